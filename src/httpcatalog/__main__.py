"""
Command line lookups against the catalog.

  httpcatalog status 404            -> 404 Not Found
  httpcatalog header content-type   -> CONTENT_TYPE: Content-Type
  httpcatalog list method           -> every request method
  httpcatalog mime --guess a.html   -> text/html
"""
import argparse
import logging
import sys

from . import TABLES, Mime, Status, __version__

LOG_FORMAT = "[%(asctime)s] %(message)s"
LOG_DATEFMT = "%H:%M:%S"

logger = logging.getLogger("httpcatalog")

def _setup_logging(verbose: bool) -> None:
  # NullHandler from the package __init__ does not count
  if not any(type(h) is logging.StreamHandler for h in logger.handlers):
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATEFMT))
    logger.addHandler(handler)
  logger.setLevel(logging.DEBUG if verbose else logging.INFO)

def build_parser() -> argparse.ArgumentParser:
  parser = argparse.ArgumentParser(prog="httpcatalog", description="Look up HTTP registry constants.")
  parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("table", choices=sorted(TABLES) + ["list"], help="table to search, or 'list'")
  parser.add_argument("value", help="value to look up, or the table to list")
  parser.add_argument("--guess", action="store_true", help="with 'mime': treat VALUE as a file name")
  return parser

def _status(value: str) -> Status:
  if value.isdigit():
    return Status.query(int(value))
  return Status.lookup(value)

def _list(name: str) -> list[str]:
  if name not in TABLES:
    raise ValueError(f"Unknown table: {name}")
  table = TABLES[name]
  if table is Status:
    return [f"{status.name}: {status}" for _, status in Status.items()]
  return [f"{key}: {value}" for key, value in table.items()]

def run(args: argparse.Namespace) -> list[str]:
  if args.table == "list":
    return _list(args.value)
  if args.guess:
    if args.table != "mime":
      raise ValueError("--guess only applies to the mime table")
    return [Mime.guess_type(args.value)]
  if args.table == "status":
    return [str(_status(args.value))]
  table = TABLES[args.table]
  return [f"{table.name_of(args.value)}: {table.query(args.value)}"]

def main(argv: list[str] | None = None) -> int:
  args = build_parser().parse_args(argv)
  _setup_logging(args.verbose)
  logger.debug(f"Looking up {args.value!r} in {args.table}")
  try:
    lines = run(args)
  except ValueError as e:
    logger.error(f"{e}")
    return 1
  for line in lines:
    print(line)
  return 0

if __name__ == "__main__":
  sys.exit(main())
