import contextlib
import io
import unittest

from httpcatalog.__main__ import main

def _run(*argv: str) -> tuple[int, str]:
  out = io.StringIO()
  with contextlib.redirect_stdout(out):
    code = main(list(argv))
  return code, out.getvalue()

class MainTest(unittest.TestCase):
  def test_status_by_code(self):
    self.assertEqual(_run("status", "404"), (0, "404 Not Found\n"))

  def test_status_by_name(self):
    self.assertEqual(_run("status", "too_many_requests"), (0, "429 Too Many Requests\n"))

  def test_header(self):
    self.assertEqual(_run("header", "content-type"), (0, "CONTENT_TYPE: Content-Type\n"))

  def test_guess(self):
    self.assertEqual(_run("mime", "--guess", "index.html"), (0, "text/html\n"))

  def test_guess_other_table(self):
    code, out = _run("header", "--guess", "index.html")
    self.assertEqual((code, out), (1, ""))

  def test_guess_status_rejected(self):
    self.assertEqual(_run("status", "--guess", "404"), (1, ""))

  def test_unknown_value_logged_as_error(self):
    with self.assertLogs("httpcatalog", "ERROR") as logs:
      code, _ = _run("method", "get")
    self.assertEqual(code, 1)
    self.assertEqual(logs.output, ["ERROR:httpcatalog:Unknown method: get"])

  def test_list(self):
    code, out = _run("list", "range")
    self.assertEqual(code, 0)
    self.assertEqual(out.splitlines(), ["BYTES: bytes", "BYTES_LIVE: bytes-live", "NONE: none"])

  def test_list_status(self):
    code, out = _run("list", "status")
    lines = out.splitlines()
    self.assertEqual(code, 0)
    self.assertEqual(lines[0], "CONTINUE: 100 Continue")
    self.assertIn("NOT_FOUND: 404 Not Found", lines)

  def test_unknown_value(self):
    self.assertEqual(_run("method", "get"), (1, ""))
    self.assertEqual(_run("status", "299"), (1, ""))
    self.assertEqual(_run("list", "nothing"), (1, ""))

  def test_unknown_table(self):
    with self.assertRaises(SystemExit), contextlib.redirect_stderr(io.StringIO()):
      main(["nothing", "x"])

if __name__ == "__main__":
  unittest.main()
