import logging
import types

logger = logging.getLogger(__name__)

class Catalog:
  """
  Base class for a closed table of named HTTP string literals.

  Entries are the upper case class attributes of a subclass. Right after
  the class body the subclass is indexed once:

    Header._map = Header._index()

  which maps the comparison key of every literal back to its identifier.
  """
  # Used in error messages, e.g. "Unknown header field: X-Foo"
  _kind = "value"
  # Registry literals compared case-insensitively (header names, tokens)
  _casefold = True
  _map: types.MappingProxyType

  @classmethod
  def _key(cls, value: str) -> str:
    return value.lower() if cls._casefold else value

  @classmethod
  def _index(cls) -> types.MappingProxyType:
    index: dict[str, str] = {}
    for name, value in vars(cls).items():
      if name.startswith("_") or not name.isupper() or not isinstance(value, str):
        continue
      key = cls._key(value)
      if key in index:
        raise ValueError(f"Duplicate {cls._kind} {value!r}: {index[key]} and {name}")
      index[key] = name
    logger.debug(f"Indexed {len(index)} {cls._kind} entries in {cls.__name__}")
    return types.MappingProxyType(index)

  @classmethod
  def name_of(cls, value: str) -> str:
    """Return the identifier of `value`, e.g. ``"CONTENT_TYPE"`` for ``"content-type"``."""
    name = cls._map.get(cls._key(value))
    if name is None:
      logger.debug(f"No {cls._kind} named {value!r} in {cls.__name__}")
      raise ValueError(f"Unknown {cls._kind}: {value}")
    return name

  @classmethod
  def query(cls, value: str) -> str:
    """Return the registered spelling of `value`."""
    return getattr(cls, cls.name_of(value))

  @classmethod
  def contains(cls, value: str) -> bool:
    return cls._key(value) in cls._map

  @classmethod
  def names(cls) -> tuple[str, ...]:
    return tuple(cls._map.values())

  @classmethod
  def values(cls) -> tuple[str, ...]:
    return tuple(getattr(cls, name) for name in cls._map.values())

  @classmethod
  def items(cls) -> tuple[tuple[str, str], ...]:
    """All ``(identifier, literal)`` pairs in declaration order."""
    return tuple((name, getattr(cls, name)) for name in cls._map.values())
