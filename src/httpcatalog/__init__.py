"""
Named constants for the HTTP registries: header fields, status codes,
methods, media types and the smaller token tables.
"""
import logging

from .AuthScheme import AuthScheme
from .CacheDirective import CacheDirective
from .Catalog import Catalog
from .ContentCoding import ContentCoding
from .Forwarded import Forwarded
from .Header import Header
from .LinkRelation import LinkRelation
from .Method import Method
from .Mime import Mime
from .Preference import Preference
from .RangeUnit import RangeUnit
from .Status import Status
from .TransferCoding import TransferCoding

__version__ = "1.0.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

# Short names used by the command line tool
TABLES: dict[str, type] = {
  "header": Header,
  "status": Status,
  "method": Method,
  "mime": Mime,
  "auth": AuthScheme,
  "cache": CacheDirective,
  "content-coding": ContentCoding,
  "transfer-coding": TransferCoding,
  "range": RangeUnit,
  "link": LinkRelation,
  "forwarded": Forwarded,
  "preference": Preference,
}

__all__ = [
  "AuthScheme",
  "CacheDirective",
  "Catalog",
  "ContentCoding",
  "Forwarded",
  "Header",
  "LinkRelation",
  "Method",
  "Mime",
  "Preference",
  "RangeUnit",
  "Status",
  "TransferCoding",
  "TABLES",
]
