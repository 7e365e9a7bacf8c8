import ast
import importlib
import unittest

from httpcatalog import (
  AuthScheme,
  CacheDirective,
  ContentCoding,
  Forwarded,
  Header,
  LinkRelation,
  Method,
  Mime,
  Preference,
  RangeUnit,
  TransferCoding,
)

# table -> number of registered entries
TABLES = {
  AuthScheme: 10,
  CacheDirective: 16,
  ContentCoding: 10,
  Forwarded: 4,
  Header: 226,
  LinkRelation: 126,
  Method: 40,
  Mime: 118,
  Preference: 6,
  RangeUnit: 3,
  TransferCoding: 7,
}

def _declared_names(table: type) -> list[str]:
  """Upper case names assigned in the class body, in source order."""
  module = importlib.import_module(table.__module__)
  with open(module.__file__, encoding="utf-8") as f:
    tree = ast.parse(f.read())
  for node in tree.body:
    if isinstance(node, ast.ClassDef) and node.name == table.__name__:
      return [
        target.id
        for stmt in node.body if isinstance(stmt, ast.Assign)
        for target in stmt.targets
        if isinstance(target, ast.Name) and target.id.isupper() and not target.id.startswith("_")
      ]
  raise AssertionError(f"class {table.__name__} not found")

class TableShapeTest(unittest.TestCase):
  def test_sizes(self):
    for table, size in TABLES.items():
      with self.subTest(table=table.__name__):
        self.assertEqual(len(table.items()), size)

  def test_names_declared_once(self):
    for table in TABLES:
      with self.subTest(table=table.__name__):
        declared = _declared_names(table)
        self.assertEqual(len(declared), len(set(declared)))
        self.assertEqual(declared, list(table.names()))

  def test_values_unique(self):
    for table in TABLES:
      with self.subTest(table=table.__name__):
        keys = [table._key(value) for value in table.values()]
        self.assertEqual(len(keys), len(set(keys)))

  def test_reverse_lookup(self):
    for table in TABLES:
      for name, value in table.items():
        with self.subTest(table=table.__name__, name=name):
          self.assertEqual(table.name_of(value), name)
          self.assertEqual(table.query(value), value)
          self.assertTrue(table.contains(value))

  def test_index_is_read_only(self):
    with self.assertRaises(TypeError):
      Header._map["x-custom"] = "X_CUSTOM"

  def test_entries_reference_defining_section(self):
    for table in TABLES:
      module = importlib.import_module(table.__module__)
      with open(module.__file__, encoding="utf-8") as f:
        lines = f.read().splitlines()
      refs = [line.strip() for line in lines if line.strip().startswith("#:")]
      with self.subTest(table=table.__name__):
        self.assertGreaterEqual(len(refs), len(table.items()))
        for ref in refs:
          self.assertIn("https://", ref)

  def test_identifiers_follow_literals(self):
    for table in TABLES:
      for name, value in table.items():
        with self.subTest(table=table.__name__, name=name):
          expected = "".join(c if c.isalnum() else "_" for c in value.upper())
          self.assertEqual(name, expected)

class HeaderTest(unittest.TestCase):
  def test_values(self):
    self.assertEqual(Header.CONTENT_TYPE, "Content-Type")
    self.assertEqual(Header.ETAG, "ETag")
    self.assertEqual(Header.WWW_AUTHENTICATE, "WWW-Authenticate")
    self.assertEqual(Header.SEC_WEBSOCKET_KEY, "Sec-WebSocket-Key")
    self.assertEqual(Header.TRACEPARENT, "traceparent")

  def test_case_insensitive(self):
    self.assertEqual(Header.query("content-type"), "Content-Type")
    self.assertEqual(Header.query("CONTENT-LENGTH"), "Content-Length")
    self.assertEqual(Header.name_of("x-frame-options"), "X_FRAME_OPTIONS")
    self.assertTrue(Header.contains("if-none-match"))

  def test_unknown(self):
    self.assertFalse(Header.contains("X-Not-Registered"))
    with self.assertRaises(ValueError) as ctx:
      Header.query("X-Not-Registered")
    self.assertEqual(str(ctx.exception), "Unknown header field: X-Not-Registered")

class MethodTest(unittest.TestCase):
  def test_values(self):
    self.assertEqual(Method.GET, "GET")
    self.assertEqual(Method.VERSION_CONTROL, "VERSION-CONTROL")
    self.assertEqual(Method.QUERY, "QUERY")

  def test_case_sensitive(self):
    self.assertTrue(Method.contains("PATCH"))
    self.assertFalse(Method.contains("patch"))
    with self.assertRaises(ValueError):
      Method.query("get")

class CodingTest(unittest.TestCase):
  def test_aliases_are_distinct(self):
    self.assertEqual(ContentCoding.GZIP, "gzip")
    self.assertEqual(ContentCoding.X_GZIP, "x-gzip")
    self.assertNotEqual(ContentCoding.name_of("gzip"), ContentCoding.name_of("x-gzip"))
    self.assertEqual(TransferCoding.CHUNKED, "chunked")
    self.assertEqual(TransferCoding.name_of("X-Compress"), "X_COMPRESS")

  def test_transfer_coding_is_not_content_coding(self):
    self.assertFalse(ContentCoding.contains(TransferCoding.CHUNKED))
    self.assertFalse(TransferCoding.contains(ContentCoding.BR))

class TokenTablesTest(unittest.TestCase):
  def test_auth_scheme(self):
    self.assertEqual(AuthScheme.query("bearer"), "Bearer")
    self.assertEqual(AuthScheme.SCRAM_SHA_256, "SCRAM-SHA-256")
    self.assertEqual(AuthScheme.VAPID, "vapid")

  def test_cache_directive(self):
    self.assertEqual(CacheDirective.MAX_AGE, "max-age")
    self.assertEqual(CacheDirective.STALE_WHILE_REVALIDATE, "stale-while-revalidate")
    self.assertEqual(CacheDirective.name_of("No-Store"), "NO_STORE")

  def test_small_tables(self):
    self.assertEqual(RangeUnit.BYTES, "bytes")
    self.assertEqual(Forwarded.FOR, "for")
    self.assertEqual(Forwarded.PROTO, "proto")
    self.assertEqual(Preference.RESPOND_ASYNC, "respond-async")
    self.assertEqual(Preference.RETURN, "return")

  def test_link_relation(self):
    self.assertEqual(LinkRelation.SELF, "self")
    self.assertEqual(LinkRelation.INTERVALAFTER, "intervalAfter")
    self.assertEqual(LinkRelation.query("intervalafter"), "intervalAfter")
    self.assertEqual(LinkRelation.REDIRECT_URI, "redirect_uri")

if __name__ == "__main__":
  unittest.main()
