import unittest

from httpcatalog import Catalog

class Colors(Catalog):
  _kind = "color"
  RED = "Red"
  DARK_BLUE = "Dark-Blue"
  _hidden = "not an entry"
  lower = "not an entry either"

Colors._map = Colors._index()

class CatalogTest(unittest.TestCase):
  def test_only_upper_case_attributes(self):
    self.assertEqual(Colors.items(), (("RED", "Red"), ("DARK_BLUE", "Dark-Blue")))
    self.assertEqual(Colors.names(), ("RED", "DARK_BLUE"))
    self.assertEqual(Colors.values(), ("Red", "Dark-Blue"))

  def test_lookups(self):
    self.assertEqual(Colors.query("dark-blue"), "Dark-Blue")
    self.assertEqual(Colors.name_of("RED"), "RED")
    self.assertTrue(Colors.contains("red"))
    self.assertFalse(Colors.contains("green"))

  def test_unknown_value(self):
    with self.assertRaises(ValueError) as ctx:
      Colors.name_of("green")
    self.assertEqual(str(ctx.exception), "Unknown color: green")

  def test_duplicate_literal(self):
    class Clash(Catalog):
      _kind = "color"
      RED = "red"
      ROUGE = "RED"
    with self.assertRaises(ValueError) as ctx:
      Clash._index()
    self.assertIn("RED and ROUGE", str(ctx.exception))

  def test_unknown_value_logged(self):
    with self.assertLogs("httpcatalog.Catalog", "DEBUG") as logs:
      with self.assertRaises(ValueError):
        Colors.name_of("green")
    self.assertEqual(logs.output, ["DEBUG:httpcatalog.Catalog:No color named 'green' in Colors"])

  def test_index_logs_entry_count(self):
    with self.assertLogs("httpcatalog.Catalog", "DEBUG") as logs:
      Colors._index()
    self.assertEqual(logs.output, ["DEBUG:httpcatalog.Catalog:Indexed 2 color entries in Colors"])

  def test_case_sensitive_table(self):
    class Exact(Catalog):
      _casefold = False
      LOWER = "red"
      UPPER = "RED"
    Exact._map = Exact._index()
    self.assertEqual(Exact.name_of("RED"), "UPPER")
    self.assertEqual(Exact.name_of("red"), "LOWER")
    with self.assertRaises(ValueError):
      Exact.query("Red")

if __name__ == "__main__":
  unittest.main()
