import unittest

from httpcatalog import Mime

class MimeTest(unittest.TestCase):
  def test_values(self):
    self.assertEqual(Mime.APPLICATION_JSON, "application/json")
    self.assertEqual(Mime.APPLICATION_PROBLEM_JSON, "application/problem+json")
    self.assertEqual(Mime.MULTIPART_FORM_DATA, "multipart/form-data")
    self.assertEqual(Mime.TEXT_EVENT_STREAM, "text/event-stream")
    self.assertEqual(Mime.APPLICATION_EMERGENCYCALLDATA_ECALL_MSD, "application/EmergencyCallData.eCall.MSD")

  def test_query_keeps_registered_spelling(self):
    self.assertEqual(Mime.query("application/emergencycalldata.ecall.msd"), "application/EmergencyCallData.eCall.MSD")
    self.assertEqual(Mime.query("TEXT/HTML"), "text/html")

  def test_guess_type(self):
    self.assertEqual(Mime.guess_type("index.html"), Mime.TEXT_HTML)
    self.assertEqual(Mime.guess_type("/static/app.MJS"), Mime.TEXT_JAVASCRIPT)
    self.assertEqual(Mime.guess_type("photo.jpeg"), Mime.IMAGE_JPEG)
    self.assertEqual(Mime.guess_type("data.json"), Mime.APPLICATION_JSON)
    self.assertEqual(Mime.guess_type("font.woff2"), Mime.FONT_WOFF2)

  def test_guess_type_unknown(self):
    self.assertEqual(Mime.guess_type("archive.tar.xz"), "application/octet-stream")
    self.assertEqual(Mime.guess_type("README"), "application/octet-stream")

  def test_extensions_map_to_catalogued_types(self):
    for ext, media_type in Mime._extensions.items():
      with self.subTest(ext=ext):
        self.assertTrue(Mime.contains(media_type))

  def test_fallback_is_not_an_entry(self):
    self.assertFalse(Mime.contains("application/octet-stream"))

if __name__ == "__main__":
  unittest.main()
