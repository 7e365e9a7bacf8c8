import sys
import unittest

import httpcatalog
from httpcatalog import Status
from httpcatalog.Status import (
  MESSAGE_200,
  MESSAGE_404,
  MESSAGE_418,
  MESSAGE_I_M_A_TEAPOT,
  MESSAGE_NOT_FOUND,
  MESSAGE_OK,
  STATUS_200,
  STATUS_404,
  STATUS_NOT_FOUND,
  STATUS_OK,
)

# (code, mnemonic, reason phrase) as registered
REGISTRY = [
  (100, "CONTINUE", "Continue"),
  (101, "SWITCHING_PROTOCOLS", "Switching Protocols"),
  (102, "PROCESSING", "Processing"),
  (103, "EARLY_HINTS", "Early Hints"),
  (200, "OK", "OK"),
  (201, "CREATED", "Created"),
  (202, "ACCEPTED", "Accepted"),
  (203, "NON_AUTHORITATIVE_INFORMATION", "Non-Authoritative Information"),
  (204, "NO_CONTENT", "No Content"),
  (205, "RESET_CONTENT", "Reset Content"),
  (206, "PARTIAL_CONTENT", "Partial Content"),
  (207, "MULTI_STATUS", "Multi-Status"),
  (208, "ALREADY_REPORTED", "Already Reported"),
  (226, "IM_USED", "IM Used"),
  (300, "MULTIPLE_CHOICES", "Multiple Choices"),
  (301, "MOVED_PERMANENTLY", "Moved Permanently"),
  (302, "FOUND", "Found"),
  (303, "SEE_OTHER", "See Other"),
  (304, "NOT_MODIFIED", "Not Modified"),
  (305, "USE_PROXY", "Use Proxy"),
  (306, "UNUSED", "Unused"),
  (307, "TEMPORARY_REDIRECT", "Temporary Redirect"),
  (308, "PERMANENT_REDIRECT", "Permanent Redirect"),
  (400, "BAD_REQUEST", "Bad Request"),
  (401, "UNAUTHORIZED", "Unauthorized"),
  (402, "PAYMENT_REQUIRED", "Payment Required"),
  (403, "FORBIDDEN", "Forbidden"),
  (404, "NOT_FOUND", "Not Found"),
  (405, "METHOD_NOT_ALLOWED", "Method Not Allowed"),
  (406, "NOT_ACCEPTABLE", "Not Acceptable"),
  (407, "PROXY_AUTHENTICATION_REQUIRED", "Proxy Authentication Required"),
  (408, "REQUEST_TIMEOUT", "Request Timeout"),
  (409, "CONFLICT", "Conflict"),
  (410, "GONE", "Gone"),
  (411, "LENGTH_REQUIRED", "Length Required"),
  (412, "PRECONDITION_FAILED", "Precondition Failed"),
  (413, "PAYLOAD_TOO_LARGE", "Payload Too Large"),
  (414, "URI_TOO_LONG", "URI Too Long"),
  (415, "UNSUPPORTED_MEDIA_TYPE", "Unsupported Media Type"),
  (416, "RANGE_NOT_SATISFIABLE", "Range Not Satisfiable"),
  (417, "EXPECTATION_FAILED", "Expectation Failed"),
  (418, "I_M_A_TEAPOT", "I'm a teapot"),
  (421, "MISDIRECTED_REQUEST", "Misdirected Request"),
  (422, "UNPROCESSABLE_ENTITY", "Unprocessable Entity"),
  (423, "LOCKED", "Locked"),
  (424, "FAILED_DEPENDENCY", "Failed Dependency"),
  (425, "TOO_EARLY", "Too Early"),
  (426, "UPGRADE_REQUIRED", "Upgrade Required"),
  (428, "PRECONDITION_REQUIRED", "Precondition Required"),
  (429, "TOO_MANY_REQUESTS", "Too Many Requests"),
  (431, "REQUEST_HEADER_FIELDS_TOO_LARGE", "Request Header Fields Too Large"),
  (451, "UNAVAILABLE_FOR_LEGAL_REASONS", "Unavailable For Legal Reasons"),
  (500, "INTERNAL_SERVER_ERROR", "Internal Server Error"),
  (501, "NOT_IMPLEMENTED", "Not Implemented"),
  (502, "BAD_GATEWAY", "Bad Gateway"),
  (503, "SERVICE_UNAVAILABLE", "Service Unavailable"),
  (504, "GATEWAY_TIMEOUT", "Gateway Timeout"),
  (505, "HTTP_VERSION_NOT_SUPPORTED", "HTTP Version Not Supported"),
  (506, "VARIANT_ALSO_NEGOTIATES", "Variant Also Negotiates"),
  (507, "INSUFFICIENT_STORAGE", "Insufficient Storage"),
  (508, "LOOP_DETECTED", "Loop Detected"),
  (510, "NOT_EXTENDED", "Not Extended"),
  (511, "NETWORK_AUTHENTICATION_REQUIRED", "Network Authentication Required"),
]

class StatusTableTest(unittest.TestCase):
  def test_registry(self):
    self.assertEqual(len(Status._map), len(REGISTRY))
    for code, name, message in REGISTRY:
      status = Status.query(code)
      self.assertEqual(status.code, code)
      self.assertEqual(status.name, name)
      self.assertEqual(status.message, message)
      self.assertIs(getattr(Status, name), status)

  def test_items_sorted(self):
    codes = [code for code, _ in Status.items()]
    self.assertEqual(codes, sorted(codes))
    self.assertEqual(codes[0], 100)
    self.assertEqual(codes[-1], 511)

  def test_unknown_code(self):
    with self.assertRaises(ValueError) as ctx:
      Status.query(299)
    self.assertIn("299", str(ctx.exception))

  def test_lookup(self):
    self.assertIs(Status.lookup("NOT_FOUND"), Status.NOT_FOUND)
    self.assertIs(Status.lookup("not found"), Status.NOT_FOUND)
    self.assertIs(Status.lookup("Multi-Status"), Status.MULTI_STATUS)
    with self.assertRaises(ValueError):
      Status.lookup("NOT_A_STATUS")

  def test_lookup_reason_phrase(self):
    self.assertIs(Status.lookup("I'm a teapot"), Status.I_M_A_TEAPOT)
    self.assertIs(Status.lookup("HTTP Version Not Supported"), Status.HTTP_VERSION_NOT_SUPPORTED)

  def test_unknown_logged(self):
    with self.assertLogs("httpcatalog.Status", "DEBUG") as logs:
      with self.assertRaises(ValueError):
        Status.query(299)
      with self.assertRaises(ValueError):
        Status.lookup("NOT_A_STATUS")
    self.assertEqual(logs.output, [
      "DEBUG:httpcatalog.Status:No status registered for 299",
      "DEBUG:httpcatalog.Status:No status named 'NOT_A_STATUS'",
    ])

  def test_reason(self):
    self.assertEqual(Status.reason(404), "Not Found")
    self.assertEqual(Status.reason(418), "I'm a teapot")
    self.assertEqual(Status.reason(505), "HTTP Version Not Supported")

  def test_str_and_int(self):
    self.assertEqual(str(Status.NOT_FOUND), "404 Not Found")
    self.assertEqual(int(Status.CREATED), 201)
    self.assertEqual(repr(Status.OK), "Status(200, 'OK', 'OK')")

  def test_equality(self):
    self.assertEqual(Status.OK, Status(200, "OK", "OK"))
    self.assertNotEqual(Status.OK, Status.CREATED)
    self.assertNotEqual(Status.OK, 200)
    self.assertEqual(len({Status.OK, Status(200, "OK", "OK")}), 1)

  def test_category(self):
    self.assertEqual(Status.CONTINUE.category, "Informational")
    self.assertEqual(Status.NO_CONTENT.category, "Success")
    self.assertEqual(Status.PERMANENT_REDIRECT.category, "Redirection")
    self.assertEqual(Status.TOO_MANY_REQUESTS.category, "Client Error")
    self.assertEqual(Status.LOOP_DETECTED.category, "Server Error")

class StatusConstantsTest(unittest.TestCase):
  def test_numeric_constants(self):
    self.assertEqual(STATUS_200, 200)
    self.assertEqual(MESSAGE_200, "OK")
    self.assertEqual(STATUS_404, 404)
    self.assertEqual(MESSAGE_404, "Not Found")
    self.assertEqual(MESSAGE_418, "I'm a teapot")

  def test_aliases(self):
    self.assertEqual(STATUS_OK, STATUS_200)
    self.assertEqual(MESSAGE_OK, MESSAGE_200)
    self.assertEqual(STATUS_NOT_FOUND, STATUS_404)
    self.assertEqual(MESSAGE_NOT_FOUND, MESSAGE_404)
    self.assertEqual(MESSAGE_I_M_A_TEAPOT, MESSAGE_418)

  def test_package_attribute_is_the_class(self):
    self.assertIs(httpcatalog.Status, Status)
    self.assertEqual(sys.modules["httpcatalog.Status"].STATUS_OK, 200)

  def test_every_alias(self):
    module = vars(sys.modules["httpcatalog.Status"])
    for code, name, message in REGISTRY:
      self.assertEqual(module[f"STATUS_{code}"], code)
      self.assertEqual(module[f"MESSAGE_{code}"], message)
      self.assertEqual(module[f"STATUS_{name}"], module[f"STATUS_{code}"])
      self.assertEqual(module[f"MESSAGE_{name}"], module[f"MESSAGE_{code}"])

if __name__ == "__main__":
  unittest.main()
