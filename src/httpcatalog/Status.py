import logging
import types

logger = logging.getLogger(__name__)

_categories = (
  None,
  "Informational",
  "Success",
  "Redirection",
  "Client Error",
  "Server Error",
)

class Status:
  """
  A registered status code: numeric `code`, mnemonic `name` and the
  canonical reason phrase `message`.

  https://www.iana.org/assignments/http-status-codes/http-status-codes.xhtml
  """
  def __init__(self, code: int, name: str, message: str):
    self.code = code
    self.name = name
    self.message = message
  def __str__(self) -> str:
    return f"{self.code} {self.message}"
  def __repr__(self) -> str:
    return f"Status({self.code}, {self.name!r}, {self.message!r})"
  def __int__(self) -> int:
    return self.code
  def __eq__(self, other: object) -> bool:
    if not isinstance(other, Status):
      return NotImplemented
    return self.code == other.code and self.message == other.message
  def __hash__(self) -> int:
    return hash((self.code, self.message))

  @property
  def category(self) -> str:
    """Class of the response, e.g. ``"Client Error"`` for 404."""
    return _categories[self.code // 100]

  _map: types.MappingProxyType
  _names: types.MappingProxyType

  @classmethod
  def query(cls, code: int) -> "Status":
    if code in cls._map:
      return cls._map[code]
    logger.debug(f"No status registered for {code!r}")
    raise ValueError(f"Unknown status code: {code}")

  @classmethod
  def lookup(cls, name: str) -> "Status":
    """
    Find a status by its mnemonic. Case is ignored and spaces, hyphens and
    apostrophes read as underscores, so ``"not found"``, ``"Not-Found"`` and
    ``"NOT_FOUND"`` all match 404 and ``"I'm a teapot"`` matches 418.
    """
    key = name.strip().upper().replace("-", "_").replace(" ", "_").replace("'", "_")
    if key in cls._names:
      return cls._names[key]
    logger.debug(f"No status named {name!r}")
    raise ValueError(f"Unknown status name: {name}")

  @classmethod
  def reason(cls, code: int) -> str:
    return cls.query(code).message

  @classmethod
  def items(cls) -> tuple[tuple[int, "Status"], ...]:
    return tuple(sorted(cls._map.items()))

  # 1xx Informational
  CONTINUE                       : "Status"
  SWITCHING_PROTOCOLS            : "Status"
  PROCESSING                     : "Status"
  EARLY_HINTS                    : "Status"
  # 2xx Success
  OK                             : "Status"
  CREATED                        : "Status"
  ACCEPTED                       : "Status"
  NON_AUTHORITATIVE_INFORMATION  : "Status"
  NO_CONTENT                     : "Status"
  RESET_CONTENT                  : "Status"
  PARTIAL_CONTENT                : "Status"
  MULTI_STATUS                   : "Status"
  ALREADY_REPORTED               : "Status"
  IM_USED                        : "Status"
  # 3xx Redirection
  MULTIPLE_CHOICES               : "Status"
  MOVED_PERMANENTLY              : "Status"
  FOUND                          : "Status"
  SEE_OTHER                      : "Status"
  NOT_MODIFIED                   : "Status"
  USE_PROXY                      : "Status"
  UNUSED                         : "Status"
  TEMPORARY_REDIRECT             : "Status"
  PERMANENT_REDIRECT             : "Status"
  # 4xx Client Error
  BAD_REQUEST                    : "Status"
  UNAUTHORIZED                   : "Status"
  PAYMENT_REQUIRED               : "Status"
  FORBIDDEN                      : "Status"
  NOT_FOUND                      : "Status"
  METHOD_NOT_ALLOWED             : "Status"
  NOT_ACCEPTABLE                 : "Status"
  PROXY_AUTHENTICATION_REQUIRED  : "Status"
  REQUEST_TIMEOUT                : "Status"
  CONFLICT                       : "Status"
  GONE                           : "Status"
  LENGTH_REQUIRED                : "Status"
  PRECONDITION_FAILED            : "Status"
  PAYLOAD_TOO_LARGE              : "Status"
  URI_TOO_LONG                   : "Status"
  UNSUPPORTED_MEDIA_TYPE         : "Status"
  RANGE_NOT_SATISFIABLE          : "Status"
  EXPECTATION_FAILED             : "Status"
  I_M_A_TEAPOT                   : "Status"
  MISDIRECTED_REQUEST            : "Status"
  UNPROCESSABLE_ENTITY           : "Status"
  LOCKED                         : "Status"
  FAILED_DEPENDENCY              : "Status"
  TOO_EARLY                      : "Status"
  UPGRADE_REQUIRED               : "Status"
  PRECONDITION_REQUIRED          : "Status"
  TOO_MANY_REQUESTS              : "Status"
  REQUEST_HEADER_FIELDS_TOO_LARGE: "Status"
  UNAVAILABLE_FOR_LEGAL_REASONS  : "Status"
  # 5xx Server Error
  INTERNAL_SERVER_ERROR          : "Status"
  NOT_IMPLEMENTED                : "Status"
  BAD_GATEWAY                    : "Status"
  SERVICE_UNAVAILABLE            : "Status"
  GATEWAY_TIMEOUT                : "Status"
  HTTP_VERSION_NOT_SUPPORTED     : "Status"
  VARIANT_ALSO_NEGOTIATES        : "Status"
  INSUFFICIENT_STORAGE           : "Status"
  LOOP_DETECTED                  : "Status"
  NOT_EXTENDED                   : "Status"
  NETWORK_AUTHENTICATION_REQUIRED: "Status"

# 1xx Informational
#: RFC 7231, section 6.2.1, https://datatracker.ietf.org/doc/html/rfc7231#section-6.2.1
Status.CONTINUE = Status(100, "CONTINUE", "Continue")
#: RFC 7231, section 6.2.2, https://datatracker.ietf.org/doc/html/rfc7231#section-6.2.2
Status.SWITCHING_PROTOCOLS = Status(101, "SWITCHING_PROTOCOLS", "Switching Protocols")
#: RFC 2518, section 10.1, https://datatracker.ietf.org/doc/html/rfc2518#section-10.1
Status.PROCESSING = Status(102, "PROCESSING", "Processing")
#: RFC 8297, section 2, https://datatracker.ietf.org/doc/html/rfc8297#section-2
Status.EARLY_HINTS = Status(103, "EARLY_HINTS", "Early Hints")

# 2xx Success
#: RFC 7231, section 6.3.1, https://datatracker.ietf.org/doc/html/rfc7231#section-6.3.1
Status.OK = Status(200, "OK", "OK")
#: RFC 7231, section 6.3.2, https://datatracker.ietf.org/doc/html/rfc7231#section-6.3.2
Status.CREATED = Status(201, "CREATED", "Created")
#: RFC 7231, section 6.3.3, https://datatracker.ietf.org/doc/html/rfc7231#section-6.3.3
Status.ACCEPTED = Status(202, "ACCEPTED", "Accepted")
#: RFC 7231, section 6.3.4, https://datatracker.ietf.org/doc/html/rfc7231#section-6.3.4
Status.NON_AUTHORITATIVE_INFORMATION = Status(203, "NON_AUTHORITATIVE_INFORMATION", "Non-Authoritative Information")
#: RFC 7231, section 6.3.5, https://datatracker.ietf.org/doc/html/rfc7231#section-6.3.5
Status.NO_CONTENT = Status(204, "NO_CONTENT", "No Content")
#: RFC 7231, section 6.3.6, https://datatracker.ietf.org/doc/html/rfc7231#section-6.3.6
Status.RESET_CONTENT = Status(205, "RESET_CONTENT", "Reset Content")
#: RFC 7233, section 4.1, https://datatracker.ietf.org/doc/html/rfc7233#section-4.1
Status.PARTIAL_CONTENT = Status(206, "PARTIAL_CONTENT", "Partial Content")
#: RFC 4918, section 11.1, https://datatracker.ietf.org/doc/html/rfc4918#section-11.1
Status.MULTI_STATUS = Status(207, "MULTI_STATUS", "Multi-Status")
#: RFC 5842, section 7.1, https://datatracker.ietf.org/doc/html/rfc5842#section-7.1
Status.ALREADY_REPORTED = Status(208, "ALREADY_REPORTED", "Already Reported")
#: RFC 3229, section 10.4.1, https://datatracker.ietf.org/doc/html/rfc3229#section-10.4.1
Status.IM_USED = Status(226, "IM_USED", "IM Used")

# 3xx Redirection
#: RFC 7231, section 6.4.1, https://datatracker.ietf.org/doc/html/rfc7231#section-6.4.1
Status.MULTIPLE_CHOICES = Status(300, "MULTIPLE_CHOICES", "Multiple Choices")
#: RFC 7231, section 6.4.2, https://datatracker.ietf.org/doc/html/rfc7231#section-6.4.2
Status.MOVED_PERMANENTLY = Status(301, "MOVED_PERMANENTLY", "Moved Permanently")
#: RFC 7231, section 6.4.3, https://datatracker.ietf.org/doc/html/rfc7231#section-6.4.3
Status.FOUND = Status(302, "FOUND", "Found")
#: RFC 7231, section 6.4.4, https://datatracker.ietf.org/doc/html/rfc7231#section-6.4.4
Status.SEE_OTHER = Status(303, "SEE_OTHER", "See Other")
#: RFC 7232, section 4.1, https://datatracker.ietf.org/doc/html/rfc7232#section-4.1
Status.NOT_MODIFIED = Status(304, "NOT_MODIFIED", "Not Modified")
#: RFC 7231, section 6.4.5, https://datatracker.ietf.org/doc/html/rfc7231#section-6.4.5
Status.USE_PROXY = Status(305, "USE_PROXY", "Use Proxy")
#: RFC 7231, section 6.4.6, https://datatracker.ietf.org/doc/html/rfc7231#section-6.4.6
Status.UNUSED = Status(306, "UNUSED", "Unused")
#: RFC 7231, section 6.4.7, https://datatracker.ietf.org/doc/html/rfc7231#section-6.4.7
Status.TEMPORARY_REDIRECT = Status(307, "TEMPORARY_REDIRECT", "Temporary Redirect")
#: RFC 7538, section 3, https://datatracker.ietf.org/doc/html/rfc7538#section-3
Status.PERMANENT_REDIRECT = Status(308, "PERMANENT_REDIRECT", "Permanent Redirect")

# 4xx Client Error
#: RFC 7231, section 6.5.1, https://datatracker.ietf.org/doc/html/rfc7231#section-6.5.1
Status.BAD_REQUEST = Status(400, "BAD_REQUEST", "Bad Request")
#: RFC 7235, section 3.1, https://datatracker.ietf.org/doc/html/rfc7235#section-3.1
Status.UNAUTHORIZED = Status(401, "UNAUTHORIZED", "Unauthorized")
#: RFC 7231, section 6.5.2, https://datatracker.ietf.org/doc/html/rfc7231#section-6.5.2
Status.PAYMENT_REQUIRED = Status(402, "PAYMENT_REQUIRED", "Payment Required")
#: RFC 7231, section 6.5.3, https://datatracker.ietf.org/doc/html/rfc7231#section-6.5.3
Status.FORBIDDEN = Status(403, "FORBIDDEN", "Forbidden")
#: RFC 7231, section 6.5.4, https://datatracker.ietf.org/doc/html/rfc7231#section-6.5.4
Status.NOT_FOUND = Status(404, "NOT_FOUND", "Not Found")
#: RFC 7231, section 6.5.5, https://datatracker.ietf.org/doc/html/rfc7231#section-6.5.5
Status.METHOD_NOT_ALLOWED = Status(405, "METHOD_NOT_ALLOWED", "Method Not Allowed")
#: RFC 7231, section 6.5.6, https://datatracker.ietf.org/doc/html/rfc7231#section-6.5.6
Status.NOT_ACCEPTABLE = Status(406, "NOT_ACCEPTABLE", "Not Acceptable")
#: RFC 7235, section 3.2, https://datatracker.ietf.org/doc/html/rfc7235#section-3.2
Status.PROXY_AUTHENTICATION_REQUIRED = Status(407, "PROXY_AUTHENTICATION_REQUIRED", "Proxy Authentication Required")
#: RFC 7231, section 6.5.7, https://datatracker.ietf.org/doc/html/rfc7231#section-6.5.7
Status.REQUEST_TIMEOUT = Status(408, "REQUEST_TIMEOUT", "Request Timeout")
#: RFC 7231, section 6.5.8, https://datatracker.ietf.org/doc/html/rfc7231#section-6.5.8
Status.CONFLICT = Status(409, "CONFLICT", "Conflict")
#: RFC 7231, section 6.5.9, https://datatracker.ietf.org/doc/html/rfc7231#section-6.5.9
Status.GONE = Status(410, "GONE", "Gone")
#: RFC 7231, section 6.5.10, https://datatracker.ietf.org/doc/html/rfc7231#section-6.5.10
Status.LENGTH_REQUIRED = Status(411, "LENGTH_REQUIRED", "Length Required")
#: RFC 7232, section 4.2, https://datatracker.ietf.org/doc/html/rfc7232#section-4.2
Status.PRECONDITION_FAILED = Status(412, "PRECONDITION_FAILED", "Precondition Failed")
#: RFC 7231, section 6.5.11, https://datatracker.ietf.org/doc/html/rfc7231#section-6.5.11
Status.PAYLOAD_TOO_LARGE = Status(413, "PAYLOAD_TOO_LARGE", "Payload Too Large")
#: RFC 7231, section 6.5.12, https://datatracker.ietf.org/doc/html/rfc7231#section-6.5.12
Status.URI_TOO_LONG = Status(414, "URI_TOO_LONG", "URI Too Long")
#: RFC 7231, section 6.5.13, https://datatracker.ietf.org/doc/html/rfc7231#section-6.5.13
Status.UNSUPPORTED_MEDIA_TYPE = Status(415, "UNSUPPORTED_MEDIA_TYPE", "Unsupported Media Type")
#: RFC 7233, section 4.4, https://datatracker.ietf.org/doc/html/rfc7233#section-4.4
Status.RANGE_NOT_SATISFIABLE = Status(416, "RANGE_NOT_SATISFIABLE", "Range Not Satisfiable")
#: RFC 7231, section 6.5.14, https://datatracker.ietf.org/doc/html/rfc7231#section-6.5.14
Status.EXPECTATION_FAILED = Status(417, "EXPECTATION_FAILED", "Expectation Failed")
#: RFC 2324, section 2.3.2, https://datatracker.ietf.org/doc/html/rfc2324#section-2.3.2
Status.I_M_A_TEAPOT = Status(418, "I_M_A_TEAPOT", "I'm a teapot")
#: RFC 7540, section 9.1.2, https://datatracker.ietf.org/doc/html/rfc7540#section-9.1.2
Status.MISDIRECTED_REQUEST = Status(421, "MISDIRECTED_REQUEST", "Misdirected Request")
#: RFC 4918, section 11.2, https://datatracker.ietf.org/doc/html/rfc4918#section-11.2
Status.UNPROCESSABLE_ENTITY = Status(422, "UNPROCESSABLE_ENTITY", "Unprocessable Entity")
#: RFC 4918, section 11.3, https://datatracker.ietf.org/doc/html/rfc4918#section-11.3
Status.LOCKED = Status(423, "LOCKED", "Locked")
#: RFC 4918, section 11.4, https://datatracker.ietf.org/doc/html/rfc4918#section-11.4
Status.FAILED_DEPENDENCY = Status(424, "FAILED_DEPENDENCY", "Failed Dependency")
#: RFC 8470, section 5.2, https://datatracker.ietf.org/doc/html/rfc8470#section-5.2
Status.TOO_EARLY = Status(425, "TOO_EARLY", "Too Early")
#: RFC 7231, section 6.5.15, https://datatracker.ietf.org/doc/html/rfc7231#section-6.5.15
Status.UPGRADE_REQUIRED = Status(426, "UPGRADE_REQUIRED", "Upgrade Required")
#: RFC 6585, section 3, https://datatracker.ietf.org/doc/html/rfc6585#section-3
Status.PRECONDITION_REQUIRED = Status(428, "PRECONDITION_REQUIRED", "Precondition Required")
#: RFC 6585, section 4, https://datatracker.ietf.org/doc/html/rfc6585#section-4
Status.TOO_MANY_REQUESTS = Status(429, "TOO_MANY_REQUESTS", "Too Many Requests")
#: RFC 6585, section 5, https://datatracker.ietf.org/doc/html/rfc6585#section-5
Status.REQUEST_HEADER_FIELDS_TOO_LARGE = Status(431, "REQUEST_HEADER_FIELDS_TOO_LARGE", "Request Header Fields Too Large")
#: RFC 7725, section 3, https://datatracker.ietf.org/doc/html/rfc7725#section-3
Status.UNAVAILABLE_FOR_LEGAL_REASONS = Status(451, "UNAVAILABLE_FOR_LEGAL_REASONS", "Unavailable For Legal Reasons")

# 5xx Server Error
#: RFC 7231, section 6.6.1, https://datatracker.ietf.org/doc/html/rfc7231#section-6.6.1
Status.INTERNAL_SERVER_ERROR = Status(500, "INTERNAL_SERVER_ERROR", "Internal Server Error")
#: RFC 7231, section 6.6.2, https://datatracker.ietf.org/doc/html/rfc7231#section-6.6.2
Status.NOT_IMPLEMENTED = Status(501, "NOT_IMPLEMENTED", "Not Implemented")
#: RFC 7231, section 6.6.3, https://datatracker.ietf.org/doc/html/rfc7231#section-6.6.3
Status.BAD_GATEWAY = Status(502, "BAD_GATEWAY", "Bad Gateway")
#: RFC 7231, section 6.6.4, https://datatracker.ietf.org/doc/html/rfc7231#section-6.6.4
Status.SERVICE_UNAVAILABLE = Status(503, "SERVICE_UNAVAILABLE", "Service Unavailable")
#: RFC 7231, section 6.6.5, https://datatracker.ietf.org/doc/html/rfc7231#section-6.6.5
Status.GATEWAY_TIMEOUT = Status(504, "GATEWAY_TIMEOUT", "Gateway Timeout")
#: RFC 7231, section 6.6.6, https://datatracker.ietf.org/doc/html/rfc7231#section-6.6.6
Status.HTTP_VERSION_NOT_SUPPORTED = Status(505, "HTTP_VERSION_NOT_SUPPORTED", "HTTP Version Not Supported")
#: RFC 2295, section 3, https://datatracker.ietf.org/doc/html/rfc7725#section-3
Status.VARIANT_ALSO_NEGOTIATES = Status(506, "VARIANT_ALSO_NEGOTIATES", "Variant Also Negotiates")
#: RFC 4918, section 11.5, https://datatracker.ietf.org/doc/html/rfc4918#section-11.5
Status.INSUFFICIENT_STORAGE = Status(507, "INSUFFICIENT_STORAGE", "Insufficient Storage")
#: RFC 5842, section 7.1, https://datatracker.ietf.org/doc/html/rfc5842#section-7.1
Status.LOOP_DETECTED = Status(508, "LOOP_DETECTED", "Loop Detected")
#: RFC 2774, section 7, https://datatracker.ietf.org/doc/html/rfc2774#section-7
Status.NOT_EXTENDED = Status(510, "NOT_EXTENDED", "Not Extended")
#: RFC 6585, section 6, https://datatracker.ietf.org/doc/html/rfc6585#section-6
Status.NETWORK_AUTHENTICATION_REQUIRED = Status(511, "NETWORK_AUTHENTICATION_REQUIRED", "Network Authentication Required")

Status._map = types.MappingProxyType({status.code: status for status in Status.__dict__.values() if isinstance(status, Status)})
Status._names = types.MappingProxyType({status.name: status for status in Status._map.values()})

# Flat aliases: STATUS_404 / MESSAGE_404 and their mnemonic forms
STATUS_100 = Status.CONTINUE.code
MESSAGE_100 = Status.CONTINUE.message
STATUS_CONTINUE = STATUS_100
MESSAGE_CONTINUE = MESSAGE_100

STATUS_101 = Status.SWITCHING_PROTOCOLS.code
MESSAGE_101 = Status.SWITCHING_PROTOCOLS.message
STATUS_SWITCHING_PROTOCOLS = STATUS_101
MESSAGE_SWITCHING_PROTOCOLS = MESSAGE_101

STATUS_102 = Status.PROCESSING.code
MESSAGE_102 = Status.PROCESSING.message
STATUS_PROCESSING = STATUS_102
MESSAGE_PROCESSING = MESSAGE_102

STATUS_103 = Status.EARLY_HINTS.code
MESSAGE_103 = Status.EARLY_HINTS.message
STATUS_EARLY_HINTS = STATUS_103
MESSAGE_EARLY_HINTS = MESSAGE_103

STATUS_200 = Status.OK.code
MESSAGE_200 = Status.OK.message
STATUS_OK = STATUS_200
MESSAGE_OK = MESSAGE_200

STATUS_201 = Status.CREATED.code
MESSAGE_201 = Status.CREATED.message
STATUS_CREATED = STATUS_201
MESSAGE_CREATED = MESSAGE_201

STATUS_202 = Status.ACCEPTED.code
MESSAGE_202 = Status.ACCEPTED.message
STATUS_ACCEPTED = STATUS_202
MESSAGE_ACCEPTED = MESSAGE_202

STATUS_203 = Status.NON_AUTHORITATIVE_INFORMATION.code
MESSAGE_203 = Status.NON_AUTHORITATIVE_INFORMATION.message
STATUS_NON_AUTHORITATIVE_INFORMATION = STATUS_203
MESSAGE_NON_AUTHORITATIVE_INFORMATION = MESSAGE_203

STATUS_204 = Status.NO_CONTENT.code
MESSAGE_204 = Status.NO_CONTENT.message
STATUS_NO_CONTENT = STATUS_204
MESSAGE_NO_CONTENT = MESSAGE_204

STATUS_205 = Status.RESET_CONTENT.code
MESSAGE_205 = Status.RESET_CONTENT.message
STATUS_RESET_CONTENT = STATUS_205
MESSAGE_RESET_CONTENT = MESSAGE_205

STATUS_206 = Status.PARTIAL_CONTENT.code
MESSAGE_206 = Status.PARTIAL_CONTENT.message
STATUS_PARTIAL_CONTENT = STATUS_206
MESSAGE_PARTIAL_CONTENT = MESSAGE_206

STATUS_207 = Status.MULTI_STATUS.code
MESSAGE_207 = Status.MULTI_STATUS.message
STATUS_MULTI_STATUS = STATUS_207
MESSAGE_MULTI_STATUS = MESSAGE_207

STATUS_208 = Status.ALREADY_REPORTED.code
MESSAGE_208 = Status.ALREADY_REPORTED.message
STATUS_ALREADY_REPORTED = STATUS_208
MESSAGE_ALREADY_REPORTED = MESSAGE_208

STATUS_226 = Status.IM_USED.code
MESSAGE_226 = Status.IM_USED.message
STATUS_IM_USED = STATUS_226
MESSAGE_IM_USED = MESSAGE_226

STATUS_300 = Status.MULTIPLE_CHOICES.code
MESSAGE_300 = Status.MULTIPLE_CHOICES.message
STATUS_MULTIPLE_CHOICES = STATUS_300
MESSAGE_MULTIPLE_CHOICES = MESSAGE_300

STATUS_301 = Status.MOVED_PERMANENTLY.code
MESSAGE_301 = Status.MOVED_PERMANENTLY.message
STATUS_MOVED_PERMANENTLY = STATUS_301
MESSAGE_MOVED_PERMANENTLY = MESSAGE_301

STATUS_302 = Status.FOUND.code
MESSAGE_302 = Status.FOUND.message
STATUS_FOUND = STATUS_302
MESSAGE_FOUND = MESSAGE_302

STATUS_303 = Status.SEE_OTHER.code
MESSAGE_303 = Status.SEE_OTHER.message
STATUS_SEE_OTHER = STATUS_303
MESSAGE_SEE_OTHER = MESSAGE_303

STATUS_304 = Status.NOT_MODIFIED.code
MESSAGE_304 = Status.NOT_MODIFIED.message
STATUS_NOT_MODIFIED = STATUS_304
MESSAGE_NOT_MODIFIED = MESSAGE_304

STATUS_305 = Status.USE_PROXY.code
MESSAGE_305 = Status.USE_PROXY.message
STATUS_USE_PROXY = STATUS_305
MESSAGE_USE_PROXY = MESSAGE_305

STATUS_306 = Status.UNUSED.code
MESSAGE_306 = Status.UNUSED.message
STATUS_UNUSED = STATUS_306
MESSAGE_UNUSED = MESSAGE_306

STATUS_307 = Status.TEMPORARY_REDIRECT.code
MESSAGE_307 = Status.TEMPORARY_REDIRECT.message
STATUS_TEMPORARY_REDIRECT = STATUS_307
MESSAGE_TEMPORARY_REDIRECT = MESSAGE_307

STATUS_308 = Status.PERMANENT_REDIRECT.code
MESSAGE_308 = Status.PERMANENT_REDIRECT.message
STATUS_PERMANENT_REDIRECT = STATUS_308
MESSAGE_PERMANENT_REDIRECT = MESSAGE_308

STATUS_400 = Status.BAD_REQUEST.code
MESSAGE_400 = Status.BAD_REQUEST.message
STATUS_BAD_REQUEST = STATUS_400
MESSAGE_BAD_REQUEST = MESSAGE_400

STATUS_401 = Status.UNAUTHORIZED.code
MESSAGE_401 = Status.UNAUTHORIZED.message
STATUS_UNAUTHORIZED = STATUS_401
MESSAGE_UNAUTHORIZED = MESSAGE_401

STATUS_402 = Status.PAYMENT_REQUIRED.code
MESSAGE_402 = Status.PAYMENT_REQUIRED.message
STATUS_PAYMENT_REQUIRED = STATUS_402
MESSAGE_PAYMENT_REQUIRED = MESSAGE_402

STATUS_403 = Status.FORBIDDEN.code
MESSAGE_403 = Status.FORBIDDEN.message
STATUS_FORBIDDEN = STATUS_403
MESSAGE_FORBIDDEN = MESSAGE_403

STATUS_404 = Status.NOT_FOUND.code
MESSAGE_404 = Status.NOT_FOUND.message
STATUS_NOT_FOUND = STATUS_404
MESSAGE_NOT_FOUND = MESSAGE_404

STATUS_405 = Status.METHOD_NOT_ALLOWED.code
MESSAGE_405 = Status.METHOD_NOT_ALLOWED.message
STATUS_METHOD_NOT_ALLOWED = STATUS_405
MESSAGE_METHOD_NOT_ALLOWED = MESSAGE_405

STATUS_406 = Status.NOT_ACCEPTABLE.code
MESSAGE_406 = Status.NOT_ACCEPTABLE.message
STATUS_NOT_ACCEPTABLE = STATUS_406
MESSAGE_NOT_ACCEPTABLE = MESSAGE_406

STATUS_407 = Status.PROXY_AUTHENTICATION_REQUIRED.code
MESSAGE_407 = Status.PROXY_AUTHENTICATION_REQUIRED.message
STATUS_PROXY_AUTHENTICATION_REQUIRED = STATUS_407
MESSAGE_PROXY_AUTHENTICATION_REQUIRED = MESSAGE_407

STATUS_408 = Status.REQUEST_TIMEOUT.code
MESSAGE_408 = Status.REQUEST_TIMEOUT.message
STATUS_REQUEST_TIMEOUT = STATUS_408
MESSAGE_REQUEST_TIMEOUT = MESSAGE_408

STATUS_409 = Status.CONFLICT.code
MESSAGE_409 = Status.CONFLICT.message
STATUS_CONFLICT = STATUS_409
MESSAGE_CONFLICT = MESSAGE_409

STATUS_410 = Status.GONE.code
MESSAGE_410 = Status.GONE.message
STATUS_GONE = STATUS_410
MESSAGE_GONE = MESSAGE_410

STATUS_411 = Status.LENGTH_REQUIRED.code
MESSAGE_411 = Status.LENGTH_REQUIRED.message
STATUS_LENGTH_REQUIRED = STATUS_411
MESSAGE_LENGTH_REQUIRED = MESSAGE_411

STATUS_412 = Status.PRECONDITION_FAILED.code
MESSAGE_412 = Status.PRECONDITION_FAILED.message
STATUS_PRECONDITION_FAILED = STATUS_412
MESSAGE_PRECONDITION_FAILED = MESSAGE_412

STATUS_413 = Status.PAYLOAD_TOO_LARGE.code
MESSAGE_413 = Status.PAYLOAD_TOO_LARGE.message
STATUS_PAYLOAD_TOO_LARGE = STATUS_413
MESSAGE_PAYLOAD_TOO_LARGE = MESSAGE_413

STATUS_414 = Status.URI_TOO_LONG.code
MESSAGE_414 = Status.URI_TOO_LONG.message
STATUS_URI_TOO_LONG = STATUS_414
MESSAGE_URI_TOO_LONG = MESSAGE_414

STATUS_415 = Status.UNSUPPORTED_MEDIA_TYPE.code
MESSAGE_415 = Status.UNSUPPORTED_MEDIA_TYPE.message
STATUS_UNSUPPORTED_MEDIA_TYPE = STATUS_415
MESSAGE_UNSUPPORTED_MEDIA_TYPE = MESSAGE_415

STATUS_416 = Status.RANGE_NOT_SATISFIABLE.code
MESSAGE_416 = Status.RANGE_NOT_SATISFIABLE.message
STATUS_RANGE_NOT_SATISFIABLE = STATUS_416
MESSAGE_RANGE_NOT_SATISFIABLE = MESSAGE_416

STATUS_417 = Status.EXPECTATION_FAILED.code
MESSAGE_417 = Status.EXPECTATION_FAILED.message
STATUS_EXPECTATION_FAILED = STATUS_417
MESSAGE_EXPECTATION_FAILED = MESSAGE_417

STATUS_418 = Status.I_M_A_TEAPOT.code
MESSAGE_418 = Status.I_M_A_TEAPOT.message
STATUS_I_M_A_TEAPOT = STATUS_418
MESSAGE_I_M_A_TEAPOT = MESSAGE_418

STATUS_421 = Status.MISDIRECTED_REQUEST.code
MESSAGE_421 = Status.MISDIRECTED_REQUEST.message
STATUS_MISDIRECTED_REQUEST = STATUS_421
MESSAGE_MISDIRECTED_REQUEST = MESSAGE_421

STATUS_422 = Status.UNPROCESSABLE_ENTITY.code
MESSAGE_422 = Status.UNPROCESSABLE_ENTITY.message
STATUS_UNPROCESSABLE_ENTITY = STATUS_422
MESSAGE_UNPROCESSABLE_ENTITY = MESSAGE_422

STATUS_423 = Status.LOCKED.code
MESSAGE_423 = Status.LOCKED.message
STATUS_LOCKED = STATUS_423
MESSAGE_LOCKED = MESSAGE_423

STATUS_424 = Status.FAILED_DEPENDENCY.code
MESSAGE_424 = Status.FAILED_DEPENDENCY.message
STATUS_FAILED_DEPENDENCY = STATUS_424
MESSAGE_FAILED_DEPENDENCY = MESSAGE_424

STATUS_425 = Status.TOO_EARLY.code
MESSAGE_425 = Status.TOO_EARLY.message
STATUS_TOO_EARLY = STATUS_425
MESSAGE_TOO_EARLY = MESSAGE_425

STATUS_426 = Status.UPGRADE_REQUIRED.code
MESSAGE_426 = Status.UPGRADE_REQUIRED.message
STATUS_UPGRADE_REQUIRED = STATUS_426
MESSAGE_UPGRADE_REQUIRED = MESSAGE_426

STATUS_428 = Status.PRECONDITION_REQUIRED.code
MESSAGE_428 = Status.PRECONDITION_REQUIRED.message
STATUS_PRECONDITION_REQUIRED = STATUS_428
MESSAGE_PRECONDITION_REQUIRED = MESSAGE_428

STATUS_429 = Status.TOO_MANY_REQUESTS.code
MESSAGE_429 = Status.TOO_MANY_REQUESTS.message
STATUS_TOO_MANY_REQUESTS = STATUS_429
MESSAGE_TOO_MANY_REQUESTS = MESSAGE_429

STATUS_431 = Status.REQUEST_HEADER_FIELDS_TOO_LARGE.code
MESSAGE_431 = Status.REQUEST_HEADER_FIELDS_TOO_LARGE.message
STATUS_REQUEST_HEADER_FIELDS_TOO_LARGE = STATUS_431
MESSAGE_REQUEST_HEADER_FIELDS_TOO_LARGE = MESSAGE_431

STATUS_451 = Status.UNAVAILABLE_FOR_LEGAL_REASONS.code
MESSAGE_451 = Status.UNAVAILABLE_FOR_LEGAL_REASONS.message
STATUS_UNAVAILABLE_FOR_LEGAL_REASONS = STATUS_451
MESSAGE_UNAVAILABLE_FOR_LEGAL_REASONS = MESSAGE_451

STATUS_500 = Status.INTERNAL_SERVER_ERROR.code
MESSAGE_500 = Status.INTERNAL_SERVER_ERROR.message
STATUS_INTERNAL_SERVER_ERROR = STATUS_500
MESSAGE_INTERNAL_SERVER_ERROR = MESSAGE_500

STATUS_501 = Status.NOT_IMPLEMENTED.code
MESSAGE_501 = Status.NOT_IMPLEMENTED.message
STATUS_NOT_IMPLEMENTED = STATUS_501
MESSAGE_NOT_IMPLEMENTED = MESSAGE_501

STATUS_502 = Status.BAD_GATEWAY.code
MESSAGE_502 = Status.BAD_GATEWAY.message
STATUS_BAD_GATEWAY = STATUS_502
MESSAGE_BAD_GATEWAY = MESSAGE_502

STATUS_503 = Status.SERVICE_UNAVAILABLE.code
MESSAGE_503 = Status.SERVICE_UNAVAILABLE.message
STATUS_SERVICE_UNAVAILABLE = STATUS_503
MESSAGE_SERVICE_UNAVAILABLE = MESSAGE_503

STATUS_504 = Status.GATEWAY_TIMEOUT.code
MESSAGE_504 = Status.GATEWAY_TIMEOUT.message
STATUS_GATEWAY_TIMEOUT = STATUS_504
MESSAGE_GATEWAY_TIMEOUT = MESSAGE_504

STATUS_505 = Status.HTTP_VERSION_NOT_SUPPORTED.code
MESSAGE_505 = Status.HTTP_VERSION_NOT_SUPPORTED.message
STATUS_HTTP_VERSION_NOT_SUPPORTED = STATUS_505
MESSAGE_HTTP_VERSION_NOT_SUPPORTED = MESSAGE_505

STATUS_506 = Status.VARIANT_ALSO_NEGOTIATES.code
MESSAGE_506 = Status.VARIANT_ALSO_NEGOTIATES.message
STATUS_VARIANT_ALSO_NEGOTIATES = STATUS_506
MESSAGE_VARIANT_ALSO_NEGOTIATES = MESSAGE_506

STATUS_507 = Status.INSUFFICIENT_STORAGE.code
MESSAGE_507 = Status.INSUFFICIENT_STORAGE.message
STATUS_INSUFFICIENT_STORAGE = STATUS_507
MESSAGE_INSUFFICIENT_STORAGE = MESSAGE_507

STATUS_508 = Status.LOOP_DETECTED.code
MESSAGE_508 = Status.LOOP_DETECTED.message
STATUS_LOOP_DETECTED = STATUS_508
MESSAGE_LOOP_DETECTED = MESSAGE_508

STATUS_510 = Status.NOT_EXTENDED.code
MESSAGE_510 = Status.NOT_EXTENDED.message
STATUS_NOT_EXTENDED = STATUS_510
MESSAGE_NOT_EXTENDED = MESSAGE_510

STATUS_511 = Status.NETWORK_AUTHENTICATION_REQUIRED.code
MESSAGE_511 = Status.NETWORK_AUTHENTICATION_REQUIRED.message
STATUS_NETWORK_AUTHENTICATION_REQUIRED = STATUS_511
MESSAGE_NETWORK_AUTHENTICATION_REQUIRED = MESSAGE_511
