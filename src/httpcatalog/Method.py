from .Catalog import Catalog

class Method(Catalog):
  """
  Request methods.

  Unlike the other tables, method names are case-sensitive:
  ``Method.contains("get")`` is false.

  https://www.iana.org/assignments/http-methods/http-methods.xhtml
  """
  _kind = "method"
  _casefold = False

  #: RFC 3744, section 8.1, https://datatracker.ietf.org/doc/html/rfc3744#section-8.1
  ACL = "ACL"

  #: RFC 3253, section 12.6, https://datatracker.ietf.org/doc/html/rfc3253#section-12.6
  BASELINE_CONTROL = "BASELINE-CONTROL"

  #: RFC 5842, section 4, https://datatracker.ietf.org/doc/html/rfc5842#section-4
  BIND = "BIND"

  #: RFC 3253, section 4.4, https://datatracker.ietf.org/doc/html/rfc3253#section-4.4
  CHECKIN = "CHECKIN"

  #: RFC 3253, section 4.3, https://datatracker.ietf.org/doc/html/rfc3253#section-4.3
  CHECKOUT = "CHECKOUT"

  #: RFC 7231, section 4.3.6, https://datatracker.ietf.org/doc/html/rfc7231#section-4.3.6
  CONNECT = "CONNECT"

  #: RFC 4918, section 9.8, https://datatracker.ietf.org/doc/html/rfc4918#section-9.8
  COPY = "COPY"

  #: RFC 7231, section 4.3.5, https://datatracker.ietf.org/doc/html/rfc7231#section-4.3.5
  DELETE = "DELETE"

  #: RFC 7231, section 4.3.1, https://datatracker.ietf.org/doc/html/rfc7231#section-4.3.1
  GET = "GET"

  #: RFC 7231, section 4.3.2, https://datatracker.ietf.org/doc/html/rfc7231#section-4.3.2
  HEAD = "HEAD"

  #: RFC 3253, section 8.2, https://datatracker.ietf.org/doc/html/rfc3253#section-8.2
  LABEL = "LABEL"

  #: draft-snell-link-method, section 3, https://datatracker.ietf.org/doc/html/draft-snell-link-method#section-3
  LINK = "LINK"

  #: RFC 4918, section 9.10, https://datatracker.ietf.org/doc/html/rfc4918#section-9.10
  LOCK = "LOCK"

  #: RFC 3253, section 11.2, https://datatracker.ietf.org/doc/html/rfc3253#section-11.2
  MERGE = "MERGE"

  #: RFC 3253, section 13.5, https://datatracker.ietf.org/doc/html/rfc3253#section-13.5
  MKACTIVITY = "MKACTIVITY"

  #: RFC 4791, section 5.3.1, https://datatracker.ietf.org/doc/html/rfc4791#section-5.3.1
  MKCALENDAR = "MKCALENDAR"

  #: RFC 4918, section 9.3, https://datatracker.ietf.org/doc/html/rfc4918#section-9.3
  MKCOL = "MKCOL"

  #: RFC 4437, section 6, https://datatracker.ietf.org/doc/html/rfc4437#section-6
  MKREDIRECTREF = "MKREDIRECTREF"

  #: RFC 3253, section 6.3, https://datatracker.ietf.org/doc/html/rfc3253#section-6.3
  MKWORKSPACE = "MKWORKSPACE"

  #: RFC 4918, section 9.9, https://datatracker.ietf.org/doc/html/rfc4918#section-9.9
  MOVE = "MOVE"

  #: RFC 7231, section 4.3.7, https://datatracker.ietf.org/doc/html/rfc7231#section-4.3.7
  OPTIONS = "OPTIONS"

  #: RFC 3648, section 7, https://datatracker.ietf.org/doc/html/rfc3648#section-7
  ORDERPATCH = "ORDERPATCH"

  #: RFC 5789, section 2, https://datatracker.ietf.org/doc/html/rfc5789#section-2
  PATCH = "PATCH"

  #: RFC 7231, section 4.3.3, https://datatracker.ietf.org/doc/html/rfc7231#section-4.3.3
  POST = "POST"

  #: RFC 7540, section 3.5, https://datatracker.ietf.org/doc/html/rfc7540#section-3.5
  PRI = "PRI"

  #: RFC 4918, section 9.1, https://datatracker.ietf.org/doc/html/rfc4918#section-9.1
  PROPFIND = "PROPFIND"

  #: RFC 4918, section 9.2, https://datatracker.ietf.org/doc/html/rfc4918#section-9.2
  PROPPATCH = "PROPPATCH"

  #: RFC 7231, section 4.3.4, https://datatracker.ietf.org/doc/html/rfc7231#section-4.3.4
  PUT = "PUT"

  #: draft-ietf-httpbis-safe-method-w-body, section 2, https://datatracker.ietf.org/doc/html/draft-ietf-httpbis-safe-method-w-body#section-2
  QUERY = "QUERY"

  #: RFC 5842, section 6, https://datatracker.ietf.org/doc/html/rfc5842#section-6
  REBIND = "REBIND"

  #: RFC 3253, section 3.6, https://datatracker.ietf.org/doc/html/rfc3253#section-3.6
  REPORT = "REPORT"

  #: RFC 5323, section 2, https://datatracker.ietf.org/doc/html/rfc5323#section-2
  SEARCH = "SEARCH"

  #: RFC 7231, section 4.3.8, https://datatracker.ietf.org/doc/html/rfc7231#section-4.3.8
  TRACE = "TRACE"

  #: RFC 5842, section 5, https://datatracker.ietf.org/doc/html/rfc5842#section-5
  UNBIND = "UNBIND"

  #: RFC 3253, section 4.5, https://datatracker.ietf.org/doc/html/rfc3253#section-4.5
  UNCHECKOUT = "UNCHECKOUT"

  #: draft-snell-link-method, section 4, https://datatracker.ietf.org/doc/html/draft-snell-link-method#section-4
  UNLINK = "UNLINK"

  #: RFC 4918, section 9.11, https://datatracker.ietf.org/doc/html/rfc4918#section-9.11
  UNLOCK = "UNLOCK"

  #: RFC 3253, section 7.1, https://datatracker.ietf.org/doc/html/rfc3253#section-7.1
  UPDATE = "UPDATE"

  #: RFC 4437, section 7, https://datatracker.ietf.org/doc/html/rfc4437#section-7
  UPDATEREDIRECTREF = "UPDATEREDIRECTREF"

  #: RFC 3253, section 3.5, https://datatracker.ietf.org/doc/html/rfc3253#section-3.5
  VERSION_CONTROL = "VERSION-CONTROL"

Method._map = Method._index()
