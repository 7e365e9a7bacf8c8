from .Catalog import Catalog

class Forwarded(Catalog):
  """Parameters of the Forwarded header field (RFC 7239)."""
  _kind = "forwarded parameter"

  #: RFC 7239, section 5.1, https://datatracker.ietf.org/doc/html/rfc7239#section-5.1
  BY = "by"

  #: RFC 7239, section 5.2, https://datatracker.ietf.org/doc/html/rfc7239#section-5.2
  FOR = "for"

  #: RFC 7239, section 5.3, https://datatracker.ietf.org/doc/html/rfc7239#section-5.3
  HOST = "host"

  #: RFC 7239, section 5.4, https://datatracker.ietf.org/doc/html/rfc7239#section-5.4
  PROTO = "proto"

Forwarded._map = Forwarded._index()
