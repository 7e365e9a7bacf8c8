from .Catalog import Catalog

class TransferCoding(Catalog):
  """
  Transfer codings, as used in Transfer-Encoding and TE.

  The x-gzip and x-compress aliases are kept as their own entries so that
  a received literal can be mapped back without loss.
  """
  _kind = "transfer coding"

  #: RFC 7230, section 4.1, https://datatracker.ietf.org/doc/html/rfc7230#section-4.1
  CHUNKED = "chunked"

  #: RFC 7230, section 4.2.1, https://datatracker.ietf.org/doc/html/rfc7230#section-4.2.1
  COMPRESS = "compress"

  #: RFC 7230, section 4.2.2, https://datatracker.ietf.org/doc/html/rfc7230#section-4.2.2
  DEFLATE = "deflate"

  #: RFC 7230, section 4.2.3, https://datatracker.ietf.org/doc/html/rfc7230#section-4.2.3
  GZIP = "gzip"

  #: RFC 2616, section 3.6, https://datatracker.ietf.org/doc/html/rfc2616#section-3.6
  IDENTITY = "identity"

  #: RFC 7230, section 4.2.1, https://datatracker.ietf.org/doc/html/rfc7230#section-4.2.1
  X_COMPRESS = "x-compress"

  #: RFC 7230, section 4.2.3, https://datatracker.ietf.org/doc/html/rfc7230#section-4.2.3
  X_GZIP = "x-gzip"

TransferCoding._map = TransferCoding._index()
