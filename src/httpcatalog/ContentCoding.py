from .Catalog import Catalog

class ContentCoding(Catalog):
  """
  Content codings, as used in Content-Encoding and Accept-Encoding.

  https://www.iana.org/assignments/http-parameters/http-parameters.xhtml#content-coding
  """
  _kind = "content coding"

  #: RFC 8188, section 2, https://datatracker.ietf.org/doc/html/rfc8188#section-2
  AES128GCM = "aes128gcm"

  #: RFC 7932, https://datatracker.ietf.org/doc/html/rfc7932
  BR = "br"

  #: RFC 7230, section 4.2.1, https://datatracker.ietf.org/doc/html/rfc7230#section-4.2.1
  COMPRESS = "compress"

  #: RFC 7230, section 4.2.2, https://datatracker.ietf.org/doc/html/rfc7230#section-4.2.2
  DEFLATE = "deflate"

  #: W3C exi, https://www.w3.org/TR/exi/#contentCoding
  EXI = "exi"

  #: RFC 7230, section 4.2.3, https://datatracker.ietf.org/doc/html/rfc7230#section-4.2.3
  GZIP = "gzip"

  #: RFC 7231, section 5.3.4, https://datatracker.ietf.org/doc/html/rfc7231#section-5.3.4
  IDENTITY = "identity"

  #: JSR 200, https://www.jcp.org/en/jsr/detail?id=200
  PACK200_GZIP = "pack200-gzip"

  #: RFC 7230, section 4.2.1, https://datatracker.ietf.org/doc/html/rfc7230#section-4.2.1
  X_COMPRESS = "x-compress"

  #: RFC 7230, section 4.2.3, https://datatracker.ietf.org/doc/html/rfc7230#section-4.2.3
  X_GZIP = "x-gzip"

ContentCoding._map = ContentCoding._index()
