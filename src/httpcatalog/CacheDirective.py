from .Catalog import Catalog

class CacheDirective(Catalog):
  """
  Cache-Control directives.

  https://www.iana.org/assignments/http-cache-directives/http-cache-directives.xhtml
  """
  _kind = "cache directive"

  #: RFC 8246, section 2, https://datatracker.ietf.org/doc/html/rfc8246#section-2
  IMMUTABLE = "immutable"

  #: draft-nottingham-linked-cache-inv, section 4, https://datatracker.ietf.org/doc/html/draft-nottingham-linked-cache-inv#section-4
  INV_MAXAGE = "inv-maxage"

  #: RFC 7234, section 5.2.1.1, https://datatracker.ietf.org/doc/html/rfc7234#section-5.2.1.1
  MAX_AGE = "max-age"

  #: RFC 7234, section 5.2.1.2, https://datatracker.ietf.org/doc/html/rfc7234#section-5.2.1.2
  MAX_STALE = "max-stale"

  #: RFC 7234, section 5.2.1.3, https://datatracker.ietf.org/doc/html/rfc7234#section-5.2.1.3
  MIN_FRESH = "min-fresh"

  #: RFC 7234, section 5.2.2.1, https://datatracker.ietf.org/doc/html/rfc7234#section-5.2.2.1
  MUST_REVALIDATE = "must-revalidate"

  #: RFC 7234, section 5.2.1.4, https://datatracker.ietf.org/doc/html/rfc7234#section-5.2.1.4
  NO_CACHE = "no-cache"

  #: RFC 7234, section 5.2.1.5, https://datatracker.ietf.org/doc/html/rfc7234#section-5.2.1.5
  NO_STORE = "no-store"

  #: RFC 7234, section 5.2.1.6, https://datatracker.ietf.org/doc/html/rfc7234#section-5.2.1.6
  NO_TRANSFORM = "no-transform"

  #: RFC 7234, section 5.2.1.7, https://datatracker.ietf.org/doc/html/rfc7234#section-5.2.1.7
  ONLY_IF_CACHED = "only-if-cached"

  #: RFC 7234, section 5.2.2.6, https://datatracker.ietf.org/doc/html/rfc7234#section-5.2.2.6
  PRIVATE = "private"

  #: RFC 7234, section 5.2.2.7, https://datatracker.ietf.org/doc/html/rfc7234#section-5.2.2.7
  PROXY_REVALIDATE = "proxy-revalidate"

  #: RFC 7234, section 5.2.2.5, https://datatracker.ietf.org/doc/html/rfc7234#section-5.2.2.5
  PUBLIC = "public"

  #: RFC 7234, section 5.2.2.9, https://datatracker.ietf.org/doc/html/rfc7234#section-5.2.2.9
  S_MAXAGE = "s-maxage"

  #: RFC 5861, section 4, https://datatracker.ietf.org/doc/html/rfc5861#section-4
  STALE_IF_ERROR = "stale-if-error"

  #: RFC 5861, section 3, https://datatracker.ietf.org/doc/html/rfc5861#section-3
  STALE_WHILE_REVALIDATE = "stale-while-revalidate"

CacheDirective._map = CacheDirective._index()
