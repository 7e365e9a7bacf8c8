from .Catalog import Catalog

class AuthScheme(Catalog):
  """
  Authentication schemes for the Authorization and WWW-Authenticate family
  of header fields. Scheme names are compared case-insensitively, so
  ``AuthScheme.query("bearer")`` returns ``"Bearer"``.

  https://www.iana.org/assignments/http-authschemes/http-authschemes.xhtml
  """
  _kind = "authentication scheme"

  #: RFC 7617, section 2, https://datatracker.ietf.org/doc/html/rfc7617#section-2
  BASIC = "Basic"

  #: RFC 6750, section 3, https://datatracker.ietf.org/doc/html/rfc6750#section-3
  BEARER = "Bearer"

  #: RFC 7616, section 3, https://datatracker.ietf.org/doc/html/rfc7616#section-3
  DIGEST = "Digest"

  #: RFC 7486, section 3, https://datatracker.ietf.org/doc/html/rfc7486#section-3
  HOBA = "HOBA"

  #: RFC 8120, section 2, https://datatracker.ietf.org/doc/html/rfc8120#section-2
  MUTUAL = "Mutual"

  #: RFC 4559, section 4, https://datatracker.ietf.org/doc/html/rfc4559#section-4
  NEGOTIATE = "Negotiate"

  #: RFC 5849, section 3.5.1, https://datatracker.ietf.org/doc/html/rfc5849#section-3.5.1
  OAUTH = "OAuth"

  #: RFC 7804, section 5, https://datatracker.ietf.org/doc/html/rfc7804#section-5
  SCRAM_SHA_1 = "SCRAM-SHA-1"

  #: RFC 7804, section 5, https://datatracker.ietf.org/doc/html/rfc7804#section-5
  SCRAM_SHA_256 = "SCRAM-SHA-256"

  #: draft-ietf-webpush-vapid, section 3, https://datatracker.ietf.org/doc/html/draft-ietf-webpush-vapid#section-3
  VAPID = "vapid"

AuthScheme._map = AuthScheme._index()
