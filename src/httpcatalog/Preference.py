from .Catalog import Catalog

class Preference(Catalog):
  """
  Preference tokens for the Prefer header field.

  https://www.iana.org/assignments/http-parameters/http-parameters.xhtml#preferences
  """
  _kind = "preference"

  #: RFC 8144, section 4, https://datatracker.ietf.org/doc/html/rfc8144#section-4
  DEPTH_NOROOT = "depth-noroot"

  #: RFC 7240, section 4.4, https://datatracker.ietf.org/doc/html/rfc7240#section-4.4
  HANDLING = "handling"

  #: RFC 7240, section 4.1, https://datatracker.ietf.org/doc/html/rfc7240#section-4.1
  RESPOND_ASYNC = "respond-async"

  #: RFC 7240, section 4.2, https://datatracker.ietf.org/doc/html/rfc7240#section-4.2
  RETURN = "return"

  #: RFC 8674, section 2, https://datatracker.ietf.org/doc/html/rfc8674#section-2
  SAFE = "safe"

  #: RFC 7240, section 4.3, https://datatracker.ietf.org/doc/html/rfc7240#section-4.3
  WAIT = "wait"

Preference._map = Preference._index()
