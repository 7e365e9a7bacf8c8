from .Catalog import Catalog

class RangeUnit(Catalog):
  """Range units (Accept-Ranges, Range, Content-Range)."""
  _kind = "range unit"

  #: RFC 7233, section 2.1, https://datatracker.ietf.org/doc/html/rfc7233#section-2.1
  BYTES = "bytes"

  #: draft-pratt-httpbis-bytes-live-range-unit, section 2, https://datatracker.ietf.org/doc/html/draft-pratt-httpbis-bytes-live-range-unit#section-2
  BYTES_LIVE = "bytes-live"

  #: RFC 7233, section 2.3, https://datatracker.ietf.org/doc/html/rfc7233#section-2.3
  NONE = "none"

RangeUnit._map = RangeUnit._index()
