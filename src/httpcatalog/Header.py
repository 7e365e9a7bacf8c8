from .Catalog import Catalog

class Header(Catalog):
  """
  HTTP header field names.

  Field names are case-insensitive on the wire, so lookups fold case:

    >>> Header.query("content-type")
    'Content-Type'
    >>> Header.name_of("X-Frame-Options")
    'X_FRAME_OPTIONS'

  https://www.iana.org/assignments/message-headers/message-headers.xhtml
  """
  _kind = "header field"

  #: RFC 3229, section 10.5.3, https://datatracker.ietf.org/doc/html/rfc3229#section-10.5.3
  A_IM = "A-IM"

  #: RFC 7639, section 2, https://datatracker.ietf.org/doc/html/rfc7639#section-2
  ALPN = "ALPN"

  #: RFC 7231, section 5.3.2, https://datatracker.ietf.org/doc/html/rfc7231#section-5.3.2
  ACCEPT = "Accept"

  #: RFC 2324, section 2.2.2.1, https://datatracker.ietf.org/doc/html/rfc2324#section-2.2.2.1
  #: RFC 7168, section 2.2.1, https://datatracker.ietf.org/doc/html/rfc7168#section-2.2.1
  ACCEPT_ADDITIONS = "Accept-Additions"

  #: draft-ietf-httpbis-client-hints, section 3.1, https://datatracker.ietf.org/doc/html/draft-ietf-httpbis-client-hints#section-3.1
  ACCEPT_CH = "Accept-CH"

  #: RFC 7231, section 5.3.3, https://datatracker.ietf.org/doc/html/rfc7231#section-5.3.3
  ACCEPT_CHARSET = "Accept-Charset"

  #: RFC 7089, section 2.1.1, https://datatracker.ietf.org/doc/html/rfc7089#section-2.1.1
  ACCEPT_DATETIME = "Accept-Datetime"

  #: RFC 7694, section 3, https://datatracker.ietf.org/doc/html/rfc7694#section-3
  #: RFC 7231, section 5.3.4, https://datatracker.ietf.org/doc/html/rfc7231#section-5.3.4
  ACCEPT_ENCODING = "Accept-Encoding"

  #: RFC 2295, section 8.2, https://datatracker.ietf.org/doc/html/rfc2295#section-8.2
  ACCEPT_FEATURES = "Accept-Features"

  #: draft-combs-http-indeterminate-range, section 2.1, https://datatracker.ietf.org/doc/html/draft-combs-http-indeterminate-range#section-2.1
  ACCEPT_INDEFINITE_RANGES = "Accept-Indefinite-Ranges"

  #: RFC 7231, section 5.3.5, https://datatracker.ietf.org/doc/html/rfc7231#section-5.3.5
  ACCEPT_LANGUAGE = "Accept-Language"

  #: RFC 5789, section 3.1, https://datatracker.ietf.org/doc/html/rfc5789#section-3.1
  ACCEPT_PATCH = "Accept-Patch"

  #: W3C ldp, https://www.w3.org/TR/ldp/#header-accept-post
  ACCEPT_POST = "Accept-Post"

  #: draft-svensson-profiled-representations, section 4, https://datatracker.ietf.org/doc/html/draft-svensson-profiled-representations#section-4
  ACCEPT_PROFILE = "Accept-Profile"

  #: draft-ruellan-http-accept-push-policy, section 3.1, https://datatracker.ietf.org/doc/html/draft-ruellan-http-accept-push-policy#section-3.1
  ACCEPT_PUSH_POLICY = "Accept-Push-Policy"

  #: draft-ietf-httpbis-safe-method-w-body, section 3, https://datatracker.ietf.org/doc/html/draft-ietf-httpbis-safe-method-w-body#section-3
  ACCEPT_QUERY = "Accept-Query"

  #: RFC 7233, section 2.3, https://datatracker.ietf.org/doc/html/rfc7233#section-2.3
  ACCEPT_RANGES = "Accept-Ranges"

  #: W3C cors, https://www.w3.org/TR/cors/#access-control-allow-credentials-response-header
  ACCESS_CONTROL_ALLOW_CREDENTIALS = "Access-Control-Allow-Credentials"

  #: W3C cors, https://www.w3.org/TR/cors/#access-control-allow-headers-response-header
  ACCESS_CONTROL_ALLOW_HEADERS = "Access-Control-Allow-Headers"

  #: W3C cors, https://www.w3.org/TR/cors/#access-control-allow-methods-response-header
  ACCESS_CONTROL_ALLOW_METHODS = "Access-Control-Allow-Methods"

  #: W3C cors, https://www.w3.org/TR/cors/#access-control-allow-origin-response-header
  ACCESS_CONTROL_ALLOW_ORIGIN = "Access-Control-Allow-Origin"

  #: W3C cors, https://www.w3.org/TR/cors/#access-control-expose-headers-response-header
  ACCESS_CONTROL_EXPOSE_HEADERS = "Access-Control-Expose-Headers"

  #: W3C cors, https://www.w3.org/TR/cors/#access-control-max-age-response-header
  ACCESS_CONTROL_MAX_AGE = "Access-Control-Max-Age"

  #: W3C cors, https://www.w3.org/TR/cors/#access-control-request-headers-request-header
  ACCESS_CONTROL_REQUEST_HEADERS = "Access-Control-Request-Headers"

  #: W3C cors, https://www.w3.org/TR/cors/#access-control-request-method-request-header
  ACCESS_CONTROL_REQUEST_METHOD = "Access-Control-Request-Method"

  #: RFC 7234, section 5.1, https://datatracker.ietf.org/doc/html/rfc7234#section-5.1
  AGE = "Age"

  #: RFC 7231, section 7.4.1, https://datatracker.ietf.org/doc/html/rfc7231#section-7.4.1
  ALLOW = "Allow"

  #: RFC 7838, section 3, https://datatracker.ietf.org/doc/html/rfc7838#section-3
  ALT_SVC = "Alt-Svc"

  #: RFC 7838, section 5, https://datatracker.ietf.org/doc/html/rfc7838#section-5
  ALT_USED = "Alt-Used"

  #: RFC 2295, section 8.3, https://datatracker.ietf.org/doc/html/rfc2295#section-8.3
  ALTERNATES = "Alternates"

  #: RFC 4437, section 12.2, https://datatracker.ietf.org/doc/html/rfc4437#section-12.2
  APPLY_TO_REDIRECT_REF = "Apply-To-Redirect-Ref"

  #: RFC 8053, section 4, https://datatracker.ietf.org/doc/html/rfc8053#section-4
  AUTHENTICATION_CONTROL = "Authentication-Control"

  #: RFC 7615, section 3, https://datatracker.ietf.org/doc/html/rfc7615#section-3
  AUTHENTICATION_INFO = "Authentication-Info"

  #: RFC 7616, section 3.4, https://datatracker.ietf.org/doc/html/rfc7616#section-3.4
  #: RFC 5849, section 3.5.1, https://datatracker.ietf.org/doc/html/rfc5849#section-3.5.1
  #: RFC 7235, section 4.1, https://datatracker.ietf.org/doc/html/rfc7235#section-4.1
  AUTHORIZATION = "Authorization"

  #: RFC 2774, section 4.3, https://datatracker.ietf.org/doc/html/rfc2774#section-4.3
  C_EXT = "C-Ext"

  #: RFC 2774, section 4.2, https://datatracker.ietf.org/doc/html/rfc2774#section-4.2
  C_MAN = "C-Man"

  #: RFC 2774, section 4.2, https://datatracker.ietf.org/doc/html/rfc2774#section-4.2
  C_OPT = "C-Opt"

  #: W3C WD-http-pep, https://www.w3.org/TR/WD-http-pep-971121.html#_Toc404743948
  C_PEP = "C-PEP"

  #: W3C WD-http-pep, https://www.w3.org/TR/WD-http-pep-971121.html#_Toc404743954
  C_PEP_INFO = "C-PEP-Info"

  #: RFC 9213, section 3, https://datatracker.ietf.org/doc/html/rfc9213#section-3
  CDN_CACHE_CONTROL = "CDN-Cache-Control"

  #: RFC 7234, section 5.2, https://datatracker.ietf.org/doc/html/rfc7234#section-5.2
  CACHE_CONTROL = "Cache-Control"

  #: draft-drechsler-httpbis-improved-caching, section 2.1, https://datatracker.ietf.org/doc/html/draft-drechsler-httpbis-improved-caching#section-2.1
  CACHE_NT = "Cache-NT"

  #: draft-ietf-httpbis-cache-header, section 2, https://datatracker.ietf.org/doc/html/draft-ietf-httpbis-cache-header#section-2
  CACHE_STATUS = "Cache-Status"

  #: draft-ietf-calext-caldav-attachments, section 5.1, https://datatracker.ietf.org/doc/html/draft-ietf-calext-caldav-attachments#section-5.1
  CAL_MANAGED_ID = "Cal-Managed-ID"

  #: W3C clear-site-data, https://www.w3.org/TR/clear-site-data/#header
  CLEAR_SITE_DATA = "Clear-Site-Data"

  #: draft-ietf-httpbis-client-cert-field, section 2.2, https://datatracker.ietf.org/doc/html/draft-ietf-httpbis-client-cert-field#section-2.2
  CLIENT_CERT = "Client-Cert"

  #: draft-ietf-httpbis-client-cert-field, section 2.3, https://datatracker.ietf.org/doc/html/draft-ietf-httpbis-client-cert-field#section-2.3
  CLIENT_CERT_CHAIN = "Client-Cert-Chain"

  #: RFC 7230, section 8.1, https://datatracker.ietf.org/doc/html/rfc7230#section-8.1
  CLOSE = "Close"

  #: RFC 7230, section 6.1, https://datatracker.ietf.org/doc/html/rfc7230#section-6.1
  CONNECTION = "Connection"

  #: RFC 2068, section 14.11, https://datatracker.ietf.org/doc/html/rfc2068#section-14.11
  CONTENT_BASE = "Content-Base"

  #: RFC 9530, section 2, https://datatracker.ietf.org/doc/html/rfc9530#section-2
  CONTENT_DIGEST = "Content-Digest"

  #: RFC 6266, section 4, https://datatracker.ietf.org/doc/html/rfc6266#section-4
  CONTENT_DISPOSITION = "Content-Disposition"

  #: RFC 7231, section 3.1.2.2, https://datatracker.ietf.org/doc/html/rfc7231#section-3.1.2.2
  CONTENT_ENCODING = "Content-Encoding"

  #: RFC 7231, section 3.1.3.2, https://datatracker.ietf.org/doc/html/rfc7231#section-3.1.3.2
  CONTENT_LANGUAGE = "Content-Language"

  #: RFC 7230, section 3.3.2, https://datatracker.ietf.org/doc/html/rfc7230#section-3.3.2
  CONTENT_LENGTH = "Content-Length"

  #: RFC 7231, section 3.1.4.2, https://datatracker.ietf.org/doc/html/rfc7231#section-3.1.4.2
  CONTENT_LOCATION = "Content-Location"

  #: draft-combs-http-indeterminate-range, section 2.2, https://datatracker.ietf.org/doc/html/draft-combs-http-indeterminate-range#section-2.2
  #: RFC 7233, section 4.2, https://datatracker.ietf.org/doc/html/rfc7233#section-4.2
  CONTENT_RANGE = "Content-Range"

  #: W3C CSP2, https://www.w3.org/TR/CSP2/#content-security-policy-header-field
  #: W3C CSP3, https://www.w3.org/TR/CSP3/#csp-header
  CONTENT_SECURITY_POLICY = "Content-Security-Policy"

  #: W3C csp-pinning, https://www.w3.org/TR/csp-pinning/#content-security-policy-pin-header-field
  CONTENT_SECURITY_POLICY_PIN = "Content-Security-Policy-Pin"

  #: W3C CSP2, https://www.w3.org/TR/CSP2/#content-security-policy-report-only-header-field
  #: W3C CSP3, https://www.w3.org/TR/CSP3/#cspro-header
  CONTENT_SECURITY_POLICY_REPORT_ONLY = "Content-Security-Policy-Report-Only"

  #: W3C csp-pinning, https://www.w3.org/TR/csp-pinning/#content-security-policy-report-only-pin-header-field
  CONTENT_SECURITY_POLICY_REPORT_ONLY_PIN = "Content-Security-Policy-Report-Only-Pin"

  #: draft-thomson-http-content-signature, section 2, https://datatracker.ietf.org/doc/html/draft-thomson-http-content-signature#section-2
  CONTENT_SIGNATURE = "Content-Signature"

  #: RFC 8255, section 6, https://datatracker.ietf.org/doc/html/rfc8255#section-6
  CONTENT_TRANSLATION_TYPE = "Content-Translation-Type"

  #: RFC 7231, section 3.1.1.5, https://datatracker.ietf.org/doc/html/rfc7231#section-3.1.1.5
  CONTENT_TYPE = "Content-Type"

  #: RFC 2068, section 19.6.2.2, https://datatracker.ietf.org/doc/html/rfc2068#section-19.6.2.2
  CONTENT_VERSION = "Content-Version"

  #: draft-cedik-http-warning, section 8.1, https://datatracker.ietf.org/doc/html/draft-cedik-http-warning#section-8.1
  CONTENT_WARNING = "Content-Warning"

  #: draft-ietf-httpbis-rfc6265bis, section 4.2, https://datatracker.ietf.org/doc/html/draft-ietf-httpbis-rfc6265bis#section-4.2
  #: RFC 6265, section 4.2, https://datatracker.ietf.org/doc/html/rfc6265#section-4.2
  COOKIE = "Cookie"

  #: RFC 2965, section 3.3, https://datatracker.ietf.org/doc/html/rfc2965#section-3.3
  COOKIE2 = "Cookie2"

  #: RFC 5323, section 9.1.1, https://datatracker.ietf.org/doc/html/rfc5323#section-9.1.1
  DASL = "DASL"

  #: RFC 4918, section 10.1, https://datatracker.ietf.org/doc/html/rfc4918#section-10.1
  DAV = "DAV"

  #: W3C tracking-dnt, https://www.w3.org/TR/tracking-dnt/#dnt-header-field
  DNT = "DNT"

  #: RFC 7231, section 7.1.1.2, https://datatracker.ietf.org/doc/html/rfc7231#section-7.1.1.2
  DATE = "Date"

  #: RFC 3229, section 10.5.1, https://datatracker.ietf.org/doc/html/rfc3229#section-10.5.1
  DELTA_BASE = "Delta-Base"

  #: draft-ietf-httpapi-deprecation-header, section 2, https://datatracker.ietf.org/doc/html/draft-ietf-httpapi-deprecation-header#section-2
  DEPRECATION = "Deprecation"

  #: RFC 4918, section 10.2, https://datatracker.ietf.org/doc/html/rfc4918#section-10.2
  DEPTH = "Depth"

  #: RFC 4918, section 10.3, https://datatracker.ietf.org/doc/html/rfc4918#section-10.3
  DESTINATION = "Destination"

  #: W3C device-memory-1, https://www.w3.org/TR/device-memory-1/#sec-device-memory-client-hint-header
  DEVICE_MEMORY = "Device-Memory"

  #: RFC 3230, section 4.3.2, https://datatracker.ietf.org/doc/html/rfc3230#section-4.3.2
  DIGEST = "Digest"

  #: RFC 6017, section 3, https://datatracker.ietf.org/doc/html/rfc6017#section-3
  EDIINT_FEATURES = "EDIINT-Features"

  #: W3C epr, https://www.w3.org/TR/epr/#epr-header
  EPR = "EPR"

  #: RFC 7232, section 2.3, https://datatracker.ietf.org/doc/html/rfc7232#section-2.3
  ETAG = "ETag"

  #: RFC 8470, section 5.1, https://datatracker.ietf.org/doc/html/rfc8470#section-5.1
  EARLY_DATA = "Early-Data"

  #: RFC 7231, section 5.1.1, https://datatracker.ietf.org/doc/html/rfc7231#section-5.1.1
  EXPECT = "Expect"

  #: RFC 9163, section 2.1, https://datatracker.ietf.org/doc/html/rfc9239#section-2.1
  EXPECT_CT = "Expect-CT"

  #: RFC 7234, section 5.3, https://datatracker.ietf.org/doc/html/rfc7234#section-5.3
  EXPIRES = "Expires"

  #: RFC 2774, section 4.3, https://datatracker.ietf.org/doc/html/rfc2774#section-4.3
  EXT = "Ext"

  #: W3C feature-policy-1, https://www.w3.org/TR/feature-policy-1/#feature-policy-http-header-field
  FEATURE_POLICY = "Feature-Policy"

  #: RFC 7239, section 4, https://datatracker.ietf.org/doc/html/rfc7239#section-4
  FORWARDED = "Forwarded"

  #: RFC 7231, section 5.5.1, https://datatracker.ietf.org/doc/html/rfc7231#section-5.5.1
  FROM = "From"

  #: draft-reschke-http-get-location, section 3, https://datatracker.ietf.org/doc/html/draft-reschke-http-get-location#section-3
  GET_LOCATION = "GET-Location"

  #: RFC 7540, section 3.2.1, https://datatracker.ietf.org/doc/html/rfc7540#section-3.2.1
  HTTP2_SETTINGS = "HTTP2-Settings"

  #: RFC 7486, section 6.1.1, https://datatracker.ietf.org/doc/html/rfc7486#section-6.1.1
  HOBAREG = "Hobareg"

  #: RFC 7230, section 5.4, https://datatracker.ietf.org/doc/html/rfc7230#section-5.4
  HOST = "Host"

  #: RFC 3229, section 10.5.2, https://datatracker.ietf.org/doc/html/rfc3229#section-10.5.2
  IM = "IM"

  #: draft-ietf-httpapi-idempotency-key-header, section 2, https://datatracker.ietf.org/doc/html/draft-ietf-httpapi-idempotency-key-header-00#section-2
  IDEMPOTENCY_KEY = "Idempotency-Key"

  #: RFC 4918, section 10.4, https://datatracker.ietf.org/doc/html/rfc4918#section-10.4
  IF = "If"

  #: RFC 7232, section 3.1, https://datatracker.ietf.org/doc/html/rfc7232#section-3.1
  IF_MATCH = "If-Match"

  #: RFC 7232, section 3.3, https://datatracker.ietf.org/doc/html/rfc7232#section-3.3
  IF_MODIFIED_SINCE = "If-Modified-Since"

  #: RFC 7232, section 3.2, https://datatracker.ietf.org/doc/html/rfc7232#section-3.2
  IF_NONE_MATCH = "If-None-Match"

  #: RFC 7233, section 3.2, https://datatracker.ietf.org/doc/html/rfc7233#section-3.2
  IF_RANGE = "If-Range"

  #: RFC 6638, section 8.3, https://datatracker.ietf.org/doc/html/rfc6638#section-8.3
  IF_SCHEDULE_TAG_MATCH = "If-Schedule-Tag-Match"

  #: RFC 7232, section 3.4, https://datatracker.ietf.org/doc/html/rfc7232#section-3.4
  IF_UNMODIFIED_SINCE = "If-Unmodified-Since"

  #: RFC 8473, section 5.3, https://datatracker.ietf.org/doc/html/rfc8473#section-5.3
  INCLUDE_REFERRED_TOKEN_BINDING_ID = "Include-Referred-Token-Binding-ID"

  #: draft-ietf-httpbis-key, section 2, https://datatracker.ietf.org/doc/html/draft-ietf-httpbis-key#section-2
  KEY = "Key"

  #: RFC 3253, section 8.3, https://datatracker.ietf.org/doc/html/rfc3253#section-8.3
  LABEL = "Label"

  #: W3C eventsource, https://www.w3.org/TR/eventsource/#last-event-id
  LAST_EVENT_ID = "Last-Event-ID"

  #: RFC 7232, section 2.2, https://datatracker.ietf.org/doc/html/rfc7232#section-2.2
  LAST_MODIFIED = "Last-Modified"

  #: RFC 8288, section 3, https://datatracker.ietf.org/doc/html/rfc8288#section-3
  LINK = "Link"

  #: RFC 9652, https://datatracker.ietf.org/doc/html/rfc9652#name-the-link-template-header-fi
  LINK_TEMPLATE = "Link-Template"

  #: RFC 7231, section 7.1.2, https://datatracker.ietf.org/doc/html/rfc7231#section-7.1.2
  LOCATION = "Location"

  #: RFC 4918, section 10.5, https://datatracker.ietf.org/doc/html/rfc4918#section-10.5
  LOCK_TOKEN = "Lock-Token"

  #: RFC 7231, appendix A.1, https://datatracker.ietf.org/doc/html/rfc7231#appendix-A.1
  MIME_VERSION = "MIME-Version"

  #: RFC 2774, section 4.1, https://datatracker.ietf.org/doc/html/rfc2774#section-4.1
  MAN = "Man"

  #: RFC 7231, section 5.1.2, https://datatracker.ietf.org/doc/html/rfc7231#section-5.1.2
  MAX_FORWARDS = "Max-Forwards"

  #: RFC 7089, section 2.1.1, https://datatracker.ietf.org/doc/html/rfc7089#section-2.1.1
  MEMENTO_DATETIME = "Memento-Datetime"

  #: W3C network-error-logging-1, https://www.w3.org/TR/network-error-logging-1/#nel-response-header
  NEL = "NEL"

  #: RFC 2295, section 8.4, https://datatracker.ietf.org/doc/html/rfc2295#section-8.4
  NEGOTIATE = "Negotiate"

  #: draft-thomson-http-nice, section 2, https://datatracker.ietf.org/doc/html/draft-thomson-http-nice#section-2
  NICE = "Nice"

  #: OASIS odata-v4.0-part1-protocol, https://docs.oasis-open.org/odata/odata/v4.0/errata03/os/complete/part1-protocol/odata-v4.0-errata03-os-part1-protocol-complete.html#_Toc453752238
  ODATA_ENTITYID = "OData-EntityId"

  #: OASIS odata-v4.0-part1-protocol, https://docs.oasis-open.org/odata/odata/v4.0/errata03/os/complete/part1-protocol/odata-v4.0-errata03-os-part1-protocol-complete.html#_Toc453752232
  ODATA_ISOLATION = "OData-Isolation"

  #: OASIS odata-v4.0-part1-protocol, https://docs.oasis-open.org/odata/odata/v4.0/errata03/os/complete/part1-protocol/odata-v4.0-errata03-os-part1-protocol-complete.html#_Toc453752233
  ODATA_MAXVERSION = "OData-MaxVersion"

  #: RFC 8613, section 11.1, https://datatracker.ietf.org/doc/html/rfc8613#section-11.1
  OSCORE = "OSCORE"

  #: RFC 2774, section 4.1, https://datatracker.ietf.org/doc/html/rfc2774#section-4.1
  OPT = "Opt"

  #: RFC 8053, section 3, https://datatracker.ietf.org/doc/html/rfc8053#section-3
  OPTIONAL_WWW_AUTHENTICATE = "Optional-WWW-Authenticate"

  #: RFC 3648, section 5.1, https://datatracker.ietf.org/doc/html/rfc3648#section-5.1
  ORDERING_TYPE = "Ordering-Type"

  #: W3C cors, https://www.w3.org/TR/cors/#origin-request-header
  ORIGIN = "Origin"

  #: draft-west-origin-cookies, section 4.4, https://datatracker.ietf.org/doc/html/draft-west-origin-cookies#section-4.4
  ORIGIN_COOKIE = "Origin-Cookie"

  #: RFC 4918, section 10.6, https://datatracker.ietf.org/doc/html/rfc4918#section-10.6
  OVERWRITE = "Overwrite"

  #: W3C P3P, https://www.w3.org/TR/P3P/#syntax_ext
  P3P = "P3P"

  #: W3C WD-http-pep, https://www.w3.org/TR/WD-http-pep-971121.html#_Toc404743947
  PEP = "PEP"

  #: W3C WD-http-pep, https://www.w3.org/TR/WD-http-pep-971121.html#_Toc404743953
  PEP_INFO = "PEP-Info"

  #: draft-nottingham-http-poe, section 4, https://datatracker.ietf.org/doc/html/draft-nottingham-http-poe-00#section-4
  POE = "POE"

  #: draft-nottingham-http-poe, section 3, https://datatracker.ietf.org/doc/html/draft-nottingham-http-poe-00#section-3
  POE_LINKS = "POE-Links"

  #: RFC 3648, section 6.1, https://datatracker.ietf.org/doc/html/rfc3648#section-6.1
  POSITION = "Position"

  #: RFC 7234, section 5.4, https://datatracker.ietf.org/doc/html/rfc7234#section-5.4
  PRAGMA = "Pragma"

  #: RFC 7240, section 2, https://datatracker.ietf.org/doc/html/rfc7240#section-2
  PREFER = "Prefer"

  #: draft-pot-prefer-push, section 3, https://datatracker.ietf.org/doc/html/draft-pot-prefer-push#section-3
  PREFER_PUSH = "Prefer-Push"

  #: RFC 7240, section 3, https://datatracker.ietf.org/doc/html/rfc7240#section-3
  PREFERENCE_APPLIED = "Preference-Applied"

  #: draft-ietf-httpbis-priority, section 5, https://datatracker.ietf.org/doc/html/draft-ietf-httpbis-priority#section-5
  PRIORITY = "Priority"

  #: RFC 7235, section 4.2, https://datatracker.ietf.org/doc/html/rfc7235#section-4.2
  PROXY_AUTHENTICATE = "Proxy-Authenticate"

  #: RFC 7615, section 4, https://datatracker.ietf.org/doc/html/rfc7615#section-4
  PROXY_AUTHENTICATION_INFO = "Proxy-Authentication-Info"

  #: RFC 7235, section 4.3, https://datatracker.ietf.org/doc/html/rfc7235#section-4.3
  PROXY_AUTHORIZATION = "Proxy-Authorization"

  #: W3C WD-proxy, https://www.w3.org/TR/WD-proxy
  PROXY_FEATURES = "Proxy-Features"

  #: W3C WD-proxy, https://www.w3.org/TR/WD-proxy
  PROXY_INSTRUCTION = "Proxy-Instruction"

  #: RFC 9209, section 2, https://datatracker.ietf.org/doc/html/rfc9209#section-2
  PROXY_STATUS = "Proxy-Status"

  #: RFC 2068, section 14.35, https://datatracker.ietf.org/doc/html/rfc2068#section-14.35
  PUBLIC = "Public"

  #: RFC 7469, section 2.5, https://datatracker.ietf.org/doc/html/rfc7469#section-2.5
  PUBLIC_KEY_PINS = "Public-Key-Pins"

  #: RFC 7469, section 2.5, https://datatracker.ietf.org/doc/html/rfc7469#section-2.5
  PUBLIC_KEY_PINS_REPORT_ONLY = "Public-Key-Pins-Report-Only"

  #: draft-ruellan-http-accept-push-policy, section 3.2, https://datatracker.ietf.org/doc/html/draft-ruellan-http-accept-push-policy#section-3.2
  PUSH_POLICY = "Push-Policy"

  #: RFC 7233, section 3.1, https://datatracker.ietf.org/doc/html/rfc7233#section-3.1
  RANGE = "Range"

  #: draft-ietf-httpapi-ratelimit-headers, section 3.1, https://datatracker.ietf.org/doc/html/draft-ietf-httpapi-ratelimit-headers#section-3.1
  RATELIMIT_LIMIT = "RateLimit-Limit"

  #: draft-ietf-httpapi-ratelimit-headers, section 3.2, https://datatracker.ietf.org/doc/html/draft-ietf-httpapi-ratelimit-headers#section-3.2
  RATELIMIT_REMAINING = "RateLimit-Remaining"

  #: draft-ietf-httpapi-ratelimit-headers, section 3.3, https://datatracker.ietf.org/doc/html/draft-polli-ratelimit-headers#section-3.3
  RATELIMIT_RESET = "RateLimit-Reset"

  #: RFC 4437, section 12.1, https://datatracker.ietf.org/doc/html/rfc4437#section-12.1
  REDIRECT_REF = "Redirect-Ref"

  #: RFC 7231, section 5.5.2, https://datatracker.ietf.org/doc/html/rfc7231#section-5.5.2
  REFERER = "Referer"

  #: OASIS repeatable-requests-v1.0, https://docs.oasis-open.org/odata/repeatable-requests/v1.0/cs01/repeatable-requests-v1.0-cs01.html#sec_RepeatabilityClientID
  REPEATABILITY_CLIENT_ID = "Repeatability-Client-ID"

  #: OASIS repeatable-requests-v1.0, https://docs.oasis-open.org/odata/repeatable-requests/v1.0/cs01/repeatable-requests-v1.0-cs01.html#sec_RepeatabilityFirstSent
  REPEATABILITY_FIRST_SENT = "Repeatability-First-Sent"

  #: OASIS repeatable-requests-v1.0, https://docs.oasis-open.org/odata/repeatable-requests/v1.0/cs01/repeatable-requests-v1.0-cs01.html#sec_RepeatabilityRequestID
  REPEATABILITY_REQUEST_ID = "Repeatability-Request-ID"

  #: OASIS repeatable-requests-v1.0, https://docs.oasis-open.org/odata/repeatable-requests/v1.0/cs01/repeatable-requests-v1.0-cs01.html#sec_RepeatabilityResult
  REPEATABILITY_RESULT = "Repeatability-Result"

  #: W3C reporting-1, https://www.w3.org/TR/reporting-1/#header
  REPORT_TO = "Report-To"

  #: RFC 9530, section 3, https://datatracker.ietf.org/doc/html/rfc9530#section-3
  REPR_DIGEST = "Repr-Digest"

  #: RFC 7231, section 7.1.3, https://datatracker.ietf.org/doc/html/rfc7231#section-7.1.3
  RETRY_AFTER = "Retry-After"

  #: W3C SOAP, https://www.w3.org/TR/2000/NOTE-SOAP-20000508/#_Toc478383528
  SOAPACTION = "SOAPAction"

  #: RFC 2310, section 4, https://datatracker.ietf.org/doc/html/rfc2310#section-4
  SAFE = "Safe"

  #: RFC 6638, section 8.1, https://datatracker.ietf.org/doc/html/rfc6638#section-8.1
  SCHEDULE_REPLY = "Schedule-Reply"

  #: RFC 6638, section 8.2, https://datatracker.ietf.org/doc/html/rfc6638#section-8.2
  SCHEDULE_TAG = "Schedule-Tag"

  #: W3C COWL, https://www.w3.org/TR/COWL/#header
  SEC_COWL = "Sec-COWL"

  #: W3C fetch-metadata, https://www.w3.org/TR/fetch-metadata/#sec-fetch-dest-header
  SEC_FETCH_DEST = "Sec-Fetch-Dest"

  #: W3C fetch-metadata, https://www.w3.org/TR/fetch-metadata/#sec-fetch-mode-header
  SEC_FETCH_MODE = "Sec-Fetch-Mode"

  #: W3C fetch-metadata, https://www.w3.org/TR/fetch-metadata/#sec-fetch-site-header
  SEC_FETCH_SITE = "Sec-Fetch-Site"

  #: W3C fetch-metadata, https://www.w3.org/TR/fetch-metadata/#sec-fetch-user-header
  SEC_FETCH_USER = "Sec-Fetch-User"

  #: RFC 8473, section 2, https://datatracker.ietf.org/doc/html/rfc8473#section-2
  SEC_TOKEN_BINDING = "Sec-Token-Binding"

  #: RFC 6455, section 11.3.3, https://datatracker.ietf.org/doc/html/rfc6455#section-11.3.3
  SEC_WEBSOCKET_ACCEPT = "Sec-WebSocket-Accept"

  #: RFC 6455, section 11.3.2, https://datatracker.ietf.org/doc/html/rfc6455#section-11.3.2
  SEC_WEBSOCKET_EXTENSIONS = "Sec-WebSocket-Extensions"

  #: RFC 6455, section 11.3.1, https://datatracker.ietf.org/doc/html/rfc6455#section-11.3.1
  SEC_WEBSOCKET_KEY = "Sec-WebSocket-Key"

  #: RFC 6455, section 11.3.4, https://datatracker.ietf.org/doc/html/rfc6455#section-11.3.4
  SEC_WEBSOCKET_PROTOCOL = "Sec-WebSocket-Protocol"

  #: RFC 6455, section 11.3.5, https://datatracker.ietf.org/doc/html/rfc6455#section-11.3.5
  SEC_WEBSOCKET_VERSION = "Sec-WebSocket-Version"

  #: RFC 2660, section 4.1, https://datatracker.ietf.org/doc/html/rfc2660#section-4.1
  SECURITY_SCHEME = "Security-Scheme"

  #: RFC 7231, section 7.4.2, https://datatracker.ietf.org/doc/html/rfc7231#section-7.4.2
  SERVER = "Server"

  #: W3C server-timing, https://www.w3.org/TR/server-timing/#the-server-timing-header-field
  SERVER_TIMING = "Server-Timing"

  #: W3C service-workers-1, https://www.w3.org/TR/service-workers-1/#service-worker-script-request
  SERVICE_WORKER = "Service-Worker"

  #: W3C service-workers-1, https://www.w3.org/TR/service-workers-1/#service-worker-script-response
  SERVICE_WORKER_ALLOWED = "Service-Worker-Allowed"

  #: draft-ietf-httpbis-rfc6265bis, section 4.1, https://datatracker.ietf.org/doc/html/draft-ietf-httpbis-rfc6265bis#section-4.1
  #: RFC 6265, section 4.1, https://datatracker.ietf.org/doc/html/rfc6265#section-4.1
  SET_COOKIE = "Set-Cookie"

  #: RFC 2965, section 3.2, https://datatracker.ietf.org/doc/html/rfc2965#section-3.2
  SET_COOKIE2 = "Set-Cookie2"

  #: draft-cavage-http-signatures, section 4, https://datatracker.ietf.org/doc/html/draft-cavage-http-signatures#section-4
  SIGNATURE = "Signature"

  #: RFC 5023, section 9.7, https://datatracker.ietf.org/doc/html/rfc5023#section-9.7
  SLUG = "Slug"

  #: RFC 2518, section 9.7, https://datatracker.ietf.org/doc/html/rfc2518#section-9.7
  STATUS_URI = "Status-URI"

  #: RFC 6797, section 6.1, https://datatracker.ietf.org/doc/html/rfc6797#section-6.1
  STRICT_TRANSPORT_SECURITY = "Strict-Transport-Security"

  #: draft-mogul-http-dupsup, section 5.2.1, https://datatracker.ietf.org/doc/html/draft-mogul-http-dupsup#section-5.2.1
  SUBOK = "SubOK"

  #: draft-mogul-http-dupsup, section 5.2.2, https://datatracker.ietf.org/doc/html/draft-mogul-http-dupsup#section-5.2.2
  SUBST = "Subst"

  #: RFC 8594, section 3, https://datatracker.ietf.org/doc/html/rfc8594#section-3
  SUNSET = "Sunset"

  #: W3C edge-arch, https://www.w3.org/TR/edge-arch/
  SURROGATE_CAPABILITY = "Surrogate-Capability"

  #: W3C edge-arch, https://www.w3.org/TR/edge-arch/
  SURROGATE_CONTROL = "Surrogate-Control"

  #: RFC 2295, section 8.5, https://datatracker.ietf.org/doc/html/rfc2295#section-8.5
  TCN = "TCN"

  #: RFC 7230, section 4.3, https://datatracker.ietf.org/doc/html/rfc7230#section-4.3
  TE = "TE"

  #: RFC 8030, section 5.2, https://datatracker.ietf.org/doc/html/rfc8030#section-5.2
  TTL = "TTL"

  #: RFC 4918, section 10.7, https://datatracker.ietf.org/doc/html/rfc4918#section-10.7
  TIMEOUT = "Timeout"

  #: RFC 4229, section 2.2.11, https://datatracker.ietf.org/doc/html/rfc4229#section-2.2.11
  TITLE = "Title"

  #: W3C tracking-dnt, https://www.w3.org/TR/tracking-dnt/#response-header-field
  TK = "Tk"

  #: RFC 8030, section 5.4, https://datatracker.ietf.org/doc/html/rfc8030#section-5.4
  TOPIC = "Topic"

  #: RFC 7230, section 4.4, https://datatracker.ietf.org/doc/html/rfc7230#section-4.4
  TRAILER = "Trailer"

  #: RFC 7230, section 3.3.1, https://datatracker.ietf.org/doc/html/rfc7230#section-3.3.1
  TRANSFER_ENCODING = "Transfer-Encoding"

  #: draft-ietf-httpbis-tunnel-protocol, section 2, https://datatracker.ietf.org/doc/html/draft-ietf-httpbis-tunnel-protocol#section-2
  TUNNEL_PROTOCOL = "Tunnel-Protocol"

  #: RFC 2068, section 19.6.2.5, https://datatracker.ietf.org/doc/html/rfc2068#section-19.6.2.5
  URI = "URI"

  #: RFC 7230, section 6.7, https://datatracker.ietf.org/doc/html/rfc7230#section-6.7
  UPGRADE = "Upgrade"

  #: W3C upgrade-insecure-requests, https://www.w3.org/TR/upgrade-insecure-requests/#preference
  UPGRADE_INSECURE_REQUESTS = "Upgrade-Insecure-Requests"

  #: draft-draft-ietf-httpbis-resumable-upload, section 9.2, https://datatracker.ietf.org/doc/html/draft-ietf-httpbis-resumable-upload-01#section-9.2
  UPLOAD_INCOMPLETE = "Upload-Incomplete"

  #: draft-draft-ietf-httpbis-resumable-upload, section 9.1, https://datatracker.ietf.org/doc/html/draft-ietf-httpbis-resumable-upload-01#section-9.1
  UPLOAD_OFFSET = "Upload-Offset"

  #: RFC 8030, section 5.3, https://datatracker.ietf.org/doc/html/rfc8030#section-5.3
  URGENCY = "Urgency"

  #: RFC 7231, section 5.5.3, https://datatracker.ietf.org/doc/html/rfc7231#section-5.5.3
  USER_AGENT = "User-Agent"

  #: draft-ietf-httpbis-variants, section 3, https://datatracker.ietf.org/doc/html/draft-ietf-httpbis-variants#section-3
  VARIANT_KEY = "Variant-Key"

  #: RFC 2295, section 8.6, https://datatracker.ietf.org/doc/html/rfc2295#section-8.6
  VARIANT_VARY = "Variant-Vary"

  #: draft-ietf-httpbis-variants, section 2, https://datatracker.ietf.org/doc/html/draft-ietf-httpbis-variants#section-2
  VARIANTS = "Variants"

  #: RFC 7231, section 7.1.4, https://datatracker.ietf.org/doc/html/rfc7231#section-7.1.4
  VARY = "Vary"

  #: RFC 7230, section 5.7.1, https://datatracker.ietf.org/doc/html/rfc7230#section-5.7.1
  VIA = "Via"

  #: RFC 7616, section 3.3, https://datatracker.ietf.org/doc/html/rfc7616#section-3.3
  #: RFC 7235, section 4.4, https://datatracker.ietf.org/doc/html/rfc7235#section-4.4
  WWW_AUTHENTICATE = "WWW-Authenticate"

  #: RFC 9530, section 4, https://datatracker.ietf.org/doc/html/rfc9530#section-4
  WANT_CONTENT_DIGEST = "Want-Content-Digest"

  #: RFC 3230, section 4.3.1, https://datatracker.ietf.org/doc/html/rfc3230#section-4.3.1
  WANT_DIGEST = "Want-Digest"

  #: RFC 9530, section 4, https://datatracker.ietf.org/doc/html/rfc9530#section-4
  WANT_REPR_DIGEST = "Want-Repr-Digest"

  #: RFC 7234, section 5.5, https://datatracker.ietf.org/doc/html/rfc7234#section-5.5
  WARNING = "Warning"

  #: RFC 7034, section 2, https://datatracker.ietf.org/doc/html/rfc7034#section-2
  X_FRAME_OPTIONS = "X-Frame-Options"

  #: W3C trace-context, https://www.w3.org/TR/trace-context/#traceparent-field
  TRACEPARENT = "traceparent"

  #: W3C trace-context, https://www.w3.org/TR/trace-context/#tracestate-field
  TRACESTATE = "tracestate"

  #: Standard Webhooks, https://github.com/standard-webhooks/standard-webhooks/blob/main/spec/standard-webhooks.md#webhook-headers-sending-metadata-to-consumers
  WEBHOOK_ID = "webhook-id"

  #: Standard Webhooks, https://github.com/standard-webhooks/standard-webhooks/blob/main/spec/standard-webhooks.md#webhook-headers-sending-metadata-to-consumers
  WEBHOOK_SIGNATURE = "webhook-signature"

  #: Standard Webhooks, https://github.com/standard-webhooks/standard-webhooks/blob/main/spec/standard-webhooks.md#webhook-headers-sending-metadata-to-consumers
  WEBHOOK_TIMESTAMP = "webhook-timestamp"

Header._map = Header._index()
