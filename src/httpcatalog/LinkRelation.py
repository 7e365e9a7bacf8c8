from .Catalog import Catalog

class LinkRelation(Catalog):
  """
  Registered link relation types for the Link header field (RFC 8288).

  Relation types compare case-insensitively; the registered spelling
  (``intervalAfter``) is what `query` returns.

  https://www.iana.org/assignments/link-relations/link-relations.xhtml
  """
  _kind = "link relation"

  #: W3C P3P, https://www.w3.org/TR/P3P/#syntax_link
  P3PV1 = "P3Pv1"

  #: RFC 6903, section 2, https://datatracker.ietf.org/doc/html/rfc6903#section-2
  ABOUT = "about"

  #: RFC 4287, section 4.2.7.2, https://datatracker.ietf.org/doc/html/rfc4287#section-4.2.7.2
  #: W3C html, https://www.w3.org/TR/html/links.html#link-type-alternate
  ALTERNATE = "alternate"

  #: W3C html4, https://www.w3.org/TR/html4/types.html#type-links
  APPENDIX = "appendix"

  #: draft-pot-authentication-link, section 2, https://datatracker.ietf.org/doc/html/draft-pot-authentication-link#section-2
  AUTHENTICATE = "authenticate"

  #: draft-pot-authentication-link, section 3, https://datatracker.ietf.org/doc/html/draft-pot-authentication-link#section-3
  AUTHENTICATED_AS = "authenticated-as"

  #: W3C html, https://www.w3.org/TR/html/links.html#link-type-author
  AUTHOR = "author"

  #: W3C indieauth, https://www.w3.org/TR/indieauth/#discovery-1
  AUTHORIZATION_ENDPOINT = "authorization_endpoint"

  #: draft-snell-more-link-relations, section 3, https://datatracker.ietf.org/doc/html/draft-snell-more-link-relations#section-3
  BCC = "bcc"

  #: draft-snell-more-link-relations, section 3, https://datatracker.ietf.org/doc/html/draft-snell-more-link-relations#section-3
  BFROM = "bfrom"

  #: W3C html, https://www.w3.org/TR/html/links.html#link-type-bookmark
  BOOKMARK = "bookmark"

  #: draft-ietf-core-dynlink, section 6.2, https://datatracker.ietf.org/doc/html/draft-ietf-core-dynlink#section-6.2
  BOUNDTO = "boundto"

  #: draft-snell-more-link-relations, section 3, https://datatracker.ietf.org/doc/html/draft-snell-more-link-relations#section-3
  BTO = "bto"

  #: RFC 6596, section 3, https://datatracker.ietf.org/doc/html/rfc6596#section-3
  CANONICAL = "canonical"

  #: draft-snell-more-link-relations, section 3, https://datatracker.ietf.org/doc/html/draft-snell-more-link-relations#section-3
  CC = "cc"

  #: W3C html4, https://www.w3.org/TR/html4/types.html#type-links
  CHAPTER = "chapter"

  #: RFC 8574, section 4, https://datatracker.ietf.org/doc/html/rfc8574#section-4
  CITE_AS = "cite-as"

  #: RFC 6573, section 2.2, https://datatracker.ietf.org/doc/html/rfc6573#section-2.2
  COLLECTION = "collection"

  #: W3C html4, https://www.w3.org/TR/html4/types.html#type-links
  CONTENTS = "contents"

  #: W3C html4, https://www.w3.org/TR/html4/types.html#type-links
  COPYRIGHT = "copyright"

  #: draft-zyp-json-schema, section 6.1.1.2, https://datatracker.ietf.org/doc/html/draft-zyp-json-schema#section-6.1.1.2
  CREATE = "create"

  #: RFC 6861, section 3.1, https://datatracker.ietf.org/doc/html/rfc6861#section-3.1
  CREATE_FORM = "create-form"

  #: RFC 5005, section 4, https://datatracker.ietf.org/doc/html/rfc5005#section-4
  CURRENT = "current"

  #: draft-ietf-httpapi-deprecation-header, section 3, https://datatracker.ietf.org/doc/html/draft-ietf-httpapi-deprecation-header#section-3
  DEPRECATION = "deprecation"

  #: draft-hoffman-xml2rfc, section 6.2, https://datatracker.ietf.org/doc/html/draft-hoffman-xml2rfc#section-6.2
  DERIVEDFROM = "derivedfrom"

  #: W3C ldp, https://www.w3.org/TR/ldp/#link-relation-describedby
  #: W3C powder-dr, https://www.w3.org/TR/powder-dr/#appD
  DESCRIBEDBY = "describedby"

  #: RFC 6892, section 2, https://datatracker.ietf.org/doc/html/rfc6892#section-2
  DESCRIBES = "describes"

  #: RFC 6579, section 2, https://datatracker.ietf.org/doc/html/rfc6579#section-2
  DISCLOSURE = "disclosure"

  #: W3C resource-hints, https://www.w3.org/TR/resource-hints/#dns-prefetch
  DNS_PREFETCH = "dns-prefetch"

  #: draft-divilly-atom-hierarchy, section 2.2, https://datatracker.ietf.org/doc/html/draft-divilly-atom-hierarchy#section-2.2
  DOWN = "down"

  #: RFC 5023, section 11.1, https://datatracker.ietf.org/doc/html/rfc5023#section-11.1
  EDIT = "edit"

  #: RFC 6861, section 3.2, https://datatracker.ietf.org/doc/html/rfc6861#section-3.2
  EDIT_FORM = "edit-form"

  #: RFC 5023, section 11.2, https://datatracker.ietf.org/doc/html/rfc5023#section-11.2
  EDIT_MEDIA = "edit-media"

  #: RFC 4287, section 4.2.7.2, https://datatracker.ietf.org/doc/html/rfc4287#section-4.2.7.2
  ENCLOSURE = "enclosure"

  #: W3C html, https://www.w3.org/TR/html/links.html#link-type-external
  EXTERNAL = "external"

  #: RFC 5005, section 3, https://datatracker.ietf.org/doc/html/rfc5005#section-3
  FIRST = "first"

  #: draft-snell-more-link-relations, section 3, https://datatracker.ietf.org/doc/html/draft-snell-more-link-relations#section-3
  FROM = "from"

  #: draft-zyp-json-schema, section 6.1.1.2, https://datatracker.ietf.org/doc/html/draft-zyp-json-schema#section-6.1.1.2
  FULL = "full"

  #: draft-snell-more-link-relations, section 3, https://datatracker.ietf.org/doc/html/draft-snell-more-link-relations#section-3
  GENERATOR = "generator"

  #: W3C html4, https://www.w3.org/TR/html4/types.html#type-links
  GLOSSARY = "glossary"

  #: W3C html, https://www.w3.org/TR/html/links.html#link-type-help
  HELP = "help"

  #: draft-nottingham-json-home, section 6, https://datatracker.ietf.org/doc/html/draft-nottingham-json-home#section-6
  HOME = "home"

  #: RFC 6690, section 2.2, https://datatracker.ietf.org/doc/html/rfc6690#section-2.2
  HOSTS = "hosts"

  #: W3C websub, https://www.w3.org/TR/websub/#discovery
  HUB = "hub"

  #: W3C html, https://www.w3.org/TR/html/links.html#link-type-icon
  ICON = "icon"

  #: W3C html4, https://www.w3.org/TR/html4/types.html#type-links
  INDEX = "index"

  #: draft-zyp-json-schema, section 6.1.1.2, https://datatracker.ietf.org/doc/html/draft-zyp-json-schema#section-6.1.1.2
  INSTANCES = "instances"

  #: W3C owl-time, https://www.w3.org/TR/owl-time/#time:intervalAfter
  INTERVALAFTER = "intervalAfter"

  #: W3C owl-time, https://www.w3.org/TR/owl-time/#time:intervalBefore
  INTERVALBEFORE = "intervalBefore"

  #: W3C owl-time, https://www.w3.org/TR/owl-time/#time:intervalContains
  INTERVALCONTAINS = "intervalContains"

  #: W3C owl-time, https://www.w3.org/TR/owl-time/#time:intervalDisjoint
  INTERVALDISJOINT = "intervalDisjoint"

  #: W3C owl-time, https://www.w3.org/TR/owl-time/#time:intervalDuring
  INTERVALDURING = "intervalDuring"

  #: W3C owl-time, https://www.w3.org/TR/owl-time/#time:intervalEquals
  INTERVALEQUALS = "intervalEquals"

  #: W3C owl-time, https://www.w3.org/TR/owl-time/#time:intervalFinishedBy
  INTERVALFINISHEDBY = "intervalFinishedBy"

  #: W3C owl-time, https://www.w3.org/TR/owl-time/#time:intervalFinishes
  INTERVALFINISHES = "intervalFinishes"

  #: W3C owl-time, https://www.w3.org/TR/owl-time/#time:intervalIn
  INTERVALIN = "intervalIn"

  #: W3C owl-time, https://www.w3.org/TR/owl-time/#time:intervalMeets
  INTERVALMEETS = "intervalMeets"

  #: W3C owl-time, https://www.w3.org/TR/owl-time/#time:intervalMetBy
  INTERVALMETBY = "intervalMetBy"

  #: W3C owl-time, https://www.w3.org/TR/owl-time/#time:intervalOverlappedBy
  INTERVALOVERLAPPEDBY = "intervalOverlappedBy"

  #: W3C owl-time, https://www.w3.org/TR/owl-time/#time:intervalOverlaps
  INTERVALOVERLAPS = "intervalOverlaps"

  #: W3C owl-time, https://www.w3.org/TR/owl-time/#time:intervalStartedBy
  INTERVALSTARTEDBY = "intervalStartedBy"

  #: W3C owl-time, https://www.w3.org/TR/owl-time/#time:intervalStarts
  INTERVALSTARTS = "intervalStarts"

  #: draft-nottingham-linked-cache-inv, section 3, https://datatracker.ietf.org/doc/html/draft-nottingham-linked-cache-inv#section-3
  INV_BY = "inv-by"

  #: draft-nottingham-linked-cache-inv, section 2, https://datatracker.ietf.org/doc/html/draft-nottingham-linked-cache-inv#section-2
  INVALIDATES = "invalidates"

  #: RFC 6573, section 2.1, https://datatracker.ietf.org/doc/html/rfc6573#section-2.1
  ITEM = "item"

  #: RFC 5005, section 3, https://datatracker.ietf.org/doc/html/rfc5005#section-3
  LAST = "last"

  #: RFC 5829, section 3.2, https://datatracker.ietf.org/doc/html/rfc5829#section-3.2
  LATEST_VERSION = "latest-version"

  #: RFC 4946, section 2, https://datatracker.ietf.org/doc/html/rfc4946#section-2
  #: W3C html, https://www.w3.org/TR/html/links.html#link-type-license
  LICENSE = "license"

  #: draft-ietf-httpapi-linkset, section 5, https://datatracker.ietf.org/doc/html/draft-ietf-httpapi-linkset#section-5
  LINKSET = "linkset"

  #: draft-snell-more-link-relations, section 3, https://datatracker.ietf.org/doc/html/draft-snell-more-link-relations#section-3
  LOCATION = "location"

  #: draft-pot-authentication-link, section 4, https://datatracker.ietf.org/doc/html/draft-pot-authentication-link#section-4
  LOGOUT = "logout"

  #: RFC 6415, section 1.1.1, https://datatracker.ietf.org/doc/html/rfc6415#section-1.1.1
  LRDD = "lrdd"

  #: W3C appmanifest, https://www.w3.org/TR/appmanifest/#linking
  MANIFEST = "manifest"

  #: RFC 7089, section 2.2.4, https://datatracker.ietf.org/doc/html/rfc7089#section-2.2.4
  MEMENTO = "memento"

  #: draft-snell-more-link-relations, section 3, https://datatracker.ietf.org/doc/html/draft-snell-more-link-relations#section-3
  MENTIONEDBY = "mentionedby"

  #: W3C micropub, https://www.w3.org/TR/micropub/#endpoint-discovery
  MICROPUB = "micropub"

  #: RFC 5005, section 3, https://datatracker.ietf.org/doc/html/rfc5005#section-3
  #: W3C html, https://www.w3.org/TR/html/links.html#link-type-next
  NEXT = "next"

  #: RFC 5005, section 4, https://datatracker.ietf.org/doc/html/rfc5005#section-4
  NEXT_ARCHIVE = "next-archive"

  #: W3C html, https://www.w3.org/TR/html/links.html#link-type-nofollow
  NOFOLLOW = "nofollow"

  #: W3C html, https://www.w3.org/TR/html/links.html#link-type-nofollow
  NOOPENER = "noopener"

  #: W3C html, https://www.w3.org/TR/html/links.html#link-type-noreferrer
  NOREFERRER = "noreferrer"

  #: RFC 7089, section 2.2.1, https://datatracker.ietf.org/doc/html/rfc7089#section-2.2.1
  ORIGINAL = "original"

  #: W3C payment-method-manifest, https://www.w3.org/TR/payment-method-manifest/#payment-method-manifest-link
  PAYMENT_METHOD_MANIFEST = "payment-method-manifest"

  #: W3C resource-hints, https://www.w3.org/TR/resource-hints/#preconnect
  PRECONNECT = "preconnect"

  #: RFC 5829, section 3.5, https://datatracker.ietf.org/doc/html/rfc5829#section-3.5
  PREDECESSOR_VERSION = "predecessor-version"

  #: W3C resource-hints, https://www.w3.org/TR/resource-hints/#prefetch
  PREFETCH = "prefetch"

  #: W3C preload, https://www.w3.org/TR/preload/#link-type-preload
  PRELOAD = "preload"

  #: W3C resource-hints, https://www.w3.org/TR/resource-hints/#prerender
  PRERENDER = "prerender"

  #: W3C html, https://www.w3.org/TR/html/links.html#link-type-prev
  PREV = "prev"

  #: RFC 5005, section 4, https://datatracker.ietf.org/doc/html/rfc5005#section-4
  PREV_ARCHIVE = "prev-archive"

  #: RFC 6903, section 3, https://datatracker.ietf.org/doc/html/rfc6903#section-3
  PREVIEW = "preview"

  #: RFC 5005, section 3, https://datatracker.ietf.org/doc/html/rfc5005#section-3
  PREVIOUS = "previous"

  #: RFC 6903, section 4, https://datatracker.ietf.org/doc/html/rfc6903#section-4
  PRIVACY_POLICY = "privacy-policy"

  #: RFC 6906, section 3, https://datatracker.ietf.org/doc/html/rfc6906#section-3
  PROFILE = "profile"

  #: draft-snell-more-link-relations, section 3, https://datatracker.ietf.org/doc/html/draft-snell-more-link-relations#section-3
  PROVIDER = "provider"

  #: W3C indieauth, https://www.w3.org/TR/indieauth/#redirect-url
  REDIRECT_URI = "redirect_uri"

  #: draft-pot-authentication-link, section 5, https://datatracker.ietf.org/doc/html/draft-pot-authentication-link#section-5
  REGISTER_USER = "register-user"

  #: RFC 4287, section 4.2.7.2, https://datatracker.ietf.org/doc/html/rfc4287#section-4.2.7.2
  RELATED = "related"

  #: draft-zyp-json-schema, section 6.1.1.2, https://datatracker.ietf.org/doc/html/draft-zyp-json-schema#section-6.1.1.2
  ROOT = "root"

  #: W3C html, https://www.w3.org/TR/html/links.html#link-type-search
  SEARCH = "search"

  #: W3C html4, https://www.w3.org/TR/html4/types.html#type-links
  SECTION = "section"

  #: RFC 4287, section 4.2.7.2, https://datatracker.ietf.org/doc/html/rfc4287#section-4.2.7.2
  SELF = "self"

  #: RFC 8631, section 4.2, https://datatracker.ietf.org/doc/html/rfc8631#section-4.2
  SERVICE_DESC = "service-desc"

  #: RFC 8631, section 4.1, https://datatracker.ietf.org/doc/html/rfc8631#section-4.1
  SERVICE_DOC = "service-doc"

  #: RFC 8631, section 4.3, https://datatracker.ietf.org/doc/html/rfc8631#section-4.3
  SERVICE_META = "service-meta"

  #: draft-snell-more-link-relations, section 3, https://datatracker.ietf.org/doc/html/draft-snell-more-link-relations#section-3
  SOURCE = "source"

  #: W3C html4, https://www.w3.org/TR/html4/types.html#type-links
  START = "start"

  #: RFC 8631, section 5, https://datatracker.ietf.org/doc/html/rfc8631#section-5
  STATUS = "status"

  #: W3C html, https://www.w3.org/TR/html/links.html#link-type-stylesheet
  STYLESHEET = "stylesheet"

  #: W3C html4, https://www.w3.org/TR/html4/types.html#type-links
  SUBSECTION = "subsection"

  #: RFC 5829, section 3.6, https://datatracker.ietf.org/doc/html/rfc5829#section-3.6
  SUCCESSOR_VERSION = "successor-version"

  #: RFC 8594, section 5, https://datatracker.ietf.org/doc/html/rfc8594#section-5
  SUNSET = "sunset"

  #: W3C html, https://www.w3.org/TR/html/links.html#link-type-tag
  TAG = "tag"

  #: RFC 6903, section 5, https://datatracker.ietf.org/doc/html/rfc6903#section-5
  TERMS_OF_SERVICE = "terms-of-service"

  #: RFC 7089, section 2.2.2, https://datatracker.ietf.org/doc/html/rfc7089#section-2.2.2
  TIMEGATE = "timegate"

  #: RFC 7089, section 2.2.3, https://datatracker.ietf.org/doc/html/rfc7089#section-2.2.3
  TIMEMAP = "timemap"

  #: W3C timesheet, https://www.w3.org/TR/timesheet#smilTimesheetsNS-Elements-Timesheet
  TIMESHEET = "timesheet"

  #: draft-snell-more-link-relations, section 3, https://datatracker.ietf.org/doc/html/draft-snell-more-link-relations#section-3
  TO = "to"

  #: W3C indieauth, https://www.w3.org/TR/indieauth/#token-endpoint-0
  TOKEN_ENDPOINT = "token_endpoint"

  #: RFC 6903, section 6, https://datatracker.ietf.org/doc/html/rfc6903#section-6
  TYPE = "type"

  #: draft-divilly-atom-hierarchy, section 2.3, https://datatracker.ietf.org/doc/html/draft-divilly-atom-hierarchy#section-2.3
  UP = "up"

  #: RFC 5829, section 3.1, https://datatracker.ietf.org/doc/html/rfc5829#section-3.1
  VERSION_HISTORY = "version-history"

  #: RFC 4287, section 4.2.7.2, https://datatracker.ietf.org/doc/html/rfc4287#section-4.2.7.2
  VIA = "via"

  #: W3C webmention, https://www.w3.org/TR/webmention/#sender-discovers-receiver-webmention-endpoint
  WEBMENTION = "webmention"

  #: RFC 5829, section 3.3, https://datatracker.ietf.org/doc/html/rfc5829#section-3.3
  WORKING_COPY = "working-copy"

  #: RFC 5829, section 3.4, https://datatracker.ietf.org/doc/html/rfc5829#section-3.4
  WORKING_COPY_OF = "working-copy-of"

LinkRelation._map = LinkRelation._index()
