import os

from .Catalog import Catalog

class Mime(Catalog):
  """
  Media types, plus a small helper resolving file extensions to them.

  Type and subtype names are case-insensitive, the registered spelling is
  kept for types such as ``application/EmergencyCallData.eCall.MSD``.

  https://www.iana.org/assignments/media-types/media-types.xhtml
  """
  _kind = "media type"
  _fallback = "application/octet-stream"

  #: RFC 8147, section 9, https://datatracker.ietf.org/doc/html/rfc8147#section-9
  APPLICATION_EMERGENCYCALLDATA_CONTROL_XML = "application/EmergencyCallData.Control+xml"

  #: RFC 8147, section 5, https://datatracker.ietf.org/doc/html/rfc8147#section-5
  APPLICATION_EMERGENCYCALLDATA_ECALL_MSD = "application/EmergencyCallData.eCall.MSD"

  #: W3C activitystreams-core, https://www.w3.org/TR/activitystreams-core/#introduction
  APPLICATION_ACTIVITY_JSON = "application/activity+json"

  #: draft-amundsen-richardson-foster-alps, section 4.2, https://datatracker.ietf.org/doc/html/draft-amundsen-richardson-foster-alps#section-4.2
  APPLICATION_ALPS_JSON = "application/alps+json"

  #: draft-amundsen-richardson-foster-alps, section 4.1, https://datatracker.ietf.org/doc/html/draft-amundsen-richardson-foster-alps#section-4.1
  APPLICATION_ALPS_XML = "application/alps+xml"

  #: RFC 4287, section 2, https://datatracker.ietf.org/doc/html/rfc4287#section-2
  APPLICATION_ATOM_XML = "application/atom+xml"

  #: RFC 5023, section 16.1, https://datatracker.ietf.org/doc/html/rfc5023#section-16.1
  APPLICATION_ATOMCAT_XML = "application/atomcat+xml"

  #: RFC 6271, section 4, https://datatracker.ietf.org/doc/html/rfc6721#section-4
  APPLICATION_ATOMDELETED_XML = "application/atomdeleted+xml"

  #: RFC 5023, section 16.2, https://datatracker.ietf.org/doc/html/rfc5023#section-16.2
  APPLICATION_ATOMSVC_XML = "application/atomsvc+xml"

  #: RFC 4745, section 15.2, https://datatracker.ietf.org/doc/html/rfc4745#section-15.2
  APPLICATION_AUTH_POLICY_XML = "application/auth-policy+xml"

  #: RFC 7049, section 1, https://datatracker.ietf.org/doc/html/rfc7049#section-1
  APPLICATION_CBOR = "application/cbor"

  #: RFC 7390, section 2.6.2.1, https://datatracker.ietf.org/doc/html/rfc7390#section-2.6.2.1
  APPLICATION_COAP_GROUP_JSON = "application/coap-group+json"

  #: draft-ietf-core-http-mapping, section 6.2, https://datatracker.ietf.org/doc/html/draft-ietf-core-http-mapping#section-6.2
  APPLICATION_COAP_PAYLOAD = "application/coap-payload"

  #: RFC 8152, section 16.9.1, https://datatracker.ietf.org/doc/html/rfc8152#section-16.9.1
  APPLICATION_COSE = "application/cose"

  #: RFC 8152, section 16.9.2, https://datatracker.ietf.org/doc/html/rfc8152#section-16.9.2
  APPLICATION_COSE_KEY = "application/cose-key"

  #: RFC 8152, section 16.9.2, https://datatracker.ietf.org/doc/html/rfc8152#section-16.9.2
  APPLICATION_COSE_KEY_SET = "application/cose-key-set"

  #: RFC 7030, section 4.5.2, https://datatracker.ietf.org/doc/html/rfc7030#section-4.5.2
  APPLICATION_CSRATTRS = "application/csrattrs"

  #: RFC 8392, section 1, https://datatracker.ietf.org/doc/html/rfc8392#section-1
  APPLICATION_CWT = "application/cwt"

  #: ISO/IEC 23009-1, https://www.iso.org/obp/ui/#iso:std:iso-iec:23009:-1
  APPLICATION_DASH_XML = "application/dash+xml"

  #: W3C exi, https://www.w3.org/TR/exi/#internetMediaType
  APPLICATION_EXI = "application/exi"

  #: ISO/IEC 14496-22, https://www.iso.org/obp/ui/#iso:std:iso-iec:14496:-22
  APPLICATION_FONT_SFNT = "application/font-sfnt"

  #: RFC 7946, section 12, https://datatracker.ietf.org/doc/html/rfc7946#section-12
  APPLICATION_GEO_JSON = "application/geo+json"

  #: RFC 8142, section 2, https://datatracker.ietf.org/doc/html/rfc8142#section-2
  APPLICATION_GEO_JSON_SEQ = "application/geo+json-seq"

  #: RFC 6713, section 3, https://datatracker.ietf.org/doc/html/rfc6713#section-3
  APPLICATION_GZIP = "application/gzip"

  #: draft-kelly-json-hal, section 1, https://datatracker.ietf.org/doc/html/draft-kelly-json-hal#section-1
  APPLICATION_HAL_JSON = "application/hal+json"

  #: draft-michaud-xml-hal, section 3, https://datatracker.ietf.org/doc/html/draft-michaud-xml-hal#section-3
  APPLICATION_HAL_XML = "application/hal+xml"

  #: RFC 5985, section 7, https://datatracker.ietf.org/doc/html/rfc5985#section-7
  APPLICATION_HELD_XML = "application/held+xml"

  #: draft-nottingham-json-home, https://datatracker.ietf.org/doc/html/draft-nottingham-json-home
  APPLICATION_HOME_JSON = "application/home+json"

  #: draft-wilde-home-xml, section 4.1, https://datatracker.ietf.org/doc/html/draft-wilde-home-xml-04#section-4.1
  APPLICATION_HOME_XML = "application/home+xml"

  #: RFC 7230, section 8.3.2, https://datatracker.ietf.org/doc/html/rfc7230#section-8.3.2
  APPLICATION_HTTP = "application/http"

  #: RFC 7515, section 9.2, https://datatracker.ietf.org/doc/html/rfc7515#section-9.2
  APPLICATION_JOSE = "application/jose"

  #: RFC 7515, section 9.2, https://datatracker.ietf.org/doc/html/rfc7515#section-9.2
  APPLICATION_JOSE_JSON = "application/jose+json"

  #: RFC 7033, section 10.2, https://datatracker.ietf.org/doc/html/rfc7033#section-10.2
  APPLICATION_JRD_JSON = "application/jrd+json"

  #: draft-ietf-jsonbis-rfc7159bis, section 1, https://datatracker.ietf.org/doc/html/draft-ietf-jsonbis-rfc7159bis#section-1
  #: RFC 8259, section 1, https://datatracker.ietf.org/doc/html/rfc8259#section-1
  APPLICATION_JSON = "application/json"

  #: RFC 6902, section 3, https://datatracker.ietf.org/doc/html/rfc6902#section-3
  APPLICATION_JSON_PATCH_JSON = "application/json-patch+json"

  #: RFC 7464, section 2, https://datatracker.ietf.org/doc/html/rfc7464#section-2
  APPLICATION_JSON_SEQ = "application/json-seq"

  #: RFC 7517, section 4, https://datatracker.ietf.org/doc/html/rfc7517#section-4
  APPLICATION_JWK_JSON = "application/jwk+json"

  #: RFC 7517, section 5, https://datatracker.ietf.org/doc/html/rfc7517#section-5
  APPLICATION_JWK_SET_JSON = "application/jwk-set+json"

  #: RFC 7519, section 4, https://datatracker.ietf.org/doc/html/rfc7519#section-4
  APPLICATION_JWT = "application/jwt"

  #: W3C json-ld, https://www.w3.org/TR/json-ld/#data-model-overview
  APPLICATION_LD_JSON = "application/ld+json"

  #: RFC 6690, section 2, https://datatracker.ietf.org/doc/html/rfc6690#section-2
  APPLICATION_LINK_FORMAT = "application/link-format"

  #: draft-ietf-core-links-json, section 2, https://datatracker.ietf.org/doc/html/draft-ietf-core-links-json#section-2
  APPLICATION_LINK_FORMAT_CBOR = "application/link-format+cbor"

  #: draft-ietf-core-links-json, section 2, https://datatracker.ietf.org/doc/html/draft-ietf-core-links-json#section-2
  APPLICATION_LINK_FORMAT_JSON = "application/link-format+json"

  #: draft-ietf-httpapi-linkset, section 4.1, https://datatracker.ietf.org/doc/html/draft-ietf-httpapi-linkset#section-4.1
  APPLICATION_LINKSET = "application/linkset"

  #: draft-ietf-httpapi-linkset, section 4.2, https://datatracker.ietf.org/doc/html/draft-ietf-httpapi-linkset#section-4.2
  APPLICATION_LINKSET_JSON = "application/linkset+json"

  #: RFC 6207, section 3, https://datatracker.ietf.org/doc/html/rfc6207#section-3
  APPLICATION_MADS_XML = "application/mads+xml"

  #: W3C appmanifest, https://www.w3.org/TR/appmanifest/#manifest-and-its-members
  APPLICATION_MANIFEST_JSON = "application/manifest+json"

  #: RFC 2220, section 2, https://datatracker.ietf.org/doc/html/rfc2220#section-2
  APPLICATION_MARC = "application/marc"

  #: RFC 6207, section 5, https://datatracker.ietf.org/doc/html/rfc6207#section-5
  APPLICATION_MARCXML_XML = "application/marcxml+xml"

  #: RFC 7396, section 1, https://datatracker.ietf.org/doc/html/rfc7396#section-1
  APPLICATION_MERGE_PATCH_JSON = "application/merge-patch+json"

  #: RFC 6207, section 4, https://datatracker.ietf.org/doc/html/rfc6207#section-4
  APPLICATION_METS_XML = "application/mets+xml"

  #: RFC 6207, section 2, https://datatracker.ietf.org/doc/html/rfc6207#section-2
  APPLICATION_MODS_XML = "application/mods+xml"

  #: RFC 6768, section 6.3.1, https://datatracker.ietf.org/doc/html/rfc6787#section-6.3.1
  APPLICATION_NLSML_XML = "application/nlsml+xml"

  #: RFC 6940, section 11.1, https://datatracker.ietf.org/doc/html/rfc6940#section-11.1
  APPLICATION_P2P_OVERLAY_XML = "application/p2p-overlay+xml"

  #: RFC 5261, section 5, https://datatracker.ietf.org/doc/html/rfc5261#section-5
  APPLICATION_PATCH_OPS_ERROR_XML = "application/patch-ops-error+xml"

  #: RFC 8118, section 1, https://datatracker.ietf.org/doc/html/rfc8118#section-1
  APPLICATION_PDF = "application/pdf"

  #: W3C powder-dr, https://www.w3.org/TR/powder-dr/#appB
  APPLICATION_POWDER_XML = "application/powder+xml"

  #: W3C powder-dr, https://www.w3.org/TR/powder-dr/#appC
  APPLICATION_POWDER_S_XML = "application/powder-s+xml"

  #: RFC 7807, section 3, https://datatracker.ietf.org/doc/html/rfc7807#section-3
  APPLICATION_PROBLEM_JSON = "application/problem+json"

  #: RFC 7807, appendix A, https://datatracker.ietf.org/doc/html/rfc7807#appendix-A
  APPLICATION_PROBLEM_XML = "application/problem+xml"

  #: W3C json-rdf, https://www.w3.org/TR/rdf-json/#overview-of-rdf-json
  APPLICATION_RDF_JSON = "application/rdf+json"

  #: RFC 3870, section 1, https://tools.ietf.org/html/rfc3870#section-1
  APPLICATION_RDF_XML = "application/rdf+xml"

  #: draft-hoffman-xml2rfc, section 6.1, https://datatracker.ietf.org/doc/html/draft-hoffman-xml2rfc#section-6.1
  APPLICATION_RFC_XML = "application/rfc+xml"

  #: OASIS saml-bindings-2.0-os, https://docs.oasis-open.org/security/saml/v2.0/saml-bindings-2.0-os.pdf#page=40
  APPLICATION_SAMLASSERTION_XML = "application/samlassertion+xml"

  #: OASIS saml-metadata-2.0-os, https://docs.oasis-open.org/security/saml/v2.0/saml-metadata-2.0-os.pdf#page=37
  APPLICATION_SAMLMETADATA_XML = "application/samlmetadata+xml"

  #: RFC 7644, section 8.1, https://datatracker.ietf.org/doc/html/rfc7644#section-8.1
  APPLICATION_SCIM_JSON = "application/scim+json"

  #: RFC 8417, section 2.3, https://datatracker.ietf.org/doc/html/rfc8417#section-2.3
  APPLICATION_SECEVENT_JWT = "application/secevent+jwt"

  #: draft-ietf-core-senml, section 6, https://datatracker.ietf.org/doc/html/draft-ietf-core-senml#section-6
  APPLICATION_SENML_CBOR = "application/senml+cbor"

  #: draft-ietf-core-senml, section 8, https://datatracker.ietf.org/doc/html/draft-ietf-core-senml#section-8
  APPLICATION_SENML_EXI = "application/senml+exi"

  #: draft-ietf-core-senml, section 5, https://datatracker.ietf.org/doc/html/draft-ietf-core-senml#section-5
  APPLICATION_SENML_JSON = "application/senml+json"

  #: draft-ietf-core-senml, section 7, https://datatracker.ietf.org/doc/html/draft-ietf-core-senml#section-7
  APPLICATION_SENML_XML = "application/senml+xml"

  #: RFC 1874, section 2.2, https://datatracker.ietf.org/doc/html/rfc1874#section-2.2
  APPLICATION_SGML = "application/sgml"

  #: RFC 3902, section 1, https://datatracker.ietf.org/doc/html/rfc3902#section-1
  APPLICATION_SOAP_XML = "application/soap+xml"

  #: RFC 6922, section 3, https://datatracker.ietf.org/doc/html/rfc6922#section-3
  APPLICATION_SQL = "application/sql"

  #: RFC 6207, section 6, https://datatracker.ietf.org/doc/html/rfc6207#section-6
  APPLICATION_SRU_XML = "application/sru+xml"

  #: W3C tracking-dnt, https://www.w3.org/TR/tracking-dnt/#status-representation
  APPLICATION_TRACKING_STATUS_JSON = "application/tracking-status+json"

  #: W3C trig, https://www.w3.org/TR/trig/#sec-trig-intro
  APPLICATION_TRIG = "application/trig"

  #: RFC 6351, section 8.2, https://datatracker.ietf.org/doc/html/rfc6351#section-8.2
  APPLICATION_VCARD_XML = "application/vcard+xml"

  #: RFC 8216, section 4, https://datatracker.ietf.org/doc/html/rfc8216#section-4
  APPLICATION_VND_APPLE_MPEGURL = "application/vnd.apple.mpegurl"

  #: draft-inadarei-api-health-check, section 3, https://datatracker.ietf.org/doc/html/draft-inadarei-api-health-check#section-3
  APPLICATION_VND_HEALTH_JSON = "application/vnd.health+json"

  #: draft-ietf-webpush-vapid, section 4, https://datatracker.ietf.org/doc/html/draft-ietf-webpush-vapid#section-4
  APPLICATION_WEBPUSH_OPTIONS_JSON = "application/webpush-options+json"

  #: W3C html, https://www.w3.org/TR/html/introduction.html#html-vs-xhtml
  APPLICATION_XHTML_XML = "application/xhtml+xml"

  #: OASIS xliff-core-v2.1, https://docs.oasis-open.org/xliff/xliff-core/v2.1/xliff-core-v2.1.html#mediaType
  APPLICATION_XLIFF_XML = "application/xliff+xml"

  #: RFC 7303, section 4.1, https://datatracker.ietf.org/doc/html/rfc7303#section-4.1
  APPLICATION_XML = "application/xml"

  #: RFC 7303, section 4.1, https://datatracker.ietf.org/doc/html/rfc7303#section-4.1
  APPLICATION_XML_DTD = "application/xml-dtd"

  #: RFC 7303, section 4.1, https://datatracker.ietf.org/doc/html/rfc7303#section-4.1
  APPLICATION_XML_EXTERNAL_PARSED_ENTITY = "application/xml-external-parsed-entity"

  #: RFC 7351, section 3, https://datatracker.ietf.org/doc/html/rfc7351#section-3
  APPLICATION_XML_PATCH_XML = "application/xml-patch+xml"

  #: draft-ietf-httpapi-yaml-mediatypes, section 2.1, https://datatracker.ietf.org/doc/html/draft-ietf-httpapi-yaml-mediatypes#section-2.1
  APPLICATION_YAML = "application/yaml"

  #: RFC 6713, section 2, https://datatracker.ietf.org/doc/html/rfc6713#section-2
  APPLICATION_ZLIB = "application/zlib"

  #: RFC 8081, section 4.4.4, https://datatracker.ietf.org/doc/html/rfc8081#section-4.4.4
  FONT_COLLECTION = "font/collection"

  #: RFC 8081, section 4.4.3, https://datatracker.ietf.org/doc/html/rfc8081#section-4.4.3
  FONT_OTF = "font/otf"

  #: RFC 8081, section 4.4.1, https://datatracker.ietf.org/doc/html/rfc8081#section-4.4.1
  FONT_SFNT = "font/sfnt"

  #: RFC 8081, section 4.4.2, https://datatracker.ietf.org/doc/html/rfc8081#section-4.4.2
  FONT_TTF = "font/ttf"

  #: RFC 8081, section 4.4.5, https://datatracker.ietf.org/doc/html/rfc8081#section-4.4.5
  FONT_WOFF = "font/woff"

  #: RFC 8081, section 4.4.6, https://datatracker.ietf.org/doc/html/rfc8081#section-4.4.6
  #: W3C WOFF2, https://www.w3.org/TR/2018/REC-WOFF2-20180301/#FileStructure
  FONT_WOFF2 = "font/woff2"

  #: ISO/IEC 10918-5, https://www.iso.org/obp/ui/#iso:std:iso-iec:10918:-5
  IMAGE_JPEG = "image/jpeg"

  #: W3C PNG, https://www.w3.org/TR/PNG/#A-Media-type
  IMAGE_PNG = "image/png"

  #: draft-zern-webp, section 1, https://datatracker.ietf.org/doc/html/draft-zern-webp#section-1
  IMAGE_WEBP = "image/webp"

  #: draft-ietf-httpbis-binary-message, section 8, https://datatracker.ietf.org/doc/html/draft-ietf-httpbis-binary-message#section-8
  MESSAGE_BHTTP = "message/bhttp"

  #: RFC 7230, section 8.3.1, https://datatracker.ietf.org/doc/html/rfc7230#section-8.3.1
  MESSAGE_HTTP = "message/http"

  #: draft-ietf-ohai-ohttp, section 7.1, https://datatracker.ietf.org/doc/html/draft-ietf-ohai-ohttp#section-7.1
  MESSAGE_OHTTP_REQ = "message/ohttp-req"

  #: draft-ietf-ohai-ohttp, section 7.2, https://datatracker.ietf.org/doc/html/draft-ietf-ohai-ohttp#section-7.2
  MESSAGE_OHTTP_RES = "message/ohttp-res"

  #: RFC 2388, section 3, https://datatracker.ietf.org/doc/html/rfc2388#section-3
  MULTIPART_FORM_DATA = "multipart/form-data"

  #: RFC 8255, section 3, https://datatracker.ietf.org/doc/html/rfc8255#section-3
  MULTIPART_MULTILINGUAL = "multipart/multilingual"

  #: W3C html, https://www.w3.org/TR/html/browsers.html#page-load-processing-model-for-multipartx-mixed-replace-resources
  MULTIPART_X_MIXED_REPLACE = "multipart/x-mixed-replace"

  #: RFC 4180, section 1, https://datatracker.ietf.org/doc/html/rfc4180#section-1
  #: RFC 7111, section 1, https://datatracker.ietf.org/doc/html/rfc7111#section-1
  TEXT_CSV = "text/csv"

  #: RFC 9239, section 6.2.1, https://datatracker.ietf.org/doc/html/rfc9239#section-6.2.1
  TEXT_ECMASCRIPT = "text/ecmascript"

  #: W3C eventsource, https://www.w3.org/TR/eventsource/#text-event-stream
  TEXT_EVENT_STREAM = "text/event-stream"

  #: RFC 6768, section 9.9, https://datatracker.ietf.org/doc/html/rfc6787#section-9.9
  TEXT_GRAMMAR_REF_LIST = "text/grammar-ref-list"

  #: W3C html, https://www.w3.org/TR/html/introduction.html#html-vs-xhtml
  TEXT_HTML = "text/html"

  #: RFC 9239, section 6.1.1, https://datatracker.ietf.org/doc/html/rfc9239#section-6.1.1
  TEXT_JAVASCRIPT = "text/javascript"

  #: RFC 7763, https://datatracker.ietf.org/doc/html/rfc7763
  TEXT_MARKDOWN = "text/markdown"

  #: RFC 5147, section 1, https://datatracker.ietf.org/doc/html/rfc5147#section-1
  TEXT_PLAIN = "text/plain"

  #: RFC 1874, section 2.1, https://datatracker.ietf.org/doc/html/rfc1874#section-2.1
  TEXT_SGML = "text/sgml"

  #: RFC 6350, section 3, https://datatracker.ietf.org/doc/html/rfc6350#section-3
  TEXT_VCARD = "text/vcard"

  #: W3C webvtt, https://www.w3.org/TR/webvtt1/#introduction
  TEXT_VTT = "text/vtt"

  #: RFC 3023, section 3.1, https://datatracker.ietf.org/doc/html/rfc3023#section-3.1
  TEXT_XML = "text/xml"

  #: RFC 3023, section 3.3, https://datatracker.ietf.org/doc/html/rfc3023#section-3.3
  TEXT_XML_EXTERNAL_PARSED_ENTITY = "text/xml-external-parsed-entity"

  # Extension Mapping
  _extensions = {
      ".atom":        APPLICATION_ATOM_XML,
      ".cbor":        APPLICATION_CBOR,
      ".csv":         TEXT_CSV,
      ".dtd":         APPLICATION_XML_DTD,
      ".geojson":     APPLICATION_GEO_JSON,
      ".gz":          APPLICATION_GZIP,
      ".htm":         TEXT_HTML,
      ".html":        TEXT_HTML,
      ".jpeg":        IMAGE_JPEG,
      ".jpg":         IMAGE_JPEG,
      ".js":          TEXT_JAVASCRIPT,
      ".json":        APPLICATION_JSON,
      ".jsonld":      APPLICATION_LD_JSON,
      ".m3u8":        APPLICATION_VND_APPLE_MPEGURL,
      ".md":          TEXT_MARKDOWN,
      ".mjs":         TEXT_JAVASCRIPT,
      ".mpd":         APPLICATION_DASH_XML,
      ".otf":         FONT_OTF,
      ".pdf":         APPLICATION_PDF,
      ".png":         IMAGE_PNG,
      ".rdf":         APPLICATION_RDF_XML,
      ".sgml":        TEXT_SGML,
      ".sql":         APPLICATION_SQL,
      ".trig":        APPLICATION_TRIG,
      ".ttc":         FONT_COLLECTION,
      ".ttf":         FONT_TTF,
      ".txt":         TEXT_PLAIN,
      ".vcf":         TEXT_VCARD,
      ".vtt":         TEXT_VTT,
      ".webmanifest": APPLICATION_MANIFEST_JSON,
      ".webp":        IMAGE_WEBP,
      ".woff":        FONT_WOFF,
      ".woff2":       FONT_WOFF2,
      ".xhtml":       APPLICATION_XHTML_XML,
      ".xlf":         APPLICATION_XLIFF_XML,
      ".xml":         TEXT_XML,
      ".yaml":        APPLICATION_YAML,
      ".yml":         APPLICATION_YAML,
  }

  @classmethod
  def guess_type(cls, path: str) -> str:
    """
    Guess the media type based on the file extension.
    Returns application/octet-stream if unknown.
    """
    _, ext = os.path.splitext(path)
    return cls._extensions.get(ext.lower(), cls._fallback)

Mime._map = Mime._index()
