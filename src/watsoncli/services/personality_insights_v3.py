"""Operations of the Personality Insights service."""

from __future__ import annotations

from functools import partial

from watsoncli.models import ServiceSpec
from watsoncli.services.common import (
    BINARY,
    BODY_ROOT,
    HEADER,
    POST,
    QUERY,
    RAW_BODY,
    boolean,
    json_value,
    operation,
    string,
)

_op = partial(operation, versioned=True)

OPERATIONS = (
    _op(
        "profile",
        "Get profile",
        "Generates a personality profile for the author of the input text. The service accepts a "
        "maximum of 20 MB of input content, but it requires much less text to produce an accurate "
        "profile. The service can analyze text in Arabic, English, Japanese, Korean, or Spanish. "
        "It can return its results in a variety of languages. **See also:*** [Requesting a "
        "profile](https://cloud.ibm.com/docs/services/personality-insights?topic=personality-insights-input#input)* "
        "[Providing sufficient "
        "input](https://cloud.ibm.com/docs/services/personality-insights?topic=personality-insights-input#sufficient) "
        "### Content types You can provide input content as plain text (`text/plain`), HTML "
        "(`text/html`), or JSON (`application/json`) by specifying the **Content-Type** "
        "parameter. The default is `text/plain`.* Per the JSON specification, the default "
        "character encoding for JSON content is effectively always UTF-8.* Per the HTTP "
        "specification, the default encoding for plain text and HTML is ISO-8859-1 (effectively, "
        "the ASCII character set). When specifying a content type of plain text or HTML, include "
        "the `charset` parameter to indicate the character encoding of the input text; for "
        "example, `Content-Type: text/plain;charset=utf-8`. **See also:** [Specifying request and "
        "response "
        "formats](https://cloud.ibm.com/docs/services/personality-insights?topic=personality-insights-input#formats) "
        "### Accept types You must request a response as JSON (`application/json`) or "
        "comma-separated values (`text/csv`) by specifying the **Accept** parameter. CSV output "
        "includes a fixed number of columns. Set the **csv_headers** parameter to `true` to "
        "request optional column headers for CSV output. **See also:*** [Understanding a JSON "
        "profile](https://cloud.ibm.com/docs/services/personality-insights?topic=personality-insights-output#output)* "
        "[Understanding a CSV "
        "profile](https://cloud.ibm.com/docs/services/personality-insights?topic=personality-insights-outputCSV#outputCSV).",
        method=POST,
        path="/v3/profile",
        flags=(
            json_value(
                "content",
                "A maximum of 20 MB of content to analyze, though the service requires much less "
                "text; for more information, see [Providing sufficient "
                "input](https://cloud.ibm.com/docs/services/personality-insights?topic=personality-insights-input#sufficient). "
                "For JSON input, provide an object of type `Content`.",
                location=BODY_ROOT,
            ),
            string(
                "body",
                "A maximum of 20 MB of content to analyze, though the service requires much less "
                "text; for more information, see [Providing sufficient "
                "input](https://cloud.ibm.com/docs/services/personality-insights?topic=personality-insights-input#sufficient). "
                "For JSON input, provide an object of type `Content`.",
                location=RAW_BODY,
            ),
            string(
                "content_type",
                "The type of the input. For more information, see **Content types** in the method "
                "description.",
                location=HEADER,
            ),
            string(
                "content_language",
                "The language of the input text for the request: Arabic, English, Japanese, "
                "Korean, or Spanish. Regional variants are treated as their parent language; for "
                "example, `en-US` is interpreted as `en`. The effect of the **Content-Language** "
                "parameter depends on the **Content-Type** parameter. When **Content-Type** is "
                "`text/plain` or `text/html`, **Content-Language** is the only way to specify the "
                "language. When **Content-Type** is `application/json`, **Content-Language** "
                "overrides a language specified with the `language` parameter of a `ContentItem` "
                "object, and content items that specify a different language are ignored; omit "
                "this parameter to base the language on the specification of the content items. "
                "You can specify any combination of languages for **Content-Language** and "
                "**Accept-Language**.",
                location=HEADER,
            ),
            string(
                "accept_language",
                "The desired language of the response. For two-character arguments, regional "
                "variants are treated as their parent language; for example, `en-US` is "
                "interpreted as `en`. You can specify any combination of languages for the input "
                "and response content.",
                location=HEADER,
            ),
            boolean(
                "raw_scores",
                "Indicates whether a raw score in addition to a normalized percentile is returned "
                "for each characteristic; raw scores are not compared with a sample population. "
                "By default, only normalized percentiles are returned.",
                location=QUERY,
            ),
            boolean(
                "csv_headers",
                "Indicates whether column labels are returned with a CSV response. By default, no "
                "column labels are returned. Applies only when the response type is CSV "
                "(`text/csv`).",
                location=QUERY,
            ),
            boolean(
                "consumption_preferences",
                "Indicates whether consumption preferences are returned with the results. By "
                "default, no consumption preferences are returned.",
                location=QUERY,
            ),
        ),
        content_type="text/plain",
    ),
    _op(
        "profile-as-csv",
        "Get profile as csv",
        "Generates a personality profile for the author of the input text. The service accepts a "
        "maximum of 20 MB of input content, but it requires much less text to produce an accurate "
        "profile. The service can analyze text in Arabic, English, Japanese, Korean, or Spanish. "
        "It can return its results in a variety of languages. **See also:*** [Requesting a "
        "profile](https://cloud.ibm.com/docs/services/personality-insights?topic=personality-insights-input#input)* "
        "[Providing sufficient "
        "input](https://cloud.ibm.com/docs/services/personality-insights?topic=personality-insights-input#sufficient) "
        "### Content types You can provide input content as plain text (`text/plain`), HTML "
        "(`text/html`), or JSON (`application/json`) by specifying the **Content-Type** "
        "parameter. The default is `text/plain`.* Per the JSON specification, the default "
        "character encoding for JSON content is effectively always UTF-8.* Per the HTTP "
        "specification, the default encoding for plain text and HTML is ISO-8859-1 (effectively, "
        "the ASCII character set). When specifying a content type of plain text or HTML, include "
        "the `charset` parameter to indicate the character encoding of the input text; for "
        "example, `Content-Type: text/plain;charset=utf-8`. **See also:** [Specifying request and "
        "response "
        "formats](https://cloud.ibm.com/docs/services/personality-insights?topic=personality-insights-input#formats) "
        "### Accept types You must request a response as JSON (`application/json`) or "
        "comma-separated values (`text/csv`) by specifying the **Accept** parameter. CSV output "
        "includes a fixed number of columns. Set the **csv_headers** parameter to `true` to "
        "request optional column headers for CSV output. **See also:*** [Understanding a JSON "
        "profile](https://cloud.ibm.com/docs/services/personality-insights?topic=personality-insights-output#output)* "
        "[Understanding a CSV "
        "profile](https://cloud.ibm.com/docs/services/personality-insights?topic=personality-insights-outputCSV#outputCSV).",
        method=POST,
        path="/v3/profile",
        flags=(
            json_value(
                "content",
                "A maximum of 20 MB of content to analyze, though the service requires much less "
                "text; for more information, see [Providing sufficient "
                "input](https://cloud.ibm.com/docs/services/personality-insights?topic=personality-insights-input#sufficient). "
                "For JSON input, provide an object of type `Content`.",
                location=BODY_ROOT,
            ),
            string(
                "body",
                "A maximum of 20 MB of content to analyze, though the service requires much less "
                "text; for more information, see [Providing sufficient "
                "input](https://cloud.ibm.com/docs/services/personality-insights?topic=personality-insights-input#sufficient). "
                "For JSON input, provide an object of type `Content`.",
                location=RAW_BODY,
            ),
            string(
                "content_type",
                "The type of the input. For more information, see **Content types** in the method "
                "description.",
                location=HEADER,
            ),
            string(
                "content_language",
                "The language of the input text for the request: Arabic, English, Japanese, "
                "Korean, or Spanish. Regional variants are treated as their parent language; for "
                "example, `en-US` is interpreted as `en`. The effect of the **Content-Language** "
                "parameter depends on the **Content-Type** parameter. When **Content-Type** is "
                "`text/plain` or `text/html`, **Content-Language** is the only way to specify the "
                "language. When **Content-Type** is `application/json`, **Content-Language** "
                "overrides a language specified with the `language` parameter of a `ContentItem` "
                "object, and content items that specify a different language are ignored; omit "
                "this parameter to base the language on the specification of the content items. "
                "You can specify any combination of languages for **Content-Language** and "
                "**Accept-Language**.",
                location=HEADER,
            ),
            string(
                "accept_language",
                "The desired language of the response. For two-character arguments, regional "
                "variants are treated as their parent language; for example, `en-US` is "
                "interpreted as `en`. You can specify any combination of languages for the input "
                "and response content.",
                location=HEADER,
            ),
            boolean(
                "raw_scores",
                "Indicates whether a raw score in addition to a normalized percentile is returned "
                "for each characteristic; raw scores are not compared with a sample population. "
                "By default, only normalized percentiles are returned.",
                location=QUERY,
            ),
            boolean(
                "csv_headers",
                "Indicates whether column labels are returned with a CSV response. By default, no "
                "column labels are returned. Applies only when the response type is CSV "
                "(`text/csv`).",
                location=QUERY,
            ),
            boolean(
                "consumption_preferences",
                "Indicates whether consumption preferences are returned with the results. By "
                "default, no consumption preferences are returned.",
                location=QUERY,
            ),
        ),
        result=BINARY,
        content_type="text/plain",
        accept="text/csv",
    ),
)

SERVICE = ServiceSpec(
    tag="personality-insights-v3",
    aliases=("pi-v3",),
    credential_name="personality_insights",
    default_url="https://gateway.watsonplatform.net/personality-insights/api",
    short_help="Personality Insights",
    long_help=(
        "Personality Insights infers personality characteristics, needs, values and "
        "consumption preferences from written content."
    ),
    version_required=True,
    operations=OPERATIONS,
)
