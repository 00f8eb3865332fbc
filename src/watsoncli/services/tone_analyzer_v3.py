"""Operations of the Tone Analyzer service."""

from __future__ import annotations

from functools import partial

from watsoncli.models import ServiceSpec
from watsoncli.services.common import (
    BODY_ROOT,
    HEADER,
    POST,
    QUERY,
    RAW_BODY,
    boolean,
    json_value,
    operation,
    string,
    string_list,
)

_op = partial(operation, versioned=True)

OPERATIONS = (
    _op(
        "tone",
        "Analyze general tone",
        "Use the general-purpose endpoint to analyze the tone of your input content. The service "
        "analyzes the content for emotional and language tones. The method always analyzes the "
        "tone of the full document; by default, it also analyzes the tone of each individual "
        "sentence of the content. You can submit no more than 128 KB of total input content and "
        "no more than 1000 individual sentences in JSON, plain text, or HTML format. The service "
        "analyzes the first 1000 sentences for document-level analysis and only the first 100 "
        "sentences for sentence-level analysis. Per the JSON specification, the default character "
        "encoding for JSON content is effectively always UTF-8; per the HTTP specification, the "
        "default encoding for plain text and HTML is ISO-8859-1 (effectively, the ASCII character "
        "set). When specifying a content type of plain text or HTML, include the `charset` "
        "parameter to indicate the character encoding of the input text; for example: "
        "`Content-Type: text/plain;charset=utf-8`. For `text/html`, the service removes HTML tags "
        "and analyzes only the textual content. **See also:** [Using the general-purpose "
        "endpoint](https://cloud.ibm.com/docs/services/tone-analyzer?topic=tone-analyzer-utgpe#utgpe).",
        method=POST,
        path="/v3/tone",
        flags=(
            json_value(
                "tone_input",
                "JSON, plain text, or HTML input that contains the content to be analyzed. For "
                "JSON input, provide an object of type `ToneInput`.",
                location=BODY_ROOT,
            ),
            string(
                "body",
                "JSON, plain text, or HTML input that contains the content to be analyzed. For "
                "JSON input, provide an object of type `ToneInput`.",
                location=RAW_BODY,
            ),
            string(
                "content_type",
                "The type of the input. A character encoding can be specified by including a "
                "`charset` parameter. For example, 'text/plain;charset=utf-8'.",
                location=HEADER,
            ),
            boolean(
                "sentences",
                "Indicates whether the service is to return an analysis of each individual "
                "sentence in addition to its analysis of the full document. If `true` (the "
                "default), the service returns results for each sentence.",
                location=QUERY,
            ),
            string_list(
                "tones",
                "**`2017-09-21`:** Deprecated. The service continues to accept the parameter for "
                "backward-compatibility, but the parameter no longer affects the response. "
                "**`2016-05-19`:** A comma-separated list of tones for which the service is to "
                "return its analysis of the input; the indicated tones apply both to the full "
                "document and to individual sentences of the document. You can specify one or "
                "more of the valid values. Omit the parameter to request results for all three "
                "tones.",
                location=QUERY,
            ),
            string(
                "content_language",
                "The language of the input text for the request: English or French. Regional "
                "variants are treated as their parent language; for example, `en-US` is "
                "interpreted as `en`. The input content must match the specified language. Do not "
                "submit content that contains both languages. You can use different languages for "
                "**Content-Language** and **Accept-Language**.* **`2017-09-21`:** Accepts `en` or "
                "`fr`.* **`2016-05-19`:** Accepts only `en`.",
                location=HEADER,
            ),
            string(
                "accept_language",
                "The desired language of the response. For two-character arguments, regional "
                "variants are treated as their parent language; for example, `en-US` is "
                "interpreted as `en`. You can use different languages for **Content-Language** "
                "and **Accept-Language**.",
                location=HEADER,
            ),
        ),
        content_type="text/plain",
    ),
    _op(
        "tone-chat",
        "Analyze customer-engagement tone",
        "Use the customer-engagement endpoint to analyze the tone of customer service and "
        "customer support conversations. For each utterance of a conversation, the method reports "
        "the most prevalent subset of the following seven tones: sad, frustrated, satisfied, "
        "excited, polite, impolite, and sympathetic. If you submit more than 50 utterances, the "
        "service returns a warning for the overall content and analyzes only the first 50 "
        "utterances. If you submit a single utterance that contains more than 500 characters, the "
        "service returns an error for that utterance and does not analyze the utterance. The "
        "request fails if all utterances have more than 500 characters. Per the JSON "
        "specification, the default character encoding for JSON content is effectively always "
        "UTF-8. **See also:** [Using the customer-engagement "
        "endpoint](https://cloud.ibm.com/docs/services/tone-analyzer?topic=tone-analyzer-utco#utco).",
        method=POST,
        path="/v3/tone_chat",
        flags=(
            json_value(
                "utterances",
                "An array of `Utterance` objects that provides the input content that the service "
                "is to analyze.",
                required=True,
            ),
            string(
                "content_language",
                "The language of the input text for the request: English or French. Regional "
                "variants are treated as their parent language; for example, `en-US` is "
                "interpreted as `en`. The input content must match the specified language. Do not "
                "submit content that contains both languages. You can use different languages for "
                "**Content-Language** and **Accept-Language**.* **`2017-09-21`:** Accepts `en` or "
                "`fr`.* **`2016-05-19`:** Accepts only `en`.",
                location=HEADER,
            ),
            string(
                "accept_language",
                "The desired language of the response. For two-character arguments, regional "
                "variants are treated as their parent language; for example, `en-US` is "
                "interpreted as `en`. You can use different languages for **Content-Language** "
                "and **Accept-Language**.",
                location=HEADER,
            ),
        ),
    ),
)

SERVICE = ServiceSpec(
    tag="tone-analyzer-v3",
    aliases=("ta-v3",),
    credential_name="tone_analyzer",
    default_url="https://gateway.watsonplatform.net/tone-analyzer/api",
    short_help="Tone Analyzer",
    long_help=(
        "Tone Analyzer detects emotional and language tones in written text, at the "
        "document and sentence levels."
    ),
    version_required=True,
    operations=OPERATIONS,
)
