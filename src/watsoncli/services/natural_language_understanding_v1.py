"""Operations of the Natural Language Understanding service."""

from __future__ import annotations

from functools import partial

from watsoncli.models import ServiceSpec
from watsoncli.services.common import (
    DELETE,
    GET,
    POST,
    boolean,
    int64,
    json_value,
    operation,
    string,
)

_op = partial(operation, versioned=True)

OPERATIONS = (
    _op(
        "analyze",
        "Analyze text",
        "Analyzes text, HTML, or a public webpage for the following features:- Categories- "
        "Concepts- Emotion- Entities- Keywords- Metadata- Relations- Semantic roles- Sentiment- "
        "Syntax (Experimental).",
        method=POST,
        path="/v1/analyze",
        flags=(
            json_value(
                "features",
                "Specific features to analyze the document for.",
                required=True,
            ),
            string(
                "text",
                "The plain text to analyze. One of the `text`, `html`, or `url` parameters is "
                "required.",
            ),
            string(
                "html",
                "The HTML file to analyze. One of the `text`, `html`, or `url` parameters is "
                "required.",
            ),
            string(
                "url",
                "The webpage to analyze. One of the `text`, `html`, or `url` parameters is "
                "required.",
            ),
            boolean(
                "clean",
                "Set this to `false` to disable webpage cleaning. To learn more about webpage "
                "cleaning, see the [Analyzing "
                "webpages](https://cloud.ibm.com/docs/services/natural-language-understanding?topic=natural-language-understanding-analyzing-webpages) "
                "documentation.",
            ),
            string(
                "xpath",
                "An [XPath "
                "query](https://cloud.ibm.com/docs/services/natural-language-understanding?topic=natural-language-understanding-analyzing-webpages#xpath) "
                "to perform on `html` or `url` input. Results of the query will be appended to "
                "the cleaned webpage text before it is analyzed. To analyze only the results of "
                "the XPath query, set the `clean` parameter to `false`.",
            ),
            boolean("fallback_to_raw", "Whether to use raw HTML content if text cleaning fails."),
            boolean("return_analyzed_text", "Whether or not to return the analyzed text."),
            string(
                "language",
                "ISO 639-1 code that specifies the language of your text. This overrides "
                "automatic language detection. Language support differs depending on the features "
                "you include in your analysis. See [Language "
                "support](https://cloud.ibm.com/docs/services/natural-language-understanding?topic=natural-language-understanding-language-support) "
                "for more information.",
            ),
            int64(
                "limit_text_characters",
                "Sets the maximum number of characters that are processed by the service.",
            ),
        ),
    ),
    _op(
        "list-models",
        "List models",
        "Lists Watson Knowledge Studio [custom entities and relations "
        "models](https://cloud.ibm.com/docs/services/natural-language-understanding?topic=natural-language-understanding-customizing) "
        "that are deployed to your Natural Language Understanding service.",
        method=GET,
        path="/v1/models",
    ),
    _op(
        "delete-model",
        "Delete model",
        "Deletes a custom model.",
        method=DELETE,
        path="/v1/models/{model_id}",
        flags=(
            string("model_id", "Model ID of the model to delete.", required=True),
        ),
    ),
)

SERVICE = ServiceSpec(
    tag="natural-language-understanding-v1",
    aliases=("nlu-v1",),
    credential_name="natural_language_understanding",
    default_url="https://gateway.watsonplatform.net/natural-language-understanding/api",
    short_help="Natural Language Understanding",
    long_help=(
        "Natural Language Understanding analyzes features of text content. Provide "
        "text, raw HTML or a public URL and request the features you need."
    ),
    version_required=True,
    operations=OPERATIONS,
)
