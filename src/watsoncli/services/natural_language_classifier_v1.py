"""Operations of the Natural Language Classifier service."""

from __future__ import annotations

from watsoncli.models import ServiceSpec
from watsoncli.services.common import (
    DELETE,
    GET,
    NONE,
    POST,
    file_path,
    json_value,
    operation,
    string,
)

_op = operation

OPERATIONS = (
    _op(
        "classify",
        "Classify a phrase",
        "Returns label information for the input. The status must be `Available` before you can "
        "use the classifier to classify text.",
        method=POST,
        path="/v1/classifiers/{classifier_id}/classify",
        flags=(
            string("classifier_id", "Classifier ID to use.", required=True),
            string(
                "text",
                "The submitted phrase. The maximum length is 2048 characters.",
                required=True,
            ),
        ),
    ),
    _op(
        "classify-collection",
        "Classify multiple phrases",
        "Returns label information for multiple phrases. The status must be `Available` before "
        "you can use the classifier to classify text.Note that classifying Japanese texts is a "
        "beta feature.",
        method=POST,
        path="/v1/classifiers/{classifier_id}/classify_collection",
        flags=(
            string("classifier_id", "Classifier ID to use.", required=True),
            json_value("collection", "The submitted phrases.", required=True),
        ),
    ),
    _op(
        "create-classifier",
        "Create classifier",
        "Sends data to create and train a classifier and returns information about the new "
        "classifier.",
        method=POST,
        path="/v1/classifiers",
        flags=(
            file_path(
                "training_metadata",
                "Metadata in JSON format. The metadata identifies the language of the data, and "
                "an optional name to identify the classifier. Specify the language with the "
                "2-letter primary language code as assigned in ISO standard 639.Supported "
                "languages are English (`en`), Arabic (`ar`), French (`fr`), German, (`de`), "
                "Italian (`it`), Japanese (`ja`), Korean (`ko`), Brazilian Portuguese (`pt`), and "
                "Spanish (`es`).",
                required=True,
            ),
            file_path(
                "training_data",
                "Training data in CSV format. Each text value must have at least one class. The "
                "data can include up to 3,000 classes and 20,000 records. For details, see [Data "
                "preparation](https://cloud.ibm.com/docs/services/natural-language-classifier?topic=natural-language-classifier-using-your-data).",
                required=True,
            ),
        ),
        multipart=True,
    ),
    _op(
        "list-classifiers",
        "List classifiers",
        "Returns an empty array if no classifiers are available.",
        method=GET,
        path="/v1/classifiers",
    ),
    _op(
        "get-classifier",
        "Get information about a classifier",
        "Returns status and other information about a classifier.",
        method=GET,
        path="/v1/classifiers/{classifier_id}",
        flags=(
            string("classifier_id", "Classifier ID to query.", required=True),
        ),
    ),
    _op(
        "delete-classifier",
        "Delete classifier",
        method=DELETE,
        path="/v1/classifiers/{classifier_id}",
        flags=(
            string("classifier_id", "Classifier ID to delete.", required=True),
        ),
        result=NONE,
    ),
)

SERVICE = ServiceSpec(
    tag="natural-language-classifier-v1",
    aliases=("nlc-v1",),
    credential_name="natural_language_classifier",
    default_url="https://gateway.watsonplatform.net/natural-language-classifier/api",
    short_help="Natural Language Classifier",
    long_help=(
        "Natural Language Classifier returns the top matching predefined classes for "
        "short text input, using classifiers trained on your examples."
    ),
    operations=OPERATIONS,
)
