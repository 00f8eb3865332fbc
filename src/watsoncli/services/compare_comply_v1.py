"""Operations of the Compare and Comply service."""

from __future__ import annotations

from functools import partial

from watsoncli.models import ServiceSpec
from watsoncli.services.common import (
    DELETE,
    GET,
    POST,
    PUT,
    QUERY,
    boolean,
    date,
    file_path,
    int64,
    json_value,
    operation,
    string,
)

_op = partial(operation, versioned=True)

OPERATIONS = (
    _op(
        "convert-to-html",
        "Convert document to HTML",
        "Converts a document to HTML.",
        method=POST,
        path="/v1/html_conversion",
        flags=(
            file_path(
                "file",
                "The document to convert.",
                required=True,
                content_type_flag="file_content_type",
            ),
            string("file_content_type", "The content type of File."),
            string(
                "model",
                "The analysis model to be used by the service. For the **Element classification** "
                "and **Compare two documents** methods, the default is `contracts`. For the "
                "**Extract tables** method, the default is `tables`. These defaults apply to the "
                "standalone methods as well as to the methods' use in batch-processing requests.",
                location=QUERY,
            ),
        ),
        multipart=True,
    ),
    _op(
        "classify-elements",
        "Classify the elements of a document",
        "Analyzes the structural and semantic elements of a document.",
        method=POST,
        path="/v1/element_classification",
        flags=(
            file_path(
                "file",
                "The document to classify.",
                required=True,
                content_type_flag="file_content_type",
            ),
            string("file_content_type", "The content type of File."),
            string(
                "model",
                "The analysis model to be used by the service. For the **Element classification** "
                "and **Compare two documents** methods, the default is `contracts`. For the "
                "**Extract tables** method, the default is `tables`. These defaults apply to the "
                "standalone methods as well as to the methods' use in batch-processing requests.",
                location=QUERY,
            ),
        ),
        multipart=True,
    ),
    _op(
        "extract-tables",
        "Extract a document's tables",
        "Analyzes the tables in a document.",
        method=POST,
        path="/v1/tables",
        flags=(
            file_path(
                "file",
                "The document on which to run table extraction.",
                required=True,
                content_type_flag="file_content_type",
            ),
            string("file_content_type", "The content type of File."),
            string(
                "model",
                "The analysis model to be used by the service. For the **Element classification** "
                "and **Compare two documents** methods, the default is `contracts`. For the "
                "**Extract tables** method, the default is `tables`. These defaults apply to the "
                "standalone methods as well as to the methods' use in batch-processing requests.",
                location=QUERY,
            ),
        ),
        multipart=True,
    ),
    _op(
        "compare-documents",
        "Compare two documents",
        "Compares two input documents. Documents must be in the same format.",
        method=POST,
        path="/v1/comparison",
        flags=(
            file_path(
                "file1",
                "The first document to compare.",
                required=True,
                content_type_flag="file1_content_type",
            ),
            file_path(
                "file2",
                "The second document to compare.",
                required=True,
                content_type_flag="file2_content_type",
            ),
            string("file1_content_type", "The content type of File1."),
            string("file2_content_type", "The content type of File2."),
            string("file1_label", "A text label for the first document.", location=QUERY),
            string("file2_label", "A text label for the second document.", location=QUERY),
            string(
                "model",
                "The analysis model to be used by the service. For the **Element classification** "
                "and **Compare two documents** methods, the default is `contracts`. For the "
                "**Extract tables** method, the default is `tables`. These defaults apply to the "
                "standalone methods as well as to the methods' use in batch-processing requests.",
                location=QUERY,
            ),
        ),
        multipart=True,
    ),
    _op(
        "add-feedback",
        "Add feedback",
        "Adds feedback in the form of _labels_ from a subject-matter expert (SME) to a governing "
        "document. **Important:** Feedback is not immediately incorporated into the training "
        "model, nor is it guaranteed to be incorporated at a later date. Instead, submitted "
        "feedback is used to suggest future updates to the training model.",
        method=POST,
        path="/v1/feedback",
        flags=(
            json_value("feedback_data", "Feedback data for submission.", required=True),
            string("user_id", "An optional string identifying the user."),
            string("comment", "An optional comment on or description of the feedback."),
        ),
    ),
    _op(
        "list-feedback",
        "List the feedback in a document",
        "Lists the feedback in a document.",
        method=GET,
        path="/v1/feedback",
        flags=(
            string(
                "feedback_type",
                "An optional string that filters the output to include only feedback with the "
                "specified feedback type. The only permitted value is `element_classification`.",
            ),
            date(
                "before",
                "An optional string in the format `YYYY-MM-DD` that filters the output to include "
                "only feedback that was added before the specified date.",
            ),
            date(
                "after",
                "An optional string in the format `YYYY-MM-DD` that filters the output to include "
                "only feedback that was added after the specified date.",
            ),
            string(
                "document_title",
                "An optional string that filters the output to include only feedback from the "
                "document with the specified `document_title`.",
            ),
            string(
                "model_id",
                "An optional string that filters the output to include only feedback with the "
                "specified `model_id`. The only permitted value is `contracts`.",
            ),
            string(
                "model_version",
                "An optional string that filters the output to include only feedback with the "
                "specified `model_version`.",
            ),
            string(
                "category_removed",
                "An optional string in the form of a comma-separated list of categories. If it is "
                "specified, the service filters the output to include only feedback that has at "
                "least one category from the list removed.",
            ),
            string(
                "category_added",
                "An optional string in the form of a comma-separated list of categories. If this "
                "is specified, the service filters the output to include only feedback that has "
                "at least one category from the list added.",
            ),
            string(
                "category_not_changed",
                "An optional string in the form of a comma-separated list of categories. If this "
                "is specified, the service filters the output to include only feedback that has "
                "at least one category from the list unchanged.",
            ),
            string(
                "type_removed",
                "An optional string of comma-separated `nature`:`party` pairs. If this is "
                "specified, the service filters the output to include only feedback that has at "
                "least one `nature`:`party` pair from the list removed.",
            ),
            string(
                "type_added",
                "An optional string of comma-separated `nature`:`party` pairs. If this is "
                "specified, the service filters the output to include only feedback that has at "
                "least one `nature`:`party` pair from the list removed.",
            ),
            string(
                "type_not_changed",
                "An optional string of comma-separated `nature`:`party` pairs. If this is "
                "specified, the service filters the output to include only feedback that has at "
                "least one `nature`:`party` pair from the list unchanged.",
            ),
            int64(
                "page_limit",
                "An optional integer specifying the number of documents that you want the service "
                "to return.",
            ),
            string(
                "cursor",
                "An optional string that returns the set of documents after the previous set. Use "
                "this parameter with the `page_limit` parameter.",
            ),
            string(
                "sort",
                "An optional comma-separated list of fields in the document to sort on. You can "
                "optionally specify the sort direction by prefixing the value of the field with "
                "`-` for descending order or `+` for ascending order (the default). Currently "
                "permitted sorting fields are `created`, `user_id`, and `document_title`.",
            ),
            boolean(
                "include_total",
                "An optional boolean value. If specified as `true`, the `pagination` object in "
                "the output includes a value called `total` that gives the total count of "
                "feedback created.",
            ),
        ),
    ),
    _op(
        "get-feedback",
        "Get a specified feedback entry",
        "Gets a feedback entry with a specified `feedback_id`.",
        method=GET,
        path="/v1/feedback/{feedback_id}",
        flags=(
            string(
                "feedback_id",
                "A string that specifies the feedback entry to be included in the output.",
                required=True,
            ),
            string(
                "model",
                "The analysis model to be used by the service. For the **Element classification** "
                "and **Compare two documents** methods, the default is `contracts`. For the "
                "**Extract tables** method, the default is `tables`. These defaults apply to the "
                "standalone methods as well as to the methods' use in batch-processing requests.",
            ),
        ),
    ),
    _op(
        "delete-feedback",
        "Delete a specified feedback entry",
        "Deletes a feedback entry with a specified `feedback_id`.",
        method=DELETE,
        path="/v1/feedback/{feedback_id}",
        flags=(
            string(
                "feedback_id",
                "A string that specifies the feedback entry to be deleted from the document.",
                required=True,
            ),
            string(
                "model",
                "The analysis model to be used by the service. For the **Element classification** "
                "and **Compare two documents** methods, the default is `contracts`. For the "
                "**Extract tables** method, the default is `tables`. These defaults apply to the "
                "standalone methods as well as to the methods' use in batch-processing requests.",
            ),
        ),
    ),
    _op(
        "create-batch",
        "Submit a batch-processing request",
        "Run Compare and Comply methods over a collection of input documents.**Important:** Batch "
        "processing requires the use of the [IBM Cloud Object Storage "
        "service](https://cloud.ibm.com/docs/services/cloud-object-storage?topic=cloud-object-storage-about#about-ibm-cloud-object-storage). "
        "The use of IBM Cloud Object Storage with Compare and Comply is discussed at [Using batch "
        "processing](https://cloud.ibm.com/docs/services/compare-comply?topic=compare-comply-batching#before-you-batch).",
        method=POST,
        path="/v1/batches",
        flags=(
            string(
                "function",
                "The Compare and Comply method to run across the submitted input documents.",
                required=True,
                location=QUERY,
            ),
            file_path(
                "input_credentials_file",
                "A JSON file containing the input Cloud Object Storage credentials. At a minimum, "
                "the credentials must enable `READ` permissions on the bucket defined by the "
                "`input_bucket_name` parameter.",
                required=True,
            ),
            string(
                "input_bucket_location",
                "The geographical location of the Cloud Object Storage input bucket as listed on "
                "the **Endpoint** tab of your Cloud Object Storage instance; for example, "
                "`us-geo`, `eu-geo`, or `ap-geo`.",
                required=True,
            ),
            string(
                "input_bucket_name",
                "The name of the Cloud Object Storage input bucket.",
                required=True,
            ),
            file_path(
                "output_credentials_file",
                "A JSON file that lists the Cloud Object Storage output credentials. At a "
                "minimum, the credentials must enable `READ` and `WRITE` permissions on the "
                "bucket defined by the `output_bucket_name` parameter.",
                required=True,
            ),
            string(
                "output_bucket_location",
                "The geographical location of the Cloud Object Storage output bucket as listed on "
                "the **Endpoint** tab of your Cloud Object Storage instance; for example, "
                "`us-geo`, `eu-geo`, or `ap-geo`.",
                required=True,
            ),
            string(
                "output_bucket_name",
                "The name of the Cloud Object Storage output bucket.",
                required=True,
            ),
            string(
                "model",
                "The analysis model to be used by the service. For the **Element classification** "
                "and **Compare two documents** methods, the default is `contracts`. For the "
                "**Extract tables** method, the default is `tables`. These defaults apply to the "
                "standalone methods as well as to the methods' use in batch-processing requests.",
                location=QUERY,
            ),
        ),
        multipart=True,
    ),
    _op(
        "list-batches",
        "List submitted batch-processing jobs",
        "Lists batch-processing jobs submitted by users.",
        method=GET,
        path="/v1/batches",
    ),
    _op(
        "get-batch",
        "Get information about a specific batch-processing job",
        "Gets information about a batch-processing job with a specified ID.",
        method=GET,
        path="/v1/batches/{batch_id}",
        flags=(
            string(
                "batch_id",
                "The ID of the batch-processing job whose information you want to retrieve.",
                required=True,
            ),
        ),
    ),
    _op(
        "update-batch",
        "Update a pending or active batch-processing job",
        "Updates a pending or active batch-processing job. You can rescan the input bucket to "
        "check for new documents or cancel a job.",
        method=PUT,
        path="/v1/batches/{batch_id}",
        flags=(
            string(
                "batch_id",
                "The ID of the batch-processing job you want to update.",
                required=True,
            ),
            string(
                "action",
                "The action you want to perform on the specified batch-processing job.",
                required=True,
                location=QUERY,
            ),
            string(
                "model",
                "The analysis model to be used by the service. For the **Element classification** "
                "and **Compare two documents** methods, the default is `contracts`. For the "
                "**Extract tables** method, the default is `tables`. These defaults apply to the "
                "standalone methods as well as to the methods' use in batch-processing requests.",
                location=QUERY,
            ),
        ),
    ),
)

SERVICE = ServiceSpec(
    tag="compare-comply-v1",
    aliases=("cc-v1",),
    credential_name="compare_comply",
    default_url="https://gateway.watsonplatform.net/compare-comply/api",
    short_help="Compare and Comply",
    long_help=(
        "Compare and Comply analyzes governing documents such as contracts to classify "
        "their elements, extract tables and compare documents."
    ),
    version_required=True,
    operations=OPERATIONS,
)
