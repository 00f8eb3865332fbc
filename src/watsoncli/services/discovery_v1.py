"""Operations of the Discovery service."""

from __future__ import annotations

from functools import partial

from watsoncli.models import ServiceSpec
from watsoncli.services.common import (
    DELETE,
    GET,
    HEADER,
    NONE,
    POST,
    PUT,
    boolean,
    date_time,
    file_path,
    int64,
    json_value,
    operation,
    string,
    string_list,
)

_op = partial(operation, versioned=True)

OPERATIONS = (
    _op(
        "create-environment",
        "Create an environment",
        "Creates a new environment for private data. An environment must be created before "
        "collections can be created. **Note**: You can create only one environment for private "
        "data per service instance. An attempt to create another environment results in an error.",
        method=POST,
        path="/v1/environments",
        flags=(
            string("name", "Name that identifies the environment.", required=True),
            string("description", "Description of the environment."),
            string(
                "size",
                "Size of the environment. In the Lite plan the default and only accepted value is "
                "`LT`, in all other plans the default is `S`.",
            ),
        ),
    ),
    _op(
        "list-environments",
        "List environments",
        "List existing environments for the service instance.",
        method=GET,
        path="/v1/environments",
        flags=(
            string("name", "Show only the environment with the given name."),
        ),
    ),
    _op(
        "get-environment",
        "Get environment info",
        method=GET,
        path="/v1/environments/{environment_id}",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
        ),
    ),
    _op(
        "update-environment",
        "Update an environment",
        "Updates an environment. The environment's **name** and **description** parameters can be "
        "changed. You must specify a **name** for the environment.",
        method=PUT,
        path="/v1/environments/{environment_id}",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("name", "Name that identifies the environment."),
            string("description", "Description of the environment."),
            string(
                "size",
                "Size that the environment should be increased to. Environment size cannot be "
                "modified when using a Lite plan. Environment size can only increased and not "
                "decreased.",
            ),
        ),
    ),
    _op(
        "delete-environment",
        "Delete environment",
        method=DELETE,
        path="/v1/environments/{environment_id}",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
        ),
    ),
    _op(
        "list-fields",
        "List fields across collections",
        "Gets a list of the unique fields (and their types) stored in the indexes of the "
        "specified collections.",
        method=GET,
        path="/v1/environments/{environment_id}/fields",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string_list(
                "collection_ids",
                "A comma-separated list of collection IDs to be queried against.",
                required=True,
            ),
        ),
    ),
    _op(
        "create-configuration",
        "Add configuration",
        "Creates a new configuration.If the input configuration contains the "
        "**configuration_id**, **created**, or **updated** properties, then they are ignored and "
        "overridden by the system, and an error is not returned so that the overridden fields do "
        "not need to be removed when copying a configuration.The configuration can contain "
        "unrecognized JSON fields. Any such fields are ignored and do not generate an error. This "
        "makes it easier to use newer configuration files with older versions of the API and the "
        "service. It also makes it possible for the tooling to add additional metadata and "
        "information to the configuration.",
        method=POST,
        path="/v1/environments/{environment_id}/configurations",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("name", "The name of the configuration.", required=True),
            string("description", "The description of the configuration, if available."),
            json_value("conversions", "Document conversion settings."),
            json_value(
                "enrichments",
                "An array of document enrichment settings for the configuration.",
            ),
            json_value(
                "normalizations",
                "Defines operations that can be used to transform the final output JSON into a "
                "normalized form. Operations are executed in the order that they appear in the "
                "array.",
            ),
            json_value("source", "Object containing source parameters for the configuration."),
        ),
    ),
    _op(
        "list-configurations",
        "List configurations",
        "Lists existing configurations for the service instance.",
        method=GET,
        path="/v1/environments/{environment_id}/configurations",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("name", "Find configurations with the given name."),
        ),
    ),
    _op(
        "get-configuration",
        "Get configuration details",
        method=GET,
        path="/v1/environments/{environment_id}/configurations/{configuration_id}",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("configuration_id", "The ID of the configuration.", required=True),
        ),
    ),
    _op(
        "update-configuration",
        "Update a configuration",
        "Replaces an existing configuration. * Completely replaces the original configuration. * "
        "The **configuration_id**, **updated**, and **created** fields are accepted in the "
        "request, but they are ignored, and an error is not generated. It is also acceptable for "
        "users to submit an updated configuration with none of the three properties. * Documents "
        "are processed with a snapshot of the configuration as it was at the time the document "
        "was submitted to be ingested. This means that already submitted documents will not see "
        "any updates made to the configuration.",
        method=PUT,
        path="/v1/environments/{environment_id}/configurations/{configuration_id}",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("configuration_id", "The ID of the configuration.", required=True),
            string("name", "The name of the configuration.", required=True),
            string("description", "The description of the configuration, if available."),
            json_value("conversions", "Document conversion settings."),
            json_value(
                "enrichments",
                "An array of document enrichment settings for the configuration.",
            ),
            json_value(
                "normalizations",
                "Defines operations that can be used to transform the final output JSON into a "
                "normalized form. Operations are executed in the order that they appear in the "
                "array.",
            ),
            json_value("source", "Object containing source parameters for the configuration."),
        ),
    ),
    _op(
        "delete-configuration",
        "Delete a configuration",
        "The deletion is performed unconditionally. A configuration deletion request succeeds "
        "even if the configuration is referenced by a collection or document ingestion. However, "
        "documents that have already been submitted for processing continue to use the deleted "
        "configuration. Documents are always processed with a snapshot of the configuration as it "
        "existed at the time the document was submitted.",
        method=DELETE,
        path="/v1/environments/{environment_id}/configurations/{configuration_id}",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("configuration_id", "The ID of the configuration.", required=True),
        ),
    ),
    _op(
        "create-collection",
        "Create a collection",
        method=POST,
        path="/v1/environments/{environment_id}/collections",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("name", "The name of the collection to be created.", required=True),
            string("description", "A description of the collection."),
            string(
                "configuration_id",
                "The ID of the configuration in which the collection is to be created.",
            ),
            string(
                "language",
                "The language of the documents stored in the collection, in the form of an ISO "
                "639-1 language code.",
            ),
        ),
    ),
    _op(
        "list-collections",
        "List collections",
        "Lists existing collections for the service instance.",
        method=GET,
        path="/v1/environments/{environment_id}/collections",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("name", "Find collections with the given name."),
        ),
    ),
    _op(
        "get-collection",
        "Get collection details",
        method=GET,
        path="/v1/environments/{environment_id}/collections/{collection_id}",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
        ),
    ),
    _op(
        "update-collection",
        "Update a collection",
        method=PUT,
        path="/v1/environments/{environment_id}/collections/{collection_id}",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string("name", "The name of the collection."),
            string("description", "A description of the collection."),
            string(
                "configuration_id",
                "The ID of the configuration in which the collection is to be updated.",
            ),
        ),
    ),
    _op(
        "delete-collection",
        "Delete a collection",
        method=DELETE,
        path="/v1/environments/{environment_id}/collections/{collection_id}",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
        ),
    ),
    _op(
        "list-collection-fields",
        "List collection fields",
        "Gets a list of the unique fields (and their types) stored in the index.",
        method=GET,
        path="/v1/environments/{environment_id}/collections/{collection_id}/fields",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
        ),
    ),
    _op(
        "list-expansions",
        "Get the expansion list",
        "Returns the current expansion list for the specified collection. If an expansion list is "
        "not specified, an object with empty expansion arrays is returned.",
        method=GET,
        path="/v1/environments/{environment_id}/collections/{collection_id}/expansions",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
        ),
    ),
    _op(
        "create-expansions",
        "Create or update expansion list",
        "Create or replace the Expansion list for this collection. The maximum number of expanded "
        "terms per collection is `500`. The current expansion list is replaced with the uploaded "
        "content.",
        method=POST,
        path="/v1/environments/{environment_id}/collections/{collection_id}/expansions",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            json_value(
                "expansions",
                "An array of query expansion definitions. Each object in the **expansions** array "
                "represents a term or set of terms that will be expanded into other terms. Each "
                "expansion object can be configured as bidirectional or unidirectional. "
                "Bidirectional means that all terms are expanded to all other terms in the "
                "object. Unidirectional means that a set list of terms can be expanded into a "
                "second list of terms. To create a bi-directional expansion specify an "
                "**expanded_terms** array. When found in a query, all items in the "
                "**expanded_terms** array are then expanded to the other items in the same array. "
                "To create a uni-directional expansion, specify both an array of **input_terms** "
                "and an array of **expanded_terms**. When items in the **input_terms** array are "
                "present in a query, they are expanded using the items listed in the "
                "**expanded_terms** array.",
                required=True,
            ),
        ),
    ),
    _op(
        "delete-expansions",
        "Delete the expansion list",
        "Remove the expansion information for this collection. The expansion list must be deleted "
        "to disable query expansion for a collection.",
        method=DELETE,
        path="/v1/environments/{environment_id}/collections/{collection_id}/expansions",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
        ),
        result=NONE,
    ),
    _op(
        "get-tokenization-dictionary-status",
        "Get tokenization dictionary status",
        "Returns the current status of the tokenization dictionary for the specified collection.",
        method=GET,
        path="/v1/environments/{environment_id}/collections/{collection_id}/word_lists/tokenization_dictionary",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
        ),
    ),
    _op(
        "create-tokenization-dictionary",
        "Create tokenization dictionary",
        "Upload a custom tokenization dictionary to use with the specified collection.",
        method=POST,
        path="/v1/environments/{environment_id}/collections/{collection_id}/word_lists/tokenization_dictionary",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            json_value(
                "tokenization_rules",
                "An array of tokenization rules. Each rule contains, the original `text` string, "
                "component `tokens`, any alternate character set `readings`, and which "
                "`part_of_speech` the text is from.",
            ),
        ),
    ),
    _op(
        "delete-tokenization-dictionary",
        "Delete tokenization dictionary",
        "Delete the tokenization dictionary from the collection.",
        method=DELETE,
        path="/v1/environments/{environment_id}/collections/{collection_id}/word_lists/tokenization_dictionary",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
        ),
        result=NONE,
    ),
    _op(
        "get-stopword-list-status",
        "Get stopword list status",
        "Returns the current status of the stopword list for the specified collection.",
        method=GET,
        path="/v1/environments/{environment_id}/collections/{collection_id}/word_lists/stopwords",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
        ),
    ),
    _op(
        "create-stopword-list",
        "Create stopword list",
        "Upload a custom stopword list to use with the specified collection.",
        method=POST,
        path="/v1/environments/{environment_id}/collections/{collection_id}/word_lists/stopwords",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            file_path(
                "stopword_file",
                "The content of the stopword list to ingest.",
                required=True,
                filename_flag="stopword_filename",
            ),
            string("stopword_filename", "The filename for StopwordFile.", required=True),
        ),
        multipart=True,
    ),
    _op(
        "delete-stopword-list",
        "Delete a custom stopword list",
        "Delete a custom stopword list from the collection. After a custom stopword list is "
        "deleted, the default list is used for the collection.",
        method=DELETE,
        path="/v1/environments/{environment_id}/collections/{collection_id}/word_lists/stopwords",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
        ),
        result=NONE,
    ),
    _op(
        "add-document",
        "Add a document",
        "Add a document to a collection with optional metadata. * The **version** query parameter "
        "is still required. * Returns immediately after the system has accepted the document for "
        "processing. * The user must provide document content, metadata, or both. If the request "
        "is missing both document content and metadata, it is rejected. * The user can set the "
        "**Content-Type** parameter on the **file** part to indicate the media type of the "
        "document. If the **Content-Type** parameter is missing or is one of the generic media "
        "types (for example, `application/octet-stream`), then the service attempts to "
        "automatically detect the document's media type. * The following field names are reserved "
        "and will be filtered out if present after normalization: `id`, `score`, `highlight`, and "
        "any field with the prefix of: `_`, `+`, or `-` * Fields with empty name values after "
        "normalization are filtered out before indexing. * Fields containing the following "
        "characters after normalization are filtered out before indexing: `#` and `,` **Note:** "
        "Documents can be added with a specific **document_id** by using the "
        "**_/v1/environments/{environment_id}/collections/{collection_id}/documents** method.",
        method=POST,
        path="/v1/environments/{environment_id}/collections/{collection_id}/documents",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            file_path(
                "file",
                "The content of the document to ingest. The maximum supported file size when "
                "adding a file to a collection is 50 megabytes, the maximum supported file size "
                "when testing a confiruration is 1 megabyte. Files larger than the supported size "
                "are rejected.",
                filename_flag="filename",
                content_type_flag="file_content_type",
            ),
            string("filename", "The filename for File."),
            string("file_content_type", "The content type of File."),
            string(
                "metadata",
                "The maximum supported metadata file size is 1 MB. Metadata parts larger than 1 "
                "MB are rejected. Example: ``` { 'Creator': 'Johnny Appleseed', 'Subject': "
                "'Apples'} ```.",
            ),
        ),
        multipart=True,
    ),
    _op(
        "get-document-status",
        "Get document details",
        "Fetch status details about a submitted document. **Note:** this operation does not "
        "return the document itself. Instead, it returns only the document's processing status "
        "and any notices (warnings or errors) that were generated when the document was ingested. "
        "Use the query API to retrieve the actual document content.",
        method=GET,
        path="/v1/environments/{environment_id}/collections/{collection_id}/documents/{document_id}",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string("document_id", "The ID of the document.", required=True),
        ),
    ),
    _op(
        "update-document",
        "Update a document",
        "Replace an existing document or add a document with a specified **document_id**. Starts "
        "ingesting a document with optional metadata.**Note:** When uploading a new document with "
        "this method it automatically replaces any document stored with the same **document_id** "
        "if it exists.",
        method=POST,
        path="/v1/environments/{environment_id}/collections/{collection_id}/documents/{document_id}",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string("document_id", "The ID of the document.", required=True),
            file_path(
                "file",
                "The content of the document to ingest. The maximum supported file size when "
                "adding a file to a collection is 50 megabytes, the maximum supported file size "
                "when testing a confiruration is 1 megabyte. Files larger than the supported size "
                "are rejected.",
                filename_flag="filename",
                content_type_flag="file_content_type",
            ),
            string("filename", "The filename for File."),
            string("file_content_type", "The content type of File."),
            string(
                "metadata",
                "The maximum supported metadata file size is 1 MB. Metadata parts larger than 1 "
                "MB are rejected. Example: ``` { 'Creator': 'Johnny Appleseed', 'Subject': "
                "'Apples'} ```.",
            ),
        ),
        multipart=True,
    ),
    _op(
        "delete-document",
        "Delete a document",
        "If the given document ID is invalid, or if the document is not found, then the a success "
        "response is returned (HTTP status code `200`) with the status set to 'deleted'.",
        method=DELETE,
        path="/v1/environments/{environment_id}/collections/{collection_id}/documents/{document_id}",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string("document_id", "The ID of the document.", required=True),
        ),
    ),
    _op(
        "query",
        "Query a collection",
        "By using this method, you can construct long queries. For details, see the [Discovery "
        "documentation](https://cloud.ibm.com/docs/services/discovery?topic=discovery-query-concepts#query-concepts).",
        method=POST,
        path="/v1/environments/{environment_id}/collections/{collection_id}/query",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string(
                "filter",
                "A cacheable query that excludes documents that don't mention the query content. "
                "Filter searches are better for metadata-type searches and for assessing the "
                "concepts in the data set.",
            ),
            string(
                "query",
                "A query search returns all documents in your data set with full enrichments and "
                "full text, but with the most relevant documents listed first. Use a query search "
                "when you want to find the most relevant search results.",
            ),
            string(
                "natural_language_query",
                "A natural language query that returns relevant documents by utilizing training "
                "data and natural language understanding.",
            ),
            boolean(
                "passages",
                "A passages query that returns the most relevant passages from the results.",
            ),
            string(
                "aggregation",
                "An aggregation search that returns an exact answer by combining query search "
                "with filters. Useful for applications to build lists, tables, and time series. "
                "For a full list of possible aggregations, see the Query reference.",
            ),
            int64("count", "Number of results to return."),
            string(
                "return",
                "A comma-separated list of the portion of the document hierarchy to return.",
            ),
            int64(
                "offset",
                "The number of query results to skip at the beginning. For example, if the total "
                "number of results that are returned is 10 and the offset is 8, it returns the "
                "last two results.",
            ),
            string(
                "sort",
                "A comma-separated list of fields in the document to sort on. You can optionally "
                "specify a sort direction by prefixing the field with `-` for descending or `+` "
                "for ascending. Ascending is the default sort direction if no prefix is "
                "specified. This parameter cannot be used in the same query as the **bias** "
                "parameter.",
            ),
            boolean(
                "highlight",
                "When true, a highlight field is returned for each result which contains the "
                "fields which match the query with `<em></em>` tags around the matching query "
                "terms.",
            ),
            string(
                "passages_fields",
                "A comma-separated list of fields that passages are drawn from. If this parameter "
                "not specified, then all top-level fields are included.",
            ),
            int64(
                "passages_count",
                "The maximum number of passages to return. The search returns fewer passages if "
                "the requested total is not found. The default is `10`. The maximum is `100`.",
            ),
            int64(
                "passages_characters",
                "The approximate number of characters that any one passage will have.",
            ),
            boolean(
                "deduplicate",
                "When `true`, and used with a Watson Discovery News collection, duplicate results "
                "(based on the contents of the **title** field) are removed. Duplicate comparison "
                "is limited to the current query only; **offset** is not considered. This "
                "parameter is currently Beta functionality.",
            ),
            string(
                "deduplicate_field",
                "When specified, duplicate results based on the field specified are removed from "
                "the returned results. Duplicate comparison is limited to the current query only, "
                "**offset** is not considered. This parameter is currently Beta functionality.",
            ),
            boolean(
                "similar",
                "When `true`, results are returned based on their similarity to the document IDs "
                "specified in the **similar.document_ids** parameter.",
            ),
            string(
                "similar_document_ids",
                "A comma-separated list of document IDs to find similar documents.**Tip:** "
                "Include the **natural_language_query** parameter to expand the scope of the "
                "document similarity search with the natural language query. Other query "
                "parameters, such as **filter** and **query**, are subsequently applied and "
                "reduce the scope.",
            ),
            string(
                "similar_fields",
                "A comma-separated list of field names that are used as a basis for comparison to "
                "identify similar documents. If not specified, the entire document is used for "
                "comparison.",
            ),
            string(
                "bias",
                "Field which the returned results will be biased against. The specified field "
                "must be either a **date** or **number** format. When a **date** type field is "
                "specified returned results are biased towards field values closer to the current "
                "date. When a **number** type field is specified, returned results are biased "
                "towards higher field values. This parameter cannot be used in the same query as "
                "the **sort** parameter.",
            ),
            boolean(
                "spelling_suggestions",
                "When `true` and the **natural_language_query** parameter is used, the "
                "**natural_languge_query** parameter is spell checked. The most likely correction "
                "is retunred in the **suggested_query** field of the response (if one exists). "
                "**Important:** this parameter is only valid when using the Cloud Pak version of "
                "Discovery.",
            ),
            boolean(
                "x_watson_logging_opt_out",
                "If `true`, queries are not stored in the Discovery **Logs** endpoint.",
                location=HEADER,
            ),
        ),
    ),
    _op(
        "query-notices",
        "Query system notices",
        "Queries for notices (errors or warnings) that might have been generated by the system. "
        "Notices are generated when ingesting documents and performing relevance training. See "
        "the [Discovery "
        "documentation](https://cloud.ibm.com/docs/services/discovery?topic=discovery-query-concepts#query-concepts) "
        "for more details on the query language.",
        method=GET,
        path="/v1/environments/{environment_id}/collections/{collection_id}/notices",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string(
                "filter",
                "A cacheable query that excludes documents that don't mention the query content. "
                "Filter searches are better for metadata-type searches and for assessing the "
                "concepts in the data set.",
            ),
            string(
                "query",
                "A query search returns all documents in your data set with full enrichments and "
                "full text, but with the most relevant documents listed first.",
            ),
            string(
                "natural_language_query",
                "A natural language query that returns relevant documents by utilizing training "
                "data and natural language understanding.",
            ),
            boolean(
                "passages",
                "A passages query that returns the most relevant passages from the results.",
            ),
            string(
                "aggregation",
                "An aggregation search that returns an exact answer by combining query search "
                "with filters. Useful for applications to build lists, tables, and time series. "
                "For a full list of possible aggregations, see the Query reference.",
            ),
            int64(
                "count",
                "Number of results to return. The maximum for the **count** and **offset** values "
                "together in any one query is **10000**.",
            ),
            string_list(
                "return",
                "A comma-separated list of the portion of the document hierarchy to return.",
            ),
            int64(
                "offset",
                "The number of query results to skip at the beginning. For example, if the total "
                "number of results that are returned is 10 and the offset is 8, it returns the "
                "last two results. The maximum for the **count** and **offset** values together "
                "in any one query is **10000**.",
            ),
            string_list(
                "sort",
                "A comma-separated list of fields in the document to sort on. You can optionally "
                "specify a sort direction by prefixing the field with `-` for descending or `+` "
                "for ascending. Ascending is the default sort direction if no prefix is specified.",
            ),
            boolean(
                "highlight",
                "When true, a highlight field is returned for each result which contains the "
                "fields which match the query with `<em></em>` tags around the matching query "
                "terms.",
            ),
            string_list(
                "passages_fields",
                "A comma-separated list of fields that passages are drawn from. If this parameter "
                "not specified, then all top-level fields are included.",
            ),
            int64(
                "passages_count",
                "The maximum number of passages to return. The search returns fewer passages if "
                "the requested total is not found.",
            ),
            int64(
                "passages_characters",
                "The approximate number of characters that any one passage will have.",
            ),
            string(
                "deduplicate_field",
                "When specified, duplicate results based on the field specified are removed from "
                "the returned results. Duplicate comparison is limited to the current query only, "
                "**offset** is not considered. This parameter is currently Beta functionality.",
            ),
            boolean(
                "similar",
                "When `true`, results are returned based on their similarity to the document IDs "
                "specified in the **similar.document_ids** parameter.",
            ),
            string_list(
                "similar_document_ids",
                "A comma-separated list of document IDs to find similar documents.**Tip:** "
                "Include the **natural_language_query** parameter to expand the scope of the "
                "document similarity search with the natural language query. Other query "
                "parameters, such as **filter** and **query**, are subsequently applied and "
                "reduce the scope.",
            ),
            string_list(
                "similar_fields",
                "A comma-separated list of field names that are used as a basis for comparison to "
                "identify similar documents. If not specified, the entire document is used for "
                "comparison.",
            ),
        ),
    ),
    _op(
        "federated-query",
        "Query multiple collections",
        "By using this method, you can construct long queries that search multiple collection. "
        "For details, see the [Discovery "
        "documentation](https://cloud.ibm.com/docs/services/discovery?topic=discovery-query-concepts#query-concepts).",
        method=POST,
        path="/v1/environments/{environment_id}/query",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string(
                "filter",
                "A cacheable query that excludes documents that don't mention the query content. "
                "Filter searches are better for metadata-type searches and for assessing the "
                "concepts in the data set.",
            ),
            string(
                "query",
                "A query search returns all documents in your data set with full enrichments and "
                "full text, but with the most relevant documents listed first. Use a query search "
                "when you want to find the most relevant search results.",
            ),
            string(
                "natural_language_query",
                "A natural language query that returns relevant documents by utilizing training "
                "data and natural language understanding.",
            ),
            boolean(
                "passages",
                "A passages query that returns the most relevant passages from the results.",
            ),
            string(
                "aggregation",
                "An aggregation search that returns an exact answer by combining query search "
                "with filters. Useful for applications to build lists, tables, and time series. "
                "For a full list of possible aggregations, see the Query reference.",
            ),
            int64("count", "Number of results to return."),
            string(
                "return",
                "A comma-separated list of the portion of the document hierarchy to return.",
            ),
            int64(
                "offset",
                "The number of query results to skip at the beginning. For example, if the total "
                "number of results that are returned is 10 and the offset is 8, it returns the "
                "last two results.",
            ),
            string(
                "sort",
                "A comma-separated list of fields in the document to sort on. You can optionally "
                "specify a sort direction by prefixing the field with `-` for descending or `+` "
                "for ascending. Ascending is the default sort direction if no prefix is "
                "specified. This parameter cannot be used in the same query as the **bias** "
                "parameter.",
            ),
            boolean(
                "highlight",
                "When true, a highlight field is returned for each result which contains the "
                "fields which match the query with `<em></em>` tags around the matching query "
                "terms.",
            ),
            string(
                "passages_fields",
                "A comma-separated list of fields that passages are drawn from. If this parameter "
                "not specified, then all top-level fields are included.",
            ),
            int64(
                "passages_count",
                "The maximum number of passages to return. The search returns fewer passages if "
                "the requested total is not found. The default is `10`. The maximum is `100`.",
            ),
            int64(
                "passages_characters",
                "The approximate number of characters that any one passage will have.",
            ),
            boolean(
                "deduplicate",
                "When `true`, and used with a Watson Discovery News collection, duplicate results "
                "(based on the contents of the **title** field) are removed. Duplicate comparison "
                "is limited to the current query only; **offset** is not considered. This "
                "parameter is currently Beta functionality.",
            ),
            string(
                "deduplicate_field",
                "When specified, duplicate results based on the field specified are removed from "
                "the returned results. Duplicate comparison is limited to the current query only, "
                "**offset** is not considered. This parameter is currently Beta functionality.",
            ),
            boolean(
                "similar",
                "When `true`, results are returned based on their similarity to the document IDs "
                "specified in the **similar.document_ids** parameter.",
            ),
            string(
                "similar_document_ids",
                "A comma-separated list of document IDs to find similar documents.**Tip:** "
                "Include the **natural_language_query** parameter to expand the scope of the "
                "document similarity search with the natural language query. Other query "
                "parameters, such as **filter** and **query**, are subsequently applied and "
                "reduce the scope.",
            ),
            string(
                "similar_fields",
                "A comma-separated list of field names that are used as a basis for comparison to "
                "identify similar documents. If not specified, the entire document is used for "
                "comparison.",
            ),
            string(
                "bias",
                "Field which the returned results will be biased against. The specified field "
                "must be either a **date** or **number** format. When a **date** type field is "
                "specified returned results are biased towards field values closer to the current "
                "date. When a **number** type field is specified, returned results are biased "
                "towards higher field values. This parameter cannot be used in the same query as "
                "the **sort** parameter.",
            ),
            string(
                "collection_ids",
                "A comma-separated list of collection IDs to be queried against.",
            ),
            boolean(
                "x_watson_logging_opt_out",
                "If `true`, queries are not stored in the Discovery **Logs** endpoint.",
                location=HEADER,
            ),
        ),
    ),
    _op(
        "federated-query-notices",
        "Query multiple collection system notices",
        "Queries for notices (errors or warnings) that might have been generated by the system. "
        "Notices are generated when ingesting documents and performing relevance training. See "
        "the [Discovery "
        "documentation](https://cloud.ibm.com/docs/services/discovery?topic=discovery-query-concepts#query-concepts) "
        "for more details on the query language.",
        method=GET,
        path="/v1/environments/{environment_id}/notices",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string_list(
                "collection_ids",
                "A comma-separated list of collection IDs to be queried against.",
                required=True,
            ),
            string(
                "filter",
                "A cacheable query that excludes documents that don't mention the query content. "
                "Filter searches are better for metadata-type searches and for assessing the "
                "concepts in the data set.",
            ),
            string(
                "query",
                "A query search returns all documents in your data set with full enrichments and "
                "full text, but with the most relevant documents listed first.",
            ),
            string(
                "natural_language_query",
                "A natural language query that returns relevant documents by utilizing training "
                "data and natural language understanding.",
            ),
            string(
                "aggregation",
                "An aggregation search that returns an exact answer by combining query search "
                "with filters. Useful for applications to build lists, tables, and time series. "
                "For a full list of possible aggregations, see the Query reference.",
            ),
            int64(
                "count",
                "Number of results to return. The maximum for the **count** and **offset** values "
                "together in any one query is **10000**.",
            ),
            string_list(
                "return",
                "A comma-separated list of the portion of the document hierarchy to return.",
            ),
            int64(
                "offset",
                "The number of query results to skip at the beginning. For example, if the total "
                "number of results that are returned is 10 and the offset is 8, it returns the "
                "last two results. The maximum for the **count** and **offset** values together "
                "in any one query is **10000**.",
            ),
            string_list(
                "sort",
                "A comma-separated list of fields in the document to sort on. You can optionally "
                "specify a sort direction by prefixing the field with `-` for descending or `+` "
                "for ascending. Ascending is the default sort direction if no prefix is specified.",
            ),
            boolean(
                "highlight",
                "When true, a highlight field is returned for each result which contains the "
                "fields which match the query with `<em></em>` tags around the matching query "
                "terms.",
            ),
            string(
                "deduplicate_field",
                "When specified, duplicate results based on the field specified are removed from "
                "the returned results. Duplicate comparison is limited to the current query only, "
                "**offset** is not considered. This parameter is currently Beta functionality.",
            ),
            boolean(
                "similar",
                "When `true`, results are returned based on their similarity to the document IDs "
                "specified in the **similar.document_ids** parameter.",
            ),
            string_list(
                "similar_document_ids",
                "A comma-separated list of document IDs to find similar documents.**Tip:** "
                "Include the **natural_language_query** parameter to expand the scope of the "
                "document similarity search with the natural language query. Other query "
                "parameters, such as **filter** and **query**, are subsequently applied and "
                "reduce the scope.",
            ),
            string_list(
                "similar_fields",
                "A comma-separated list of field names that are used as a basis for comparison to "
                "identify similar documents. If not specified, the entire document is used for "
                "comparison.",
            ),
        ),
    ),
    _op(
        "get-autocompletion",
        "Get Autocomplete Suggestions",
        "Returns completion query suggestions for the specified prefix. /n/n **Important:** this "
        "method is only valid when using the Cloud Pak version of Discovery.",
        method=GET,
        path="/v1/environments/{environment_id}/collections/{collection_id}/autocompletion",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string(
                "field",
                "The field in the result documents that autocompletion suggestions are identified "
                "from.",
            ),
            string(
                "prefix",
                "The prefix to use for autocompletion. For example, the prefix `Ho` could "
                "autocomplete to `Hot`, `Housing`, or `How do I upgrade`. Possible completions "
                "are.",
            ),
            int64("count", "The number of autocompletion suggestions to return."),
        ),
    ),
    _op(
        "list-training-data",
        "List training data",
        "Lists the training data for the specified collection.",
        method=GET,
        path="/v1/environments/{environment_id}/collections/{collection_id}/training_data",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
        ),
    ),
    _op(
        "add-training-data",
        "Add query to training data",
        "Adds a query to the training data for this collection. The query can contain a filter "
        "and natural language query.",
        method=POST,
        path="/v1/environments/{environment_id}/collections/{collection_id}/training_data",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string("natural_language_query", "The natural text query for the new training query."),
            string(
                "filter",
                "The filter used on the collection before the **natural_language_query** is "
                "applied.",
            ),
            json_value("examples", "Array of training examples."),
        ),
    ),
    _op(
        "delete-all-training-data",
        "Delete all training data",
        "Deletes all training data from a collection.",
        method=DELETE,
        path="/v1/environments/{environment_id}/collections/{collection_id}/training_data",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
        ),
        result=NONE,
    ),
    _op(
        "get-training-data",
        "Get details about a query",
        "Gets details for a specific training data query, including the query string and all "
        "examples.",
        method=GET,
        path="/v1/environments/{environment_id}/collections/{collection_id}/training_data/{query_id}",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string("query_id", "The ID of the query used for training.", required=True),
        ),
    ),
    _op(
        "delete-training-data",
        "Delete a training data query",
        "Removes the training data query and all associated examples from the training data set.",
        method=DELETE,
        path="/v1/environments/{environment_id}/collections/{collection_id}/training_data/{query_id}",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string("query_id", "The ID of the query used for training.", required=True),
        ),
        result=NONE,
    ),
    _op(
        "list-training-examples",
        "List examples for a training data query",
        "List all examples for this training data query.",
        method=GET,
        path="/v1/environments/{environment_id}/collections/{collection_id}/training_data/{query_id}/examples",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string("query_id", "The ID of the query used for training.", required=True),
        ),
    ),
    _op(
        "create-training-example",
        "Add example to training data query",
        "Adds a example to this training data query.",
        method=POST,
        path="/v1/environments/{environment_id}/collections/{collection_id}/training_data/{query_id}/examples",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string("query_id", "The ID of the query used for training.", required=True),
            string("document_id", "The document ID associated with this training example."),
            string(
                "cross_reference",
                "The cross reference associated with this training example.",
            ),
            int64("relevance", "The relevance of the training example."),
        ),
    ),
    _op(
        "delete-training-example",
        "Delete example for training data query",
        "Deletes the example document with the given ID from the training data query.",
        method=DELETE,
        path="/v1/environments/{environment_id}/collections/{collection_id}/training_data/{query_id}/examples/{example_id}",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string("query_id", "The ID of the query used for training.", required=True),
            string("example_id", "The ID of the document as it is indexed.", required=True),
        ),
        result=NONE,
    ),
    _op(
        "update-training-example",
        "Change label or cross reference for example",
        "Changes the label or cross reference query for this training data example.",
        method=PUT,
        path="/v1/environments/{environment_id}/collections/{collection_id}/training_data/{query_id}/examples/{example_id}",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string("query_id", "The ID of the query used for training.", required=True),
            string("example_id", "The ID of the document as it is indexed.", required=True),
            string("cross_reference", "The example to add."),
            int64("relevance", "The relevance value for this example."),
        ),
    ),
    _op(
        "get-training-example",
        "Get details for training data example",
        "Gets the details for this training example.",
        method=GET,
        path="/v1/environments/{environment_id}/collections/{collection_id}/training_data/{query_id}/examples/{example_id}",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("collection_id", "The ID of the collection.", required=True),
            string("query_id", "The ID of the query used for training.", required=True),
            string("example_id", "The ID of the document as it is indexed.", required=True),
        ),
    ),
    _op(
        "delete-user-data",
        "Delete labeled data",
        "Deletes all data associated with a specified customer ID. The method has no effect if no "
        "data is associated with the customer ID. You associate a customer ID with data by "
        "passing the **X-Watson-Metadata** header with a request that passes data. For more "
        "information about personal data and customer IDs, see [Information "
        "security](https://cloud.ibm.com/docs/services/discovery?topic=discovery-information-security#information-security).",
        method=DELETE,
        path="/v1/user_data",
        flags=(
            string(
                "customer_id",
                "The customer ID for which all data is to be deleted.",
                required=True,
            ),
        ),
        result=NONE,
    ),
    _op(
        "create-event",
        "Create event",
        "The **Events** API can be used to create log entries that are associated with specific "
        "queries. For example, you can record which documents in the results set were 'clicked' "
        "by a user and when that click occured.",
        method=POST,
        path="/v1/events",
        flags=(
            string("type", "The event type to be created.", required=True),
            json_value("data", "Query event data object.", required=True),
        ),
    ),
    _op(
        "query-log",
        "Search the query and event log",
        "Searches the query and event log to find query sessions that match the specified "
        "criteria. Searching the **logs** endpoint uses the standard Discovery query syntax for "
        "the parameters that are supported.",
        method=GET,
        path="/v1/logs",
        flags=(
            string(
                "filter",
                "A cacheable query that excludes documents that don't mention the query content. "
                "Filter searches are better for metadata-type searches and for assessing the "
                "concepts in the data set.",
            ),
            string(
                "query",
                "A query search returns all documents in your data set with full enrichments and "
                "full text, but with the most relevant documents listed first.",
            ),
            int64(
                "count",
                "Number of results to return. The maximum for the **count** and **offset** values "
                "together in any one query is **10000**.",
            ),
            int64(
                "offset",
                "The number of query results to skip at the beginning. For example, if the total "
                "number of results that are returned is 10 and the offset is 8, it returns the "
                "last two results. The maximum for the **count** and **offset** values together "
                "in any one query is **10000**.",
            ),
            string_list(
                "sort",
                "A comma-separated list of fields in the document to sort on. You can optionally "
                "specify a sort direction by prefixing the field with `-` for descending or `+` "
                "for ascending. Ascending is the default sort direction if no prefix is specified.",
            ),
        ),
    ),
    _op(
        "get-metrics-query",
        "Number of queries over time",
        "Total number of queries using the **natural_language_query** parameter over a specific "
        "time window.",
        method=GET,
        path="/v1/metrics/number_of_queries",
        flags=(
            date_time(
                "start_time",
                "Metric is computed from data recorded after this timestamp; must be in "
                "`YYYY-MM-DDThh:mm:ssZ` format.",
            ),
            date_time(
                "end_time",
                "Metric is computed from data recorded before this timestamp; must be in "
                "`YYYY-MM-DDThh:mm:ssZ` format.",
            ),
            string("result_type", "The type of result to consider when calculating the metric."),
        ),
    ),
    _op(
        "get-metrics-query-event",
        "Number of queries with an event over time",
        "Total number of queries using the **natural_language_query** parameter that have a "
        "corresponding 'click' event over a specified time window. This metric requires having "
        "integrated event tracking in your application using the **Events** API.",
        method=GET,
        path="/v1/metrics/number_of_queries_with_event",
        flags=(
            date_time(
                "start_time",
                "Metric is computed from data recorded after this timestamp; must be in "
                "`YYYY-MM-DDThh:mm:ssZ` format.",
            ),
            date_time(
                "end_time",
                "Metric is computed from data recorded before this timestamp; must be in "
                "`YYYY-MM-DDThh:mm:ssZ` format.",
            ),
            string("result_type", "The type of result to consider when calculating the metric."),
        ),
    ),
    _op(
        "get-metrics-query-no-results",
        "Number of queries with no search results over time",
        "Total number of queries using the **natural_language_query** parameter that have no "
        "results returned over a specified time window.",
        method=GET,
        path="/v1/metrics/number_of_queries_with_no_search_results",
        flags=(
            date_time(
                "start_time",
                "Metric is computed from data recorded after this timestamp; must be in "
                "`YYYY-MM-DDThh:mm:ssZ` format.",
            ),
            date_time(
                "end_time",
                "Metric is computed from data recorded before this timestamp; must be in "
                "`YYYY-MM-DDThh:mm:ssZ` format.",
            ),
            string("result_type", "The type of result to consider when calculating the metric."),
        ),
    ),
    _op(
        "get-metrics-event-rate",
        "Percentage of queries with an associated event",
        "The percentage of queries using the **natural_language_query** parameter that have a "
        "corresponding 'click' event over a specified time window. This metric requires having "
        "integrated event tracking in your application using the **Events** API.",
        method=GET,
        path="/v1/metrics/event_rate",
        flags=(
            date_time(
                "start_time",
                "Metric is computed from data recorded after this timestamp; must be in "
                "`YYYY-MM-DDThh:mm:ssZ` format.",
            ),
            date_time(
                "end_time",
                "Metric is computed from data recorded before this timestamp; must be in "
                "`YYYY-MM-DDThh:mm:ssZ` format.",
            ),
            string("result_type", "The type of result to consider when calculating the metric."),
        ),
    ),
    _op(
        "get-metrics-query-token-event",
        "Most frequent query tokens with an event",
        "The most frequent query tokens parsed from the **natural_language_query** parameter and "
        "their corresponding 'click' event rate within the recording period (queries and events "
        "are stored for 30 days). A query token is an individual word or unigram within the query "
        "string.",
        method=GET,
        path="/v1/metrics/top_query_tokens_with_event_rate",
        flags=(
            int64(
                "count",
                "Number of results to return. The maximum for the **count** and **offset** values "
                "together in any one query is **10000**.",
            ),
        ),
    ),
    _op(
        "list-credentials",
        "List credentials",
        "List all the source credentials that have been created for this service instance. "
        "**Note:** All credentials are sent over an encrypted connection and encrypted at rest.",
        method=GET,
        path="/v1/environments/{environment_id}/credentials",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
        ),
    ),
    _op(
        "create-credentials",
        "Create credentials",
        "Creates a set of credentials to connect to a remote source. Created credentials are used "
        "in a configuration to associate a collection with the remote source.**Note:** All "
        "credentials are sent over an encrypted connection and encrypted at rest.",
        method=POST,
        path="/v1/environments/{environment_id}/credentials",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string(
                "source_type",
                "The source that this credentials object connects to.- `box` indicates the "
                "credentials are used to connect an instance of Enterprise Box.- `salesforce` "
                "indicates the credentials are used to connect to Salesforce.- `sharepoint` "
                "indicates the credentials are used to connect to Microsoft SharePoint Online.- "
                "`web_crawl` indicates the credentials are used to perform a web crawl.= "
                "`cloud_object_storage` indicates the credentials are used to connect to an IBM "
                "Cloud Object Store.",
            ),
            json_value(
                "credential_details",
                "Object containing details of the stored credentials. Obtain credentials for your "
                "source from the administrator of the source.",
            ),
            string(
                "status",
                "The current status of this set of credentials. `connected` indicates that the "
                "credentials are available to use with the source configuration of a collection. "
                "`invalid` refers to the credentials (for example, the password provided has "
                "expired) and must be corrected before they can be used with a collection.",
            ),
        ),
    ),
    _op(
        "get-credentials",
        "View Credentials",
        "Returns details about the specified credentials. **Note:** Secure credential information "
        "such as a password or SSH key is never returned and must be obtained from the source "
        "system.",
        method=GET,
        path="/v1/environments/{environment_id}/credentials/{credential_id}",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string(
                "credential_id",
                "The unique identifier for a set of source credentials.",
                required=True,
            ),
        ),
    ),
    _op(
        "update-credentials",
        "Update credentials",
        "Updates an existing set of source credentials.**Note:** All credentials are sent over an "
        "encrypted connection and encrypted at rest.",
        method=PUT,
        path="/v1/environments/{environment_id}/credentials/{credential_id}",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string(
                "credential_id",
                "The unique identifier for a set of source credentials.",
                required=True,
            ),
            string(
                "source_type",
                "The source that this credentials object connects to.- `box` indicates the "
                "credentials are used to connect an instance of Enterprise Box.- `salesforce` "
                "indicates the credentials are used to connect to Salesforce.- `sharepoint` "
                "indicates the credentials are used to connect to Microsoft SharePoint Online.- "
                "`web_crawl` indicates the credentials are used to perform a web crawl.= "
                "`cloud_object_storage` indicates the credentials are used to connect to an IBM "
                "Cloud Object Store.",
            ),
            json_value(
                "credential_details",
                "Object containing details of the stored credentials. Obtain credentials for your "
                "source from the administrator of the source.",
            ),
            string(
                "status",
                "The current status of this set of credentials. `connected` indicates that the "
                "credentials are available to use with the source configuration of a collection. "
                "`invalid` refers to the credentials (for example, the password provided has "
                "expired) and must be corrected before they can be used with a collection.",
            ),
        ),
    ),
    _op(
        "delete-credentials",
        "Delete credentials",
        "Deletes a set of stored credentials from your Discovery instance.",
        method=DELETE,
        path="/v1/environments/{environment_id}/credentials/{credential_id}",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string(
                "credential_id",
                "The unique identifier for a set of source credentials.",
                required=True,
            ),
        ),
    ),
    _op(
        "list-gateways",
        "List Gateways",
        "List the currently configured gateways.",
        method=GET,
        path="/v1/environments/{environment_id}/gateways",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
        ),
    ),
    _op(
        "create-gateway",
        "Create Gateway",
        "Create a gateway configuration to use with a remotely installed gateway.",
        method=POST,
        path="/v1/environments/{environment_id}/gateways",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("name", "User-defined name."),
        ),
    ),
    _op(
        "get-gateway",
        "List Gateway Details",
        "List information about the specified gateway.",
        method=GET,
        path="/v1/environments/{environment_id}/gateways/{gateway_id}",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("gateway_id", "The requested gateway ID.", required=True),
        ),
    ),
    _op(
        "delete-gateway",
        "Delete Gateway",
        "Delete the specified gateway configuration.",
        method=DELETE,
        path="/v1/environments/{environment_id}/gateways/{gateway_id}",
        flags=(
            string("environment_id", "The ID of the environment.", required=True),
            string("gateway_id", "The requested gateway ID.", required=True),
        ),
    ),
)

SERVICE = ServiceSpec(
    tag="discovery-v1",
    credential_name="discovery",
    default_url="https://gateway.watsonplatform.net/discovery/api",
    short_help="Discovery",
    long_help=(
        "Discovery is a cognitive search and content analytics engine. Ingest "
        "documents into collections, enrich them, and query them with a simplified "
        "query language."
    ),
    version_required=True,
    operations=OPERATIONS,
)
