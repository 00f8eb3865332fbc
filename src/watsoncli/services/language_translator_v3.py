"""Operations of the Language Translator service."""

from __future__ import annotations

from functools import partial

from watsoncli.models import ServiceSpec
from watsoncli.services.common import (
    BINARY,
    DELETE,
    GET,
    HEADER,
    NONE,
    POST,
    QUERY,
    RAW_BODY,
    boolean,
    file_path,
    operation,
    string,
    string_list,
)

_op = partial(operation, versioned=True)

OPERATIONS = (
    _op(
        "translate",
        "Translate",
        "Translates the input text from the source language to the target language.",
        method=POST,
        path="/v3/translate",
        flags=(
            string_list(
                "text",
                "Input text in UTF-8 encoding. Multiple entries will result in multiple "
                "translations in the response.",
                required=True,
            ),
            string(
                "model_id",
                "A globally unique string that identifies the underlying model that is used for "
                "translation.",
            ),
            string("source", "Translation source language code."),
            string("target", "Translation target language code."),
        ),
    ),
    _op(
        "list-identifiable-languages",
        "List identifiable languages",
        "Lists the languages that the service can identify. Returns the language code (for "
        "example, `en` for English or `es` for Spanish) and name of each language.",
        method=GET,
        path="/v3/identifiable_languages",
    ),
    _op(
        "identify",
        "Identify language",
        "Identifies the language of the input text.",
        method=POST,
        path="/v3/identify",
        flags=(
            string("text", "Input text in UTF-8 format.", required=True, location=RAW_BODY),
        ),
        content_type="text/plain",
    ),
    _op(
        "list-models",
        "List models",
        "Lists available translation models.",
        method=GET,
        path="/v3/models",
        flags=(
            string("source", "Specify a language code to filter results by source language."),
            string("target", "Specify a language code to filter results by target language."),
            boolean(
                "default",
                "If the default parameter isn't specified, the service will return all models "
                "(default and non-default) for each language pair. To return only default models, "
                "set this to `true`. To return only non-default models, set this to `false`. "
                "There is exactly one default model per language pair, the IBM provided base "
                "model.",
            ),
        ),
    ),
    _op(
        "create-model",
        "Create model",
        "Uploads Translation Memory eXchange (TMX) files to customize a translation model.You can "
        "either customize a model with a forced glossary or with a corpus that contains parallel "
        "sentences. To create a model that is customized with a parallel corpus <b>and</b> a "
        "forced glossary, proceed in two steps: customize with a parallel corpus first and then "
        "customize the resulting model with a glossary. Depending on the type of customization "
        "and the size of the uploaded corpora, training can range from minutes for a glossary to "
        "several hours for a large parallel corpus. You can upload a single forced glossary file "
        "and this file must be less than <b>10 MB</b>. You can upload multiple parallel corpora "
        "tmx files. The cumulative file size of all uploaded files is limited to <b>250 MB</b>. "
        "To successfully train with a parallel corpus you must have at least <b>5,000 parallel "
        "sentences</b> in your corpus.You can have a <b>maximum of 10 custom models per language "
        "pair</b>.",
        method=POST,
        path="/v3/models",
        flags=(
            string(
                "base_model_id",
                "The model ID of the model to use as the base for customization. To see available "
                "models, use the `List models` method. Usually all IBM provided models are "
                "customizable. In addition, all your models that have been created via parallel "
                "corpus customization, can be further customized with a forced glossary.",
                required=True,
                location=QUERY,
            ),
            file_path(
                "forced_glossary",
                "A TMX file with your customizations. The customizations in the file completely "
                "overwrite the domain translaton data, including high frequency or high "
                "confidence phrase translations. You can upload only one glossary with a file "
                "size less than 10 MB per call. A forced glossary should contain single words or "
                "short phrases.",
            ),
            file_path(
                "parallel_corpus",
                "A TMX file with parallel sentences for source and target language. You can "
                "upload multiple parallel_corpus files in one request. All uploaded "
                "parallel_corpus files combined, your parallel corpus must contain at least 5,000 "
                "parallel sentences to train successfully.",
            ),
            string(
                "name",
                "An optional model name that you can use to identify the model. Valid characters "
                "are letters, numbers, dashes, underscores, spaces and apostrophes. The maximum "
                "length is 32 characters.",
                location=QUERY,
            ),
        ),
        multipart=True,
    ),
    _op(
        "delete-model",
        "Delete model",
        "Deletes a custom translation model.",
        method=DELETE,
        path="/v3/models/{model_id}",
        flags=(
            string("model_id", "Model ID of the model to delete.", required=True),
        ),
    ),
    _op(
        "get-model",
        "Get model details",
        "Gets information about a translation model, including training status for custom models. "
        "Use this API call to poll the status of your customization request. A successfully "
        "completed training will have a status of `available`.",
        method=GET,
        path="/v3/models/{model_id}",
        flags=(
            string("model_id", "Model ID of the model to get.", required=True),
        ),
    ),
    _op(
        "list-documents",
        "List documents",
        "Lists documents that have been submitted for translation.",
        method=GET,
        path="/v3/documents",
    ),
    _op(
        "translate-document",
        "Translate document",
        "Submit a document for translation. You can submit the document contents in the `file` "
        "parameter, or you can reference a previously submitted document by document ID.",
        method=POST,
        path="/v3/documents",
        flags=(
            file_path(
                "file",
                "The source file to translate.[Supported file "
                "types](https://cloud.ibm.com/docs/services/language-translator?topic=language-translator-document-translator-tutorial#supported-file-formats)Maximum "
                "file size: **20 MB**.",
                required=True,
                filename_flag="filename",
                content_type_flag="file_content_type",
            ),
            string("filename", "The filename for File.", required=True),
            string("file_content_type", "The content type of File."),
            string(
                "model_id",
                "The model to use for translation. `model_id` or both `source` and `target` are "
                "required.",
            ),
            string("source", "Language code that specifies the language of the source document."),
            string("target", "Language code that specifies the target language for translation."),
            string(
                "document_id",
                "To use a previously submitted document as the source for a new translation, "
                "enter the `document_id` of the document.",
            ),
        ),
        multipart=True,
    ),
    _op(
        "get-document-status",
        "Get document status",
        "Gets the translation status of a document.",
        method=GET,
        path="/v3/documents/{document_id}",
        flags=(
            string("document_id", "The document ID of the document.", required=True),
        ),
    ),
    _op(
        "delete-document",
        "Delete document",
        "Deletes a document.",
        method=DELETE,
        path="/v3/documents/{document_id}",
        flags=(
            string("document_id", "Document ID of the document to delete.", required=True),
        ),
        result=NONE,
    ),
    _op(
        "get-translated-document",
        "Get translated document",
        "Gets the translated document associated with the given document ID.",
        method=GET,
        path="/v3/documents/{document_id}/translated_document",
        flags=(
            string(
                "document_id",
                "The document ID of the document that was submitted for translation.",
                required=True,
            ),
            string(
                "accept",
                "The type of the response: application/powerpoint, application/mspowerpoint, "
                "application/x-rtf, application/json, application/xml, application/vnd.ms-excel, "
                "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet, "
                "application/vnd.ms-powerpoint, "
                "application/vnd.openxmlformats-officedocument.presentationml.presentation, "
                "application/msword, "
                "application/vnd.openxmlformats-officedocument.wordprocessingml.document, "
                "application/vnd.oasis.opendocument.spreadsheet, "
                "application/vnd.oasis.opendocument.presentation, "
                "application/vnd.oasis.opendocument.text, application/pdf, application/rtf, "
                "text/html, text/json, text/plain, text/richtext, text/rtf, or text/xml. A "
                "character encoding can be specified by including a `charset` parameter. For "
                "example, 'text/html;charset=utf-8'.",
                location=HEADER,
            ),
        ),
        result=BINARY,
        accept="*/*",
    ),
)

SERVICE = ServiceSpec(
    tag="language-translator-v3",
    aliases=("lt-v3",),
    credential_name="language_translator",
    default_url="https://gateway.watsonplatform.net/language-translator/api",
    short_help="Language Translator",
    long_help=(
        "Language Translator translates text and documents from one language to "
        "another, with IBM provided models that you can customize."
    ),
    version_required=True,
    operations=OPERATIONS,
)
