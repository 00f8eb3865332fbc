"""Operations of the Speech to Text service.

Only the HTTP interface is described here; the WebSocket recognition
interface has no command.
"""

from __future__ import annotations

from watsoncli.models import FlagSpec, ServiceSpec
from watsoncli.services.common import (
    DELETE,
    GET,
    HEADER,
    NONE,
    POST,
    PUT,
    QUERY,
    RAW_BODY,
    boolean,
    file_path,
    float32,
    float64,
    int64,
    json_value,
    operation,
    string,
    string_list,
)

_op = operation

_DOCS = "https://cloud.ibm.com/docs/services/speech-to-text?topic=speech-to-text-"

_LANGUAGE_MODEL_ID_HELP = (
    "The customization ID (GUID) of the custom language model that is to be used for the "
    "request. You must make the request with credentials for the instance of the service that "
    "owns the custom model."
)

_ACOUSTIC_MODEL_ID_HELP = (
    "The customization ID (GUID) of the custom acoustic model that is to be used for the "
    "request. You must make the request with credentials for the instance of the service that "
    "owns the custom model."
)


def _language_model_id() -> FlagSpec:
    return string("customization_id", _LANGUAGE_MODEL_ID_HELP, required=True)


def _acoustic_model_id() -> FlagSpec:
    return string("customization_id", _ACOUSTIC_MODEL_ID_HELP, required=True)


def _allow_overwrite(resource: str) -> FlagSpec:
    return boolean(
        "allow_overwrite",
        f"If `true`, the specified {resource} overwrites an existing {resource} with the same "
        f"name. If `false`, the request fails if a {resource} with the same name already "
        "exists.",
        default_value=False,
        location=QUERY,
    )


def _recognition_flags() -> tuple[FlagSpec, ...]:
    """Flags shared by synchronous and asynchronous recognition."""
    return (
        string(
            "content_type",
            "The format (MIME type) of the audio, for example `audio/flac` or "
            "`audio/l16;rate=16000`. Omit it to have the service detect the format.",
            location=HEADER,
        ),
        string(
            "model",
            "The identifier of the model that is to be used for the recognition request.",
            default_value="en-US_BroadbandModel",
            location=QUERY,
        ),
        string(
            "language_customization_id",
            "The customization ID (GUID) of a custom language model that is to be used with the "
            "recognition request. The base model of the custom language model must match the "
            "model specified with the `model` parameter.",
            location=QUERY,
        ),
        string(
            "acoustic_customization_id",
            "The customization ID (GUID) of a custom acoustic model that is to be used with the "
            "recognition request.",
            location=QUERY,
        ),
        string(
            "base_model_version",
            "The version of the specified base model that is to be used with the recognition "
            "request.",
            location=QUERY,
        ),
        float64(
            "customization_weight",
            "How much weight to give to words from the custom language model compared to those "
            "from the base model, between 0.0 and 1.0.",
            default_value=0.3,
            location=QUERY,
        ),
        int64(
            "inactivity_timeout",
            "The time in seconds after which, if only silence is detected in streaming audio, "
            "the connection is closed with a 400 error. Use `-1` for infinity.",
            default_value=30,
            location=QUERY,
        ),
        string_list(
            "keywords",
            "An array of keyword strings to spot in the audio. If you specify any keywords, you "
            "must also specify a keywords threshold.",
            location=QUERY,
        ),
        float32(
            "keywords_threshold",
            "A confidence value that is the lower bound for spotting a keyword, between 0.0 and "
            "1.0.",
            location=QUERY,
        ),
        int64(
            "max_alternatives",
            "The maximum number of alternative transcripts that the service is to return.",
            default_value=1,
            location=QUERY,
        ),
        float32(
            "word_alternatives_threshold",
            "A confidence value that is the lower bound for identifying a hypothesis as a "
            "possible word alternative, between 0.0 and 1.0.",
            location=QUERY,
        ),
        boolean(
            "word_confidence",
            "If `true`, the service returns a confidence measure for each word.",
            default_value=False,
            location=QUERY,
        ),
        boolean(
            "timestamps",
            "If `true`, the service returns time alignment for each word.",
            default_value=False,
            location=QUERY,
        ),
        boolean(
            "profanity_filter",
            "If `true`, the service replaces profanity with a series of asterisks. Applies to "
            "US English transcription only.",
            default_value=True,
            location=QUERY,
        ),
        boolean(
            "smart_formatting",
            "If `true`, the service converts dates, times, numbers, currency values and "
            "internet addresses into more readable conventional representations.",
            default_value=False,
            location=QUERY,
        ),
        boolean(
            "speaker_labels",
            "If `true`, the response includes labels that identify which words were spoken by "
            "which participants in a multi-person exchange.",
            default_value=False,
            location=QUERY,
        ),
        string(
            "customization_id",
            "**Deprecated.** Use the `language_customization_id` parameter instead.",
            location=QUERY,
        ),
        string(
            "grammar_name",
            "The name of a grammar that is to be used with the recognition request. You must "
            "also pass `language_customization_id` for the custom model that owns the grammar.",
            location=QUERY,
        ),
        boolean(
            "redaction",
            "If `true`, the service masks numeric data that has three or more consecutive "
            "digits in final transcripts.",
            default_value=False,
            location=QUERY,
        ),
        boolean(
            "audio_metrics",
            "If `true`, requests detailed information about the signal characteristics of the "
            "input audio.",
            default_value=False,
            location=QUERY,
        ),
    )


OPERATIONS = (
    _op(
        "list-models",
        "List models",
        "Lists all language models that are available for use with the service. The information "
        "includes the name of the model and its minimum sampling rate in Hertz, among other "
        f"things. **See also:** [Languages and models]({_DOCS}models#models).",
        method=GET,
        path="/v1/models",
    ),
    _op(
        "get-model",
        "Get a model",
        "Gets information for a single specified language model that is available for use with "
        "the service. The information includes the name of the model and its minimum sampling "
        "rate in Hertz, among other things.",
        method=GET,
        path="/v1/models/{model_id}",
        flags=(
            string(
                "model_id",
                "The identifier of the model in the form of its name from the output of the "
                "**List models** method.",
                required=True,
            ),
        ),
    ),
    _op(
        "recognize",
        "Recognize audio",
        "Sends audio and returns transcription results for a recognition request. You can pass "
        "a maximum of 100 MB and a minimum of 100 bytes of audio with a request. The method "
        "returns only final results. For formats such as `audio/l16`, `audio/alaw`, "
        "`audio/mulaw` and `audio/basic` the `--content_type` flag is required; for all other "
        "formats the service detects the format of the audio. **See also:** [Making a basic "
        f"HTTP request]({_DOCS}http#HTTP-basic).",
        method=POST,
        path="/v1/recognize",
        flags=(
            file_path("audio", "The audio file to transcribe.", required=True, location=RAW_BODY),
            *_recognition_flags(),
        ),
    ),
    _op(
        "register-callback",
        "Register a callback",
        "Registers a callback URL with the service for use with subsequent asynchronous "
        "recognition requests. The service white-lists the URL by sending a `GET` request with a "
        "`challenge_string` parameter that the URL must echo. **See also:** [Registering a "
        f"callback URL]({_DOCS}async#register).",
        method=POST,
        path="/v1/register_callback",
        flags=(
            string(
                "callback_url",
                "An HTTP or HTTPS URL to which callback notifications are to be sent. To be "
                "white-listed, the URL must successfully echo the challenge string during URL "
                "verification.",
                required=True,
                location=QUERY,
            ),
            string(
                "user_secret",
                "A user-specified string that the service uses to generate the HMAC-SHA1 "
                "signature that it sends via the `X-Callback-Signature` header.",
                location=QUERY,
            ),
        ),
    ),
    _op(
        "unregister-callback",
        "Unregister a callback",
        "Unregisters a callback URL that was previously white-listed with a **Register a "
        "callback** request. Once unregistered, the URL can no longer be used with asynchronous "
        "recognition requests.",
        method=POST,
        path="/v1/unregister_callback",
        flags=(
            string(
                "callback_url",
                "The callback URL that is to be unregistered.",
                required=True,
                location=QUERY,
            ),
        ),
        result=NONE,
    ),
    _op(
        "create-job",
        "Create a job",
        "Creates a job for a new asynchronous recognition request. The job is owned by the "
        "instance of the service whose credentials are used to create it. Include "
        "`--callback_url` to be notified when the job completes, or poll its status with the "
        "**Check a job** method. **See also:** [Creating a "
        f"job]({_DOCS}async#create).",
        method=POST,
        path="/v1/recognitions",
        flags=(
            file_path("audio", "The audio file to transcribe.", required=True, location=RAW_BODY),
            string(
                "callback_url",
                "A URL to which callback notifications are to be sent. The URL must already be "
                "registered with the **Register a callback** method.",
                location=QUERY,
            ),
            string(
                "events",
                "If the job includes a callback URL, a comma-separated list of notification "
                "events to which to subscribe: `recognitions.started`, "
                "`recognitions.completed`, `recognitions.completed_with_results` or "
                "`recognitions.failed`.",
                location=QUERY,
            ),
            string(
                "user_token",
                "If the job includes a callback URL, a user-specified string that the service "
                "includes with each callback notification for the job.",
                location=QUERY,
            ),
            int64(
                "results_ttl",
                "The number of minutes for which the results are to be available after the job "
                "has finished.",
                location=QUERY,
            ),
            boolean(
                "processing_metrics",
                "If `true`, requests processing metrics about the service's transcription of "
                "the input audio.",
                default_value=False,
                location=QUERY,
            ),
            float32(
                "processing_metrics_interval",
                "The interval in real wall-clock seconds at which the service is to return "
                "processing metrics.",
                location=QUERY,
            ),
            *_recognition_flags(),
        ),
    ),
    _op(
        "check-jobs",
        "Check jobs",
        "Returns the ID and status of the latest 100 outstanding jobs associated with the "
        "credentials with which it is called.",
        method=GET,
        path="/v1/recognitions",
    ),
    _op(
        "check-job",
        "Check a job",
        "Returns information about the specified job. If the status is `completed`, the "
        "response includes the results of the recognition request.",
        method=GET,
        path="/v1/recognitions/{id}",
        flags=(
            string(
                "id",
                "The identifier of the asynchronous job that is to be used for the request.",
                required=True,
            ),
        ),
    ),
    _op(
        "delete-job",
        "Delete a job",
        "Deletes the specified job. You cannot delete a job that the service is actively "
        "processing. Once you delete a job, its results are no longer available.",
        method=DELETE,
        path="/v1/recognitions/{id}",
        flags=(
            string(
                "id",
                "The identifier of the asynchronous job that is to be used for the request.",
                required=True,
            ),
        ),
        result=NONE,
    ),
    # Custom language models
    _op(
        "create-language-model",
        "Create a custom language model",
        "Creates a new custom language model for a specified base model. The custom language "
        "model can be used only with the base model for which it is created. **See also:** "
        f"[Create a custom language model]({_DOCS}languageCreate#createModel-language).",
        method=POST,
        path="/v1/customizations",
        flags=(
            string(
                "name",
                "A user-defined name for the new custom language model. Use a name that is "
                "unique among all custom language models that you own.",
                required=True,
            ),
            string(
                "base_model_name",
                "The name of the base language model that is to be customized by the new custom "
                "language model.",
                required=True,
            ),
            string(
                "dialect",
                "The dialect of the specified language that is to be used with the custom "
                "language model. Meaningful only for Spanish models.",
            ),
            string("description", "A description of the new custom language model."),
        ),
    ),
    _op(
        "list-language-models",
        "List custom language models",
        "Lists information about all custom language models that are owned by an instance of "
        "the service. Use the `language` parameter to see all custom language models for the "
        "specified language.",
        method=GET,
        path="/v1/customizations",
        flags=(
            string(
                "language",
                "The identifier of the language for which custom language models are to be "
                "returned, for example `en-US`.",
            ),
        ),
    ),
    _op(
        "get-language-model",
        "Get a custom language model",
        "Gets information about a specified custom language model.",
        method=GET,
        path="/v1/customizations/{customization_id}",
        flags=(_language_model_id(),),
    ),
    _op(
        "delete-language-model",
        "Delete a custom language model",
        "Deletes an existing custom language model. The custom model cannot be deleted if "
        "another request, such as adding a corpus or grammar to the model, is currently being "
        "processed.",
        method=DELETE,
        path="/v1/customizations/{customization_id}",
        flags=(_language_model_id(),),
        result=NONE,
    ),
    _op(
        "train-language-model",
        "Train a custom language model",
        "Initiates the training of a custom language model with new resources such as corpora, "
        "grammars, and custom words. The training method is asynchronous; poll the model with "
        "the **Get a custom language model** method to learn when it is `available`. **See "
        f"also:** [Train the custom language model]({_DOCS}languageCreate#trainModel-language).",
        method=POST,
        path="/v1/customizations/{customization_id}/train",
        flags=(
            _language_model_id(),
            string(
                "word_type_to_add",
                "The type of words from the custom model's words resource on which to train the "
                "model: `all` or `user`.",
                default_value="all",
                location=QUERY,
            ),
            float64(
                "customization_weight",
                "A customization weight for the custom language model, between 0.0 and 1.0.",
                default_value=0.3,
                location=QUERY,
            ),
        ),
    ),
    _op(
        "reset-language-model",
        "Reset a custom language model",
        "Resets a custom language model by removing all corpora, grammars, and words from the "
        "model. Metadata such as the name and language of the model are preserved.",
        method=POST,
        path="/v1/customizations/{customization_id}/reset",
        flags=(_language_model_id(),),
        result=NONE,
    ),
    _op(
        "upgrade-language-model",
        "Upgrade a custom language model",
        "Initiates the upgrade of a custom language model to the latest version of its base "
        "language model. The upgrade method is asynchronous.",
        method=POST,
        path="/v1/customizations/{customization_id}/upgrade_model",
        flags=(_language_model_id(),),
        result=NONE,
    ),
    _op(
        "list-corpora",
        "List corpora",
        "Lists information about all corpora from a custom language model. The information "
        "includes the total number of words and out-of-vocabulary (OOV) words, name, and status "
        "of each corpus.",
        method=GET,
        path="/v1/customizations/{customization_id}/corpora",
        flags=(_language_model_id(),),
    ),
    _op(
        "add-corpus",
        "Add a corpus",
        "Adds a single corpus text file of new training data to a custom language model. Adding "
        "a corpus does not affect the custom language model until you train the model with the "
        "**Train a custom language model** method. **See also:** [Add a corpus to the custom "
        f"language model]({_DOCS}languageCreate#addCorpus).",
        method=POST,
        path="/v1/customizations/{customization_id}/corpora/{corpus_name}",
        flags=(
            _language_model_id(),
            string(
                "corpus_name",
                "The name of the new corpus for the custom language model. Do not use characters "
                "that need to be URL-encoded.",
                required=True,
            ),
            file_path(
                "corpus_file",
                "A plain text file that contains the training data for the corpus, in UTF-8 "
                "when it contains non-ASCII characters.",
                required=True,
            ),
            _allow_overwrite("corpus"),
        ),
        multipart=True,
        result=NONE,
    ),
    _op(
        "get-corpus",
        "Get a corpus",
        "Gets information about a corpus from a custom language model.",
        method=GET,
        path="/v1/customizations/{customization_id}/corpora/{corpus_name}",
        flags=(
            _language_model_id(),
            string(
                "corpus_name",
                "The name of the corpus for the custom language model.",
                required=True,
            ),
        ),
    ),
    _op(
        "delete-corpus",
        "Delete a corpus",
        "Deletes an existing corpus from a custom language model. Removing a corpus does not "
        "affect the custom model until you train the model.",
        method=DELETE,
        path="/v1/customizations/{customization_id}/corpora/{corpus_name}",
        flags=(
            _language_model_id(),
            string(
                "corpus_name",
                "The name of the corpus for the custom language model.",
                required=True,
            ),
        ),
        result=NONE,
    ),
    _op(
        "list-words",
        "List custom words",
        "Lists information about custom words from a custom language model.",
        method=GET,
        path="/v1/customizations/{customization_id}/words",
        flags=(
            _language_model_id(),
            string(
                "word_type",
                "The type of words to be listed: `all`, `user`, `corpora` or `grammars`.",
                default_value="all",
            ),
            string(
                "sort",
                "The order in which the words are to be listed, `alphabetical` or by `count`. "
                "Prepend `+` or `-` for ascending or descending order.",
                default_value="alphabetical",
            ),
        ),
    ),
    _op(
        "add-words",
        "Add custom words",
        "Adds one or more custom words to a custom language model, or modifies existing words "
        "in its words resource. Adding words does not affect the custom model until you train "
        "the model.",
        method=POST,
        path="/v1/customizations/{customization_id}/words",
        flags=(
            _language_model_id(),
            json_value(
                "words",
                "A JSON array of `CustomWord` objects, each with a `word` and optional "
                '`sounds_like` and `display_as` fields. Example: `[{"word": "IEEE", '
                '"sounds_like": ["I. triple E."]}]`.',
                required=True,
            ),
        ),
        result=NONE,
    ),
    _op(
        "add-word",
        "Add a custom word",
        "Adds a custom word to a custom language model, or modifies an existing word in its "
        "words resource.",
        method=PUT,
        path="/v1/customizations/{customization_id}/words/{word_name}",
        flags=(
            _language_model_id(),
            string(
                "word_name",
                "The custom word that is to be added to or updated in the custom language "
                "model. Do not include spaces in the word.",
                required=True,
            ),
            string(
                "word",
                "For the **Add custom words** method, the custom word. Omit this parameter for "
                "the **Add a custom word** method.",
            ),
            string_list(
                "sounds_like",
                "Sounds-like pronunciations for the custom word. A word can have at most five "
                "sounds-like pronunciations.",
            ),
            string(
                "display_as",
                "An alternative spelling for the custom word when it appears in a transcript.",
            ),
        ),
        result=NONE,
    ),
    _op(
        "get-word",
        "Get a custom word",
        "Gets information about a custom word from a custom language model.",
        method=GET,
        path="/v1/customizations/{customization_id}/words/{word_name}",
        flags=(
            _language_model_id(),
            string(
                "word_name",
                "The custom word that is to be read from the custom language model.",
                required=True,
            ),
        ),
    ),
    _op(
        "delete-word",
        "Delete a custom word",
        "Deletes a custom word from a custom language model. If the word also exists in the "
        "service's base vocabulary, only the custom pronunciation is removed.",
        method=DELETE,
        path="/v1/customizations/{customization_id}/words/{word_name}",
        flags=(
            _language_model_id(),
            string(
                "word_name",
                "The custom word that is to be deleted from the custom language model.",
                required=True,
            ),
        ),
        result=NONE,
    ),
    _op(
        "list-grammars",
        "List grammars",
        "Lists information about all grammars from a custom language model.",
        method=GET,
        path="/v1/customizations/{customization_id}/grammars",
        flags=(_language_model_id(),),
    ),
    _op(
        "add-grammar",
        "Add a grammar",
        "Adds a single grammar file to a custom language model. Adding a grammar does not "
        "affect the custom language model until you train the model. **See also:** [Add a "
        f"grammar to the custom language model]({_DOCS}grammarAdd#addGrammar).",
        method=POST,
        path="/v1/customizations/{customization_id}/grammars/{grammar_name}",
        flags=(
            _language_model_id(),
            string(
                "grammar_name",
                "The name of the new grammar for the custom language model.",
                required=True,
            ),
            file_path(
                "grammar_file",
                "A plain text file that contains the grammar in the format given by "
                "`--content_type`, encoded in UTF-8.",
                required=True,
                location=RAW_BODY,
            ),
            string(
                "content_type",
                "The format of the grammar file: `application/srgs` for ABNF or "
                "`application/srgs+xml` for XML Form.",
                required=True,
                location=HEADER,
            ),
            _allow_overwrite("grammar"),
        ),
        result=NONE,
    ),
    _op(
        "get-grammar",
        "Get a grammar",
        "Gets information about a grammar from a custom language model.",
        method=GET,
        path="/v1/customizations/{customization_id}/grammars/{grammar_name}",
        flags=(
            _language_model_id(),
            string(
                "grammar_name",
                "The name of the grammar for the custom language model.",
                required=True,
            ),
        ),
    ),
    _op(
        "delete-grammar",
        "Delete a grammar",
        "Deletes an existing grammar from a custom language model. Removing a grammar does not "
        "affect the custom model until you train the model.",
        method=DELETE,
        path="/v1/customizations/{customization_id}/grammars/{grammar_name}",
        flags=(
            _language_model_id(),
            string(
                "grammar_name",
                "The name of the grammar for the custom language model.",
                required=True,
            ),
        ),
        result=NONE,
    ),
    # Custom acoustic models
    _op(
        "create-acoustic-model",
        "Create a custom acoustic model",
        "Creates a new custom acoustic model for a specified base model. The custom acoustic "
        "model can be used only with the base model for which it is created. **See also:** "
        f"[Create a custom acoustic model]({_DOCS}acoustic#createModel-acoustic).",
        method=POST,
        path="/v1/acoustic_customizations",
        flags=(
            string(
                "name",
                "A user-defined name for the new custom acoustic model. Use a name that is "
                "unique among all custom acoustic models that you own.",
                required=True,
            ),
            string(
                "base_model_name",
                "The name of the base language model that is to be customized by the new custom "
                "acoustic model.",
                required=True,
            ),
            string("description", "A description of the new custom acoustic model."),
        ),
    ),
    _op(
        "list-acoustic-models",
        "List custom acoustic models",
        "Lists information about all custom acoustic models that are owned by an instance of "
        "the service. Use the `language` parameter to see all custom acoustic models for the "
        "specified language.",
        method=GET,
        path="/v1/acoustic_customizations",
        flags=(
            string(
                "language",
                "The identifier of the language for which custom acoustic models are to be "
                "returned, for example `en-US`.",
            ),
        ),
    ),
    _op(
        "get-acoustic-model",
        "Get a custom acoustic model",
        "Gets information about a specified custom acoustic model.",
        method=GET,
        path="/v1/acoustic_customizations/{customization_id}",
        flags=(_acoustic_model_id(),),
    ),
    _op(
        "delete-acoustic-model",
        "Delete a custom acoustic model",
        "Deletes an existing custom acoustic model. The custom model cannot be deleted if "
        "another request, such as adding an audio resource to the model, is currently being "
        "processed.",
        method=DELETE,
        path="/v1/acoustic_customizations/{customization_id}",
        flags=(_acoustic_model_id(),),
        result=NONE,
    ),
    _op(
        "train-acoustic-model",
        "Train a custom acoustic model",
        "Initiates the training of a custom acoustic model with new or changed audio resources. "
        "The training method is asynchronous; poll the model with the **Get a custom acoustic "
        "model** method to learn when it is `available`.",
        method=POST,
        path="/v1/acoustic_customizations/{customization_id}/train",
        flags=(
            _acoustic_model_id(),
            string(
                "custom_language_model_id",
                "The customization ID (GUID) of a custom language model that is to be used "
                "during training of the custom acoustic model.",
                location=QUERY,
            ),
        ),
    ),
    _op(
        "reset-acoustic-model",
        "Reset a custom acoustic model",
        "Resets a custom acoustic model by removing all audio resources from the model. "
        "Metadata such as the name and language of the model are preserved.",
        method=POST,
        path="/v1/acoustic_customizations/{customization_id}/reset",
        flags=(_acoustic_model_id(),),
        result=NONE,
    ),
    _op(
        "upgrade-acoustic-model",
        "Upgrade a custom acoustic model",
        "Initiates the upgrade of a custom acoustic model to the latest version of its base "
        "language model. The upgrade method is asynchronous.",
        method=POST,
        path="/v1/acoustic_customizations/{customization_id}/upgrade_model",
        flags=(
            _acoustic_model_id(),
            string(
                "custom_language_model_id",
                "If the custom acoustic model was trained with a custom language model, the "
                "customization ID (GUID) of that custom language model.",
                location=QUERY,
            ),
            boolean(
                "force",
                "If `true`, forces the upgrade of a custom acoustic model for which no input "
                "data has been modified since it was last trained.",
                default_value=False,
                location=QUERY,
            ),
        ),
        result=NONE,
    ),
    _op(
        "list-audio",
        "List audio resources",
        "Lists information about all audio resources from a custom acoustic model, including "
        "the name, duration and status of each resource.",
        method=GET,
        path="/v1/acoustic_customizations/{customization_id}/audio",
        flags=(_acoustic_model_id(),),
    ),
    _op(
        "add-audio",
        "Add an audio resource",
        "Adds an audio resource to a custom acoustic model: an individual audio file or an "
        "archive (`.zip` or `.tar.gz`) of audio files. Adding audio data does not affect the "
        "custom acoustic model until you train the model. **See also:** [Add audio to the custom "
        f"acoustic model]({_DOCS}acoustic#addAudio).",
        method=POST,
        path="/v1/acoustic_customizations/{customization_id}/audio/{audio_name}",
        flags=(
            _acoustic_model_id(),
            string(
                "audio_name",
                "The name of the new audio resource for the custom acoustic model.",
                required=True,
            ),
            file_path(
                "audio_resource",
                "The audio resource that is to be added to the custom acoustic model, an "
                "individual audio file or an archive file.",
                required=True,
                location=RAW_BODY,
            ),
            string(
                "content_type",
                "For an audio-type resource, the format (MIME type) of the audio. For an "
                "archive-type resource, the media type of the archive file.",
                location=HEADER,
            ),
            string(
                "contained_content_type",
                "For an archive-type resource, the format of the audio files that are contained "
                "in the archive file.",
                location=HEADER,
            ),
            _allow_overwrite("audio resource"),
        ),
        result=NONE,
    ),
    _op(
        "get-audio",
        "Get an audio resource",
        "Gets information about an audio resource from a custom acoustic model.",
        method=GET,
        path="/v1/acoustic_customizations/{customization_id}/audio/{audio_name}",
        flags=(
            _acoustic_model_id(),
            string(
                "audio_name",
                "The name of the audio resource for the custom acoustic model.",
                required=True,
            ),
        ),
    ),
    _op(
        "delete-audio",
        "Delete an audio resource",
        "Deletes an existing audio resource from a custom acoustic model. Deleting an "
        "archive-type audio resource removes the entire archive of files.",
        method=DELETE,
        path="/v1/acoustic_customizations/{customization_id}/audio/{audio_name}",
        flags=(
            _acoustic_model_id(),
            string(
                "audio_name",
                "The name of the audio resource for the custom acoustic model.",
                required=True,
            ),
        ),
        result=NONE,
    ),
    _op(
        "delete-user-data",
        "Delete labeled data",
        "Deletes all data that is associated with a specified customer ID. The method has no "
        "effect if no data is associated with the customer ID. You associate a customer ID "
        "with data by passing the `X-Watson-Metadata` header with a request that passes the "
        f"data. **See also:** [Information security]({_DOCS}information-security).",
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
)

SERVICE = ServiceSpec(
    tag="speech-to-text-v1",
    aliases=("stt-v1",),
    credential_name="speech_to_text",
    default_url="https://stream.watsonplatform.net/speech-to-text/api",
    short_help="Speech to Text",
    long_help=(
        "Speech to Text transcribes audio into text, runs asynchronous recognition jobs, and "
        "manages custom language and acoustic models that adapt recognition to a domain."
    ),
    operations=OPERATIONS,
)
