"""Operations of the Visual Recognition service."""

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
    boolean,
    file_map,
    file_path,
    float32,
    operation,
    string,
    string_list,
)

_op = partial(operation, versioned=True)

OPERATIONS = (
    _op(
        "classify",
        "Classify images",
        "Classify images with built-in or custom classifiers.",
        method=POST,
        path="/v3/classify",
        flags=(
            file_path(
                "images_file",
                "An image file (.gif, .jpg, .png, .tif) or .zip file with images. Maximum image "
                "size is 10 MB. Include no more than 20 images and limit the .zip file to 100 MB. "
                "Encode the image and .zip file names in UTF-8 if they contain non-ASCII "
                "characters. The service assumes UTF-8 encoding if it encounters non-ASCII "
                "characters.You can also include an image with the **url** parameter.",
                filename_flag="images_filename",
                content_type_flag="images_file_content_type",
            ),
            string("images_filename", "The filename for ImagesFile."),
            string("images_file_content_type", "The content type of ImagesFile."),
            string(
                "url",
                "The URL of an image (.gif, .jpg, .png, .tif) to analyze. The minimum recommended "
                "pixel density is 32X32 pixels, but the service tends to perform better with "
                "images that are at least 224 x 224 pixels. The maximum image size is 10 MB.You "
                "can also include images with the **images_file** parameter.",
            ),
            float32(
                "threshold",
                "The minimum score a class must have to be displayed in the response. Set the "
                "threshold to `0.0` to return all identified classes.",
            ),
            string_list(
                "owners",
                "The categories of classifiers to apply. The **classifier_ids** parameter "
                "overrides **owners**, so make sure that **classifier_ids** is empty. - Use `IBM` "
                "to classify against the `default` general classifier. You get the same result if "
                "both **classifier_ids** and **owners** parameters are empty.- Use `me` to "
                "classify against all your custom classifiers. However, for better performance "
                "use **classifier_ids** to specify the specific custom classifiers to apply.- Use "
                "both `IBM` and `me` to analyze the image against both classifier categories.",
            ),
            string_list(
                "classifier_ids",
                "Which classifiers to apply. Overrides the **owners** parameter. You can specify "
                "both custom and built-in classifier IDs. The built-in `default` classifier is "
                "used if both **classifier_ids** and **owners** parameters are empty.The "
                "following built-in classifier IDs require no training:- `default`: Returns "
                "classes from thousands of general tags.- `food`: Enhances specificity and "
                "accuracy for images of food items.- `explicit`: Evaluates whether the image "
                "might be pornographic.",
            ),
            string(
                "accept_language",
                "The desired language of parts of the response. See the response for details.",
                location=HEADER,
            ),
        ),
        multipart=True,
    ),
    _op(
        "create-classifier",
        "Create a classifier",
        "Train a new multi-faceted classifier on the uploaded image data. Create your custom "
        "classifier with positive or negative example training images. Include at least two sets "
        "of examples, either two positive example files or one positive and one negative file. "
        "You can upload a maximum of 256 MB per call.**Tips when creating:**- If you set the "
        "**X-Watson-Learning-Opt-Out** header parameter to `true` when you create a classifier, "
        "the example training images are not stored. Save your training images locally. For more "
        "information, see [Data collection](#data-collection).- Encode all names in UTF-8 if they "
        "contain non-ASCII characters (.zip and image file names, and classifier and class "
        "names). The service assumes UTF-8 encoding if it encounters non-ASCII characters.",
        method=POST,
        path="/v3/classifiers",
        flags=(
            string(
                "name",
                "The name of the new classifier. Encode special characters in UTF-8.",
                required=True,
            ),
            file_map(
                "positive_examples",
                "A .zip file of images that depict the visual subject of a class in the new "
                "classifier. You can include more than one positive example file in a "
                "call.Specify the parameter name by appending `_positive_examples` to the class "
                "name. For example, `goldenretriever_positive_examples` creates the class "
                "**goldenretriever**.Include at least 10 images in .jpg or .png format. The "
                "minimum recommended image resolution is 32X32 pixels. The maximum number of "
                "images is 10,000 images or 100 MB per .zip file.Encode special characters in the "
                "file name in UTF-8.",
                required=True,
            ),
            file_path(
                "negative_examples",
                "A .zip file of images that do not depict the visual subject of any of the "
                "classes of the new classifier. Must contain a minimum of 10 images.Encode "
                "special characters in the file name in UTF-8.",
                filename_flag="negative_examples_filename",
            ),
            string("negative_examples_filename", "The filename for NegativeExamples."),
        ),
        multipart=True,
    ),
    _op(
        "list-classifiers",
        "Retrieve a list of classifiers",
        method=GET,
        path="/v3/classifiers",
        flags=(
            boolean(
                "verbose",
                "Specify `true` to return details about the classifiers. Omit this parameter to "
                "return a brief list of classifiers.",
            ),
        ),
    ),
    _op(
        "get-classifier",
        "Retrieve classifier details",
        "Retrieve information about a custom classifier.",
        method=GET,
        path="/v3/classifiers/{classifier_id}",
        flags=(
            string("classifier_id", "The ID of the classifier.", required=True),
        ),
    ),
    _op(
        "update-classifier",
        "Update a classifier",
        "Update a custom classifier by adding new positive or negative classes or by adding new "
        "images to existing classes. You must supply at least one set of positive or negative "
        "examples. For details, see [Updating custom "
        "classifiers](https://cloud.ibm.com/docs/services/visual-recognition?topic=visual-recognition-customizing#updating-custom-classifiers).Encode "
        "all names in UTF-8 if they contain non-ASCII characters (.zip and image file names, and "
        "classifier and class names). The service assumes UTF-8 encoding if it encounters "
        "non-ASCII characters.**Tips about retraining:**- You can't update the classifier if the "
        "**X-Watson-Learning-Opt-Out** header parameter was set to `true` when the classifier was "
        "created. Training images are not stored in that case. Instead, create another "
        "classifier. For more information, see [Data collection](#data-collection).- Don't make "
        "retraining calls on a classifier until the status is ready. When you submit retraining "
        "requests in parallel, the last request overwrites the previous requests. The `retrained` "
        "property shows the last time the classifier retraining finished.",
        method=POST,
        path="/v3/classifiers/{classifier_id}",
        flags=(
            string("classifier_id", "The ID of the classifier.", required=True),
            file_map(
                "positive_examples",
                "A .zip file of images that depict the visual subject of a class in the "
                "classifier. The positive examples create or update classes in the classifier. "
                "You can include more than one positive example file in a call.Specify the "
                "parameter name by appending `_positive_examples` to the class name. For example, "
                "`goldenretriever_positive_examples` creates the class `goldenretriever`.Include "
                "at least 10 images in .jpg or .png format. The minimum recommended image "
                "resolution is 32X32 pixels. The maximum number of images is 10,000 images or 100 "
                "MB per .zip file.Encode special characters in the file name in UTF-8.",
            ),
            file_path(
                "negative_examples",
                "A .zip file of images that do not depict the visual subject of any of the "
                "classes of the new classifier. Must contain a minimum of 10 images.Encode "
                "special characters in the file name in UTF-8.",
                filename_flag="negative_examples_filename",
            ),
            string("negative_examples_filename", "The filename for NegativeExamples."),
        ),
        multipart=True,
    ),
    _op(
        "delete-classifier",
        "Delete a classifier",
        method=DELETE,
        path="/v3/classifiers/{classifier_id}",
        flags=(
            string("classifier_id", "The ID of the classifier.", required=True),
        ),
        result=NONE,
    ),
    _op(
        "get-core-ml-model",
        "Retrieve a Core ML model of a classifier",
        "Download a Core ML model file (.mlmodel) of a custom classifier that returns "
        "<tt>'core_ml_enabled': true</tt> in the classifier details.",
        method=GET,
        path="/v3/classifiers/{classifier_id}/core_ml_model",
        flags=(
            string("classifier_id", "The ID of the classifier.", required=True),
        ),
        result=BINARY,
        accept="application/octet-stream",
    ),
    _op(
        "delete-user-data",
        "Delete labeled data",
        "Deletes all data associated with a specified customer ID. The method has no effect if no "
        "data is associated with the customer ID. You associate a customer ID with data by "
        "passing the `X-Watson-Metadata` header with a request that passes data. For more "
        "information about personal data and customer IDs, see [Information "
        "security](https://cloud.ibm.com/docs/services/visual-recognition?topic=visual-recognition-information-security).",
        method=DELETE,
        path="/v3/user_data",
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
    tag="visual-recognition-v3",
    aliases=("vr-v3",),
    credential_name="visual_recognition",
    default_url="https://gateway.watsonplatform.net/visual-recognition/api",
    short_help="Visual Recognition",
    long_help=(
        "Visual Recognition identifies scenes and objects in images. Create and train "
        "custom classifiers to identify subjects that suit your needs."
    ),
    version_required=True,
    operations=OPERATIONS,
)
