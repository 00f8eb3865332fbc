"""Operations of the Visual Recognition v4 service."""

from __future__ import annotations

from functools import partial

from watsoncli.models import ServiceSpec
from watsoncli.services.common import (
    BINARY,
    DELETE,
    GET,
    NONE,
    POST,
    file_list,
    float32,
    json_value,
    operation,
    string,
    string_list,
)

_op = partial(operation, versioned=True)

OPERATIONS = (
    _op(
        "analyze",
        "Analyze images",
        "Analyze images by URL, by file, or both against your own collection. Make sure that "
        "**training_status.objects.ready** is `true` for the feature before you use a collection "
        "to analyze images.Encode the image and .zip file names in UTF-8 if they contain "
        "non-ASCII characters. The service assumes UTF-8 encoding if it encounters non-ASCII "
        "characters.",
        method=POST,
        path="/v4/analyze",
        flags=(
            string_list("collection_ids", "The IDs of the collections to analyze.", required=True),
            string_list("features", "The features to analyze.", required=True),
            file_list(
                "images_file",
                "An array of image files (.jpg or .png) or .zip files with images.- Include a "
                "maximum of 20 images in a request.- Limit the .zip file to 100 MB.- Limit each "
                "image file to 10 MB.You can also include an image with the **image_url** "
                "parameter.",
            ),
            string_list(
                "image_url",
                "An array of URLs of image files (.jpg or .png).- Include a maximum of 20 images "
                "in a request.- Limit each image file to 10 MB.- Minimum width and height is 30 "
                "pixels, but the service tends to perform better with images that are at least "
                "300 x 300 pixels. Maximum is 5400 pixels for either height or width.You can also "
                "include images with the **images_file** parameter.",
            ),
            float32("threshold", "The minimum score a feature must have to be returned."),
        ),
        multipart=True,
    ),
    _op(
        "create-collection",
        "Create a collection",
        "Create a collection that can be used to store images.To create a collection without "
        "specifying a name and description, include an empty JSON object in the request "
        "body.Encode the name and description in UTF-8 if they contain non-ASCII characters. The "
        "service assumes UTF-8 encoding if it encounters non-ASCII characters.",
        method=POST,
        path="/v4/collections",
        flags=(
            string(
                "name",
                "The name of the collection. The name can contain alphanumeric, underscore, "
                "hyphen, and dot characters. It cannot begin with the reserved prefix `sys-`.",
            ),
            string("description", "The description of the collection."),
        ),
    ),
    _op(
        "list-collections",
        "List collections",
        "Retrieves a list of collections for the service instance.",
        method=GET,
        path="/v4/collections",
    ),
    _op(
        "get-collection",
        "Get collection details",
        "Get details of one collection.",
        method=GET,
        path="/v4/collections/{collection_id}",
        flags=(
            string("collection_id", "The identifier of the collection.", required=True),
        ),
    ),
    _op(
        "update-collection",
        "Update a collection",
        "Update the name or description of a collection.Encode the name and description in UTF-8 "
        "if they contain non-ASCII characters. The service assumes UTF-8 encoding if it "
        "encounters non-ASCII characters.",
        method=POST,
        path="/v4/collections/{collection_id}",
        flags=(
            string("collection_id", "The identifier of the collection.", required=True),
            string(
                "name",
                "The name of the collection. The name can contain alphanumeric, underscore, "
                "hyphen, and dot characters. It cannot begin with the reserved prefix `sys-`.",
            ),
            string("description", "The description of the collection."),
        ),
    ),
    _op(
        "delete-collection",
        "Delete a collection",
        "Delete a collection from the service instance.",
        method=DELETE,
        path="/v4/collections/{collection_id}",
        flags=(
            string("collection_id", "The identifier of the collection.", required=True),
        ),
        result=NONE,
    ),
    _op(
        "add-images",
        "Add images",
        "Add images to a collection by URL, by file, or both.Encode the image and .zip file names "
        "in UTF-8 if they contain non-ASCII characters. The service assumes UTF-8 encoding if it "
        "encounters non-ASCII characters.",
        method=POST,
        path="/v4/collections/{collection_id}/images",
        flags=(
            string("collection_id", "The identifier of the collection.", required=True),
            file_list(
                "images_file",
                "An array of image files (.jpg or .png) or .zip files with images.- Include a "
                "maximum of 20 images in a request.- Limit the .zip file to 100 MB.- Limit each "
                "image file to 10 MB.You can also include an image with the **image_url** "
                "parameter.",
            ),
            string_list(
                "image_url",
                "The array of URLs of image files (.jpg or .png).- Include a maximum of 20 images "
                "in a request.- Limit each image file to 10 MB.- Minimum width and height is 30 "
                "pixels, but the service tends to perform better with images that are at least "
                "300 x 300 pixels. Maximum is 5400 pixels for either height or width.You can also "
                "include images with the **images_file** parameter.",
            ),
            string(
                "training_data",
                "Training data for a single image. Include training data only if you add one "
                "image with the request.The `object` property can contain alphanumeric, "
                "underscore, hyphen, space, and dot characters. It cannot begin with the reserved "
                "prefix `sys-` and must be no longer than 32 characters.",
            ),
        ),
        multipart=True,
    ),
    _op(
        "list-images",
        "List images",
        "Retrieves a list of images in a collection.",
        method=GET,
        path="/v4/collections/{collection_id}/images",
        flags=(
            string("collection_id", "The identifier of the collection.", required=True),
        ),
    ),
    _op(
        "get-image-details",
        "Get image details",
        "Get the details of an image in a collection.",
        method=GET,
        path="/v4/collections/{collection_id}/images/{image_id}",
        flags=(
            string("collection_id", "The identifier of the collection.", required=True),
            string("image_id", "The identifier of the image.", required=True),
        ),
    ),
    _op(
        "delete-image",
        "Delete an image",
        "Delete one image from a collection.",
        method=DELETE,
        path="/v4/collections/{collection_id}/images/{image_id}",
        flags=(
            string("collection_id", "The identifier of the collection.", required=True),
            string("image_id", "The identifier of the image.", required=True),
        ),
        result=NONE,
    ),
    _op(
        "get-jpeg-image",
        "Get a JPEG file of an image",
        "Download a JPEG representation of an image.",
        method=GET,
        path="/v4/collections/{collection_id}/images/{image_id}/jpeg",
        flags=(
            string("collection_id", "The identifier of the collection.", required=True),
            string("image_id", "The identifier of the image.", required=True),
            string("size", "Specify the image size."),
        ),
        result=BINARY,
        accept="image/jpeg",
    ),
    _op(
        "train",
        "Train a collection",
        "Start training on images in a collection. The collection must have enough training data "
        "and untrained data (the **training_status.objects.data_changed** is `true`). If training "
        "is in progress, the request queues the next training job.",
        method=POST,
        path="/v4/collections/{collection_id}/train",
        flags=(
            string("collection_id", "The identifier of the collection.", required=True),
        ),
    ),
    _op(
        "add-image-training-data",
        "Add training data to an image",
        "Add, update, or delete training data for an image. Encode the object name in UTF-8 if it "
        "contains non-ASCII characters. The service assumes UTF-8 encoding if it encounters "
        "non-ASCII characters.Elements in the request replace the existing elements.- To update "
        "the training data, provide both the unchanged and the new or changed values.- To delete "
        "the training data, provide an empty value for the training data.",
        method=POST,
        path="/v4/collections/{collection_id}/images/{image_id}/training_data",
        flags=(
            string("collection_id", "The identifier of the collection.", required=True),
            string("image_id", "The identifier of the image.", required=True),
            json_value("objects", "Training data for specific objects."),
        ),
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
        path="/v4/user_data",
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
    tag="visual-recognition-v4",
    aliases=("vr-v4",),
    credential_name="visual_recognition",
    default_url="https://gateway.watsonplatform.net/visual-recognition/api",
    short_help="Visual Recognition v4",
    long_help=(
        "Visual Recognition v4 detects objects in images, based on collections of "
        "images with training data."
    ),
    version_required=True,
    operations=OPERATIONS,
)
