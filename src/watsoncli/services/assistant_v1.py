"""Operations of the Watson Assistant v1 service."""

from __future__ import annotations

from functools import partial

from watsoncli.models import ServiceSpec
from watsoncli.services.common import (
    BODY,
    DELETE,
    GET,
    NONE,
    POST,
    QUERY,
    boolean,
    int64,
    json_value,
    operation,
    string,
    string_list,
)

_op = partial(operation, versioned=True)

OPERATIONS = (
    _op(
        "message",
        "Get response to user input",
        "Send user input to a workspace and receive a response.**Important:** This method has "
        "been superseded by the new v2 runtime API. The v2 API offers significant advantages, "
        "including ease of deployment, automatic state management, versioning, and search "
        "capabilities. For more information, see the "
        "[documentation](https://cloud.ibm.com/docs/services/assistant?topic=assistant-api-overview).There "
        "is no rate limit for this operation.",
        method=POST,
        path="/v1/workspaces/{workspace_id}/message",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            json_value("input", "An input object that includes the input text."),
            json_value(
                "intents",
                "Intents to use when evaluating the user input. Include intents from the previous "
                "response to continue using those intents rather than trying to recognize intents "
                "in the new input.",
            ),
            json_value(
                "entities",
                "Entities to use when evaluating the message. Include entities from the previous "
                "response to continue using those entities rather than detecting entities in the "
                "new input.",
            ),
            boolean(
                "alternate_intents",
                "Whether to return more than one intent. A value of `true` indicates that all "
                "matching intents are returned.",
            ),
            json_value(
                "context",
                "State information for the conversation. To maintain state, include the context "
                "from the previous response.",
            ),
            json_value(
                "message_output",
                "An output object that includes the response to the user, the dialog nodes that "
                "were triggered, and messages from the log.",
                wire_name="output",
            ),
            boolean(
                "nodes_visited_details",
                "Whether to include additional diagnostic information about the dialog nodes that "
                "were visited during processing of the message.",
                location=QUERY,
            ),
        ),
    ),
    _op(
        "list-workspaces",
        "List workspaces",
        "List the workspaces associated with a Watson Assistant service instance.This operation "
        "is limited to 500 requests per 30 minutes. For more information, see **Rate limiting**.",
        method=GET,
        path="/v1/workspaces",
        flags=(
            int64("page_limit", "The number of records to return in each page of results."),
            string(
                "sort",
                "The attribute by which returned workspaces will be sorted. To reverse the sort "
                "order, prefix the value with a minus sign (`-`).",
            ),
            string("cursor", "A token identifying the page of results to retrieve."),
            boolean(
                "include_audit",
                "Whether to include the audit properties (`created` and `updated` timestamps) in "
                "the response.",
            ),
        ),
    ),
    _op(
        "create-workspace",
        "Create workspace",
        "Create a workspace based on component objects. You must provide workspace components "
        "defining the content of the new workspace.This operation is limited to 30 requests per "
        "30 minutes. For more information, see **Rate limiting**.",
        method=POST,
        path="/v1/workspaces",
        flags=(
            string(
                "name",
                "The name of the workspace. This string cannot contain carriage return, newline, "
                "or tab characters.",
            ),
            string(
                "description",
                "The description of the workspace. This string cannot contain carriage return, "
                "newline, or tab characters.",
            ),
            string("language", "The language of the workspace."),
            json_value("metadata", "Any metadata related to the workspace."),
            boolean(
                "learning_opt_out",
                "Whether training data from the workspace (including artifacts such as intents "
                "and entities) can be used by IBM for general service improvements. `true` "
                "indicates that workspace training data is not to be used.",
            ),
            json_value("system_settings", "Global settings for the workspace."),
            json_value("intents", "An array of objects defining the intents for the workspace."),
            json_value(
                "entities",
                "An array of objects describing the entities for the workspace.",
            ),
            json_value(
                "dialog_nodes",
                "An array of objects describing the dialog nodes in the workspace.",
            ),
            json_value(
                "counterexamples",
                "An array of objects defining input examples that have been marked as irrelevant "
                "input.",
            ),
        ),
    ),
    _op(
        "get-workspace",
        "Get information about a workspace",
        "Get information about a workspace, optionally including all workspace content.With "
        "**export**=`false`, this operation is limited to 6000 requests per 5 minutes. With "
        "**export**=`true`, the limit is 20 requests per 30 minutes. For more information, see "
        "**Rate limiting**.",
        method=GET,
        path="/v1/workspaces/{workspace_id}",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            boolean(
                "export",
                "Whether to include all element content in the returned data. If "
                "**export**=`false`, the returned data includes only information about the "
                "element itself. If **export**=`true`, all content, including subelements, is "
                "included.",
            ),
            boolean(
                "include_audit",
                "Whether to include the audit properties (`created` and `updated` timestamps) in "
                "the response.",
            ),
            string(
                "sort",
                "Indicates how the returned workspace data will be sorted. This parameter is "
                "valid only if **export**=`true`. Specify `sort=stable` to sort all workspace "
                "objects by unique identifier, in ascending alphabetical order.",
            ),
        ),
    ),
    _op(
        "update-workspace",
        "Update workspace",
        "Update an existing workspace with new or modified data. You must provide component "
        "objects defining the content of the updated workspace.This operation is limited to 30 "
        "request per 30 minutes. For more information, see **Rate limiting**.",
        method=POST,
        path="/v1/workspaces/{workspace_id}",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string(
                "name",
                "The name of the workspace. This string cannot contain carriage return, newline, "
                "or tab characters.",
            ),
            string(
                "description",
                "The description of the workspace. This string cannot contain carriage return, "
                "newline, or tab characters.",
            ),
            string("language", "The language of the workspace."),
            json_value("metadata", "Any metadata related to the workspace."),
            boolean(
                "learning_opt_out",
                "Whether training data from the workspace (including artifacts such as intents "
                "and entities) can be used by IBM for general service improvements. `true` "
                "indicates that workspace training data is not to be used.",
            ),
            json_value("system_settings", "Global settings for the workspace."),
            json_value("intents", "An array of objects defining the intents for the workspace."),
            json_value(
                "entities",
                "An array of objects describing the entities for the workspace.",
            ),
            json_value(
                "dialog_nodes",
                "An array of objects describing the dialog nodes in the workspace.",
            ),
            json_value(
                "counterexamples",
                "An array of objects defining input examples that have been marked as irrelevant "
                "input.",
            ),
            boolean(
                "append",
                "Whether the new data is to be appended to the existing data in the workspace. If "
                "**append**=`false`, elements included in the new data completely replace the "
                "corresponding existing elements, including all subelements. For example, if the "
                "new data includes **entities** and **append**=`false`, all existing entities in "
                "the workspace are discarded and replaced with the new entities.If "
                "**append**=`true`, existing elements are preserved, and the new elements are "
                "added. If any elements in the new data collide with existing elements, the "
                "update request fails.",
                location=QUERY,
            ),
        ),
    ),
    _op(
        "delete-workspace",
        "Delete workspace",
        "Delete a workspace from the service instance.This operation is limited to 30 requests "
        "per 30 minutes. For more information, see **Rate limiting**.",
        method=DELETE,
        path="/v1/workspaces/{workspace_id}",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
        ),
        result=NONE,
    ),
    _op(
        "list-intents",
        "List intents",
        "List the intents for a workspace.With **export**=`false`, this operation is limited to "
        "2000 requests per 30 minutes. With **export**=`true`, the limit is 400 requests per 30 "
        "minutes. For more information, see **Rate limiting**.",
        method=GET,
        path="/v1/workspaces/{workspace_id}/intents",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            boolean(
                "export",
                "Whether to include all element content in the returned data. If "
                "**export**=`false`, the returned data includes only information about the "
                "element itself. If **export**=`true`, all content, including subelements, is "
                "included.",
            ),
            int64("page_limit", "The number of records to return in each page of results."),
            string(
                "sort",
                "The attribute by which returned intents will be sorted. To reverse the sort "
                "order, prefix the value with a minus sign (`-`).",
            ),
            string("cursor", "A token identifying the page of results to retrieve."),
            boolean(
                "include_audit",
                "Whether to include the audit properties (`created` and `updated` timestamps) in "
                "the response.",
            ),
        ),
    ),
    _op(
        "create-intent",
        "Create intent",
        "Create a new intent.If you want to create multiple intents with a single API call, "
        "consider using the **[Update workspace](#update-workspace)** method instead.This "
        "operation is limited to 2000 requests per 30 minutes. For more information, see **Rate "
        "limiting**.",
        method=POST,
        path="/v1/workspaces/{workspace_id}/intents",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string(
                "intent",
                "The name of the intent. This string must conform to the following restrictions:- "
                "It can contain only Unicode alphanumeric, underscore, hyphen, and dot "
                "characters.- It cannot begin with the reserved prefix `sys-`.",
                required=True,
            ),
            string(
                "description",
                "The description of the intent. This string cannot contain carriage return, "
                "newline, or tab characters.",
            ),
            json_value("examples", "An array of user input examples for the intent."),
        ),
    ),
    _op(
        "get-intent",
        "Get intent",
        "Get information about an intent, optionally including all intent content.With "
        "**export**=`false`, this operation is limited to 6000 requests per 5 minutes. With "
        "**export**=`true`, the limit is 400 requests per 30 minutes. For more information, see "
        "**Rate limiting**.",
        method=GET,
        path="/v1/workspaces/{workspace_id}/intents/{intent}",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("intent", "The intent name.", required=True),
            boolean(
                "export",
                "Whether to include all element content in the returned data. If "
                "**export**=`false`, the returned data includes only information about the "
                "element itself. If **export**=`true`, all content, including subelements, is "
                "included.",
            ),
            boolean(
                "include_audit",
                "Whether to include the audit properties (`created` and `updated` timestamps) in "
                "the response.",
            ),
        ),
    ),
    _op(
        "update-intent",
        "Update intent",
        "Update an existing intent with new or modified data. You must provide component objects "
        "defining the content of the updated intent.If you want to update multiple intents with a "
        "single API call, consider using the **[Update workspace](#update-workspace)** method "
        "instead.This operation is limited to 2000 requests per 30 minutes. For more information, "
        "see **Rate limiting**.",
        method=POST,
        path="/v1/workspaces/{workspace_id}/intents/{intent}",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("intent", "The intent name.", required=True),
            string(
                "new_intent",
                "The name of the intent. This string must conform to the following restrictions:- "
                "It can contain only Unicode alphanumeric, underscore, hyphen, and dot "
                "characters.- It cannot begin with the reserved prefix `sys-`.",
                location=BODY,
                wire_name="intent",
            ),
            string(
                "new_description",
                "The description of the intent. This string cannot contain carriage return, "
                "newline, or tab characters.",
                location=BODY,
                wire_name="description",
            ),
            json_value(
                "new_examples",
                "An array of user input examples for the intent.",
                location=BODY,
                wire_name="examples",
            ),
        ),
    ),
    _op(
        "delete-intent",
        "Delete intent",
        "Delete an intent from a workspace.This operation is limited to 2000 requests per 30 "
        "minutes. For more information, see **Rate limiting**.",
        method=DELETE,
        path="/v1/workspaces/{workspace_id}/intents/{intent}",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("intent", "The intent name.", required=True),
        ),
        result=NONE,
    ),
    _op(
        "list-examples",
        "List user input examples",
        "List the user input examples for an intent, optionally including contextual entity "
        "mentions.This operation is limited to 2500 requests per 30 minutes. For more "
        "information, see **Rate limiting**.",
        method=GET,
        path="/v1/workspaces/{workspace_id}/intents/{intent}/examples",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("intent", "The intent name.", required=True),
            int64("page_limit", "The number of records to return in each page of results."),
            string(
                "sort",
                "The attribute by which returned examples will be sorted. To reverse the sort "
                "order, prefix the value with a minus sign (`-`).",
            ),
            string("cursor", "A token identifying the page of results to retrieve."),
            boolean(
                "include_audit",
                "Whether to include the audit properties (`created` and `updated` timestamps) in "
                "the response.",
            ),
        ),
    ),
    _op(
        "create-example",
        "Create user input example",
        "Add a new user input example to an intent.If you want to add multiple exaples with a "
        "single API call, consider using the **[Update intent](#update-intent)** method "
        "instead.This operation is limited to 1000 requests per 30 minutes. For more information, "
        "see **Rate limiting**.",
        method=POST,
        path="/v1/workspaces/{workspace_id}/intents/{intent}/examples",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("intent", "The intent name.", required=True),
            string(
                "text",
                "The text of a user input example. This string must conform to the following "
                "restrictions:- It cannot contain carriage return, newline, or tab characters.- "
                "It cannot consist of only whitespace characters.",
                required=True,
            ),
            json_value("mentions", "An array of contextual entity mentions."),
        ),
    ),
    _op(
        "get-example",
        "Get user input example",
        "Get information about a user input example.This operation is limited to 6000 requests "
        "per 5 minutes. For more information, see **Rate limiting**.",
        method=GET,
        path="/v1/workspaces/{workspace_id}/intents/{intent}/examples/{text}",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("intent", "The intent name.", required=True),
            string("text", "The text of the user input example.", required=True),
            boolean(
                "include_audit",
                "Whether to include the audit properties (`created` and `updated` timestamps) in "
                "the response.",
            ),
        ),
    ),
    _op(
        "update-example",
        "Update user input example",
        "Update the text of a user input example.If you want to update multiple examples with a "
        "single API call, consider using the **[Update intent](#update-intent)** method "
        "instead.This operation is limited to 1000 requests per 30 minutes. For more information, "
        "see **Rate limiting**.",
        method=POST,
        path="/v1/workspaces/{workspace_id}/intents/{intent}/examples/{text}",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("intent", "The intent name.", required=True),
            string("text", "The text of the user input example.", required=True),
            string(
                "new_text",
                "The text of the user input example. This string must conform to the following "
                "restrictions:- It cannot contain carriage return, newline, or tab characters.- "
                "It cannot consist of only whitespace characters.",
                location=BODY,
                wire_name="text",
            ),
            json_value(
                "new_mentions",
                "An array of contextual entity mentions.",
                location=BODY,
                wire_name="mentions",
            ),
        ),
    ),
    _op(
        "delete-example",
        "Delete user input example",
        "Delete a user input example from an intent.This operation is limited to 1000 requests "
        "per 30 minutes. For more information, see **Rate limiting**.",
        method=DELETE,
        path="/v1/workspaces/{workspace_id}/intents/{intent}/examples/{text}",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("intent", "The intent name.", required=True),
            string("text", "The text of the user input example.", required=True),
        ),
        result=NONE,
    ),
    _op(
        "list-counterexamples",
        "List counterexamples",
        "List the counterexamples for a workspace. Counterexamples are examples that have been "
        "marked as irrelevant input.This operation is limited to 2500 requests per 30 minutes. "
        "For more information, see **Rate limiting**.",
        method=GET,
        path="/v1/workspaces/{workspace_id}/counterexamples",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            int64("page_limit", "The number of records to return in each page of results."),
            string(
                "sort",
                "The attribute by which returned counterexamples will be sorted. To reverse the "
                "sort order, prefix the value with a minus sign (`-`).",
            ),
            string("cursor", "A token identifying the page of results to retrieve."),
            boolean(
                "include_audit",
                "Whether to include the audit properties (`created` and `updated` timestamps) in "
                "the response.",
            ),
        ),
    ),
    _op(
        "create-counterexample",
        "Create counterexample",
        "Add a new counterexample to a workspace. Counterexamples are examples that have been "
        "marked as irrelevant input.If you want to add multiple counterexamples with a single API "
        "call, consider using the **[Update workspace](#update-workspace)** method instead.This "
        "operation is limited to 1000 requests per 30 minutes. For more information, see **Rate "
        "limiting**.",
        method=POST,
        path="/v1/workspaces/{workspace_id}/counterexamples",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string(
                "text",
                "The text of a user input marked as irrelevant input. This string must conform to "
                "the following restrictions:- It cannot contain carriage return, newline, or tab "
                "characters.- It cannot consist of only whitespace characters.",
                required=True,
            ),
        ),
    ),
    _op(
        "get-counterexample",
        "Get counterexample",
        "Get information about a counterexample. Counterexamples are examples that have been "
        "marked as irrelevant input.This operation is limited to 6000 requests per 5 minutes. For "
        "more information, see **Rate limiting**.",
        method=GET,
        path="/v1/workspaces/{workspace_id}/counterexamples/{text}",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string(
                "text",
                "The text of a user input counterexample (for example, `What are you wearing?`).",
                required=True,
            ),
            boolean(
                "include_audit",
                "Whether to include the audit properties (`created` and `updated` timestamps) in "
                "the response.",
            ),
        ),
    ),
    _op(
        "update-counterexample",
        "Update counterexample",
        "Update the text of a counterexample. Counterexamples are examples that have been marked "
        "as irrelevant input.If you want to update multiple counterexamples with a single API "
        "call, consider using the **[Update workspace](#update-workspace)** method instead.This "
        "operation is limited to 1000 requests per 30 minutes. For more information, see **Rate "
        "limiting**.",
        method=POST,
        path="/v1/workspaces/{workspace_id}/counterexamples/{text}",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string(
                "text",
                "The text of a user input counterexample (for example, `What are you wearing?`).",
                required=True,
            ),
            string(
                "new_text",
                "The text of a user input marked as irrelevant input. This string must conform to "
                "the following restrictions:- It cannot contain carriage return, newline, or tab "
                "characters.- It cannot consist of only whitespace characters.",
                location=BODY,
                wire_name="text",
            ),
        ),
    ),
    _op(
        "delete-counterexample",
        "Delete counterexample",
        "Delete a counterexample from a workspace. Counterexamples are examples that have been "
        "marked as irrelevant input.This operation is limited to 1000 requests per 30 minutes. "
        "For more information, see **Rate limiting**.",
        method=DELETE,
        path="/v1/workspaces/{workspace_id}/counterexamples/{text}",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string(
                "text",
                "The text of a user input counterexample (for example, `What are you wearing?`).",
                required=True,
            ),
        ),
        result=NONE,
    ),
    _op(
        "list-entities",
        "List entities",
        "List the entities for a workspace.With **export**=`false`, this operation is limited to "
        "1000 requests per 30 minutes. With **export**=`true`, the limit is 200 requests per 30 "
        "minutes. For more information, see **Rate limiting**.",
        method=GET,
        path="/v1/workspaces/{workspace_id}/entities",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            boolean(
                "export",
                "Whether to include all element content in the returned data. If "
                "**export**=`false`, the returned data includes only information about the "
                "element itself. If **export**=`true`, all content, including subelements, is "
                "included.",
            ),
            int64("page_limit", "The number of records to return in each page of results."),
            string(
                "sort",
                "The attribute by which returned entities will be sorted. To reverse the sort "
                "order, prefix the value with a minus sign (`-`).",
            ),
            string("cursor", "A token identifying the page of results to retrieve."),
            boolean(
                "include_audit",
                "Whether to include the audit properties (`created` and `updated` timestamps) in "
                "the response.",
            ),
        ),
    ),
    _op(
        "create-entity",
        "Create entity",
        "Create a new entity, or enable a system entity.If you want to create multiple entities "
        "with a single API call, consider using the **[Update workspace](#update-workspace)** "
        "method instead.This operation is limited to 1000 requests per 30 minutes. For more "
        "information, see **Rate limiting**.",
        method=POST,
        path="/v1/workspaces/{workspace_id}/entities",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string(
                "entity",
                "The name of the entity. This string must conform to the following restrictions:- "
                "It can contain only Unicode alphanumeric, underscore, and hyphen characters.- If "
                "you specify an entity name beginning with the reserved prefix `sys-`, it must be "
                "the name of a system entity that you want to enable. (Any entity content "
                "specified with the request is ignored.).",
                required=True,
            ),
            string(
                "description",
                "The description of the entity. This string cannot contain carriage return, "
                "newline, or tab characters.",
            ),
            json_value("metadata", "Any metadata related to the entity."),
            boolean("fuzzy_match", "Whether to use fuzzy matching for the entity."),
            json_value("values", "An array of objects describing the entity values."),
        ),
    ),
    _op(
        "get-entity",
        "Get entity",
        "Get information about an entity, optionally including all entity content.With "
        "**export**=`false`, this operation is limited to 6000 requests per 5 minutes. With "
        "**export**=`true`, the limit is 200 requests per 30 minutes. For more information, see "
        "**Rate limiting**.",
        method=GET,
        path="/v1/workspaces/{workspace_id}/entities/{entity}",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            boolean(
                "export",
                "Whether to include all element content in the returned data. If "
                "**export**=`false`, the returned data includes only information about the "
                "element itself. If **export**=`true`, all content, including subelements, is "
                "included.",
            ),
            boolean(
                "include_audit",
                "Whether to include the audit properties (`created` and `updated` timestamps) in "
                "the response.",
            ),
        ),
    ),
    _op(
        "update-entity",
        "Update entity",
        "Update an existing entity with new or modified data. You must provide component objects "
        "defining the content of the updated entity.If you want to update multiple entities with "
        "a single API call, consider using the **[Update workspace](#update-workspace)** method "
        "instead.This operation is limited to 1000 requests per 30 minutes. For more information, "
        "see **Rate limiting**.",
        method=POST,
        path="/v1/workspaces/{workspace_id}/entities/{entity}",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            string(
                "new_entity",
                "The name of the entity. This string must conform to the following restrictions:- "
                "It can contain only Unicode alphanumeric, underscore, and hyphen characters.- It "
                "cannot begin with the reserved prefix `sys-`.",
                location=BODY,
                wire_name="entity",
            ),
            string(
                "new_description",
                "The description of the entity. This string cannot contain carriage return, "
                "newline, or tab characters.",
                location=BODY,
                wire_name="description",
            ),
            json_value(
                "new_metadata",
                "Any metadata related to the entity.",
                location=BODY,
                wire_name="metadata",
            ),
            boolean(
                "new_fuzzy_match",
                "Whether to use fuzzy matching for the entity.",
                location=BODY,
                wire_name="fuzzy_match",
            ),
            json_value(
                "new_values",
                "An array of objects describing the entity values.",
                location=BODY,
                wire_name="values",
            ),
        ),
    ),
    _op(
        "delete-entity",
        "Delete entity",
        "Delete an entity from a workspace, or disable a system entity.This operation is limited "
        "to 1000 requests per 30 minutes. For more information, see **Rate limiting**.",
        method=DELETE,
        path="/v1/workspaces/{workspace_id}/entities/{entity}",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
        ),
        result=NONE,
    ),
    _op(
        "list-mentions",
        "List entity mentions",
        "List mentions for a contextual entity. An entity mention is an occurrence of a "
        "contextual entity in the context of an intent user input example.This operation is "
        "limited to 200 requests per 30 minutes. For more information, see **Rate limiting**.",
        method=GET,
        path="/v1/workspaces/{workspace_id}/entities/{entity}/mentions",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            boolean(
                "export",
                "Whether to include all element content in the returned data. If "
                "**export**=`false`, the returned data includes only information about the "
                "element itself. If **export**=`true`, all content, including subelements, is "
                "included.",
            ),
            boolean(
                "include_audit",
                "Whether to include the audit properties (`created` and `updated` timestamps) in "
                "the response.",
            ),
        ),
    ),
    _op(
        "list-values",
        "List entity values",
        "List the values for an entity.This operation is limited to 2500 requests per 30 minutes. "
        "For more information, see **Rate limiting**.",
        method=GET,
        path="/v1/workspaces/{workspace_id}/entities/{entity}/values",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            boolean(
                "export",
                "Whether to include all element content in the returned data. If "
                "**export**=`false`, the returned data includes only information about the "
                "element itself. If **export**=`true`, all content, including subelements, is "
                "included.",
            ),
            int64("page_limit", "The number of records to return in each page of results."),
            string(
                "sort",
                "The attribute by which returned entity values will be sorted. To reverse the "
                "sort order, prefix the value with a minus sign (`-`).",
            ),
            string("cursor", "A token identifying the page of results to retrieve."),
            boolean(
                "include_audit",
                "Whether to include the audit properties (`created` and `updated` timestamps) in "
                "the response.",
            ),
        ),
    ),
    _op(
        "create-value",
        "Create entity value",
        "Create a new value for an entity.If you want to create multiple entity values with a "
        "single API call, consider using the **[Update entity](#update-entity)** method "
        "instead.This operation is limited to 1000 requests per 30 minutes. For more information, "
        "see **Rate limiting**.",
        method=POST,
        path="/v1/workspaces/{workspace_id}/entities/{entity}/values",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            string(
                "value",
                "The text of the entity value. This string must conform to the following "
                "restrictions:- It cannot contain carriage return, newline, or tab characters.- "
                "It cannot consist of only whitespace characters.",
                required=True,
            ),
            json_value("metadata", "Any metadata related to the entity value."),
            string("type", "Specifies the type of entity value."),
            string_list(
                "synonyms",
                "An array of synonyms for the entity value. A value can specify either synonyms "
                "or patterns (depending on the value type), but not both. A synonym must conform "
                "to the following resrictions:- It cannot contain carriage return, newline, or "
                "tab characters.- It cannot consist of only whitespace characters.",
            ),
            string_list(
                "patterns",
                "An array of patterns for the entity value. A value can specify either synonyms "
                "or patterns (depending on the value type), but not both. A pattern is a regular "
                "expression; for more information about how to specify a pattern, see the "
                "[documentation](https://cloud.ibm.com/docs/services/assistant?topic=assistant-entities#entities-create-dictionary-based).",
            ),
        ),
    ),
    _op(
        "get-value",
        "Get entity value",
        "Get information about an entity value.This operation is limited to 6000 requests per 5 "
        "minutes. For more information, see **Rate limiting**.",
        method=GET,
        path="/v1/workspaces/{workspace_id}/entities/{entity}/values/{value}",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            string("value", "The text of the entity value.", required=True),
            boolean(
                "export",
                "Whether to include all element content in the returned data. If "
                "**export**=`false`, the returned data includes only information about the "
                "element itself. If **export**=`true`, all content, including subelements, is "
                "included.",
            ),
            boolean(
                "include_audit",
                "Whether to include the audit properties (`created` and `updated` timestamps) in "
                "the response.",
            ),
        ),
    ),
    _op(
        "update-value",
        "Update entity value",
        "Update an existing entity value with new or modified data. You must provide component "
        "objects defining the content of the updated entity value.If you want to update multiple "
        "entity values with a single API call, consider using the **[Update "
        "entity](#update-entity)** method instead.This operation is limited to 1000 requests per "
        "30 minutes. For more information, see **Rate limiting**.",
        method=POST,
        path="/v1/workspaces/{workspace_id}/entities/{entity}/values/{value}",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            string("value", "The text of the entity value.", required=True),
            string(
                "new_value",
                "The text of the entity value. This string must conform to the following "
                "restrictions:- It cannot contain carriage return, newline, or tab characters.- "
                "It cannot consist of only whitespace characters.",
                location=BODY,
                wire_name="value",
            ),
            json_value(
                "new_metadata",
                "Any metadata related to the entity value.",
                location=BODY,
                wire_name="metadata",
            ),
            string(
                "new_type",
                "Specifies the type of entity value.",
                location=BODY,
                wire_name="type",
            ),
            string_list(
                "new_synonyms",
                "An array of synonyms for the entity value. A value can specify either synonyms "
                "or patterns (depending on the value type), but not both. A synonym must conform "
                "to the following resrictions:- It cannot contain carriage return, newline, or "
                "tab characters.- It cannot consist of only whitespace characters.",
                location=BODY,
                wire_name="synonyms",
            ),
            string_list(
                "new_patterns",
                "An array of patterns for the entity value. A value can specify either synonyms "
                "or patterns (depending on the value type), but not both. A pattern is a regular "
                "expression; for more information about how to specify a pattern, see the "
                "[documentation](https://cloud.ibm.com/docs/services/assistant?topic=assistant-entities#entities-create-dictionary-based).",
                location=BODY,
                wire_name="patterns",
            ),
        ),
    ),
    _op(
        "delete-value",
        "Delete entity value",
        "Delete a value from an entity.This operation is limited to 1000 requests per 30 minutes. "
        "For more information, see **Rate limiting**.",
        method=DELETE,
        path="/v1/workspaces/{workspace_id}/entities/{entity}/values/{value}",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            string("value", "The text of the entity value.", required=True),
        ),
        result=NONE,
    ),
    _op(
        "list-synonyms",
        "List entity value synonyms",
        "List the synonyms for an entity value.This operation is limited to 2500 requests per 30 "
        "minutes. For more information, see **Rate limiting**.",
        method=GET,
        path="/v1/workspaces/{workspace_id}/entities/{entity}/values/{value}/synonyms",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            string("value", "The text of the entity value.", required=True),
            int64("page_limit", "The number of records to return in each page of results."),
            string(
                "sort",
                "The attribute by which returned entity value synonyms will be sorted. To reverse "
                "the sort order, prefix the value with a minus sign (`-`).",
            ),
            string("cursor", "A token identifying the page of results to retrieve."),
            boolean(
                "include_audit",
                "Whether to include the audit properties (`created` and `updated` timestamps) in "
                "the response.",
            ),
        ),
    ),
    _op(
        "create-synonym",
        "Create entity value synonym",
        "Add a new synonym to an entity value.If you want to create multiple synonyms with a "
        "single API call, consider using the **[Update entity](#update-entity)** or **[Update "
        "entity value](#update-entity-value)** method instead.This operation is limited to 1000 "
        "requests per 30 minutes. For more information, see **Rate limiting**.",
        method=POST,
        path="/v1/workspaces/{workspace_id}/entities/{entity}/values/{value}/synonyms",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            string("value", "The text of the entity value.", required=True),
            string(
                "synonym",
                "The text of the synonym. This string must conform to the following "
                "restrictions:- It cannot contain carriage return, newline, or tab characters.- "
                "It cannot consist of only whitespace characters.",
                required=True,
            ),
        ),
    ),
    _op(
        "get-synonym",
        "Get entity value synonym",
        "Get information about a synonym of an entity value.This operation is limited to 6000 "
        "requests per 5 minutes. For more information, see **Rate limiting**.",
        method=GET,
        path="/v1/workspaces/{workspace_id}/entities/{entity}/values/{value}/synonyms/{synonym}",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            string("value", "The text of the entity value.", required=True),
            string("synonym", "The text of the synonym.", required=True),
            boolean(
                "include_audit",
                "Whether to include the audit properties (`created` and `updated` timestamps) in "
                "the response.",
            ),
        ),
    ),
    _op(
        "update-synonym",
        "Update entity value synonym",
        "Update an existing entity value synonym with new text.If you want to update multiple "
        "synonyms with a single API call, consider using the **[Update entity](#update-entity)** "
        "or **[Update entity value](#update-entity-value)** method instead.This operation is "
        "limited to 1000 requests per 30 minutes. For more information, see **Rate limiting**.",
        method=POST,
        path="/v1/workspaces/{workspace_id}/entities/{entity}/values/{value}/synonyms/{synonym}",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            string("value", "The text of the entity value.", required=True),
            string("synonym", "The text of the synonym.", required=True),
            string(
                "new_synonym",
                "The text of the synonym. This string must conform to the following "
                "restrictions:- It cannot contain carriage return, newline, or tab characters.- "
                "It cannot consist of only whitespace characters.",
                location=BODY,
                wire_name="synonym",
            ),
        ),
    ),
    _op(
        "delete-synonym",
        "Delete entity value synonym",
        "Delete a synonym from an entity value.This operation is limited to 1000 requests per 30 "
        "minutes. For more information, see **Rate limiting**.",
        method=DELETE,
        path="/v1/workspaces/{workspace_id}/entities/{entity}/values/{value}/synonyms/{synonym}",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("entity", "The name of the entity.", required=True),
            string("value", "The text of the entity value.", required=True),
            string("synonym", "The text of the synonym.", required=True),
        ),
        result=NONE,
    ),
    _op(
        "list-dialog-nodes",
        "List dialog nodes",
        "List the dialog nodes for a workspace.This operation is limited to 2500 requests per 30 "
        "minutes. For more information, see **Rate limiting**.",
        method=GET,
        path="/v1/workspaces/{workspace_id}/dialog_nodes",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            int64("page_limit", "The number of records to return in each page of results."),
            string(
                "sort",
                "The attribute by which returned dialog nodes will be sorted. To reverse the sort "
                "order, prefix the value with a minus sign (`-`).",
            ),
            string("cursor", "A token identifying the page of results to retrieve."),
            boolean(
                "include_audit",
                "Whether to include the audit properties (`created` and `updated` timestamps) in "
                "the response.",
            ),
        ),
    ),
    _op(
        "create-dialog-node",
        "Create dialog node",
        "Create a new dialog node.If you want to create multiple dialog nodes with a single API "
        "call, consider using the **[Update workspace](#update-workspace)** method instead.This "
        "operation is limited to 500 requests per 30 minutes. For more information, see **Rate "
        "limiting**.",
        method=POST,
        path="/v1/workspaces/{workspace_id}/dialog_nodes",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string(
                "dialog_node",
                "The dialog node ID. This string must conform to the following restrictions:- It "
                "can contain only Unicode alphanumeric, space, underscore, hyphen, and dot "
                "characters.",
                required=True,
            ),
            string(
                "description",
                "The description of the dialog node. This string cannot contain carriage return, "
                "newline, or tab characters.",
            ),
            string(
                "conditions",
                "The condition that will trigger the dialog node. This string cannot contain "
                "carriage return, newline, or tab characters.",
            ),
            string(
                "parent",
                "The ID of the parent dialog node. This property is omitted if the dialog node "
                "has no parent.",
            ),
            string(
                "previous_sibling",
                "The ID of the previous sibling dialog node. This property is omitted if the "
                "dialog node has no previous sibling.",
            ),
            json_value(
                "create_dialog_node_output",
                "The output of the dialog node. For more information about how to specify dialog "
                "node output, see the "
                "[documentation](https://cloud.ibm.com/docs/services/assistant?topic=assistant-dialog-overview#dialog-overview-responses).",
                wire_name="output",
            ),
            json_value("context", "The context for the dialog node."),
            json_value("metadata", "The metadata for the dialog node."),
            json_value("next_step", "The next step to execute following this dialog node."),
            string(
                "title",
                "The alias used to identify the dialog node. This string must conform to the "
                "following restrictions:- It can contain only Unicode alphanumeric, space, "
                "underscore, hyphen, and dot characters.",
            ),
            string("type", "How the dialog node is processed."),
            string("event_name", "How an `event_handler` node is processed."),
            string("variable", "The location in the dialog context where output is stored."),
            json_value(
                "actions",
                "An array of objects describing any actions to be invoked by the dialog node.",
            ),
            string("digress_in", "Whether this top-level dialog node can be digressed into."),
            string(
                "digress_out",
                "Whether this dialog node can be returned to after a digression.",
            ),
            string(
                "digress_out_slots",
                "Whether the user can digress to top-level nodes while filling out slots.",
            ),
            string(
                "user_label",
                "A label that can be displayed externally to describe the purpose of the node to "
                "users.",
            ),
        ),
    ),
    _op(
        "get-dialog-node",
        "Get dialog node",
        "Get information about a dialog node.This operation is limited to 6000 requests per 5 "
        "minutes. For more information, see **Rate limiting**.",
        method=GET,
        path="/v1/workspaces/{workspace_id}/dialog_nodes/{dialog_node}",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("dialog_node", "The dialog node ID (for example, `get_order`).", required=True),
            boolean(
                "include_audit",
                "Whether to include the audit properties (`created` and `updated` timestamps) in "
                "the response.",
            ),
        ),
    ),
    _op(
        "update-dialog-node",
        "Update dialog node",
        "Update an existing dialog node with new or modified data.If you want to update multiple "
        "dialog nodes with a single API call, consider using the **[Update "
        "workspace](#update-workspace)** method instead.This operation is limited to 500 requests "
        "per 30 minutes. For more information, see **Rate limiting**.",
        method=POST,
        path="/v1/workspaces/{workspace_id}/dialog_nodes/{dialog_node}",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("dialog_node", "The dialog node ID (for example, `get_order`).", required=True),
            string(
                "new_dialog_node",
                "The dialog node ID. This string must conform to the following restrictions:- It "
                "can contain only Unicode alphanumeric, space, underscore, hyphen, and dot "
                "characters.",
                location=BODY,
                wire_name="dialog_node",
            ),
            string(
                "new_description",
                "The description of the dialog node. This string cannot contain carriage return, "
                "newline, or tab characters.",
                location=BODY,
                wire_name="description",
            ),
            string(
                "new_conditions",
                "The condition that will trigger the dialog node. This string cannot contain "
                "carriage return, newline, or tab characters.",
                location=BODY,
                wire_name="conditions",
            ),
            string(
                "new_parent",
                "The ID of the parent dialog node. This property is omitted if the dialog node "
                "has no parent.",
                location=BODY,
                wire_name="parent",
            ),
            string(
                "new_previous_sibling",
                "The ID of the previous sibling dialog node. This property is omitted if the "
                "dialog node has no previous sibling.",
                location=BODY,
                wire_name="previous_sibling",
            ),
            json_value(
                "new_output",
                "The output of the dialog node. For more information about how to specify dialog "
                "node output, see the "
                "[documentation](https://cloud.ibm.com/docs/services/assistant?topic=assistant-dialog-overview#dialog-overview-responses).",
                location=BODY,
                wire_name="output",
            ),
            json_value(
                "new_context",
                "The context for the dialog node.",
                location=BODY,
                wire_name="context",
            ),
            json_value(
                "new_metadata",
                "The metadata for the dialog node.",
                location=BODY,
                wire_name="metadata",
            ),
            json_value(
                "new_next_step",
                "The next step to execute following this dialog node.",
                location=BODY,
                wire_name="next_step",
            ),
            string(
                "new_title",
                "The alias used to identify the dialog node. This string must conform to the "
                "following restrictions:- It can contain only Unicode alphanumeric, space, "
                "underscore, hyphen, and dot characters.",
                location=BODY,
                wire_name="title",
            ),
            string(
                "new_type",
                "How the dialog node is processed.",
                location=BODY,
                wire_name="type",
            ),
            string(
                "new_event_name",
                "How an `event_handler` node is processed.",
                location=BODY,
                wire_name="event_name",
            ),
            string(
                "new_variable",
                "The location in the dialog context where output is stored.",
                location=BODY,
                wire_name="variable",
            ),
            json_value(
                "new_actions",
                "An array of objects describing any actions to be invoked by the dialog node.",
                location=BODY,
                wire_name="actions",
            ),
            string(
                "new_digress_in",
                "Whether this top-level dialog node can be digressed into.",
                location=BODY,
                wire_name="digress_in",
            ),
            string(
                "new_digress_out",
                "Whether this dialog node can be returned to after a digression.",
                location=BODY,
                wire_name="digress_out",
            ),
            string(
                "new_digress_out_slots",
                "Whether the user can digress to top-level nodes while filling out slots.",
                location=BODY,
                wire_name="digress_out_slots",
            ),
            string(
                "new_user_label",
                "A label that can be displayed externally to describe the purpose of the node to "
                "users.",
                location=BODY,
                wire_name="user_label",
            ),
        ),
    ),
    _op(
        "delete-dialog-node",
        "Delete dialog node",
        "Delete a dialog node from a workspace.This operation is limited to 500 requests per 30 "
        "minutes. For more information, see **Rate limiting**.",
        method=DELETE,
        path="/v1/workspaces/{workspace_id}/dialog_nodes/{dialog_node}",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string("dialog_node", "The dialog node ID (for example, `get_order`).", required=True),
        ),
        result=NONE,
    ),
    _op(
        "list-logs",
        "List log events in a workspace",
        "List the events from the log of a specific workspace.If **cursor** is not specified, "
        "this operation is limited to 40 requests per 30 minutes. If **cursor** is specified, the "
        "limit is 120 requests per minute. For more information, see **Rate limiting**.",
        method=GET,
        path="/v1/workspaces/{workspace_id}/logs",
        flags=(
            string("workspace_id", "Unique identifier of the workspace.", required=True),
            string(
                "sort",
                "How to sort the returned log events. You can sort by **request_timestamp**. To "
                "reverse the sort order, prefix the parameter value with a minus sign (`-`).",
            ),
            string(
                "filter",
                "A cacheable parameter that limits the results to those matching the specified "
                "filter. For more information, see the "
                "[documentation](https://cloud.ibm.com/docs/services/assistant?topic=assistant-filter-reference#filter-reference).",
            ),
            int64("page_limit", "The number of records to return in each page of results."),
            string("cursor", "A token identifying the page of results to retrieve."),
        ),
    ),
    _op(
        "list-all-logs",
        "List log events in all workspaces",
        "List the events from the logs of all workspaces in the service instance.If **cursor** is "
        "not specified, this operation is limited to 40 requests per 30 minutes. If **cursor** is "
        "specified, the limit is 120 requests per minute. For more information, see **Rate "
        "limiting**.",
        method=GET,
        path="/v1/logs",
        flags=(
            string(
                "filter",
                "A cacheable parameter that limits the results to those matching the specified "
                "filter. You must specify a filter query that includes a value for `language`, as "
                "well as a value for `workspace_id` or `request.context.metadata.deployment`. For "
                "more information, see the "
                "[documentation](https://cloud.ibm.com/docs/services/assistant?topic=assistant-filter-reference#filter-reference).",
                required=True,
            ),
            string(
                "sort",
                "How to sort the returned log events. You can sort by **request_timestamp**. To "
                "reverse the sort order, prefix the parameter value with a minus sign (`-`).",
            ),
            int64("page_limit", "The number of records to return in each page of results."),
            string("cursor", "A token identifying the page of results to retrieve."),
        ),
    ),
    _op(
        "delete-user-data",
        "Delete labeled data",
        "Deletes all data associated with a specified customer ID. The method has no effect if no "
        "data is associated with the customer ID. You associate a customer ID with data by "
        "passing the `X-Watson-Metadata` header with a request that passes data. For more "
        "information about personal data and customer IDs, see [Information "
        "security](https://cloud.ibm.com/docs/services/assistant?topic=assistant-information-security#information-security).",
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
    tag="assistant-v1",
    credential_name="assistant",
    default_url="https://gateway.watsonplatform.net/assistant/api",
    short_help="Watson Assistant v1",
    long_help=(
        "Watson Assistant v1 provides authoring methods your application can use to "
        "create or update a workspace, and to send messages to it."
    ),
    version_required=True,
    operations=OPERATIONS,
)
