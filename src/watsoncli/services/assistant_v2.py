"""Operations of the Watson Assistant v2 service."""

from __future__ import annotations

from functools import partial

from watsoncli.models import ServiceSpec
from watsoncli.services.common import (
    DELETE,
    NONE,
    POST,
    json_value,
    operation,
    string,
)

_op = partial(operation, versioned=True)

OPERATIONS = (
    _op(
        "create-session",
        "Create a session",
        "Create a new session. A session is used to send user input to a skill and receive "
        "responses. It also maintains the state of the conversation.",
        method=POST,
        path="/v2/assistants/{assistant_id}/sessions",
        flags=(
            string(
                "assistant_id",
                "Unique identifier of the assistant. To find the assistant ID in the Watson "
                "Assistant user interface, open the assistant settings and click **API Details**. "
                "For information about creating assistants, see the "
                "[documentation](https://cloud.ibm.com/docs/services/assistant?topic=assistant-assistant-add#assistant-add-task).**Note:** "
                "Currently, the v2 API does not support creating assistants.",
                required=True,
            ),
        ),
    ),
    _op(
        "delete-session",
        "Delete session",
        "Deletes a session explicitly before it times out.",
        method=DELETE,
        path="/v2/assistants/{assistant_id}/sessions/{session_id}",
        flags=(
            string(
                "assistant_id",
                "Unique identifier of the assistant. To find the assistant ID in the Watson "
                "Assistant user interface, open the assistant settings and click **API Details**. "
                "For information about creating assistants, see the "
                "[documentation](https://cloud.ibm.com/docs/services/assistant?topic=assistant-assistant-add#assistant-add-task).**Note:** "
                "Currently, the v2 API does not support creating assistants.",
                required=True,
            ),
            string("session_id", "Unique identifier of the session.", required=True),
        ),
        result=NONE,
    ),
    _op(
        "message",
        "Send user input to assistant",
        "Send user input to an assistant and receive a response.There is no rate limit for this "
        "operation.",
        method=POST,
        path="/v2/assistants/{assistant_id}/sessions/{session_id}/message",
        flags=(
            string(
                "assistant_id",
                "Unique identifier of the assistant. To find the assistant ID in the Watson "
                "Assistant user interface, open the assistant settings and click **API Details**. "
                "For information about creating assistants, see the "
                "[documentation](https://cloud.ibm.com/docs/services/assistant?topic=assistant-assistant-add#assistant-add-task).**Note:** "
                "Currently, the v2 API does not support creating assistants.",
                required=True,
            ),
            string("session_id", "Unique identifier of the session.", required=True),
            json_value("input", "An input object that includes the input text."),
            json_value(
                "context",
                "State information for the conversation. The context is stored by the assistant "
                "on a per-session basis. You can use this property to set or modify context "
                "variables, which can also be accessed by dialog nodes.",
            ),
        ),
    ),
)

SERVICE = ServiceSpec(
    tag="assistant-v2",
    credential_name="assistant",
    default_url="https://gateway.watsonplatform.net/assistant/api",
    short_help="Watson Assistant v2",
    long_help=(
        "Watson Assistant v2 provides runtime methods your client application can use "
        "to send user input to an assistant and receive a response."
    ),
    version_required=True,
    operations=OPERATIONS,
)
