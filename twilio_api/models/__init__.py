"""Typed request and response shapes for the Twilio API.

Response models mirror the JSON Twilio returns. Request models serialize to
the PascalCase query/form keys the API expects, leaving out unset fields.

    from twilio_api.models import CreateMessageRequest

    body = CreateMessageRequest(to="+15558675310", from_="+15017122661", body="Hi")
    body.to_params()  # {"To": "+15558675310", "From": "+15017122661", "Body": "Hi"}
"""

from twilio_api.models._base import Page, PageParams, TwilioParams, TwilioResource
from twilio_api.models.accounts import (
    Account,
    AccountList,
    Balance,
    CreateAccountRequest,
    ListAccountParams,
    UpdateAccountRequest,
)
from twilio_api.models.applications import (
    Application,
    ApplicationList,
    ApplicationRequest,
    ListApplicationParams,
)
from twilio_api.models.calls import (
    Call,
    CallList,
    CreateCallRequest,
    ListCallParams,
    UpdateCallRequest,
)
from twilio_api.models.incoming_phone_numbers import (
    CreateIncomingPhoneNumberRequest,
    IncomingPhoneNumber,
    IncomingPhoneNumberList,
    ListIncomingPhoneNumberParams,
    UpdateIncomingPhoneNumberRequest,
)
from twilio_api.models.keys import Key, KeyList, KeyRequest, NewKey
from twilio_api.models.messages import (
    CreateMessageRequest,
    ListMessageParams,
    Message,
    MessageList,
    UpdateMessageRequest,
)
from twilio_api.models.queues import CreateQueueRequest, Queue, QueueList, UpdateQueueRequest
from twilio_api.models.recordings import (
    FetchRecordingParams,
    ListRecordingParams,
    Recording,
    RecordingList,
)
from twilio_api.models.sip import (
    CreateCredentialRequest,
    Credential,
    CredentialList,
    CredentialListList,
    CredentialListRequest,
    CredentialPage,
    UpdateCredentialRequest,
)

__all__ = [
    "TwilioResource",
    "TwilioParams",
    "Page",
    "PageParams",
    "Account",
    "AccountList",
    "Balance",
    "CreateAccountRequest",
    "ListAccountParams",
    "UpdateAccountRequest",
    "Application",
    "ApplicationList",
    "ApplicationRequest",
    "ListApplicationParams",
    "Call",
    "CallList",
    "CreateCallRequest",
    "ListCallParams",
    "UpdateCallRequest",
    "IncomingPhoneNumber",
    "IncomingPhoneNumberList",
    "CreateIncomingPhoneNumberRequest",
    "ListIncomingPhoneNumberParams",
    "UpdateIncomingPhoneNumberRequest",
    "Key",
    "KeyList",
    "KeyRequest",
    "NewKey",
    "Message",
    "MessageList",
    "CreateMessageRequest",
    "ListMessageParams",
    "UpdateMessageRequest",
    "Queue",
    "QueueList",
    "CreateQueueRequest",
    "UpdateQueueRequest",
    "Recording",
    "RecordingList",
    "ListRecordingParams",
    "FetchRecordingParams",
    "CredentialList",
    "CredentialListList",
    "CredentialListRequest",
    "Credential",
    "CredentialPage",
    "CreateCredentialRequest",
    "UpdateCredentialRequest",
]
