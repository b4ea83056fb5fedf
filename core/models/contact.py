# =============================================================================
# core/models/contact.py - Contact Form Schemas
# =============================================================================
# These models define the contact form contract:
# - ContactFormState: the four form fields, edited one at a time
# - SubmissionStatus: lifecycle of the submission request
# - ContactSubmission: validated JSON body for POST /api/v1/contact
# =============================================================================

from enum import Enum

from pydantic import BaseModel, Field


CONTACT_FIELDS = ("name", "email", "company", "message")


class SubmissionStatus(str, Enum):
    """
    States of a contact form submission.

    - idle: nothing submitted yet
    - sending: request in flight, submit button disabled
    - sent: backend accepted the submission, form cleared
    - error: backend rejected it or was unreachable, form kept

    Flow: idle -> sending -> (sent | error) -> sending -> ...
    """
    IDLE = "idle"
    SENDING = "sending"
    SENT = "sent"
    ERROR = "error"


class ContactFormState(BaseModel):
    """
    Current values of the contact form fields.

    All fields are plain strings. Serialized as-is into the request body.
    """

    name: str = ""
    email: str = ""
    company: str = ""
    message: str = ""


class ContactSubmission(BaseModel):
    """
    JSON body accepted by POST /api/v1/contact.

    Mirrors the HTML form's `required` attributes: name, email and message
    must be non-empty, company is optional. Email format is not checked.

    Example:
        {
            "name": "Ada",
            "email": "ada@example.com",
            "company": "",
            "message": "Let's talk"
        }
    """

    name: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)
    company: str = ""
    message: str = Field(..., min_length=1)

    def to_form_state(self) -> ContactFormState:
        return ContactFormState(**self.model_dump())
