# =============================================================================
# core/services/contact_submitter.py - Contact Form Submission
# =============================================================================
# Owns one contact form: its four fields and its submission status.
# Submitting sends exactly one POST <backend>/api/contact with the fields
# as JSON. There is no retry; the visitor resubmits after an error.
# =============================================================================

import logging

import httpx

from core.models.contact import CONTACT_FIELDS, ContactFormState, SubmissionStatus
from lib.backend_client import CONTACT_PATH, SubmissionError, build_url
from lib.utils import Liveness

logger = logging.getLogger(__name__)


class ContactFormSubmitter:
    """
    Contact form state plus the submit operation.

    Status transitions:
        idle -> sending           on submit()
        sending -> sent           backend answered with a success status
        sending -> error          non-success status or transport error
        sent/error -> sending     on a fresh submit()

    While the status is `sending`, submit() is a no-op (the submit button
    is disabled in that state).

    Example:
        submitter = ContactFormSubmitter("http://localhost:8000", client)
        submitter.update_field("name", "Ada")
        status = await submitter.submit()
    """

    def __init__(
        self,
        base_url: str,
        client: httpx.AsyncClient,
        liveness: Liveness | None = None,
        form: ContactFormState | None = None,
    ):
        self.base_url = base_url
        self.client = client
        self.liveness = liveness or Liveness("contact-form")
        self.form = form or ContactFormState()
        self.status = SubmissionStatus.IDLE

    @property
    def url(self) -> str:
        return build_url(self.base_url, CONTACT_PATH)

    @property
    def can_submit(self) -> bool:
        return self.status != SubmissionStatus.SENDING

    def update_field(self, name: str, value: str) -> None:
        """
        Set one form field.

        Raises:
            ValueError: If `name` isn't one of the form fields
        """
        if name not in CONTACT_FIELDS:
            raise ValueError(f"Unknown contact field: {name!r} (expected one of {CONTACT_FIELDS})")
        self.form = self.form.model_copy(update={name: value})

    def reset(self) -> None:
        self.form = ContactFormState()

    async def submit(self) -> SubmissionStatus:
        """
        Send the form to the backend.

        Returns:
            The status after the attempt (unchanged if a send is already in
            flight)
        """
        if not self.can_submit:
            logger.debug("Submit ignored: a submission is already in flight")
            return self.status

        if not self.liveness.alive:
            logger.debug(f"Submit ignored: {self.liveness!r}")
            return self.status

        self.status = SubmissionStatus.SENDING
        payload = self.form.model_dump()

        # A scope closed mid-send leaves this instance in `sending` for good;
        # nothing reads it after teardown.
        try:
            await self._send(payload)
        except SubmissionError as e:
            if self.liveness.alive:
                logger.warning(f"{e} details={e.details}")
                self.status = SubmissionStatus.ERROR
            return self.status

        if self.liveness.alive:
            logger.info("Contact form submitted")
            self.status = SubmissionStatus.SENT
            self.reset()
        return self.status

    async def _send(self, payload: dict[str, str]) -> None:
        """
        POST the payload.

        Raises:
            SubmissionError: On transport errors or a non-success status
        """
        try:
            response = await self.client.post(self.url, json=payload)
        except httpx.HTTPError as e:
            raise SubmissionError(self.url, f"{type(e).__name__}: {e}") from e

        if not response.is_success:
            raise SubmissionError(
                self.url,
                f"HTTP {response.status_code}",
                status_code=response.status_code,
            )
