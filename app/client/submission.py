"""
FormSubmission: drives one form from submit to outcome.

IDLE → VALIDATING → REJECTED_CLIENT_INVALID        (no request sent)
                  → SENDING → SUCCEEDED
                            → REJECTED_SERVER_INVALID (4xx)
                            → REJECTED_SERVER_ERROR   (5xx, transport failure, bad body)

Each submit() is a single one-shot request: no retries, no cancellation and
no guard against a second submit while one is in flight.
"""
import enum
from dataclasses import dataclass, field
from typing import Any, Optional

import httpx

from app.client.forms import AccountForm
from app.client.notifications import Notifier
from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)

MSG_GENERIC_ERROR = "An error occurred."


class SubmissionState(str, enum.Enum):
    IDLE = "IDLE"
    VALIDATING = "VALIDATING"
    SENDING = "SENDING"
    SUCCEEDED = "SUCCEEDED"
    REJECTED_CLIENT_INVALID = "REJECTED_CLIENT_INVALID"
    REJECTED_SERVER_INVALID = "REJECTED_SERVER_INVALID"
    REJECTED_SERVER_ERROR = "REJECTED_SERVER_ERROR"


TERMINAL_STATES = {
    SubmissionState.SUCCEEDED,
    SubmissionState.REJECTED_CLIENT_INVALID,
    SubmissionState.REJECTED_SERVER_INVALID,
    SubmissionState.REJECTED_SERVER_ERROR,
}


@dataclass
class SubmissionOutcome:
    state: SubmissionState
    message: Optional[str] = None
    status_code: Optional[int] = None
    data: dict[str, Any] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return self.state == SubmissionState.SUCCEEDED


def create_client() -> httpx.AsyncClient:
    """HTTP client pointed at the configured API."""
    return httpx.AsyncClient(
        base_url=settings.CLIENT_BASE_URL + settings.API_PREFIX,
        timeout=settings.CLIENT_TIMEOUT,
        headers={"Content-Type": "application/json"},
    )


class FormSubmission:
    def __init__(
        self,
        form: AccountForm,
        client: httpx.AsyncClient,
        notifier: Optional[Notifier] = None,
    ):
        self.form = form
        self.client = client
        self.notifier = notifier or Notifier()
        self.state = SubmissionState.IDLE
        self.transitions: list[SubmissionState] = [SubmissionState.IDLE]

    @property
    def finished(self) -> bool:
        return self.state in TERMINAL_STATES

    def _enter(self, state: SubmissionState) -> None:
        self.state = state
        self.transitions.append(state)

    async def submit(self) -> SubmissionOutcome:
        self._enter(SubmissionState.VALIDATING)
        if not self.form.run_validation():
            self._enter(SubmissionState.REJECTED_CLIENT_INVALID)
            logger.info(
                "form_invalid",
                endpoint=self.form.endpoint,
                fields=sorted(self.form.errors),
            )
            return SubmissionOutcome(self.state, data={"errors": dict(self.form.errors)})

        self._enter(SubmissionState.SENDING)
        notice_id = self.notifier.loading(self.form.loading_message)

        try:
            response = await self.client.request(
                self.form.method, self.form.endpoint, json=self.form.payload()
            )
        except httpx.TransportError as e:
            logger.warning("form_transport_failure", endpoint=self.form.endpoint, error=str(e))
            return self._fail(SubmissionState.REJECTED_SERVER_ERROR, MSG_GENERIC_ERROR, notice_id)

        try:
            data = response.json()
        except ValueError:
            data = {}
        if not isinstance(data, dict):
            data = {}

        if response.is_success:
            self._enter(SubmissionState.SUCCEEDED)
            if self.form.clear_on_success:
                self.form.clear()
            self.notifier.success(self.form.success_message, notice_id)
            logger.info("form_submitted", endpoint=self.form.endpoint, status_code=response.status_code)
            return SubmissionOutcome(
                self.state, self.form.success_message, response.status_code, data
            )

        state = (
            SubmissionState.REJECTED_SERVER_INVALID
            if response.is_client_error
            else SubmissionState.REJECTED_SERVER_ERROR
        )
        message = data.get("message") or MSG_GENERIC_ERROR
        return self._fail(state, message, notice_id, response.status_code, data)

    def _fail(
        self,
        state: SubmissionState,
        message: str,
        notice_id: str,
        status_code: Optional[int] = None,
        data: Optional[dict[str, Any]] = None,
    ) -> SubmissionOutcome:
        self._enter(state)
        self.notifier.error(message, notice_id)
        logger.info(
            "form_rejected",
            endpoint=self.form.endpoint,
            state=state.value,
            status_code=status_code,
        )
        return SubmissionOutcome(state, message, status_code, data or {})
