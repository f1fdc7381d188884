"""Submission lifecycle for the sign-up form."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, Mapping, Optional, Protocol

from .mapper import assemble
from .validators import missing_required_fields

log = logging.getLogger(__name__)


class SubmissionState(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCESS = "success"


class Transport(Protocol):
    def send(self, payload: Dict[str, Any]) -> Awaitable[Any]: ...


StateListener = Callable[[SubmissionState], None]


class SubmissionController:
    """Single-flight submit: idle -> loading -> success | idle.

    Validation failures and double submits are silent no-ops. A failed
    webhook call puts the form back to idle so the user can retry; the UI
    shows nothing about the failure, only the log does.
    """

    def __init__(self, transport: Transport, on_state_change: Optional[StateListener] = None):
        self._transport = transport
        self.on_state_change = on_state_change
        self._state = SubmissionState.IDLE
        self._in_flight = False

    @property
    def state(self) -> SubmissionState:
        return self._state

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    @property
    def can_submit(self) -> bool:
        return not self._in_flight and self._state is not SubmissionState.SUCCESS

    def _set_state(self, state: SubmissionState) -> None:
        self._state = state
        if self.on_state_change is not None:
            self.on_state_change(state)

    async def submit(self, form_fields: Mapping[str, Any]) -> SubmissionState:
        """Validate, send and reflect the outcome of one submit event."""

        if self._in_flight:
            log.debug("signup.submit.skip reason=in_flight")
            return self._state

        if self._state is not SubmissionState.IDLE:
            log.debug("signup.submit.skip reason=state state=%s", self._state.value)
            return self._state

        missing = missing_required_fields(form_fields)
        if missing:
            log.debug("signup.submit.skip reason=missing fields=%s", ",".join(missing))
            return self._state

        self._in_flight = True
        self._set_state(SubmissionState.LOADING)
        try:
            payload = assemble(form_fields)
            log.info("signup.submit.start email=%s", payload.email)
            await self._transport.send(payload.to_dict())
        except Exception as exc:  # noqa: BLE001
            log.warning("signup.submit.fail exc=%s", exc)
            self._set_state(SubmissionState.IDLE)
        else:
            log.info("signup.submit.ok")
            self._set_state(SubmissionState.SUCCESS)
        finally:
            self._in_flight = False
        return self._state

    def reset(self) -> None:
        self._in_flight = False
        self._state = SubmissionState.IDLE
