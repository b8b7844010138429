"""
Session context shared by every view of a request.

The context owns the current principal and the session state machine:

    UNKNOWN --resolve(principal)--> AUTHENTICATED
    UNKNOWN --resolve(None)-------> UNAUTHENTICATED
    AUTHENTICATED --sign_out/expire--> UNAUTHENTICATED
    UNAUTHENTICATED --begin_login--> UNKNOWN

Views receive the context at construction and subscribe to transitions
instead of looking the session up globally.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from unfold_india.core.exceptions import SessionTransitionError, Unauthenticated

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    UNKNOWN = "unknown"
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"


@dataclass(frozen=True)
class Principal:
    id: str
    email: str


SessionListener = Callable[[SessionState, SessionState], None]


class SessionContext:
    def __init__(self) -> None:
        self._state = SessionState.UNKNOWN
        self._principal: Principal | None = None
        self._listeners: list[SessionListener] = []

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def principal(self) -> Principal | None:
        return self._principal

    @property
    def is_authenticated(self) -> bool:
        return self._state is SessionState.AUTHENTICATED

    def require_principal(self) -> Principal:
        if self._principal is None:
            raise Unauthenticated()
        return self._principal

    def subscribe(self, listener: SessionListener) -> Callable[[], None]:
        """Register ``listener(previous, current)``; returns an unsubscribe handle."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def resolve(self, principal: Principal | None) -> None:
        if self._state is not SessionState.UNKNOWN:
            raise SessionTransitionError(
                "Session can only be resolved while unknown",
                {"state": self._state.value},
            )
        self._principal = principal
        if principal is None:
            self._transition(SessionState.UNAUTHENTICATED)
        else:
            self._transition(SessionState.AUTHENTICATED)

    def sign_out(self) -> None:
        self._end("sign_out")

    def expire(self) -> None:
        self._end("expire")

    def begin_login(self) -> None:
        if self._state is not SessionState.UNAUTHENTICATED:
            raise SessionTransitionError(
                "A new login can only start from a signed-out session",
                {"state": self._state.value},
            )
        self._transition(SessionState.UNKNOWN)

    def _end(self, reason: str) -> None:
        if self._state is not SessionState.AUTHENTICATED:
            return
        logger.info(f"Session ended ({reason}) for principal {self._principal.id}")
        self._principal = None
        self._transition(SessionState.UNAUTHENTICATED)

    def _transition(self, new_state: SessionState) -> None:
        previous = self._state
        self._state = new_state
        # Copy: listeners may unsubscribe while being notified
        for listener in list(self._listeners):
            try:
                listener(previous, new_state)
            except Exception:
                logger.exception(
                    f"Session listener failed on {previous.value} -> {new_state.value}"
                )
