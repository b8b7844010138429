"""
Route guard for the front-end views.

Decides, from the session state alone, whether a view renders, waits for
the session check, or redirects to the login view.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, Literal

from unfold_india.core.session_context import SessionContext, SessionState

logger = logging.getLogger(__name__)

LOGIN_PATH = "/login"
PROTECTED_PATHS = frozenset(
    {"/chatbot", "/routes", "/translator", "/my-chats", "/my-profile"}
)


@dataclass(frozen=True)
class GuardDecision:
    outcome: Literal["render", "wait", "redirect"]
    redirect_to: str | None = None


RENDER = GuardDecision("render")
WAIT = GuardDecision("wait")


class RouteGuard:
    def __init__(
        self,
        context: SessionContext,
        protected_paths: Iterable[str] = PROTECTED_PATHS,
        login_path: str = LOGIN_PATH,
    ):
        self.context = context
        self.protected_paths = frozenset(protected_paths)
        self.login_path = login_path

    def is_protected(self, path: str) -> bool:
        return path.rstrip("/") in self.protected_paths

    def decide(self, path: str) -> GuardDecision:
        if not self.is_protected(path):
            return RENDER
        state = self.context.state
        if state is SessionState.AUTHENTICATED:
            return RENDER
        if state is SessionState.UNKNOWN:
            return WAIT
        return GuardDecision("redirect", self.login_path)

    def watch(self, path: str, on_redirect: Callable[[str], None]) -> Callable[[], None]:
        """Redirect a rendered protected view once the session ends.

        Returns the unsubscribe handle; call it when the view goes away.
        """
        if not self.is_protected(path):
            return lambda: None

        def _on_transition(previous: SessionState, current: SessionState) -> None:
            if current is SessionState.UNAUTHENTICATED:
                logger.info(f"Session ended while {path} was open, redirecting")
                on_redirect(self.login_path)

        return self.context.subscribe(_on_transition)
