from fastapi import APIRouter, Depends

from unfold_india.api import deps
from unfold_india.core.exceptions import NotFound
from unfold_india.core.session_context import SessionContext
from unfold_india.repositories.profile_repository import ProfileRepository
from unfold_india.schemas.home import (
    AccountSummary,
    FeatureCard,
    HomeContent,
    NavigationState,
    NavItem,
)
from unfold_india.services.route_guard import RouteGuard

router = APIRouter()

HOME = HomeContent(
    name="Unfold India",
    tagline="Your AI travel companion for exploring India",
    features=[
        FeatureCard(
            title="Translator",
            description="Translate text to multiple Indian languages instantly",
            path="/translator",
        ),
        FeatureCard(
            title="Safe Directions",
            description="AI-powered route planning with safety recommendations",
            path="/routes",
        ),
        FeatureCard(
            title="AI Chatbot",
            description="Your intelligent travel companion for India",
            path="/chatbot",
        ),
    ],
)

NAV_ITEMS = [
    ("Home", "/"),
    ("Chatbot", "/chatbot"),
    ("Routes", "/routes"),
    ("Translator", "/translator"),
    ("My Chats", "/my-chats"),
    ("My Profile", "/my-profile"),
]


def account_summary(email: str, full_name: str | None, avatar_url: str | None) -> AccountSummary:
    display_name = full_name or email.split("@")[0] or "Traveler"
    initial = (full_name or email or "?")[0].upper()
    return AccountSummary(
        email=email,
        display_name=display_name,
        initial=initial,
        avatar_url=avatar_url or None,
    )


@router.get("/", response_model=HomeContent)
def read_home() -> HomeContent:
    return HOME


@router.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/navigation", response_model=NavigationState)
def read_navigation(
    context: SessionContext = Depends(deps.get_session_context),
    profiles: ProfileRepository = Depends(deps.get_profile_repository),
) -> NavigationState:
    guard = RouteGuard(context)
    items = []
    for name, path in NAV_ITEMS:
        decision = guard.decide(path)
        items.append(
            NavItem(
                name=name,
                path=path,
                outcome=decision.outcome,
                redirect_to=decision.redirect_to,
            )
        )

    account = None
    if context.is_authenticated:
        principal = context.principal
        try:
            profile = profiles.fetch()
            account = account_summary(principal.email, profile.full_name, profile.avatar_url)
        except NotFound:
            account = account_summary(principal.email, None, None)

    return NavigationState(session=context.state.value, items=items, account=account)
