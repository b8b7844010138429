from typing import Literal

from pydantic import BaseModel


class FeatureCard(BaseModel):
    title: str
    description: str
    path: str


class HomeContent(BaseModel):
    name: str
    tagline: str
    features: list[FeatureCard]


class NavItem(BaseModel):
    name: str
    path: str
    outcome: Literal["render", "wait", "redirect"]
    redirect_to: str | None = None


class AccountSummary(BaseModel):
    email: str
    display_name: str
    initial: str
    avatar_url: str | None = None


class NavigationState(BaseModel):
    session: Literal["unknown", "authenticated", "unauthenticated"]
    items: list[NavItem]
    account: AccountSummary | None = None
