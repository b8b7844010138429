from pydantic import BaseModel


class RouteSearchRequest(BaseModel):
    start_location: str
    destination: str


class FastestRoute(BaseModel):
    duration: str
    distance: str
    traffic: str
    route: str


class SafestRoute(BaseModel):
    duration: str
    distance: str
    safety_score: int
    route: str
    features: list[str]


class RoutePlan(BaseModel):
    start_location: str
    destination: str
    fastest: FastestRoute
    safest: SafestRoute
