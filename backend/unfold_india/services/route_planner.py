from unfold_india.core.exceptions import ValidationError
from unfold_india.schemas.routes import FastestRoute, RoutePlan, SafestRoute
from unfold_india.services.latency import deferred

FASTEST_ROUTE = FastestRoute(
    duration="4h 32m",
    distance="287 km",
    traffic="Moderate",
    route="NH44 → State Highway 15 → City Ring Road",
)

SAFEST_ROUTE = SafestRoute(
    duration="5h 15m",
    distance="312 km",
    safety_score=92,
    route="Express Highway → Bypass Route → Local Roads",
    features=["Well-lit roads", "Police checkpoints", "Rest stops"],
)


class RoutePlanner:
    """Returns the same fastest/safest pair for any trip."""

    def __init__(self, search_delay: float = 0.0):
        self.search_delay = search_delay

    async def find_routes(self, start_location: str, destination: str) -> RoutePlan:
        start_location = start_location.strip()
        destination = destination.strip()
        if not start_location:
            raise ValidationError("Start location is required", field="start_location")
        if not destination:
            raise ValidationError("Destination is required", field="destination")

        return await deferred(
            lambda: RoutePlan(
                start_location=start_location,
                destination=destination,
                fastest=FASTEST_ROUTE.model_copy(),
                safest=SAFEST_ROUTE.model_copy(deep=True),
            ),
            self.search_delay,
        )
