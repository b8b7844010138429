from fastapi import APIRouter, Depends

from unfold_india.api import deps
from unfold_india.schemas.routes import RoutePlan, RouteSearchRequest
from unfold_india.services.route_planner import RoutePlanner

router = APIRouter()


@router.post("/search", response_model=RoutePlan)
async def search_routes(
    payload: RouteSearchRequest,
    planner: RoutePlanner = Depends(deps.get_route_planner),
) -> RoutePlan:
    return await planner.find_routes(payload.start_location, payload.destination)
