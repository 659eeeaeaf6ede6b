"""API endpoints for dry-running the router."""

import structlog
from fastapi import APIRouter, Depends

from swap_router.api.schemas import RouteRequest, SimulationResponse, SwapLegRequest
from swap_router.contract import execute_swap_operations
from swap_router.operations import execute_swap_operation
from swap_router.querier import MessageInfo
from swap_router.settings import RouterSettings

logger = structlog.get_logger()

router = APIRouter()

# Read once at import; ROUTER_* environment variables override the defaults
SETTINGS = RouterSettings.from_env()


def get_settings() -> RouterSettings:
    """Dependency provider for router settings.

    Override this in tests:
        app.dependency_overrides[get_settings] = lambda: RouterSettings(...)
    """
    return SETTINGS


@router.post("/swap-leg", response_model_exclude_none=True)
async def simulate_swap_leg(
    request: SwapLegRequest,
    settings: RouterSettings = Depends(get_settings),
) -> SimulationResponse:
    """Build the message one swap leg would emit against the snapshot.

    Error Handling:
        - Invalid request schema: 422 (Pydantic)
        - Router errors (unauthorized, pair not found, ...): 400 with error code
    """
    deps, env = request.snapshot.build(settings)
    sender = request.sender or env.contract_address

    logger.info(
        "simulate_swap_leg",
        router=env.contract_address,
        sender=sender,
        operation=request.operation.kind,
        single=request.single,
    )

    response = execute_swap_operation(
        deps,
        env,
        MessageInfo(sender=sender),
        request.operation,
        to=request.to,
        max_spread=request.max_spread,
        single=request.single,
    )
    return SimulationResponse.from_response(response)


@router.post("/route", response_model_exclude_none=True)
async def simulate_route(
    request: RouteRequest,
    settings: RouterSettings = Depends(get_settings),
) -> SimulationResponse:
    """Plan a route: the per-hop self messages and the optional minimum-receive check."""
    deps, env = request.snapshot.build(settings)

    logger.info(
        "simulate_route",
        router=env.contract_address,
        sender=request.sender,
        hops=len(request.operations),
    )

    response = execute_swap_operations(
        deps,
        env,
        MessageInfo(sender=request.sender),
        request.operations,
        minimum_receive=(
            int(request.minimum_receive) if request.minimum_receive is not None else None
        ),
        to=request.to,
        max_spread=request.max_spread,
        settings=settings,
    )
    return SimulationResponse.from_response(response)
