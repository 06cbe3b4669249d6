"""API routes for the waitlist dashboard."""
from fastapi import APIRouter, Depends

from waitlist_dashboard.dependencies import get_waitlist_controller
from waitlist_dashboard.schemas import WaitlistStateResponse, WaitlistStats
from waitlist_dashboard.services.waitlist_controller import WaitlistController

router = APIRouter(prefix="/api/v1/waitlist", tags=["waitlist"])


@router.get("", response_model=WaitlistStateResponse)
def get_waitlist(controller: WaitlistController = Depends(get_waitlist_controller)):
    """Current fetch state, entries and stats."""
    return controller.state.to_dict()


@router.get("/stats", response_model=WaitlistStats)
def get_waitlist_stats(controller: WaitlistController = Depends(get_waitlist_controller)):
    """Counts for the currently held entries."""
    return controller.stats


@router.post("/refresh", response_model=WaitlistStateResponse)
async def refresh_waitlist(controller: WaitlistController = Depends(get_waitlist_controller)):
    """Refetch the waitlist from the upstream endpoint."""
    state = await controller.refresh()
    return state.to_dict()
