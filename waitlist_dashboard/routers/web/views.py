"""Web UI routes - server-rendered waitlist dashboard."""
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from waitlist_dashboard.config import settings
from waitlist_dashboard.dependencies import get_waitlist_controller
from waitlist_dashboard.services.waitlist_controller import WaitlistController
from waitlist_dashboard.utils.formatting import format_joined_date, mailto_link, role_label

router = APIRouter()
templates = Jinja2Templates(directory=str(Path(__file__).resolve().parents[2] / "templates"))
templates.env.filters["role_label"] = role_label
templates.env.filters["mailto"] = mailto_link
templates.env.filters["joined_date"] = lambda value: format_joined_date(
    value, settings.display_timezone
)


@router.get("/", response_class=HTMLResponse)
async def dashboard(
    request: Request, controller: WaitlistController = Depends(get_waitlist_controller)
):
    """Main dashboard. Triggers the initial fetch if startup did not."""
    state = await controller.mount()
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "app_name": settings.app_name,
            "view": state.view,
            "error": state.error,
            "entries": state.entries,
            "stats": state.stats,
        },
    )


@router.post("/refresh")
async def refresh(controller: WaitlistController = Depends(get_waitlist_controller)):
    """Form target for both "Refresh" and "Try Again"."""
    await controller.refresh()
    return RedirectResponse(url="/", status_code=303)
