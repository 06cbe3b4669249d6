"""Shared FastAPI dependencies."""

import logging

from fastapi import Request

from waitlist_dashboard.services.waitlist_controller import WaitlistController, build_controller

logger = logging.getLogger(__name__)


def get_waitlist_controller(request: Request) -> WaitlistController:
    """Dependency for getting the application's waitlist controller."""
    controller = getattr(request.app.state, "waitlist_controller", None)
    if controller is None:
        # Lifespan did not run (e.g. app used without startup events)
        logger.info("Creating waitlist controller on first use")
        controller = build_controller()
        request.app.state.waitlist_controller = controller
    return controller
