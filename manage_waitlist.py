import argparse
import asyncio
import json
import logging
import os
import sys

# Add the project root to the Python path
project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.insert(0, project_root)


from waitlist_dashboard.config import settings
from waitlist_dashboard.services.waitlist_controller import WaitlistController, build_controller
from waitlist_dashboard.utils.formatting import format_joined_date, role_label

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

TABLE_COLUMNS = ("Name", "Email", "Occupation", "Role", "Joined")


def load_waitlist(controller: WaitlistController) -> bool:
    """
    Run the initial fetch.

    Returns:
        True when the waitlist was loaded, False if the fetch failed.
    """
    state = asyncio.run(controller.mount())
    if state.error:
        logger.error(f"Could not load waitlist from {settings.waitlist_api_url}: {state.error}")
        return False
    return True


def print_stats(controller: WaitlistController):
    """Print the signup counts."""
    stats = controller.stats
    print(f"Total Signups:  {stats.total}")
    print(f"Event Planners: {stats.event_planners}")
    print(f"Vendors:        {stats.vendors}")


def render_table(controller: WaitlistController) -> str:
    """Render entries as a plain-text table."""
    if not controller.entries:
        return "No waitlist entries yet\nEntries will appear here once people sign up"

    rows = [
        (
            entry.name,
            entry.email,
            entry.occupation,
            role_label(entry.role),
            format_joined_date(entry.created_at, settings.display_timezone),
        )
        for entry in controller.entries
    ]
    widths = [
        max(len(str(row[i])) for row in [TABLE_COLUMNS, *rows])
        for i in range(len(TABLE_COLUMNS))
    ]
    lines = ["  ".join(col.ljust(widths[i]) for i, col in enumerate(TABLE_COLUMNS))]
    lines.append("  ".join("-" * width for width in widths))
    for row in rows:
        lines.append("  ".join(str(value).ljust(widths[i]) for i, value in enumerate(row)))
    return "\n".join(line.rstrip() for line in lines)


def print_entries(controller: WaitlistController, as_json: bool):
    """Print entries as a table or JSON."""
    if as_json:
        print(json.dumps([entry.model_dump() for entry in controller.entries], indent=2))
    else:
        print(render_table(controller))


def serve(host: str, port: int):
    """Run the dashboard web app."""
    import uvicorn

    uvicorn.run(
        "waitlist_dashboard.main:app", host=host, port=port, log_level=settings.log_level.lower()
    )


def main(argv=None) -> int:
    """Main function to parse arguments and call the appropriate function."""
    parser = argparse.ArgumentParser(description="Waitlist dashboard command line tool.")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("stats", help="Show signup counts.")

    list_parser = subparsers.add_parser("list", help="List waitlist entries.")
    list_parser.add_argument("--json", action="store_true", help="Print raw entries as JSON.")

    serve_parser = subparsers.add_parser("serve", help="Run the web dashboard.")
    serve_parser.add_argument("--host", default="127.0.0.1", help="Interface to bind.")
    serve_parser.add_argument("--port", type=int, default=8000, help="Port to bind.")

    args = parser.parse_args(argv)

    if args.command == "serve":
        serve(args.host, args.port)
        return 0

    controller = build_controller()
    if not load_waitlist(controller):
        return 1

    if args.command == "stats":
        print_stats(controller)
    elif args.command == "list":
        print_entries(controller, args.json)
    return 0


if __name__ == "__main__":
    sys.exit(main())
