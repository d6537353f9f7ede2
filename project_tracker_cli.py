#!/usr/bin/env python3
"""
Terminal menu for the Project Tracker API.

Talks to a running server over HTTP through
:class:`project_tracker_client.ProjectTrackerAPI`.  Intended for local
manual testing.

Usage:
    python run.py                                  # in one terminal
    python project_tracker_cli.py --base-url http://localhost:3000
"""

from __future__ import annotations

import argparse
import os
import sys
from typing import Any, Callable, Dict, Optional

from project_tracker_client import ProjectTrackerAPI

Prompt = Callable[[str], str]

TRANSITIONS_HELP = (
    "Allowed transitions:\n"
    "  active    -> on_hold | completed\n"
    "  on_hold   -> active  | completed\n"
    "  completed -> (none)"
)


def print_error(error: Dict[str, Any]) -> None:
    print(f"\nError [{error.get('code')}]: {error.get('message')}")


def print_project(project: Dict[str, Any]) -> None:
    width = max(len(key) for key in project)
    for key, value in project.items():
        print(f"  {key.ljust(width)}  {value if value is not None else '-'}")


def create_project(api: ProjectTrackerAPI, ask: Prompt) -> None:
    print("\n--- Create Project ---")
    body: Dict[str, Any] = {
        "name": ask("Project name: "),
        "clientName": ask("Client name: "),
        "startDate": ask("Start date (YYYY-MM-DD): "),
    }
    end_date = ask("End date (YYYY-MM-DD, or leave empty): ").strip()
    status = ask("Status (active/on_hold/completed, or leave empty for active): ").strip()
    if end_date:
        body["endDate"] = end_date
    if status:
        body["status"] = status

    project, error = api.create_project(body)
    if error:
        print_error(error)
        return
    print("\nProject created successfully:")
    print_project(project)


def list_projects(api: ProjectTrackerAPI, ask: Prompt) -> None:
    print("\n--- List Projects ---")
    projects, error = api.list_projects(
        status=ask("Filter by status (active/on_hold/completed, or leave empty): ").strip(),
        search=ask("Search (name or client, or leave empty): ").strip(),
        sort=ask("Sort by (createdAt/startDate, or leave empty): ").strip(),
        order=ask("Order (asc/desc, or leave empty): ").strip(),
    )
    if error:
        print_error(error)
        return
    if not projects:
        print("\nNo projects found.")
        return
    print(f"\nFound {len(projects)} project(s):\n")
    for index, p in enumerate(projects, start=1):
        print(f"  {index}. [{p['status'].upper()}] {p['name']} - {p['clientName']} (ID: {p['id']})")
        print(f"     Start: {p['startDate']} | End: {p.get('endDate') or 'N/A'}")


def get_project(api: ProjectTrackerAPI, ask: Prompt) -> None:
    print("\n--- Get Project by ID ---")
    project, error = api.get_project(ask("Project ID: ").strip())
    if error:
        print_error(error)
        return
    print("\nProject details:")
    print_project(project)


def update_status(api: ProjectTrackerAPI, ask: Prompt) -> None:
    print("\n--- Update Project Status ---")
    project_id = ask("Project ID: ").strip()
    print(TRANSITIONS_HELP)
    project, error = api.update_status(project_id, ask("New status: ").strip())
    if error:
        print_error(error)
        return
    print("\nStatus updated successfully:")
    print_project(project)


def delete_project(api: ProjectTrackerAPI, ask: Prompt) -> None:
    print("\n--- Delete Project ---")
    project_id = ask("Project ID: ").strip()
    if ask("Are you sure? (y/n): ").strip().lower() != "y":
        print("Cancelled.")
        return
    _, error = api.delete_project(project_id)
    if error:
        print_error(error)
        return
    print("\nProject deleted (soft delete) successfully.")


ACTIONS: Dict[str, Callable[[ProjectTrackerAPI, Prompt], None]] = {
    "1": create_project,
    "2": list_projects,
    "3": get_project,
    "4": update_status,
    "5": delete_project,
}

MENU = """
====================================
  Project Tracker API - CLI
====================================
  1. Create project
  2. List projects
  3. Get project by ID
  4. Update project status
  5. Delete project
  0. Exit
------------------------------------"""


def run_menu(api: ProjectTrackerAPI, ask: Prompt = input) -> None:
    """Show the menu until the user picks ``0`` or input ends."""
    while True:
        print(MENU)
        try:
            choice = ask("Choose an option: ").strip()
        except EOFError:
            choice = "0"
        if choice == "0":
            print("Goodbye!")
            return
        action = ACTIONS.get(choice)
        if action is None:
            print("Invalid option. Please try again.")
            continue
        action(api, ask)


def main(argv: Optional[list] = None) -> None:
    ap = argparse.ArgumentParser(description="Interactive client for the Project Tracker API.")
    ap.add_argument(
        "--base-url",
        default=os.getenv("API_URL", "http://localhost:3000"),
        help="API base URL (default: $API_URL or http://localhost:3000)",
    )
    args = ap.parse_args(argv)

    api = ProjectTrackerAPI(base_url=args.base_url)
    ok, error = api.health()
    if not ok:
        message = error["message"] if error else "unexpected health response"
        print(f"[!] API not reachable at {args.base_url}: {message}", file=sys.stderr)
        sys.exit(1)
    try:
        run_menu(api)
    except KeyboardInterrupt:
        print("\nGoodbye!")


if __name__ == "__main__":
    main()
