"""Renderers for the board's visible output.

Human output reads the list views back from the page, so what is printed
is exactly what the views rendered. JSON output serializes the store
snapshot for scripting.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from rich.text import Text

from prjboard.output.console import create_console, get_output

if TYPE_CHECKING:
    from prjboard.app import ProjectBoard


def render_lists(board: ProjectBoard, *, no_color: bool = False) -> str:
    """Render every list view as a heading followed by its titles."""
    console = create_console(no_color=no_color)
    for view in board.lists.values():
        console.print(Text(view.heading, style="board.heading"))
        titles = view.rendered_titles()
        if not titles:
            console.print(Text("  (none)", style="board.empty"))
        for project, title in zip(view.assigned_projects, titles, strict=True):
            line = Text("  • ")
            line.append(title, style="board.title")
            line.append(f"  {project.id}", style="board.id")
            console.print(line)
    return get_output(console).rstrip("\n")


def render_json(board: ProjectBoard) -> str:
    """Serialize the store snapshot as a JSON array of projects."""
    return json.dumps(
        [project.model_dump(mode="json") for project in board.store.snapshot()],
        indent=2,
    )


def format_alert(message: str, *, no_color: bool = False) -> str:
    """Format a rejected-submission alert."""
    console = create_console(no_color=no_color)
    console.print(Text(f"ALERT: {message}", style="board.alert"))
    return get_output(console).rstrip("\n")
