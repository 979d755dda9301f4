"""Project status enum.

The status doubles as the filter category of a list view: the ``active``
list shows projects whose status is ``active``, and so on.
"""

from __future__ import annotations

from enum import StrEnum


class ProjectStatus(StrEnum):
    """Lifecycle status of a project."""

    ACTIVE = "active"
    FINISHED = "finished"
