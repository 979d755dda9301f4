"""Project model — the single record type held by the store."""

from __future__ import annotations

from pydantic import BaseModel

from prjboard.domain.types import ProjectStatus


class Project(BaseModel):
    """A submitted project.

    Frozen after construction. ``people_count`` is kept in the 1..9 range by
    the input form's validation, not by the model, so that adding to the
    store can never fail.
    """

    model_config = {"frozen": True}

    id: str
    title: str
    description: str
    people_count: int
    status: ProjectStatus = ProjectStatus.ACTIVE
