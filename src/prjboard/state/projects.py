"""ProjectStore — the application's single store of projects.

This is process-wide shared mutable state. Exactly one instance exists per
running board: :class:`prjboard.app.ProjectBoard` constructs it once and
passes it by reference to every view. There is no global accessor and no
reset operation.
"""

from __future__ import annotations

import logging

from prjboard.domain.ids import generate_project_id
from prjboard.domain.models import Project
from prjboard.domain.types import ProjectStatus
from prjboard.state.observable import ObservableStore

logger = logging.getLogger(__name__)


class ProjectStore(ObservableStore[Project]):
    """Observable store of :class:`Project` records."""

    def __init__(self) -> None:
        super().__init__()
        self._issued_ids: set[str] = set()

    def add_project(self, title: str, description: str, people_count: int) -> Project:
        """Create an active project with a fresh ID and notify listeners.

        Input is assumed to be validated already; this never fails.
        """
        project = Project(
            id=self._next_id(),
            title=title,
            description=description,
            people_count=people_count,
            status=ProjectStatus.ACTIVE,
        )
        logger.debug("Adding project %s (%s)", project.id, project.title)
        self.add(project)
        return project

    def add(self, item: Project) -> None:
        """Append *item*, reserving its ID so it is never issued again.

        Raises:
            ValueError: *item* reuses an ID already held by this store.
        """
        if item.id in self._issued_ids:
            msg = f"Project ID already in use: {item.id}"
            raise ValueError(msg)
        self._issued_ids.add(item.id)
        super().add(item)

    def _next_id(self) -> str:
        project_id = generate_project_id()
        while project_id in self._issued_ids:
            project_id = generate_project_id()
        return project_id
