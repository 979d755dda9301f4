"""ProjectBoard — composition root wiring store, page and views together.

The board constructs the one :class:`ProjectStore` of the running process
and hands that same instance to every view. Nothing else constructs a store.
"""

from __future__ import annotations

import logging
from pathlib import Path

from prjboard.domain.types import ProjectStatus
from prjboard.infrastructure.dom import Document, Event, TemplateRenderer
from prjboard.infrastructure.templates import build_template_environment
from prjboard.state.projects import ProjectStore
from prjboard.views.project_input import DEFAULT_ALERT_MESSAGE, Alert, ProjectInputForm
from prjboard.views.project_list import ProjectListView

logger = logging.getLogger(__name__)


class ProjectBoard:
    """The mounted application: an input form above an active and a finished list.

    Parameters:
        alert: Called with a user-facing message when a submission is rejected.
        template_dir: Optional directory whose templates shadow the packaged ones.
        host_id: Id of the page node the views mount into.
        input_template: Template for the input form.
        list_template: Template for each project list.
        form_id: Id assigned to the form's root node.
        people_min: Lowest accepted headcount.
        people_max: Highest accepted headcount.
        alert_message: Message passed to *alert* on rejection.

    Raises:
        MountResolutionError: A template or the host node is missing.
    """

    def __init__(
        self,
        alert: Alert,
        *,
        template_dir: Path | None = None,
        host_id: str = "app",
        input_template: str = "project-input",
        list_template: str = "project-list",
        form_id: str = "user-input",
        people_min: int = 1,
        people_max: int = 9,
        alert_message: str = DEFAULT_ALERT_MESSAGE,
    ) -> None:
        self.renderer = TemplateRenderer(build_template_environment(template_dir))
        self.document = Document.from_template(self.renderer)
        self.store = ProjectStore()
        self.form = ProjectInputForm(
            self.store,
            self.renderer,
            self.document,
            alert,
            host_id=host_id,
            template_id=input_template,
            element_id=form_id,
            people_min=people_min,
            people_max=people_max,
            alert_message=alert_message,
        )
        self.lists: dict[ProjectStatus, ProjectListView] = {
            category: ProjectListView(
                self.store,
                self.renderer,
                self.document,
                category,
                host_id=host_id,
                template_id=list_template,
            )
            for category in (ProjectStatus.ACTIVE, ProjectStatus.FINISHED)
        }
        logger.debug("Board mounted with %d list view(s)", len(self.lists))

    def submit(self, title: str, description: str, people: str) -> bool:
        """Fill the form inputs and dispatch a submit event on the form.

        Returns True when the submission added a project to the store.
        """
        before = len(self.store)
        self.form.title_input.set("value", title)
        self.form.description_input.set("value", description)
        self.form.people_input.set("value", people)
        self.document.dispatch_event(self.form.element, Event("submit"))
        return len(self.store) > before

    def titles(self, category: ProjectStatus) -> list[str]:
        """Titles currently rendered by the list view for *category*."""
        return self.lists[ProjectStatus(category)].rendered_titles()
