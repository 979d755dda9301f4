"""ProjectListView — one filtered list of project titles."""

from __future__ import annotations

from typing import TYPE_CHECKING
from xml.etree.ElementTree import Element, SubElement

from prjboard.domain.types import ProjectStatus
from prjboard.views.base import ViewComponent

if TYPE_CHECKING:
    from prjboard.domain.models import Project
    from prjboard.infrastructure.dom import Document, TemplateRenderer
    from prjboard.state.projects import ProjectStore

DEFAULT_TEMPLATE = "project-list"


class ProjectListView(ViewComponent[Element, Element]):
    """Shows the titles of every project whose status equals ``category``.

    Appended to the host. The list is rebuilt from scratch on every store
    notification; only the list region is touched, never the heading.
    """

    def __init__(
        self,
        store: ProjectStore,
        renderer: TemplateRenderer,
        document: Document,
        category: ProjectStatus,
        *,
        host_id: str = "app",
        template_id: str = DEFAULT_TEMPLATE,
    ) -> None:
        self.category = ProjectStatus(category)
        self.assigned_projects: tuple[Project, ...] = ()
        self._store = store
        super().__init__(renderer, document, template_id, host_id, False, f"{self.category}-projects")
        self.configure()
        self.render_content()

    @property
    def list_id(self) -> str:
        return f"{self.category}-projects-list"

    @property
    def heading(self) -> str:
        return f"{self.category.upper()} PROJECTS"

    def configure(self) -> None:
        self._store.subscribe(self._on_projects_changed)

    def render_content(self) -> None:
        self._renderer.query_required(self.element, "ul").set("id", self.list_id)
        self._renderer.query_required(self.element, "h2").text = self.heading

    def _on_projects_changed(self, projects: tuple[Project, ...]) -> None:
        self.assigned_projects = tuple(p for p in projects if p.status == self.category)
        self._render_projects()

    def _render_projects(self) -> None:
        list_element = self._renderer.query_required(self.element, f"#{self.list_id}")
        for child in list(list_element):
            list_element.remove(child)
        for project in self.assigned_projects:
            item = SubElement(list_element, "li", {"data-project-id": project.id})
            item.text = project.title

    def rendered_titles(self) -> list[str]:
        """Return the titles currently present in the list region."""
        list_element = self._renderer.query_required(self.element, f"#{self.list_id}")
        return [item.text or "" for item in list_element.iter("li")]
