"""ViewComponent — abstract base for every mountable view.

Construction materializes the view's template, optionally assigns an id to
the produced root node, lets the subclass resolve sub-nodes through
:meth:`_resolve_elements`, and attaches it to the host exactly once. The
lifecycle hooks are left to subclasses: each concrete view decides when to
call :meth:`configure` and :meth:`render_content`.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar, cast
from xml.etree.ElementTree import Element

if TYPE_CHECKING:
    from prjboard.infrastructure.dom import Document, TemplateRenderer

HostT = TypeVar("HostT", bound=Element)
RootT = TypeVar("RootT", bound=Element)

logger = logging.getLogger(__name__)


class ViewComponent(ABC, Generic[HostT, RootT]):
    """A view that owns one root node mounted under one host node.

    Parameters:
        renderer: Materializes the template and attaches the root node.
        document: Page in which the host node is looked up by id.
        template_id: Template to materialize into the root node.
        host_id: Id of the host node to attach into.
        insert_at_start: Attach before (True) or after (False) existing content.
        new_element_id: Optional id assigned to the root node.

    Raises:
        MountResolutionError: The template or the host cannot be resolved.
    """

    def __init__(
        self,
        renderer: TemplateRenderer,
        document: Document,
        template_id: str,
        host_id: str,
        insert_at_start: bool,
        new_element_id: str | None = None,
    ) -> None:
        self._renderer = renderer
        self._document = document
        self.host_element = cast(HostT, document.get_element_by_id(host_id))
        self.element = cast(RootT, renderer.materialize(template_id))
        if new_element_id:
            self.element.set("id", new_element_id)
        self._resolve_elements()
        self._attach(insert_at_start)
        logger.debug(
            "Mounted %s into #%s (%s)",
            template_id,
            host_id,
            "start" if insert_at_start else "end",
        )

    def _resolve_elements(self) -> None:
        """Look up sub-nodes of the root. Runs before the root is attached."""

    def _attach(self, insert_at_start: bool) -> None:
        self._renderer.attach(self.host_element, self.element, at_start=insert_at_start)

    @abstractmethod
    def configure(self) -> None:
        """Wire event listeners and store subscriptions."""

    @abstractmethod
    def render_content(self) -> None:
        """Populate the content derived from the view's own state."""
