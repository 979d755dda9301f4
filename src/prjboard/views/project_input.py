"""ProjectInputForm — the validated form that feeds the project store."""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable
from typing import TYPE_CHECKING
from xml.etree.ElementTree import Element

from prjboard.domain.validation import ValidationRule, validate_all
from prjboard.views.base import ViewComponent

if TYPE_CHECKING:
    from prjboard.infrastructure.dom import Document, Event, TemplateRenderer
    from prjboard.state.projects import ProjectStore

Alert = Callable[[str], None]

DEFAULT_TEMPLATE = "project-input"
DEFAULT_ELEMENT_ID = "user-input"
DEFAULT_ALERT_MESSAGE = "Invalid input, please try again!"

logger = logging.getLogger(__name__)


_PEOPLE_PATTERN = re.compile(r"^\s*([+-]?[0-9]+)(?:\.0*)?\s*$", re.ASCII)


def _parse_people(raw: str) -> int | float:
    """Parse the people field as a whole number of ASCII digits.

    An integral decimal such as ``3.0`` counts. Anything else becomes NaN so
    the range checks reject it.
    """
    match = _PEOPLE_PATTERN.match(raw)
    if match is None:
        return math.nan
    return int(match.group(1))


class ProjectInputForm(ViewComponent[Element, Element]):
    """Form with title, description and people inputs.

    Prepended to the host. On submit the three values are validated; a
    failure raises the *alert* and leaves store and inputs untouched, a
    success adds a project and clears the inputs.
    """

    def __init__(
        self,
        store: ProjectStore,
        renderer: TemplateRenderer,
        document: Document,
        alert: Alert,
        *,
        host_id: str = "app",
        template_id: str = DEFAULT_TEMPLATE,
        element_id: str = DEFAULT_ELEMENT_ID,
        people_min: int = 1,
        people_max: int = 9,
        alert_message: str = DEFAULT_ALERT_MESSAGE,
    ) -> None:
        self._store = store
        self._alert = alert
        self._people_min = people_min
        self._people_max = people_max
        self._alert_message = alert_message
        super().__init__(renderer, document, template_id, host_id, True, element_id)
        self.configure()

    def _resolve_elements(self) -> None:
        # A form missing any input never reaches the host.
        self.title_input = self._renderer.query_required(self.element, "#title")
        self.description_input = self._renderer.query_required(self.element, "#description")
        self.people_input = self._renderer.query_required(self.element, "#people")

    def configure(self) -> None:
        # Registered as a bound method: the receiver is fixed here, not at dispatch.
        self._document.add_event_listener(self.element, "submit", self.submit_handler)

    def render_content(self) -> None:
        pass

    def submit_handler(self, event: Event) -> None:
        event.prevent_default()
        user_input = self._gather_user_input()
        if user_input is None:
            return
        title, description, people = user_input
        self._store.add_project(title, description, people)
        self._clear_inputs()

    def _gather_user_input(self) -> tuple[str, str, int] | None:
        entered_title = self.title_input.get("value", "")
        entered_description = self.description_input.get("value", "")
        entered_people = _parse_people(self.people_input.get("value", ""))

        rules = [
            ValidationRule(value=entered_title, required=True),
            ValidationRule(value=entered_description, required=True),
            ValidationRule(
                value=entered_people,
                required=True,
                min=self._people_min,
                max=self._people_max,
            ),
        ]
        if not validate_all(rules):
            logger.info("Rejected project submission")
            self._alert(self._alert_message)
            return None
        # Range validation passed, so the NaN sentinel is ruled out.
        return entered_title, entered_description, int(entered_people)

    def _clear_inputs(self) -> None:
        for field in (self.title_input, self.description_input, self.people_input):
            field.set("value", "")
