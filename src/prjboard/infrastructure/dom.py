"""DOM collaborator — template materialization, attachment, and events.

Templates are rendered with Jinja2 and parsed into ``xml.etree`` elements,
so every template must be well-formed markup with a single root element.

The views only rely on four capabilities:

- ``TemplateRenderer.materialize()``: template id -> fresh root node.
- ``TemplateRenderer.attach()``: insert a node at the start or end of a host.
- ``TemplateRenderer.query()``: find a descendant by ``#id``, ``.class`` or tag.
- ``Document``: look up hosts by id and dispatch events to listeners.

Anything that cannot be resolved raises :class:`MountResolutionError`.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from collections.abc import Callable
from dataclasses import dataclass
from xml.etree.ElementTree import Element

from jinja2 import Environment, TemplateNotFound

logger = logging.getLogger(__name__)

INDEX_TEMPLATE = "index"


class MountResolutionError(Exception):
    """A template or host node required to mount a view could not be resolved.

    Fatal: a view cannot exist without its mount points.
    """


@dataclass
class Event:
    """A dispatched UI event."""

    type: str
    target: Element | None = None
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


EventListener = Callable[[Event], None]


def _matches(element: Element, selector: str) -> bool:
    """Match *element* against a minimal CSS selector (``#id``, ``.class`` or tag).

    Attribute values are compared directly, so ids and classes may hold any
    character, quotes included.
    """
    if selector.startswith("#"):
        return element.get("id") == selector[1:]
    if selector.startswith("."):
        return selector[1:] in (element.get("class") or "").split()
    return element.tag == selector


def _find(node: Element, selector: str) -> Element | None:
    """First strict descendant of *node* matching *selector*, in document order."""
    return next((e for e in node.iter() if e is not node and _matches(e, selector)), None)


class TemplateRenderer:
    """Produces DOM nodes from named templates.

    Parameters:
        env: Jinja2 environment; ``<template_id>.html`` is looked up in it.
    """

    def __init__(self, env: Environment) -> None:
        self._env = env

    def materialize(self, template_id: str) -> Element:
        """Render *template_id* and return a fresh root node."""
        try:
            markup = self._env.get_template(f"{template_id}.html").render()
        except TemplateNotFound as exc:
            msg = f"Template not found: {template_id!r}"
            raise MountResolutionError(msg) from exc
        try:
            return ET.fromstring(markup)
        except ET.ParseError as exc:
            msg = f"Template {template_id!r} is not well-formed: {exc}"
            raise MountResolutionError(msg) from exc

    @staticmethod
    def attach(host: Element, node: Element, *, at_start: bool) -> None:
        """Insert *node* as the first (``at_start``) or last child of *host*."""
        if at_start:
            host.insert(0, node)
        else:
            host.append(node)

    @staticmethod
    def query(node: Element, selector: str) -> Element | None:
        """Return the first descendant of *node* matching *selector*, or None."""
        return _find(node, selector)

    @classmethod
    def query_required(cls, node: Element, selector: str) -> Element:
        """Like :meth:`query`, but raise :class:`MountResolutionError` on a miss."""
        found = cls.query(node, selector)
        if found is None:
            msg = f"No element matches {selector!r}"
            raise MountResolutionError(msg)
        return found


class Document:
    """The page: a root node plus the event listeners registered on its nodes."""

    def __init__(self, root: Element) -> None:
        self.root = root
        self._listeners: dict[Element, dict[str, list[EventListener]]] = {}

    @classmethod
    def from_template(cls, renderer: TemplateRenderer, template_id: str = INDEX_TEMPLATE) -> Document:
        """Build a document from the page template (``index`` by default)."""
        return cls(renderer.materialize(template_id))

    def get_element_by_id(self, element_id: str) -> Element:
        """Return the node whose ``id`` is *element_id*.

        Raises:
            MountResolutionError: No node carries that id.
        """
        found = next((e for e in self.root.iter() if e.get("id") == element_id), None)
        if found is None:
            msg = f"No element with id {element_id!r}"
            raise MountResolutionError(msg)
        return found

    def add_event_listener(self, target: Element, event_type: str, listener: EventListener) -> None:
        """Register *listener* for *event_type* events dispatched to *target*."""
        self._listeners.setdefault(target, {}).setdefault(event_type, []).append(listener)

    def dispatch_event(self, target: Element, event: Event) -> bool:
        """Call every listener for ``event.type`` on *target*, in registration order.

        Returns False when a listener called ``prevent_default()``.
        """
        event.target = target
        listeners = list(self._listeners.get(target, {}).get(event.type, []))
        logger.debug("Dispatching %s to %d listener(s)", event.type, len(listeners))
        for listener in listeners:
            listener(event)
        return not event.default_prevented

    def to_html(self) -> str:
        """Serialize the whole page."""
        return ET.tostring(self.root, encoding="unicode", method="html")
