"""Tests for ProjectInputForm."""

from __future__ import annotations

from pathlib import Path

import pytest

from prjboard.infrastructure.dom import Document, Event, MountResolutionError, TemplateRenderer
from prjboard.infrastructure.templates import build_template_environment
from prjboard.state.projects import ProjectStore
from prjboard.views.project_input import DEFAULT_ALERT_MESSAGE, ProjectInputForm
from tests.conftest import AlertRecorder


@pytest.fixture
def form(
    store: ProjectStore, renderer: TemplateRenderer, document: Document, alerts: AlertRecorder
) -> ProjectInputForm:
    return ProjectInputForm(store, renderer, document, alerts)


def _submit(form: ProjectInputForm, document: Document, title: str, desc: str, people: str) -> bool:
    form.title_input.set("value", title)
    form.description_input.set("value", desc)
    form.people_input.set("value", people)
    return document.dispatch_event(form.element, Event("submit"))


def _values(form: ProjectInputForm) -> list[str | None]:
    return [
        form.title_input.get("value"),
        form.description_input.get("value"),
        form.people_input.get("value"),
    ]


class TestMount:
    def test_prepended_with_form_id(
        self, store: ProjectStore, renderer: TemplateRenderer, document: Document
    ) -> None:
        host = document.get_element_by_id("app")
        host.append(document.root.makeelement("section", {"id": "existing"}))
        form = ProjectInputForm(store, renderer, document, lambda message: None)
        assert form.element.get("id") == "user-input"
        assert list(host)[0] is form.element

    def test_resolves_inputs(self, form: ProjectInputForm) -> None:
        assert form.title_input.get("id") == "title"
        assert form.description_input.get("id") == "description"
        assert form.people_input.get("id") == "people"

    def test_missing_input_is_fatal(
        self, store: ProjectStore, document: Document, tmp_path: Path
    ) -> None:
        (tmp_path / "project-input.html").write_text('<form><input id="title" /></form>')
        renderer = TemplateRenderer(build_template_environment(tmp_path))
        with pytest.raises(MountResolutionError, match="#description"):
            ProjectInputForm(store, renderer, document, lambda message: None)
        assert list(document.get_element_by_id("app")) == []


class TestSubmit:
    def test_valid_submission_adds_and_clears(
        self,
        form: ProjectInputForm,
        document: Document,
        store: ProjectStore,
        alerts: AlertRecorder,
    ) -> None:
        _submit(form, document, "Build API", "REST service", "3")
        assert alerts.messages == []
        assert len(store) == 1
        project = store.snapshot()[0]
        assert (project.title, project.description, project.people_count) == (
            "Build API",
            "REST service",
            3,
        )
        assert _values(form) == ["", "", ""]

    def test_prevents_default(self, form: ProjectInputForm, document: Document) -> None:
        assert _submit(form, document, "Build API", "REST service", "3") is False

    @pytest.mark.parametrize(
        "title,desc,people",
        [
            ("", "X", "3"),
            ("   ", "X", "3"),
            ("T", "", "3"),
            ("T", "X", ""),
            ("T", "X", "0"),
            ("T", "X", "10"),
            ("T", "X", "three"),
            ("T", "X", "2.5"),
            ("T", "X", "3.5"),
            ("T", "X", "0_3"),
            ("T", "X", "\u0663"),
            ("T", "X", "1e0"),
        ],
    )
    def test_invalid_submission_alerts_and_keeps_inputs(
        self,
        form: ProjectInputForm,
        document: Document,
        store: ProjectStore,
        alerts: AlertRecorder,
        title: str,
        desc: str,
        people: str,
    ) -> None:
        _submit(form, document, title, desc, people)
        assert alerts.messages == [DEFAULT_ALERT_MESSAGE]
        assert len(store) == 0
        assert _values(form) == [title, desc, people]

    @pytest.mark.parametrize("people", ["1", "9"])
    def test_boundaries_accepted(
        self, form: ProjectInputForm, document: Document, store: ProjectStore, people: str
    ) -> None:
        _submit(form, document, "T", "X", people)
        assert len(store) == 1

    @pytest.mark.parametrize("people", ["3", "3.0", "3.", " 3 ", "+3", "03"])
    def test_integral_forms_accepted(
        self, form: ProjectInputForm, document: Document, store: ProjectStore, people: str
    ) -> None:
        _submit(form, document, "T", "X", people)
        assert [p.people_count for p in store.snapshot()] == [3]

    def test_handler_reads_own_instance_state(
        self, store: ProjectStore, renderer: TemplateRenderer, document: Document
    ) -> None:
        """Two forms on one page: each handler is bound to its own form."""
        alerts_a = AlertRecorder()
        alerts_b = AlertRecorder()
        form_a = ProjectInputForm(store, renderer, document, alerts_a, element_id="form-a")
        form_b = ProjectInputForm(store, renderer, document, alerts_b, element_id="form-b")

        _submit(form_b, document, "", "X", "3")

        assert alerts_a.messages == []
        assert alerts_b.messages == [DEFAULT_ALERT_MESSAGE]
        assert form_a.title_input.get("value") == ""

    def test_handler_invoked_detached(
        self, form: ProjectInputForm, store: ProjectStore
    ) -> None:
        handler = form.submit_handler
        form.title_input.set("value", "Detached")
        form.description_input.set("value", "call")
        form.people_input.set("value", "2")
        handler(Event("submit"))
        assert [p.title for p in store.snapshot()] == ["Detached"]

    def test_custom_bounds_and_message(
        self,
        store: ProjectStore,
        renderer: TemplateRenderer,
        document: Document,
        alerts: AlertRecorder,
    ) -> None:
        form = ProjectInputForm(
            store, renderer, document, alerts, people_max=4, alert_message="Nope"
        )
        _submit(form, document, "T", "X", "5")
        assert alerts.messages == ["Nope"]
        assert len(store) == 0

    def test_render_content_is_noop(self, form: ProjectInputForm) -> None:
        before = len(list(form.element.iter()))
        form.render_content()
        assert len(list(form.element.iter())) == before
