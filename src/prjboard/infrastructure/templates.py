"""Shared Jinja2 template loading with a user override directory."""

from __future__ import annotations

from pathlib import Path

from jinja2 import BaseLoader, ChoiceLoader, Environment, FileSystemLoader, PackageLoader


def build_template_environment(template_dir: Path | None = None) -> Environment:
    """Build a Jinja2 environment with user overrides before packaged defaults.

    Templates named ``<id>.html`` in *template_dir* shadow the packaged
    ``prjboard/templates/<id>.html`` of the same name, so a single view can
    be restyled without copying the full set.
    """

    loaders: list[BaseLoader] = []
    if template_dir is not None:
        loaders.append(FileSystemLoader(str(template_dir)))

    loaders.append(PackageLoader("prjboard", "templates"))
    return Environment(loader=ChoiceLoader(loaders), autoescape=True, keep_trailing_newline=True)
