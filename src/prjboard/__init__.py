"""prjboard — project board with a validated form and filtered list views."""

__version__ = "0.1.0"
