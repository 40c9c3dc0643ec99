"""Command registrations for the appconf CLI."""

from __future__ import annotations

from . import edit, view

__all__ = ["edit", "view"]
