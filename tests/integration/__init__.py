"""Integration tests.

These tests drive a real Tcl interpreter through ``tkinter`` and are
skipped when Tcl is unavailable. Run only the fast suite with
``pytest tests/unit/``.
"""
from __future__ import annotations
