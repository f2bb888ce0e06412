"""Shared pytest fixtures and configuration for the cmdline-utils test suite.

Guidelines
----------
* subprocess and PATH lookups are mocked at the infra boundary.
* Core tests are pure — no side effects.
* Files only ever live under ``tmp_path``.
"""

from __future__ import annotations

import pytest


@pytest.fixture(autouse=True)
def _plain_console(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep Rich from emitting ANSI codes into captured output."""
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("TTY_COMPATIBLE", raising=False)
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.setenv("TERM", "dumb")
