"""Pytest fixtures for the valsan test-suite."""
from __future__ import annotations

from typing import Any, List

import pytest

from valsan import ValSan, ValidationError, validation_error, validation_success


# ---------------------------------------------------------------------------
# 1. anyio backend selection – ensure tests run only with asyncio backend
# ---------------------------------------------------------------------------

@pytest.fixture()
def anyio_backend():  # noqa: D401
    """Force *anyio* tests to use the standard asyncio backend only."""
    return "asyncio"


@pytest.fixture(autouse=True)
def _silence_logging(caplog):  # noqa: D401
    """Reduce noise – most tests assert behaviour, not log output."""
    caplog.set_level("WARNING")
    yield


@pytest.fixture(autouse=True)
def _default_sync_mode(monkeypatch):
    """Start every test with VALSAN_STRICT_SYNC unset."""
    monkeypatch.delenv("VALSAN_STRICT_SYNC", raising=False)
    monkeypatch.delenv("VALSAN_MESSAGES_FILE", raising=False)
    yield


# ---------------------------------------------------------------------------
# 2. Small units shared by several test modules
# ---------------------------------------------------------------------------


class ShoutValSan(ValSan):
    """Rejects strings shorter than 3 characters, upper-cases the rest."""

    async def validate(self, value):
        if len(value) < 3:
            return validation_error(
                [
                    ValidationError(
                        code="TOO_SHORT",
                        message="Input must be at least 3 characters",
                        field="testField",
                    )
                ]
            )
        return validation_success()

    async def sanitize(self, value):
        return value.upper()


class RecordingValSan(ValSan):
    """Passes everything through and remembers every hook call."""

    def __init__(self, *args: Any, **kwargs: Any):
        super().__init__(*args, **kwargs)
        self.calls: List[tuple] = []

    async def normalize(self, value):
        self.calls.append(("normalize", value))
        return value

    async def validate(self, value):
        self.calls.append(("validate", value))
        return self.succeed()

    async def sanitize(self, value):
        self.calls.append(("sanitize", value))
        return value


@pytest.fixture()
def shout():
    return ShoutValSan()


@pytest.fixture()
def recorder():
    return RecordingValSan()
