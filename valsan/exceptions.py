# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Exception hierarchy for the valsan package.

Input-dependent failures are never raised: they are returned as
:class:`~valsan.validation.SanitizeResult` values. The exceptions below
cover programmer errors (bad construction) and the explicit raising
boundaries (the decorator and ``SanitizeResult.unwrap``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:  # pragma: no cover
    from .validation.base import ValidationError


class ValSanError(Exception):
    """Base class for every exception raised by valsan."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ConfigurationError(ValSanError):
    """A unit, pipeline, catalog or decorator was configured incorrectly."""


class ValidationFailedError(ValSanError):
    """Raised at the explicit raising boundaries when a run did not succeed."""

    def __init__(
        self,
        errors: Sequence["ValidationError"],
        *,
        target: Optional[str] = None,
    ):
        self.errors = list(errors)
        self.target = target

        head = f"Validation failed for '{target}'" if target else "Validation failed"
        lines = [f"{head}:"]
        for error in self.errors:
            location = f"{error.field}: " if error.field else ""
            lines.append(f" - {location}{error.message} [{error.code}]")
        super().__init__("\n".join(lines))


__all__ = [
    "ConfigurationError",
    "ValSanError",
    "ValidationFailedError",
]
