# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Result types shared by every unit."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, List, Mapping, Optional

from ..exceptions import ConfigurationError, ValidationFailedError


@dataclass(frozen=True)
class ValidationError:
    """A single reported problem.

    ``field`` locates the error inside a composite structure using dotted
    keys and bracketed indexes (``address.city``, ``[2].age``). It is
    ``None`` for a failure of a root-level scalar.
    """

    code: str
    message: str
    field: Optional[str] = None
    context: Optional[Mapping[str, Any]] = None

    def __post_init__(self):
        if not self.code:
            raise ConfigurationError("ValidationError.code must be a non-empty string")

    def with_field(self, path: Optional[str]) -> "ValidationError":
        return replace(self, field=path)

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"code": self.code, "message": self.message}
        if self.field is not None:
            payload["field"] = self.field
        if self.context is not None:
            payload["context"] = dict(self.context)
        return payload


def nest_under_key(error: ValidationError, key: str) -> ValidationError:
    """Re-root *error* below the object key *key*."""

    path = f"{key}.{error.field}" if error.field else str(key)
    return error.with_field(path)


def nest_under_index(error: ValidationError, index: int) -> ValidationError:
    """Re-root *error* below the array index *index*."""

    path = f"[{index}].{error.field}" if error.field else f"[{index}]"
    return error.with_field(path)


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of the validate stage, before any sanitization."""

    is_valid: bool
    errors: List[ValidationError] = field(default_factory=list)

    def __post_init__(self):
        if self.is_valid != (len(self.errors) == 0):
            raise ConfigurationError(
                "ValidationResult.is_valid must be True exactly when there are no errors"
            )


def validation_error(errors: Iterable[ValidationError]) -> ValidationResult:
    """Build a failed :class:`ValidationResult` from *errors*."""

    return ValidationResult(is_valid=False, errors=list(errors))


def validation_success() -> ValidationResult:
    """Build a passing :class:`ValidationResult`."""

    return ValidationResult(is_valid=True, errors=[])


@dataclass(frozen=True)
class SanitizeResult:
    """Public outcome of ``run``.

    ``success`` is True exactly when ``errors`` is empty. A failed result
    never carries ``data``.
    """

    success: bool
    data: Any = None
    errors: List[ValidationError] = field(default_factory=list)

    def __post_init__(self):
        if self.success and self.errors:
            raise ConfigurationError("A successful SanitizeResult cannot carry errors")
        if not self.success:
            if not self.errors:
                raise ConfigurationError("A failed SanitizeResult must carry at least one error")
            if self.data is not None:
                raise ConfigurationError("A failed SanitizeResult cannot carry data")

    @classmethod
    def ok(cls, data: Any) -> "SanitizeResult":
        return cls(success=True, data=data, errors=[])

    @classmethod
    def failed(cls, errors: Iterable[ValidationError]) -> "SanitizeResult":
        return cls(success=False, data=None, errors=list(errors))

    def unwrap(self, target: Optional[str] = None) -> Any:
        """Return ``data`` or raise :class:`ValidationFailedError`."""

        if not self.success:
            raise ValidationFailedError(self.errors, target=target)
        return self.data

    def to_dict(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "success": self.success,
            "errors": [error.to_dict() for error in self.errors],
        }
        if self.success:
            payload["data"] = self.data
        return payload


__all__ = [
    "SanitizeResult",
    "ValidationError",
    "ValidationResult",
    "nest_under_index",
    "nest_under_key",
    "validation_error",
    "validation_success",
]
