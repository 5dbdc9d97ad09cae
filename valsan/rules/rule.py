# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Rule metadata: codes plus the human-facing copy for a failure kind."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..validation.base import ValidationError


@dataclass(frozen=True)
class RuleHint:
    helper_text: str
    error_message: str


@dataclass(frozen=True)
class Rule:
    """Named metadata a unit exposes for one failure kind.

    ``user`` copy is meant for end users (form hints, error text), ``dev``
    copy for developers reading logs. ``context`` carries the rule's
    parameters so messages can be templated without re-deriving them.
    """

    code: str
    user: RuleHint
    dev: Optional[RuleHint] = None
    context: Optional[Mapping[str, Any]] = None

    def to_error(self, field: Optional[str] = None) -> ValidationError:
        return ValidationError(
            code=self.code,
            message=self.user.error_message,
            field=field,
            context=self.context,
        )


RuleSet = Mapping[str, Rule]


__all__ = ["Rule", "RuleHint", "RuleSet"]
