# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Sequential composition of units."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Optional

from .base import BaseValSan, RunsLikeAValSan, ValSanOptions, is_unit
from .exceptions import ConfigurationError
from .rules.rule import Rule, RuleSet
from .validation.base import SanitizeResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComposedValSanOptions(ValSanOptions):
    pass


class ComposedValSan(BaseValSan):
    """Chain units so that each step's output feeds the next step.

    The first failing step ends the run and its errors are returned
    unchanged; later steps never see a value already known to be bad.

    .. code-block:: python

        email = ComposedValSan([
            TrimSanitizer(),
            LowercaseSanitizer(),
            EmailValidator(),
        ])
        result = await email.run("  USER@EXAMPLE.COM  ")
        assert result.data == "user@example.com"
    """

    options_class = ComposedValSanOptions

    def __init__(
        self,
        steps: Iterable[RunsLikeAValSan],
        options: Optional[ValSanOptions] = None,
        **overrides: Any,
    ):
        steps = tuple(steps)
        if not steps:
            raise ConfigurationError(f"{type(self).__name__} requires at least one step")
        for index, step in enumerate(steps):
            if not is_unit(step):
                raise ConfigurationError(
                    f"Step {index} of {type(self).__name__} has no run() method: {step!r}"
                )

        super().__init__(options, **overrides)
        self._steps = steps

    def get_steps(self) -> List[RunsLikeAValSan]:
        """Return a fresh copy of the step list."""

        return list(self._steps)

    def rules(self) -> RuleSet:
        merged: Dict[str, Rule] = {}
        for step in self._steps:
            step_rules = getattr(step, "rules", None)
            if not callable(step_rules):
                continue
            for name, rule in step_rules().items():
                merged.setdefault(name, rule)
        return merged

    async def _run(self, value: Any) -> SanitizeResult:
        for index, step in enumerate(self._steps):
            result = await step.run(value)
            if not result.success:
                logger.debug(
                    "%s stopped at step %d (%s) with %d error(s)",
                    type(self).__name__,
                    index,
                    type(step).__name__,
                    len(result.errors),
                )
                return SanitizeResult.failed(result.errors)
            value = result.data

        return SanitizeResult.ok(value)


__all__ = ["ComposedValSan", "ComposedValSanOptions"]
