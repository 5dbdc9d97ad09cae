# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Checks for person-related data: email addresses."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Optional, Tuple

from ..base import ValSan, ValSanOptions
from ..rules.builtin import string_rule
from ..rules.rule import Rule, RuleHint, RuleSet
from ..validation.base import ValidationResult

_DOMAIN_PART = r"@[A-Za-z0-9.-]+\.[A-Za-z]{2,}"


@dataclass(frozen=True)
class EmailValidatorOptions(ValSanOptions):
    allow_plus_address: bool = True
    # Domains without a leading "@", compared case-insensitively.
    allowed_domains: Optional[Tuple[str, ...]] = None

    def __post_init__(self):
        if self.allowed_domains is not None:
            object.__setattr__(
                self,
                "allowed_domains",
                tuple(domain.lower().lstrip("@") for domain in self.allowed_domains),
            )


class EmailValidator(ValSan):
    """Check the shape of an email address. The value is not modified.

    Pair it with :class:`TrimSanitizer` and :class:`LowercaseSanitizer` in
    a pipeline to accept sloppy user input.
    """

    options_class = EmailValidatorOptions
    type = "string"
    example = "test@example.com"

    def _pattern(self):
        plus = "+" if self.options.allow_plus_address else ""
        return re.compile(rf"[A-Za-z0-9._%{plus}-]+{_DOMAIN_PART}")

    def rules(self) -> RuleSet:
        domains = self.options.allowed_domains
        return {
            "string": string_rule,
            "invalid": Rule(
                code="email_format",
                user=RuleHint(helper_text="Email", error_message="Input is not a valid email address"),
                context={"allow_plus_address": self.options.allow_plus_address},
            ),
            "domain": Rule(
                code="email_domain",
                user=RuleHint(
                    helper_text="Domain must be: " + ", ".join(domains or ()),
                    error_message="Email domain not allowed",
                ),
                context={"allowed_domains": list(domains) if domains is not None else None},
            ),
        }

    async def validate(self, value: Any) -> ValidationResult:
        if not isinstance(value, str):
            return self.fail([string_rule])

        if not self._pattern().fullmatch(value):
            return self.fail([self.rules()["invalid"]])

        domains = self.options.allowed_domains
        if domains is not None:
            domain = value.rsplit("@", 1)[1].lower()
            if domain not in domains:
                return self.fail([self.rules()["domain"]])

        return self.succeed()

    async def sanitize(self, value: str) -> str:
        return value


__all__ = ["EmailValidator", "EmailValidatorOptions"]
