# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""valsan - composable validation and sanitization units.

.. code-block:: python

    from valsan import ComposedValSan, ObjectValSan
    from valsan.primitives import TrimSanitizer, LowercaseSanitizer, EmailValidator

    signup = ObjectValSan(schema={
        "email": ComposedValSan([TrimSanitizer(), LowercaseSanitizer(), EmailValidator()]),
        "name": TrimSanitizer(),
    })
    result = await signup.run({"email": "  Ada@Example.COM ", "name": " Ada "})
"""

from .base import (
    BaseValSan,
    RunsLikeAValSan,
    SANITIZE_ERROR_CODE,
    ValSan,
    ValSanOptions,
    with_options,
)
from .composed import ComposedValSan, ComposedValSanOptions
from .decorator import valsan_guard
from .exceptions import ConfigurationError, ValidationFailedError, ValSanError
from .primitives.array import ArrayValSan, ArrayValSanOptions
from .primitives.object import ObjectSchema, ObjectValSan, ObjectValSanOptions
from .rules import Rule, RuleCatalog, RuleHint, RuleSet, required_rule
from .runtime import run_sync
from .validation import (
    SanitizeResult,
    ValidationError,
    ValidationResult,
    validation_error,
    validation_success,
)

__all__ = [
    "ArrayValSan",
    "ArrayValSanOptions",
    "BaseValSan",
    "ComposedValSan",
    "ComposedValSanOptions",
    "ConfigurationError",
    "ObjectSchema",
    "ObjectValSan",
    "ObjectValSanOptions",
    "Rule",
    "RuleCatalog",
    "RuleHint",
    "RuleSet",
    "RunsLikeAValSan",
    "SANITIZE_ERROR_CODE",
    "SanitizeResult",
    "ValSan",
    "ValSanError",
    "ValSanOptions",
    "ValidationError",
    "ValidationFailedError",
    "ValidationResult",
    "required_rule",
    "run_sync",
    "valsan_guard",
    "validation_error",
    "validation_success",
    "with_options",
]
