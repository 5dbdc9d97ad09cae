# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Message catalogs: re-render error messages by code.

A catalog file maps error codes to message templates. Templates are
formatted with the error's ``context`` so parameterised copy such as
``"Must be at least {min_length} characters"`` can be translated without
re-deriving the numbers from the original message.

.. code-block:: yaml

    messages:
      required: "Dieser Wert ist erforderlich"
      STRING_TOO_SHORT: "Mindestens {min_length} Zeichen"
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from ..exceptions import ConfigurationError
from ..validation.base import SanitizeResult, ValidationError

logger = logging.getLogger(__name__)

CATALOG_ENV_VAR = "VALSAN_MESSAGES_FILE"

_YAML_SUFFIXES = {".yaml", ".yml"}
_JSON_SUFFIXES = {".json"}


class _KeepMissing(dict):
    """Leave unknown placeholders untouched instead of raising KeyError."""

    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


class RuleCatalog:
    """Code -> message template lookup applied to finished results."""

    def __init__(self, messages: Optional[Mapping[str, str]] = None):
        messages = dict(messages or {})
        for code, template in messages.items():
            if not isinstance(code, str) or not isinstance(template, str):
                raise ConfigurationError(
                    f"Catalog entries must map string codes to string templates, got {code!r}: {template!r}"
                )
        self._messages: Dict[str, str] = messages

    def __contains__(self, code: object) -> bool:
        return code in self._messages

    def __len__(self) -> int:
        return len(self._messages)

    @property
    def messages(self) -> Mapping[str, str]:
        return dict(self._messages)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> "RuleCatalog":
        """Load a catalog from a ``.yaml``/``.yml`` or ``.json`` file."""

        path = Path(path)
        suffix = path.suffix.lower()
        if suffix not in _YAML_SUFFIXES | _JSON_SUFFIXES:
            raise ConfigurationError(f"Unsupported message catalog format: {path.name}")

        try:
            text = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ConfigurationError(f"Unable to read message catalog {path}: {exc}") from exc

        try:
            if suffix in _YAML_SUFFIXES:
                raw = yaml.safe_load(text)
            else:
                raw = json.loads(text)
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            raise ConfigurationError(f"Malformed message catalog {path}: {exc}") from exc

        if raw is None:
            raw = {}
        if not isinstance(raw, Mapping):
            raise ConfigurationError(f"Message catalog {path} must contain a mapping at the top level")

        messages = raw.get("messages", {})
        if not isinstance(messages, Mapping):
            raise ConfigurationError(f"'messages' in {path} must be a mapping of code to template")

        logger.debug("Loaded %d message templates from %s", len(messages), path)
        return cls(messages)

    @classmethod
    def from_env(cls) -> "RuleCatalog":
        """Load the catalog named by ``VALSAN_MESSAGES_FILE``, or an empty one."""

        location = os.getenv(CATALOG_ENV_VAR)
        if not location:
            return cls()
        return cls.from_file(location)

    def render(self, error: ValidationError) -> ValidationError:
        template = self._messages.get(error.code)
        if template is None:
            return error

        values: Dict[str, Any] = _KeepMissing(error.context or {})
        try:
            message = template.format_map(values)
        except (ValueError, IndexError, KeyError, AttributeError, TypeError) as exc:
            logger.warning("Could not format catalog template for code '%s': %s", error.code, exc)
            message = template

        return ValidationError(
            code=error.code,
            message=message,
            field=error.field,
            context=error.context,
        )

    def localize(self, result: SanitizeResult) -> SanitizeResult:
        if result.success:
            return result
        return SanitizeResult.failed(self.render(error) for error in result.errors)


__all__ = ["CATALOG_ENV_VAR", "RuleCatalog"]
