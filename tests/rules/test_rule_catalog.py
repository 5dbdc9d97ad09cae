# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""
Tests for RuleCatalog.

Loading catalogs from YAML and JSON files, the environment override,
and re-rendering of error messages from the error context.
"""
from __future__ import annotations

import json

import pytest

from valsan import ConfigurationError, RuleCatalog, SanitizeResult, ValidationError
from valsan.primitives import MinLengthValidator
from valsan.rules.catalog import CATALOG_ENV_VAR


def test_catalog_from_yaml(tmp_path):
    path = tmp_path / "messages.yaml"
    path.write_text(
        "messages:\n"
        "  required: 'Dieser Wert ist erforderlich'\n"
        "  STRING_TOO_SHORT: 'Mindestens {min_length} Zeichen'\n",
        encoding="utf-8",
    )

    catalog = RuleCatalog.from_file(path)

    assert len(catalog) == 2
    assert "required" in catalog
    assert catalog.messages["required"] == "Dieser Wert ist erforderlich"


def test_catalog_from_json(tmp_path):
    path = tmp_path / "messages.json"
    path.write_text(json.dumps({"messages": {"required": "Obligatoire"}}), encoding="utf-8")

    catalog = RuleCatalog.from_file(str(path))

    assert catalog.messages == {"required": "Obligatoire"}


def test_empty_yaml_file_gives_empty_catalog(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("", encoding="utf-8")

    assert len(RuleCatalog.from_file(path)) == 0


@pytest.mark.parametrize(
    "name, content, match",
    [
        ("messages.txt", "required: x", "Unsupported"),
        ("broken.yaml", "messages: [unclosed", "Malformed"),
        ("broken.json", "{not json", "Malformed"),
        ("list.yaml", "- a\n- b\n", "top level"),
        ("nested.yaml", "messages:\n  - required\n", "must be a mapping"),
        ("numbers.yaml", "messages:\n  required: 5\n", "string templates"),
    ],
)
def test_bad_catalog_files_raise_configuration_error(tmp_path, name, content, match):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigurationError, match=match):
        RuleCatalog.from_file(path)


def test_missing_catalog_file_raises(tmp_path):
    with pytest.raises(ConfigurationError, match="Unable to read"):
        RuleCatalog.from_file(tmp_path / "missing.yaml")


def test_from_env_without_variable_is_empty():
    assert len(RuleCatalog.from_env()) == 0


def test_from_env_reads_named_file(tmp_path, monkeypatch):
    path = tmp_path / "messages.yaml"
    path.write_text("messages:\n  required: 'Pflichtfeld'\n", encoding="utf-8")
    monkeypatch.setenv(CATALOG_ENV_VAR, str(path))

    assert RuleCatalog.from_env().messages == {"required": "Pflichtfeld"}


def test_render_fills_placeholders_from_context():
    catalog = RuleCatalog({"STRING_TOO_SHORT": "Mindestens {min_length} Zeichen, erhalten {actual_length}"})
    error = ValidationError(
        code="STRING_TOO_SHORT",
        message="Input must be at least 3 characters",
        field="name",
        context={"min_length": 3, "actual_length": 1},
    )

    rendered = catalog.render(error)

    assert rendered.message == "Mindestens 3 Zeichen, erhalten 1"
    assert rendered.code == error.code
    assert rendered.field == "name"
    assert rendered.context == error.context


def test_render_keeps_unknown_placeholders():
    catalog = RuleCatalog({"required": "Need {what}"})

    rendered = catalog.render(ValidationError(code="required", message="Value is required"))

    assert rendered.message == "Need {what}"


def test_render_leaves_unknown_codes_alone():
    error = ValidationError(code="other", message="Original")

    assert RuleCatalog({"required": "x"}).render(error) is error


@pytest.mark.parametrize(
    "template",
    [
        "Broken {0",
        "Positional {0}",
        "Indexed {min_length[0]}",
        "Keyed {limits[upper]}",
        "Attribute {min_length.real.nope}",
        "Bad spec {min_length:z}",
    ],
)
def test_render_falls_back_to_raw_template_on_format_error(template, caplog):
    catalog = RuleCatalog({"STRING_TOO_SHORT": template})
    error = ValidationError(
        code="STRING_TOO_SHORT",
        message="Input must be at least 3 characters",
        context={"min_length": 3, "limits": {"lower": 3}},
    )

    rendered = catalog.render(error)

    assert rendered.message == template
    assert "STRING_TOO_SHORT" in caplog.text


@pytest.mark.anyio
async def test_localize_survives_template_that_does_not_fit_the_context():
    catalog = RuleCatalog({"STRING_TOO_SHORT": "min {min_length[0]}"})

    localized = catalog.localize(await MinLengthValidator(min_length=3).run("a"))

    assert localized.errors[0].message == "min {min_length[0]}"


@pytest.mark.anyio
async def test_localize_rewrites_failed_results():
    catalog = RuleCatalog({"STRING_TOO_SHORT": "Au moins {min_length} caracteres"})

    result = await MinLengthValidator(min_length=4).run("abc")
    localized = catalog.localize(result)

    assert localized.success is False
    assert localized.errors[0].message == "Au moins 4 caracteres"
    assert result.errors[0].message == "Input must be at least 4 characters"


def test_localize_returns_successful_results_unchanged():
    result = SanitizeResult.ok("fine")

    assert RuleCatalog({"required": "x"}).localize(result) is result
