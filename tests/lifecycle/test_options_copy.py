# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""Tests for option handling: defaults, overrides, copy and with_options."""
from __future__ import annotations

import dataclasses
from dataclasses import dataclass

import pytest

from valsan import (
    BaseValSan,
    ComposedValSan,
    ConfigurationError,
    ValSan,
    ValSanOptions,
    with_options,
)
from valsan.primitives import (
    EmailValidator,
    LowercaseSanitizer,
    MinLengthValidator,
    TrimSanitizer,
)


@dataclass(frozen=True)
class PrefixOptions(ValSanOptions):
    prefix: str = ">"


class PrefixValSan(ValSan):
    options_class = PrefixOptions

    async def validate(self, value):
        return self.succeed()

    async def sanitize(self, value):
        return f"{self.options.prefix}{value}"


def test_defaults_apply_when_no_options_given():
    unit = PrefixValSan()

    assert unit.options.is_optional is False
    assert unit.options.prefix == ">"


def test_keyword_overrides_and_options_object_are_equivalent():
    from_kwargs = PrefixValSan(prefix="#", is_optional=True)
    from_object = PrefixValSan(PrefixOptions(is_optional=True, prefix="#"))

    assert from_kwargs.options == from_object.options


def test_unknown_option_is_rejected():
    with pytest.raises(ConfigurationError, match="colour"):
        PrefixValSan(colour="red")


def test_options_of_the_wrong_class_are_rejected():
    with pytest.raises(ConfigurationError):
        MinLengthValidator(PrefixOptions())


def test_options_are_immutable():
    unit = PrefixValSan()

    with pytest.raises(dataclasses.FrozenInstanceError):
        unit.options.prefix = "!"


@pytest.mark.anyio
async def test_copy_merges_overrides_without_touching_original():
    original = PrefixValSan(prefix="#")
    sibling = original.copy(is_optional=True)

    assert sibling is not original
    assert type(sibling) is PrefixValSan
    assert sibling.options.prefix == "#"
    assert sibling.options.is_optional is True
    assert original.options.is_optional is False

    assert (await sibling.run(None)).success is True
    assert (await original.run(None)).success is False


def test_copy_without_overrides_returns_equal_options():
    original = PrefixValSan(prefix="#")

    assert original.copy().options == original.options


def test_copy_rejects_unknown_options():
    with pytest.raises(ConfigurationError):
        PrefixValSan().copy(nope=1)


@pytest.mark.anyio
async def test_with_options_matches_copy():
    base = MinLengthValidator(min_length=3)
    relaxed = with_options(base, is_optional=True, min_length=1)

    assert relaxed.options.min_length == 1
    assert base.options.min_length == 3
    assert (await relaxed.run("a")).success is True
    assert (await base.run("a")).success is False


@pytest.mark.anyio
async def test_composed_copy_keeps_steps_and_changes_options():
    pipeline = ComposedValSan([TrimSanitizer(), MinLengthValidator(min_length=2)])
    optional = pipeline.copy(is_optional=True)

    assert isinstance(optional, ComposedValSan)
    assert len(optional.get_steps()) == 2
    assert [type(s) for s in optional.get_steps()] == [type(s) for s in pipeline.get_steps()]
    assert (await optional.run(None)).success is True
    assert (await pipeline.run(None)).errors[0].code == "required"
    assert (await optional.run("  ok ")).data == "ok"


def test_repr_names_the_unit():
    assert repr(PrefixValSan()).startswith("PrefixValSan(")


class EmailPipeline(ComposedValSan):
    """A pipeline subclass with its own constructor signature."""

    def __init__(self, **overrides):
        super().__init__([TrimSanitizer(), LowercaseSanitizer(), EmailValidator()], **overrides)


@pytest.mark.anyio
async def test_pipeline_subclass_with_custom_constructor_can_be_copied():
    strict = EmailPipeline()
    optional = strict.copy(is_optional=True)

    assert type(optional) is EmailPipeline
    assert optional.options.is_optional is True
    assert strict.options.is_optional is False
    assert (await optional.run(None)).success is True
    assert (await optional.run(" Ada@Example.COM ")).data == "ada@example.com"
    assert (await strict.run(None)).errors[0].code == "required"


@pytest.mark.anyio
async def test_unit_with_extra_constructor_arguments_can_be_copied():
    class SuffixValSan(ValSan):
        def __init__(self, suffix, **overrides):
            super().__init__(**overrides)
            self.suffix = suffix

        async def validate(self, value):
            return self.succeed()

        async def sanitize(self, value):
            return value + self.suffix

    sibling = SuffixValSan("!", is_optional=False).copy(is_optional=True)

    assert sibling.suffix == "!"
    assert (await sibling.run("hi")).data == "hi!"
    assert (await sibling.run(None)).success is True


def test_base_unit_requires_a_run_implementation():
    class NoRun(BaseValSan):
        pass

    with pytest.raises(TypeError):
        NoRun()
