"""Primitives package - leaf checks and the structural composites."""

from .array import ArrayValSan, ArrayValSanOptions
from .boolean import StringToBooleanValSan, StringToBooleanValSanOptions
from .number import (
    IntegerValidator,
    MaxValidator,
    MaxValidatorOptions,
    MinValidator,
    MinValidatorOptions,
    RangeValidator,
    RangeValidatorOptions,
    StringToNumberValSan,
    is_number,
)
from .object import ObjectSchema, ObjectValSan, ObjectValSanOptions
from .person import EmailValidator, EmailValidatorOptions
from .string import (
    AlphanumericValidator,
    AlphaValidator,
    AlphaValidatorOptions,
    LengthValidator,
    LengthValidatorOptions,
    LowercaseSanitizer,
    MaxLengthValidator,
    MaxLengthValidatorOptions,
    MinLengthValidator,
    MinLengthValidatorOptions,
    PatternValidator,
    PatternValidatorOptions,
    SlugValidator,
    SlugValidatorOptions,
    TrimSanitizer,
    UppercaseSanitizer,
    is_string,
)
from .utility import EnumValidator, EnumValidatorOptions

__all__ = [
    "AlphaValidator",
    "AlphaValidatorOptions",
    "AlphanumericValidator",
    "ArrayValSan",
    "ArrayValSanOptions",
    "EmailValidator",
    "EmailValidatorOptions",
    "EnumValidator",
    "EnumValidatorOptions",
    "IntegerValidator",
    "LengthValidator",
    "LengthValidatorOptions",
    "LowercaseSanitizer",
    "MaxLengthValidator",
    "MaxLengthValidatorOptions",
    "MaxValidator",
    "MaxValidatorOptions",
    "MinLengthValidator",
    "MinLengthValidatorOptions",
    "MinValidator",
    "MinValidatorOptions",
    "ObjectSchema",
    "ObjectValSan",
    "ObjectValSanOptions",
    "PatternValidator",
    "PatternValidatorOptions",
    "RangeValidator",
    "RangeValidatorOptions",
    "SlugValidator",
    "SlugValidatorOptions",
    "StringToBooleanValSan",
    "StringToBooleanValSanOptions",
    "StringToNumberValSan",
    "TrimSanitizer",
    "UppercaseSanitizer",
    "is_number",
    "is_string",
]
