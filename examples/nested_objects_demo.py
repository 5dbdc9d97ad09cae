# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""
Nested Objects Demo
===================

This demonstrates how ObjectValSan and ArrayValSan compose into a schema
for a whole payload, and how errors deep inside it are reported with a
path back to the offending value.

How it works:
1. Every field of an object is run through its child unit
2. Every element of an array is run through the element unit
3. Child errors are re-rooted under the key (``address.city``) or the
   index (``[1].age``) they came from
4. One run reports every problem, not just the first

Run with:
    python examples/nested_objects_demo.py
"""

from __future__ import annotations

import asyncio
import os
import sys

# Set up path for local development
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from valsan import ArrayValSan, ComposedValSan, ObjectValSan
from valsan.primitives import (
    EmailValidator,
    IntegerValidator,
    LowercaseSanitizer,
    RangeValidator,
    StringToNumberValSan,
    TrimSanitizer,
)


# -------------------------------------------------------------------------
# Schemas
# -------------------------------------------------------------------------

city = ObjectValSan(
    schema={
        "name": TrimSanitizer(),
        "population": IntegerValidator(is_optional=True),
    }
)

address = ObjectValSan(
    schema={
        "street": TrimSanitizer(),
        "city": city,
        "zipCode": TrimSanitizer(),
    }
)

user = ObjectValSan(
    schema={
        "name": TrimSanitizer(),
        "email": ComposedValSan([TrimSanitizer(), LowercaseSanitizer(), EmailValidator()]),
        "age": ComposedValSan([StringToNumberValSan(), IntegerValidator(), RangeValidator(min=0, max=130)]),
        "address": address,
    }
)

team = ArrayValSan(schema=user, concurrent=True)


def print_result(result):
    if result.success:
        print(f"[ok] data: {result.data}")
        return
    for error in result.errors:
        print(f"[rejected] {error.field or '<root>'}: {error.message} [{error.code}]")


# -------------------------------------------------------------------------
# Demo scenarios
# -------------------------------------------------------------------------

async def scenario_1_clean_payload():
    """
    Scenario 1: A messy but valid payload is cleaned up
    """
    print("\n" + "="*60)
    print("Scenario 1: Sanitizing a nested payload")
    print("="*60)

    result = await user.run(
        {
            "name": "  John Doe  ",
            "email": "  John@Example.COM ",
            "age": "30",
            "address": {
                "street": "  123 Main St  ",
                "city": {"name": "  Springfield  "},
                "zipCode": "  12345  ",
            },
        }
    )
    print_result(result)


async def scenario_2_deep_errors():
    """
    Scenario 2: Problems at several depths are all reported
    """
    print("\n" + "="*60)
    print("Scenario 2: Reporting errors with their paths")
    print("="*60)

    result = await user.run(
        {
            "name": "Jane",
            "email": "not-an-email",
            "age": "two hundred",
            "address": {
                "street": "456 Oak Ave",
                "city": {"name": "Metropolis", "population": 12.5},
                "zipCode": "54321",
                "country": "Nowhere",
            },
        }
    )
    print_result(result)


async def scenario_3_arrays():
    """
    Scenario 3: Arrays keep going after a bad element
    """
    print("\n" + "="*60)
    print("Scenario 3: Validating a list of users")
    print("="*60)

    good = {
        "name": "Ada",
        "email": "ada@example.com",
        "age": "36",
        "address": {"street": "1 Loop Rd", "city": {"name": "London"}, "zipCode": "N1"},
    }
    bad = dict(good, email="ada-at-example", age="-4")

    print_result(await team.run([good, bad, good]))
    print_result(await team.run("not a list"))


async def main():
    await scenario_1_clean_payload()
    await scenario_2_deep_errors()
    await scenario_3_arrays()


if __name__ == "__main__":
    asyncio.run(main())
