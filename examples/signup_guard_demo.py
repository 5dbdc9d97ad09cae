# Copyright (c) 2025 Artoo Corporation
# Licensed under the Business Source License 1.1 (see LICENSE).
# Change Date: 2029-09-08  •  Change License: LGPL-3.0-or-later

"""
Signup Guard Demo
=================

This demonstrates pipelines, the @valsan_guard decorator and message
catalogs working together on a signup handler.

How it works:
1. A pipeline trims, lowercases and checks an email in one unit
2. @valsan_guard runs the handler's arguments through their units and
   calls the handler with the sanitized values
3. Rejected calls raise ValidationFailedError (or go to on_fail)
4. A YAML message catalog re-renders error messages by code

Run with:
    python examples/signup_guard_demo.py
"""

from __future__ import annotations

import asyncio
import os
import sys
from pathlib import Path

# Set up path for local development
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from valsan import ComposedValSan, RuleCatalog, ValidationFailedError, run_sync, valsan_guard
from valsan.primitives import (
    EmailValidator,
    LengthValidator,
    LowercaseSanitizer,
    SlugValidator,
    StringToBooleanValSan,
    TrimSanitizer,
)

EXAMPLES_DIR = Path(__file__).resolve().parent
CATALOG_PATH = EXAMPLES_DIR / "messages_de.yaml"

email = ComposedValSan([TrimSanitizer(), LowercaseSanitizer(), EmailValidator()])
username = ComposedValSan([TrimSanitizer(), LengthValidator(min_length=3, max_length=20)])


# -------------------------------------------------------------------------
# Demo handlers
# -------------------------------------------------------------------------

@valsan_guard(
    {
        "email": email,
        "username": username,
        "newsletter": StringToBooleanValSan(is_optional=True),
    }
)
async def create_account(email: str, username: str, newsletter=None):
    """Create an account - only ever sees sanitized values."""
    return {"email": email, "username": username, "newsletter": bool(newsletter)}


@valsan_guard(
    {"slug": SlugValidator(auto_convert=True)},
    on_fail=lambda err: {"status": 400, "errors": [e.to_dict() for e in err.errors]},
)
def publish_profile(slug: str):
    """Synchronous handler with a soft failure response."""
    return {"status": 200, "url": f"/u/{slug}"}


# -------------------------------------------------------------------------
# Demo scenarios
# -------------------------------------------------------------------------

async def scenario_1_accepted_signup():
    """
    Scenario 1: Sloppy input is cleaned before the handler runs
    """
    print("\n" + "="*60)
    print("Scenario 1: Accepted signup")
    print("="*60)

    account = await create_account("  Ada@Example.COM ", "  ada  ", newsletter=" Yes ")
    print(f"[ok] Created: {account}")


async def scenario_2_rejected_signup():
    """
    Scenario 2: Rejected arguments raise with every problem listed
    """
    print("\n" + "="*60)
    print("Scenario 2: Rejected signup")
    print("="*60)

    try:
        await create_account("ada-at-example", "a")
        print("[FAIL] Should have been rejected!")
    except ValidationFailedError as e:
        print(f"[ok] REJECTED:\n{e}")


async def scenario_3_localized_messages():
    """
    Scenario 3: Re-rendering messages from a catalog file
    """
    print("\n" + "="*60)
    print("Scenario 3: Localized error messages")
    print("="*60)

    catalog = RuleCatalog.from_file(CATALOG_PATH)
    result = catalog.localize(await username.run(" a "))
    for error in result.errors:
        print(f"[ok] {error.code}: {error.message}")


def scenario_4_sync_callers():
    """
    Scenario 4: Sync code paths
    """
    print("\n" + "="*60)
    print("Scenario 4: Calling from synchronous code")
    print("="*60)

    print(f"[ok] run_sync: {run_sync(email, ' Grace@Example.com ').data}")
    print(f"[ok] publish: {publish_profile('  My First Post! ')}")
    print(f"[ok] publish rejected: {publish_profile('???')}")


async def main():
    await scenario_1_accepted_signup()
    await scenario_2_rejected_signup()
    await scenario_3_localized_messages()


if __name__ == "__main__":
    asyncio.run(main())
    scenario_4_sync_callers()
