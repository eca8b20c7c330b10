# SPDX-FileCopyrightText: 2025 seedshard contributors
# SPDX-License-Identifier: MIT
#
# conftest.py: test environment
#   • src/ on sys.path so the package imports without installation
#   • configuration reset to defaults so a developer's SEEDSHARD_* variables
#     never leak into test runs

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent
SRC = ROOT / "src"
if SRC.is_dir():
    sys.path.insert(0, str(SRC))


@pytest.fixture(autouse=True)
def _default_policy(monkeypatch):
    """Run every test against the built-in defaults with auditing disabled."""

    from seedshard import policy as policy_module

    monkeypatch.setattr(policy_module, "policy", policy_module.SharePolicy())
    yield
