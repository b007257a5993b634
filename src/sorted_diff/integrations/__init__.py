"""Integrations subpackage for sorted-diff.

Contains integration adapters for external frameworks:
- pytest plugin (auto-discovered via pytest11 entry point), providing the
  ``assert_eq_sorted`` fixture
"""

from __future__ import annotations

__all__: list[str] = []
