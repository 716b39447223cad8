"""Structural detection over JavaScript test sources.

This package recognises mocha test and suite calls, skipped tests, and
the chai assertion entry points the lint rules inspect.
"""

from .assertion_entry import recognize_assert, recognize_assertion, recognize_expect
from .test_structure import DEFAULT_SUITE_NAMES, DEFAULT_TEST_NAMES, TestStructureDetector

__all__ = [
    "DEFAULT_SUITE_NAMES",
    "DEFAULT_TEST_NAMES",
    "TestStructureDetector",
    "recognize_assert",
    "recognize_assertion",
    "recognize_expect",
]
