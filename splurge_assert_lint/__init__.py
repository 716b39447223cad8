"""splurge_assert_lint package.

This initializer is intentionally lightweight: the tree-sitter grammar
and the CLI stack are only imported when a name that needs them is
accessed (for example ``from splurge_assert_lint import lint``).

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

__version__ = "2025.1.0"
__author__ = "Jim Schilling"
__description__ = "Lint chai assertions in mocha tests for raw expressions"

# Public API names. Submodules are imported lazily when accessed.
__all__ = [
    "lint",
    "cli",
    "AssertionLinter",
    "LintConfig",
    "ConfigManager",
    "Diagnostic",
    "Result",
    "ResultStatus",
    "classify",
    "Decision",
    "DecisionKind",
    "NoExpressionsInAssertionsRule",
    # Exceptions
    "LintError",
    "ParseError",
    "ValidationError",
    "ConfigurationError",
]


def __getattr__(name: str):
    """Lazily import submodules/attributes on demand."""
    import importlib

    mapping = {
        "lint": "splurge_assert_lint.main",
        "cli": "splurge_assert_lint.cli",
        "AssertionLinter": "splurge_assert_lint.linter",
        "LintConfig": "splurge_assert_lint.context",
        "ConfigManager": "splurge_assert_lint.context",
        "Diagnostic": "splurge_assert_lint.reporting",
        "Result": "splurge_assert_lint.result",
        "ResultStatus": "splurge_assert_lint.result",
        "classify": "splurge_assert_lint.rules.classifier",
        "Decision": "splurge_assert_lint.rules.classifier",
        "DecisionKind": "splurge_assert_lint.rules.classifier",
        "NoExpressionsInAssertionsRule": "splurge_assert_lint.rules.no_expressions_in_assertions",
        # Exceptions
        "LintError": "splurge_assert_lint.exceptions",
        "ParseError": "splurge_assert_lint.exceptions",
        "ValidationError": "splurge_assert_lint.exceptions",
        "ConfigurationError": "splurge_assert_lint.exceptions",
    }

    if name not in mapping:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module = importlib.import_module(mapping[name])
    if name == "cli":
        return module
    return getattr(module, name)


def __dir__():
    return sorted(list(globals().keys()) + __all__)
