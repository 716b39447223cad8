"""Main entry point for running splurge-assert-lint as a module.

This allows users to run the CLI with:
    python -m splurge_assert_lint [command] [options]
"""

from .cli import main

if __name__ == "__main__":
    main()
