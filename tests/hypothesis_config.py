"""
Hypothesis configuration for property-based testing.

This module configures Hypothesis settings for reproducible, performant,
and effective property-based testing of the splurge-assert-lint rules.
"""

import hypothesis
from hypothesis import HealthCheck, Phase, settings

hypothesis.settings.register_profile(
    "default",
    settings(
        database=None,  # Disable database to avoid state between runs
        print_blob=True,
        max_examples=100,
        deadline=None,
        phases=[
            Phase.explicit,
            Phase.reuse,
            Phase.generate,
            Phase.target,
            Phase.shrink,
        ],
        derandomize=True,
    ),
)

hypothesis.settings.register_profile(
    "ci",
    settings(
        max_examples=200,
        deadline=None,
        print_blob=True,
        derandomize=True,
    ),
)

hypothesis.settings.register_profile(
    "fast",
    settings(
        max_examples=30,
        deadline=None,
        print_blob=True,
        derandomize=True,
        phases=[
            Phase.explicit,
            Phase.reuse,
            Phase.generate,
            Phase.shrink,
        ],
    ),
)

hypothesis.settings.load_profile("default")

# Common settings that can be imported by test modules
DEFAULT_SETTINGS = settings(
    max_examples=100,
    deadline=None,
    print_blob=True,
    derandomize=True,
)

# Parsing JavaScript is slower than building IR directly
PARSING_SETTINGS = settings(
    max_examples=40,
    deadline=None,
    print_blob=True,
    derandomize=True,
    suppress_health_check=[HealthCheck.too_slow],
)
