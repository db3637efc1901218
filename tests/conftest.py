"""Pytest configuration for the typedliterals test suite.

Hypothesis profiles:
- dev: Local development with 200 examples
- ci: CI runs with 50 examples, derandomized
- verbose: Debug mode with progress output (100 examples)

Profile auto-detection:
- HYPOTHESIS_PROFILE env var -> explicit override
- CI=true environment variable -> "ci" profile
- Otherwise -> "dev" profile
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

# =============================================================================
# HYPOTHESIS PROFILES
# =============================================================================

settings.register_profile(
    "dev",
    max_examples=200,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
)

settings.register_profile(
    "ci",
    max_examples=50,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=True,
    print_blob=True,
)

settings.register_profile(
    "verbose",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    derandomize=False,
    verbosity=Verbosity.verbose,
)


def _detect_profile() -> str:
    """Pick the Hypothesis profile from the environment."""
    explicit = os.environ.get("HYPOTHESIS_PROFILE")
    if explicit in ("dev", "ci", "verbose"):
        return explicit
    if os.environ.get("CI") == "true":
        return "ci"
    return "dev"


settings.load_profile(_detect_profile())


# =============================================================================
# SHARED FIXTURES
# =============================================================================


@pytest.fixture
def spec_data() -> dict[str, dict[str, object]]:
    """A specification covering every entry shape."""
    return {
        "Yes": {"default": "Yes"},
        "No": {},
        "MyNameIs": {"default": "My name is {name}", "substitutions": ["name"]},
        "People": {
            "default": "There is {count} person|There are {count} people",
            "pluralise": True,
        },
        "GuestsOf": {
            "default": "{count} guest of {host}|{count} guests of {host}",
            "substitutions": ["host"],
            "pluralise": True,
        },
    }


@pytest.fixture
def translations_dir(tmp_path: Path) -> Path:
    """Directory holding fr.json and en.json translation files."""
    directory = tmp_path / "translations"
    directory.mkdir()
    (directory / "fr.json").write_text(
        '{"Yes": "Oui", "MyNameIs": "Je m\'appelle {name}",'
        ' "People": "Il y a {count} personne|Il y a {count} personnes"}',
        encoding="utf-8",
    )
    (directory / "en.json").write_text(
        '{"Yes": "Yes", "No": "No"}',
        encoding="utf-8",
    )
    return directory
