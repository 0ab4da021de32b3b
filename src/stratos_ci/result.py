# ──────────────────────────────────────────────────────────────────────
# OpenStratos CI — Test Result Record
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""Result accumulation and the report payload."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

from stratos_ci.features import FeatureSelection
from stratos_ci.process import PhaseOutcome


@dataclass
class ResultDraft:
    """In-progress result, filled by the build and test phases."""
    build: PhaseOutcome = field(default_factory=PhaseOutcome)
    test: PhaseOutcome = field(default_factory=PhaseOutcome)


@dataclass(frozen=True)
class TestResult:
    build: PhaseOutcome
    test: PhaseOutcome
    features: tuple[str, ...]

    # Not a pytest test class.
    __test__ = False

    def to_payload(self) -> Dict[str, Any]:
        return {
            "build": self.build.succeeded,
            "build_stdout": self.build.stdout,
            "build_stderr": self.build.stderr,
            "test": self.test.succeeded,
            "test_stdout": self.test.stdout,
            "test_stderr": self.test.stderr,
            "features": list(self.features),
        }


def aggregate_result(draft: ResultDraft, selection: FeatureSelection) -> TestResult:
    """Freeze ``draft`` with the features that were passed to the test command."""
    return TestResult(build=draft.build, test=draft.test, features=tuple(selection.features))
