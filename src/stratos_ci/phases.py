# ──────────────────────────────────────────────────────────────────────
# OpenStratos CI — Build and Test Phases
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
from __future__ import annotations

import logging

from stratos_ci.config import HarnessConfig
from stratos_ci.errors import SpawnError
from stratos_ci.features import FeatureSelection
from stratos_ci.process import CommandRunner, PhaseOutcome
from stratos_ci.result import ResultDraft

LOGGER = logging.getLogger("stratos_ci.phases")


def build_command(config: HarnessConfig) -> list[str]:
    return [config.cargo_bin, "build", "--manifest-path", str(config.manifest_path)]


def test_command(config: HarnessConfig, selection: FeatureSelection) -> list[str]:
    """Test command with default features off and ignored (hardware) tests enabled."""
    return [
        config.cargo_bin,
        "test",
        "--manifest-path",
        str(config.manifest_path),
        "--no-default-features",
        *selection.cargo_args(),
        "--",
        "--ignored",
    ]


def _log_outcome(phase: str, outcome: PhaseOutcome) -> None:
    if outcome.succeeded:
        LOGGER.info("%s phase succeeded", phase, extra={"phase": phase})
    else:
        LOGGER.warning(
            "%s phase failed (exit=%s)", phase, outcome.returncode, extra={"phase": phase}
        )


def run_build_phase(runner: CommandRunner, config: HarnessConfig, result: ResultDraft) -> PhaseOutcome:
    LOGGER.info("Building %s", config.manifest_path, extra={"phase": "build"})
    try:
        outcome = runner.run(build_command(config), cwd=config.repo_path)
    except SpawnError as exc:
        raise SpawnError("error running the build command") from exc
    result.build = outcome
    _log_outcome("build", outcome)
    return outcome


def run_test_phase(
    runner: CommandRunner,
    config: HarnessConfig,
    selection: FeatureSelection,
    result: ResultDraft,
) -> PhaseOutcome:
    LOGGER.info(
        "Testing %s with features: %s",
        config.manifest_path,
        selection.feature_string or "<none>",
        extra={"phase": "test"},
    )
    try:
        outcome = runner.run(test_command(config, selection), cwd=config.repo_path)
    except SpawnError as exc:
        raise SpawnError("error running the test command") from exc
    result.test = outcome
    _log_outcome("test", outcome)
    return outcome
