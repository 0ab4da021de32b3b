# ──────────────────────────────────────────────────────────────────────
# OpenStratos CI — Harness Pipeline
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
r"""Sequential harness run.

Stages, each gating the next:

1. **key** — read and validate the operator authentication key
2. **features** — compose the feature list, SMS-cost confirmation
3. **build** — ``cargo build`` of the server checkout
4. **test** — ``cargo test`` of the ignored (hardware) tests
5. **aggregate** — freeze the result with the tested features
6. **report** — POST the result to the REST API

A failed build does not stop the test phase; both outcomes are reported
together. Declining the SMS confirmation ends the run before anything is
built, tested or sent.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Optional

from stratos_ci.config import DEFAULT_CONFIG, HarnessConfig
from stratos_ci.errors import TransportError
from stratos_ci.features import FeatureFlags, select_features
from stratos_ci.phases import run_build_phase, run_test_phase
from stratos_ci.process import CommandRunner, SubprocessRunner
from stratos_ci.prompts import Console, confirm_sms_cost, prompt_auth_key
from stratos_ci.report import ReportClient
from stratos_ci.result import ResultDraft, TestResult, aggregate_result

LOGGER = logging.getLogger("stratos_ci.pipeline")


class RunOutcome(Enum):
    REPORTED = "reported"
    DECLINED = "declined"


class HarnessPipeline:
    def __init__(
        self,
        config: HarnessConfig = DEFAULT_CONFIG,
        *,
        console: Optional[Console] = None,
        runner: Optional[CommandRunner] = None,
        client_factory: Optional[Callable[[str], ReportClient]] = None,
    ) -> None:
        self.config = config
        self.console = console if console is not None else Console()
        self.runner = runner if runner is not None else SubprocessRunner()
        self.client_factory = client_factory if client_factory is not None else ReportClient
        self.result: Optional[TestResult] = None

    def run(self, flags: FeatureFlags) -> RunOutcome:
        key = prompt_auth_key(self.console, self.config.key_length)
        LOGGER.info("Authentication key accepted", extra={"phase": "key"})

        selection = select_features(flags, lambda: confirm_sms_cost(self.console))
        if selection is None:
            return RunOutcome.DECLINED

        draft = ResultDraft()
        run_build_phase(self.runner, self.config, draft)
        run_test_phase(self.runner, self.config, selection, draft)
        self.result = aggregate_result(draft, selection)

        self._report(key, self.result)
        return RunOutcome.REPORTED

    def _report(self, key: str, result: TestResult) -> None:
        with self.client_factory(self.config.report_url) as client:
            try:
                client.send(result, key)
            except TransportError as exc:
                raise TransportError("error sending result") from exc
