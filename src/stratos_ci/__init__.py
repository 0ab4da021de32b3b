# ──────────────────────────────────────────────────────────────────────
# OpenStratos CI — Package Init
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""Hardware-in-the-loop CI harness for the OpenStratos testing probe."""

__version__ = "0.3.0"

from .config import DEFAULT_CONFIG, HarnessConfig, load_config
from .errors import (
    HarnessError,
    HarnessIOError,
    ResponseError,
    SpawnError,
    TransportError,
)
from .features import Feature, FeatureFlags, FeatureSelection, select_features
from .pipeline import HarnessPipeline, RunOutcome
from .process import PhaseOutcome, SubprocessRunner
from .report import ReportClient
from .result import ResultDraft, TestResult, aggregate_result

__all__ = [
    "DEFAULT_CONFIG",
    "Feature",
    "FeatureFlags",
    "FeatureSelection",
    "HarnessConfig",
    "HarnessError",
    "HarnessIOError",
    "HarnessPipeline",
    "PhaseOutcome",
    "ReportClient",
    "ResponseError",
    "ResultDraft",
    "RunOutcome",
    "SpawnError",
    "SubprocessRunner",
    "TestResult",
    "TransportError",
    "aggregate_result",
    "load_config",
    "select_features",
]
