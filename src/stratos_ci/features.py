# ──────────────────────────────────────────────────────────────────────
# OpenStratos CI — Hardware Feature Selection
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""
Hardware feature flags and the SMS-cost safety gate.

``no_sms`` only modifies behaviour: it skips the confirmation prompt and
is never part of the tested feature list.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

LOGGER = logging.getLogger("stratos_ci.features")


class Feature(str, Enum):
    RASPICAM = "raspicam"
    FONA = "fona"
    NO_SMS = "no_sms"
    GPS = "gps"
    TELEMETRY = "telemetry"
    NO_POWER_OFF = "no_power_off"


TESTED_FEATURES: tuple[Feature, ...] = tuple(f for f in Feature if f is not Feature.NO_SMS)

FEATURE_HELP: dict[Feature, str] = {
    Feature.RASPICAM: "Whether to test the Raspberry Pi camera.",
    Feature.FONA: "Whether to test the Adafruit FONA module.",
    Feature.NO_SMS: "Do not send SMSs (requires --fona).",
    Feature.GPS: "Whether to test the GPS module.",
    Feature.TELEMETRY: "Whether to test the telemetry module.",
    Feature.NO_POWER_OFF: "Do not power the Raspberry Pi off.",
}


@dataclass(frozen=True)
class FeatureFlags:
    raspicam: bool = False
    fona: bool = False
    no_sms: bool = False
    gps: bool = False
    telemetry: bool = False
    no_power_off: bool = False

    def is_set(self, feature: Feature) -> bool:
        return bool(getattr(self, feature.value))

    def validate(self) -> None:
        if self.no_sms and not self.fona:
            raise ValueError("--no_sms can only be used together with --fona")


@dataclass(frozen=True)
class FeatureSelection:
    features: tuple[str, ...] = ()

    @property
    def feature_string(self) -> str:
        return " ".join(self.features)

    def cargo_args(self) -> list[str]:
        if not self.features:
            return []
        return ["--features", self.feature_string]


def select_features(
    flags: FeatureFlags,
    confirm: Callable[[], bool],
) -> FeatureSelection | None:
    """Compose the tested feature list, asking ``confirm`` unless ``no_sms`` is set.

    Returns ``None`` when the operator declines sending real SMSs.
    """
    if not flags.no_sms:
        if not confirm():
            LOGGER.info("Operator declined the SMS cost confirmation")
            return None

    selection = FeatureSelection(
        tuple(f.value for f in TESTED_FEATURES if flags.is_set(f))
    )
    LOGGER.info("Selected features: %s", selection.feature_string or "<none>")
    return selection
