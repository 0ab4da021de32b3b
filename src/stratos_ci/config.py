# ──────────────────────────────────────────────────────────────────────
# OpenStratos CI — Harness Configuration
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""
Validated harness configuration.

The defaults describe the testing probe: where the server checkout lives,
which endpoint receives the results and how long an operator key is.
They are compiled in; tests build their own ``HarnessConfig`` instances.
"""

from pathlib import Path
from typing import Any, Dict, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator

OPENSTRATOS_REPO = Path("/opt/openstratos/server-rs")
OPENSTRATOS_REST = "http://staging.openstratos.org/test"
KEY_LEN = 20


class HarnessConfig(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    repo_path: Path = OPENSTRATOS_REPO
    manifest_name: str = Field(default="Cargo.toml", min_length=1)
    report_url: str = OPENSTRATOS_REST
    key_length: int = Field(default=KEY_LEN, gt=0)
    cargo_bin: str = Field(default="cargo", min_length=1)

    @field_validator("report_url")
    @classmethod
    def check_report_url(cls, v: str):
        parsed = urlparse(v)
        if parsed.scheme not in {"http", "https"} or not parsed.netloc:
            raise ValueError("report_url must be an absolute http(s) URL")
        return v

    @property
    def manifest_path(self) -> Path:
        return self.repo_path / self.manifest_name


def load_config(overrides: Optional[Dict[str, Any]] = None) -> HarnessConfig:
    """Validate a raw mapping on top of the defaults and return a HarnessConfig."""
    return HarnessConfig.model_validate(dict(overrides or {}))


DEFAULT_CONFIG = load_config()
