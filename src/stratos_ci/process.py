# ──────────────────────────────────────────────────────────────────────
# OpenStratos CI — External Process Runner
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
from __future__ import annotations

import logging
import shlex
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol, Sequence

from stratos_ci.errors import SpawnError

LOGGER = logging.getLogger("stratos_ci.process")


@dataclass(frozen=True)
class PhaseOutcome:
    """Exit status and captured output of one child process."""
    succeeded: bool = False
    stdout: str = ""
    stderr: str = ""
    returncode: Optional[int] = None


class CommandRunner(Protocol):
    def run(self, argv: Sequence[str], cwd: Optional[Path] = None) -> PhaseOutcome:
        ...


def _decode(data: bytes | None) -> str:
    if not data:
        return ""
    return data.decode("utf-8", errors="replace")


class SubprocessRunner:
    """Blocking runner; a non-zero exit is data, a failed launch is an error."""

    def run(self, argv: Sequence[str], cwd: Optional[Path] = None) -> PhaseOutcome:
        cmd = [str(a) for a in argv]
        LOGGER.debug("cmd=%s cwd=%s", shlex.join(cmd), cwd)
        try:
            result = subprocess.run(
                cmd,
                cwd=str(cwd) if cwd is not None else None,
                capture_output=True,
                check=False,
            )
        except OSError as exc:
            raise SpawnError(f"could not launch '{cmd[0]}'") from exc

        outcome = PhaseOutcome(
            succeeded=result.returncode == 0,
            stdout=_decode(result.stdout),
            stderr=_decode(result.stderr),
            returncode=int(result.returncode),
        )
        LOGGER.debug("cmd=%s exit=%d", cmd[0], outcome.returncode)
        return outcome
