# ──────────────────────────────────────────────────────────────────────
# OpenStratos CI — Operator Prompts
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""Interactive read-validate-reprompt loops for the operator terminal."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

import click

from stratos_ci.errors import HarnessIOError

LOGGER = logging.getLogger("stratos_ci.prompts")

KEY_PROMPT = "Please, insert your authentication key:"
KEY_REPROMPT = "Invalid key, please, insert the correct key:"
SMS_PROMPT = (
    "You decided to test by sending SMSs but this can cost you money, "
    "are you sure? (y/n)"
)
SMS_REPROMPT = "Please, select 'y' (yes) or 'n' (no)"


class Console:
    """Line-oriented operator terminal over injectable text streams."""

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def write(self, message: str, *, nl: bool = True) -> None:
        try:
            click.echo(message, file=self.stdout, nl=nl)
            self.stdout.flush()
        except (OSError, ValueError) as exc:
            raise HarnessIOError("error writing to the terminal") from exc

    def read_line(self) -> str:
        try:
            line = self.stdin.readline()
        except (OSError, ValueError) as exc:
            raise HarnessIOError("error reading from the terminal") from exc
        if not line:
            raise HarnessIOError("input stream closed while waiting for operator input")
        return line


def _key_size(key: str) -> int:
    # Key length is counted in UTF-8 bytes.
    return len(key.encode("utf-8"))


def prompt_auth_key(console: Console, key_length: int) -> str:
    """Read lines until one trims to exactly ``key_length`` UTF-8 bytes."""
    console.write(KEY_PROMPT)
    key = console.read_line().strip()
    while _key_size(key) != key_length:
        LOGGER.info("Rejected key of length %d (expected %d)", _key_size(key), key_length)
        console.write(KEY_REPROMPT)
        key = console.read_line().strip()
    return key


def confirm_sms_cost(console: Console) -> bool:
    console.write(SMS_PROMPT, nl=False)
    answer = console.read_line().strip()
    while answer not in ("y", "n"):
        console.write(SMS_REPROMPT, nl=False)
        answer = console.read_line().strip()
    return answer == "y"
