# ──────────────────────────────────────────────────────────────────────
# OpenStratos CI — Structured Logging Configuration
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
from __future__ import annotations

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, TextIO

LOGGER_NAME = "stratos_ci"


class HarnessJSONFormatter(logging.Formatter):
    """
    JSON Formatter for the CI harness.
    Encodes log records as one JSON object per line.
    """
    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "module": record.module,
            "line": record.lineno,
            "message": record.getMessage(),
        }

        # Pipeline stage, passed via extra={"phase": ...}
        if hasattr(record, "phase"):
            log_data["phase"] = record.phase

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data)


def setup_harness_logging(
    level: int = logging.WARNING,
    json_output: bool = False,
    log_file: str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Initializes logging for the ``stratos_ci`` namespace.

    Console output goes to stderr unless ``stream`` is given, so log lines
    never mix with the operator prompts on stdout.
    """
    root_logger = logging.getLogger(LOGGER_NAME)
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    if json_output:
        console_handler.setFormatter(HarnessJSONFormatter())
    else:
        console_handler.setFormatter(logging.Formatter(
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
        ))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(HarnessJSONFormatter() if json_output else logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        ))
        root_logger.addHandler(file_handler)

    root_logger.debug("Logging initialized (json=%s)", json_output)
    return root_logger
