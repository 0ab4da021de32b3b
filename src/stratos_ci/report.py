# ──────────────────────────────────────────────────────────────────────
# OpenStratos CI — Result Reporting Client
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
"""
Delivery of the finalized result to the OpenStratos REST API.

One POST, HTTP Basic auth with the operator key as username (UTF-8) and an
empty password. Only ``200`` counts as success; there is no retry.
"""

from __future__ import annotations

import logging
from typing import Optional

import requests
from requests.auth import HTTPBasicAuth

from stratos_ci.errors import ResponseError, TransportError
from stratos_ci.result import TestResult

LOGGER = logging.getLogger("stratos_ci.report")


class ReportClient:
    def __init__(self, url: str, session: Optional[requests.Session] = None) -> None:
        self.url = url
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def send(self, result: TestResult, key: str) -> requests.Response:
        LOGGER.info("Posting result to %s", self.url)
        try:
            response = self.session.post(
                self.url,
                json=result.to_payload(),
                auth=HTTPBasicAuth(key.encode("utf-8"), b""),
            )
        except requests.RequestException as exc:
            raise TransportError(f"could not reach {self.url}") from exc

        if response.status_code != 200:
            body = (response.content or b"").decode("utf-8", errors="replace")
            LOGGER.error("Report rejected with status %d", response.status_code)
            raise ResponseError(response.status_code, body)

        LOGGER.info("Report accepted")
        return response

    def close(self) -> None:
        if self._owns_session:
            self.session.close()

    def __enter__(self) -> "ReportClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
