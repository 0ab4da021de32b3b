from __future__ import annotations

import io
import logging
from pathlib import Path

import pytest

from stratos_ci.config import HarnessConfig
from stratos_ci.errors import HarnessIOError, ResponseError, SpawnError, TransportError
from stratos_ci.features import FeatureFlags
from stratos_ci.pipeline import HarnessPipeline, RunOutcome
from stratos_ci.process import PhaseOutcome
from stratos_ci.prompts import Console, KEY_REPROMPT

KEY = "ABCDEFGHIJ0123456789"
CONFIG = HarnessConfig(repo_path=Path("/srv/server-rs"), report_url="http://ci.example.test/test")


class _Runner:
    def __init__(self, outcomes: dict[str, PhaseOutcome] | None = None, error: Exception | None = None) -> None:
        self.outcomes = outcomes or {}
        self.error = error
        self.calls: list[list[str]] = []

    def run(self, argv, cwd=None):  # type: ignore[no-untyped-def]
        self.calls.append(list(argv))
        if self.error is not None:
            raise self.error
        return self.outcomes.get(argv[1], PhaseOutcome(succeeded=True, stdout=argv[1], stderr="", returncode=0))


class _Client:
    def __init__(self, error: Exception | None = None) -> None:
        self.error = error
        self.sent: list[tuple[dict, str]] = []
        self.url: str | None = None
        self.closed = False

    def __call__(self, url: str) -> "_Client":
        self.url = url
        return self

    def send(self, result, key):  # type: ignore[no-untyped-def]
        self.sent.append((result.to_payload(), key))
        if self.error is not None:
            raise self.error

    def __enter__(self) -> "_Client":
        return self

    def __exit__(self, *exc_info) -> None:
        self.closed = True


def _pipeline(text: str, runner: _Runner, client: _Client) -> tuple[HarnessPipeline, io.StringIO]:
    out = io.StringIO()
    pipeline = HarnessPipeline(
        CONFIG,
        console=Console(io.StringIO(text), out),
        runner=runner,
        client_factory=client,  # type: ignore[arg-type]
    )
    return pipeline, out


def test_full_run_reports_fona_gps() -> None:
    runner, client = _Runner(), _Client()
    pipeline, _ = _pipeline(KEY + "\n", runner, client)

    outcome = pipeline.run(FeatureFlags(fona=True, no_sms=True, gps=True))

    assert outcome is RunOutcome.REPORTED
    assert [c[1] for c in runner.calls] == ["build", "test"]
    assert runner.calls[1][runner.calls[1].index("--features") + 1] == "fona gps"
    payload, key = client.sent[0]
    assert key == KEY
    assert payload["features"] == ["fona", "gps"]
    assert client.url == CONFIG.report_url
    assert client.closed is True


def test_declined_gate_skips_build_test_and_report() -> None:
    runner, client = _Runner(), _Client()
    pipeline, out = _pipeline(KEY + "\nwhat\nn\n", runner, client)

    assert pipeline.run(FeatureFlags(fona=True, gps=True)) is RunOutcome.DECLINED
    assert runner.calls == []
    assert client.sent == []
    assert client.url is None
    assert pipeline.result is None
    assert "(y/n)" in out.getvalue()


def test_confirmed_gate_runs_everything() -> None:
    runner, client = _Runner(), _Client()
    pipeline, _ = _pipeline(KEY + "\ny\n", runner, client)

    assert pipeline.run(FeatureFlags(raspicam=True, telemetry=True)) is RunOutcome.REPORTED
    assert client.sent[0][0]["features"] == ["raspicam", "telemetry"]


def test_build_failure_still_tests_and_reports() -> None:
    failed = PhaseOutcome(succeeded=False, stdout="", stderr="could not compile", returncode=101)
    runner, client = _Runner({"build": failed}), _Client()
    pipeline, _ = _pipeline(KEY + "\n", runner, client)

    pipeline.run(FeatureFlags(fona=True, no_sms=True))

    assert len(runner.calls) == 2
    payload = client.sent[0][0]
    assert payload["build"] is False
    assert payload["build_stderr"] == "could not compile"
    assert payload["test"] is True
    assert payload["test_stdout"] == "test"


def test_key_reprompted_before_anything_runs() -> None:
    runner, client = _Runner(), _Client()
    pipeline, out = _pipeline("bad\n" + KEY + "\n", runner, client)
    pipeline.run(FeatureFlags(fona=True, no_sms=True))
    assert out.getvalue().count(KEY_REPROMPT) == 1
    assert client.sent[0][1] == KEY


def test_closed_input_aborts_before_build() -> None:
    runner, client = _Runner(), _Client()
    pipeline, _ = _pipeline("", runner, client)
    with pytest.raises(HarnessIOError):
        pipeline.run(FeatureFlags())
    assert runner.calls == []


def test_spawn_error_aborts_without_report() -> None:
    runner, client = _Runner(error=SpawnError("could not launch 'cargo'")), _Client()
    pipeline, _ = _pipeline(KEY + "\n", runner, client)
    with pytest.raises(SpawnError, match="error running the build command"):
        pipeline.run(FeatureFlags(fona=True, no_sms=True))
    assert client.sent == []


def test_transport_error_gets_context() -> None:
    root = TransportError("could not reach http://ci.example.test/test")
    runner, client = _Runner(), _Client(error=root)
    pipeline, _ = _pipeline(KEY + "\n", runner, client)
    with pytest.raises(TransportError, match="error sending result") as info:
        pipeline.run(FeatureFlags(fona=True, no_sms=True))
    assert info.value.__cause__ is root
    assert client.closed is True


def test_response_error_propagates_unchanged() -> None:
    runner, client = _Runner(), _Client(error=ResponseError(500, "boom"))
    pipeline, _ = _pipeline(KEY + "\n", runner, client)
    with pytest.raises(ResponseError) as info:
        pipeline.run(FeatureFlags(fona=True, no_sms=True))
    assert info.value.status_code == 500


def test_key_never_logged(caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="stratos_ci")
    runner, client = _Runner(), _Client()
    pipeline, _ = _pipeline("short\n" + KEY + "\n", runner, client)
    pipeline.run(FeatureFlags(fona=True, no_sms=True))
    assert caplog.records
    assert all(KEY not in record.getMessage() for record in caplog.records)
