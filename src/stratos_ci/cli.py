# ──────────────────────────────────────────────────────────────────────
# OpenStratos CI — Command Line Interface
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
from __future__ import annotations

import logging
import sys

import click

from stratos_ci import __version__
from stratos_ci.config import DEFAULT_CONFIG
from stratos_ci.errors import HarnessError, format_error_report
from stratos_ci.features import FEATURE_HELP, Feature, FeatureFlags
from stratos_ci.logging_config import setup_harness_logging
from stratos_ci.pipeline import HarnessPipeline, RunOutcome

LOGGER = logging.getLogger("stratos_ci.cli")


def _feature_option(feature: Feature):
    return click.option(
        f"--{feature.value}",
        feature.value,
        is_flag=True,
        help=FEATURE_HELP[feature],
    )


def _status(succeeded: bool) -> str:
    return click.style("OK", fg="green") if succeeded else click.style("FAILED", fg="red")


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@_feature_option(Feature.RASPICAM)
@_feature_option(Feature.FONA)
@_feature_option(Feature.NO_SMS)
@_feature_option(Feature.GPS)
@_feature_option(Feature.TELEMETRY)
@_feature_option(Feature.NO_POWER_OFF)
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Harness log level.",
)
@click.option("--json-logs", is_flag=True, help="Emit log records as JSON lines on stderr.")
@click.option(
    "--log-file",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Also write log records to this file.",
)
@click.version_option(__version__, prog_name="OpenStratos CI")
@click.pass_context
def cli(
    ctx: click.Context,
    raspicam: bool,
    fona: bool,
    no_sms: bool,
    gps: bool,
    telemetry: bool,
    no_power_off: bool,
    log_level: str,
    json_logs: bool,
    log_file: str | None,
) -> None:
    """OpenStratos Continuous Integration.

    Checks OpenStratos code in the real testing probe, with real hardware.
    """
    setup_harness_logging(
        getattr(logging, log_level.upper(), logging.WARNING),
        json_output=json_logs,
        log_file=log_file,
    )

    flags = FeatureFlags(
        raspicam=raspicam,
        fona=fona,
        no_sms=no_sms,
        gps=gps,
        telemetry=telemetry,
        no_power_off=no_power_off,
    )
    try:
        flags.validate()
    except ValueError as exc:
        raise click.UsageError(str(exc), ctx=ctx) from exc

    pipeline = ctx.obj if ctx.obj is not None else HarnessPipeline(DEFAULT_CONFIG)
    outcome = pipeline.run(flags)

    if outcome is RunOutcome.DECLINED:
        click.echo("Aborting test.")
        return

    result = pipeline.result
    click.echo(click.style("Test results delivered.", fg="green"))
    if result is not None:
        click.echo(f"  build: {_status(result.build.succeeded)}")
        click.echo(f"  test:  {_status(result.test.succeeded)}")


def main(argv: list[str] | None = None) -> int:
    try:
        cli.main(args=argv, standalone_mode=False)
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except HarnessError as exc:
        verbose = LOGGER.getEffectiveLevel() <= logging.DEBUG
        click.echo(click.style(format_error_report(exc, with_traceback=verbose), fg="red"))
        return 1
    except SystemExit as exc:
        code = exc.code if isinstance(exc.code, int) else 1
        return code
    return 0


if __name__ == "__main__":
    sys.exit(main())
