#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Main CLI entry point for xidmon."""

from __future__ import annotations

from collections.abc import Sequence
import sys

import click
from provide.foundation.logger import get_logger
from structlog.typing import FilteringBoundLogger as StructLogger

from xidmon.cli.text import HELP_TEXT, PROG_NAME, version_text
from xidmon.config import ConfigurationError, MonitorConfig

log: StructLogger = get_logger(__name__)

EXIT_INTERRUPTED = 130
KNOWN_OPTIONS = ("-h", "-V")


def _setup_logging(config: MonitorConfig) -> None:
    """Route foundation/structlog output to stderr at the configured level."""
    from attrs import evolve
    from provide.foundation import LoggingConfig, TelemetryConfig, get_hub

    base_config = TelemetryConfig.from_env()
    telemetry_config = evolve(
        base_config,
        service_name=PROG_NAME,
        logging=LoggingConfig(
            default_level=config.log_level,
            das_emoji_prefix_enabled=False,
            logger_name_emoji_prefix_enabled=False,
        ),
    )
    get_hub().initialize_foundation(telemetry_config)


def _run(ctx: click.Context) -> None:
    from xidmon.monitor import run_monitor
    from xidmon.output import LineReporter
    from xidmon.source import XlibEventSource

    try:
        config = MonitorConfig.from_env()
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        ctx.exit(1)

    _setup_logging(config)
    log.debug("Starting monitor", display=config.display, burst_window_ms=config.burst_window_ms)

    try:
        result = run_monitor(XlibEventSource(config.display), LineReporter(), config.burst_window)
    except KeyboardInterrupt:
        log.debug("Interrupted by operator")
        ctx.exit(EXIT_INTERRUPTED)

    if result.outcome.is_fatal and result.message:
        click.echo(result.message, err=True)
    ctx.exit(result.exit_code)


@click.command(
    name=PROG_NAME,
    context_settings={"ignore_unknown_options": True},
    add_help_option=False,
)
@click.option("-h", "show_help", is_flag=True, help="Print usage and exit.")
@click.option("-V", "show_version", is_flag=True, help="Print version and license and exit.")
@click.argument("extra", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx: click.Context, show_help: bool, show_version: bool, extra: tuple[str, ...]) -> None:
    """Monitor XInput2 device hotplug and report on stdout."""
    if extra:
        raise click.ClickException(f"Unknown option {extra[0]}")
    if show_help and show_version:
        raise click.ClickException("Invalid number of arguments")

    if show_help:
        click.echo(HELP_TEXT, nl=False)
        ctx.exit(0)
    elif show_version:
        from xidmon import __version__

        click.echo(version_text(__version__), nl=False)
        ctx.exit(0)

    _run(ctx)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command and return the process exit code."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) > 1:
        click.echo("Invalid number of arguments", err=True)
        return 1
    if args and args[0] not in KNOWN_OPTIONS:
        click.echo(f"Unknown option {args[0]}", err=True)
        return 1

    try:
        rv = cli.main(args=args, prog_name=PROG_NAME, standalone_mode=False)
    except click.ClickException as e:
        click.echo(e.format_message(), err=True)
        return 1
    return rv if isinstance(rv, int) else 0


if __name__ == "__main__":
    sys.exit(main())


# 🔼⚙️🔚
