#!/usr/bin/env python3
"""laraboot CLI - Main entry point"""

from pathlib import Path

import click

from laraboot import ui
from laraboot.cli.arguments import ShowHelp, UnknownArgument, parse_arguments
from laraboot.cli.usage import print_usage
from laraboot.config import DEFAULT_CONFIG_FILE, ConfigManager
from laraboot.errors import ConfigError, SetupError, UsageError
from laraboot.installer.bootstrap import StepRunner
from laraboot.installer.steps import FilterState
from laraboot.log import setup_logging

console = ui.console


def load_config(config_path: Path) -> dict:
    """Load the config, reporting a missing project root ahead of a bad file."""
    try:
        return ConfigManager(config_path).load()
    except ConfigError:
        StepRunner(FilterState(), ConfigManager(None).load()).validate_environment()
        raise


@click.command(
    context_settings={"ignore_unknown_options": True},
    add_help_option=False,
)
@click.option("--config", type=click.Path(dir_okay=False), help="Config file path")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
@click.option("--dry-run", is_flag=True, help="Show the plan without executing it")
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
@click.pass_context
def cli(ctx, config, verbose, dry_run, args):
    """Laravel project setup assistant"""
    outcome = parse_arguments(args)

    if isinstance(outcome, ShowHelp):
        print_usage(console)
        ctx.exit(0)

    if isinstance(outcome, UnknownArgument):
        err = UsageError(outcome.argument)
        ui.error(str(err))
        print_usage(console)
        ctx.exit(err.exit_code)

    config_path = Path(config) if config else Path.cwd() / DEFAULT_CONFIG_FILE

    try:
        cfg = load_config(config_path)
        setup_logging("debug" if verbose else cfg["logging"]["level"])

        runner = StepRunner(outcome.filters, cfg)
        runner.validate_environment()

        if dry_run:
            console.print(runner.plan())
            return

        runner.run()

    except SetupError as e:
        ui.error(str(e))
        ctx.exit(e.exit_code)
    except KeyboardInterrupt:
        ui.error("Interrupted by user")
        ctx.exit(130)


if __name__ == "__main__":
    cli()
