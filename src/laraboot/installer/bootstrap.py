"""Sequential project bootstrap for Laravel-style repositories."""

import logging
import shutil
import subprocess
from pathlib import Path
from typing import Any, Dict, Optional

from rich.table import Table
from rich.text import Text

from laraboot import ui
from laraboot.errors import ProjectEnvironmentError, StepExecutionError
from laraboot.installer import envfile
from laraboot.installer.steps import APP_INSTALLED, KNOWN_NAMES, STEPS, FilterState, Step

logger = logging.getLogger(__name__)


def run_command(command: str, cwd: Optional[Path] = None) -> int:
    """Run ``command`` through the shell and return its exit status.

    The child inherits our stdin, stdout and stderr so its output shows up live.
    """
    logger.debug("Running: %s", command)
    result = subprocess.run(command, shell=True, cwd=cwd, check=False)
    logger.debug("Exit status %d: %s", result.returncode, command)
    return result.returncode


class StepRunner:
    """Run the setup steps in order, subject to the include/exclude filters."""

    def __init__(self, filters: FilterState, config: Dict[str, Any], root: Optional[Path] = None):
        self.filters = filters
        self.root = Path(root) if root is not None else Path.cwd()

        project = config["project"]
        self.marker_file = self.root / project["marker_file"]
        self.env_file = self.root / project["env_file"]
        self.env_example = self.root / project["env_example"]
        self.installed_key = project["installed_key"]
        self.commands = dict(config.get("commands") or {})

    def validate_environment(self) -> None:
        """Make sure we are sitting in the project root."""
        if not self.marker_file.exists():
            raise ProjectEnvironmentError(
                "Please make sure to run this script from the root directory of this repo."
            )

    def warn_unknown_names(self) -> None:
        unknown = (self.filters.only | self.filters.skip) - KNOWN_NAMES
        if unknown:
            logger.warning("Ignoring unknown step name(s): %s", ", ".join(sorted(unknown)))

    def command_for(self, step: Step) -> Optional[str]:
        return self.commands.get(step.name, step.command)

    def execute_command(self, command: str, message: str) -> None:
        """Announce ``message``, run ``command`` and fail hard on a non-zero exit."""
        ui.info(message)
        returncode = run_command(command, cwd=self.root)

        if returncode != 0:
            raise StepExecutionError(command, returncode)

    def copy_env_file(self, step: Step) -> None:
        ui.info(step.progress)
        try:
            shutil.copyfile(self.env_example, self.env_file)
        except OSError as e:
            logger.debug("Copy failed: %s", e)
            raise StepExecutionError(
                f"cp {self.env_example.name} {self.env_file.name}"
            ) from e

    def set_app_installed(self, status: bool) -> None:
        """Write the installed flag to the env file, if the filters allow it."""
        if not self.filters.allows(APP_INSTALLED):
            logger.debug("Skipping %s", APP_INSTALLED)
            return

        if not self.env_file.exists():
            raise ProjectEnvironmentError(f"{self.env_file.name} file not found.")

        value = "true" if status else "false"
        envfile.set_value(self.env_file, self.installed_key, value)
        ui.info(f"✅ {self.installed_key} set to {value} in {self.env_file.name}.")

    def run_step(self, step: Step) -> None:
        if not self.filters.allows(step.name):
            logger.debug("Skipping %s", step.name)
            return

        if step.name == "cp_env":
            self.copy_env_file(step)
        else:
            self.execute_command(self.command_for(step), step.progress)

    def run(self) -> None:
        """Run every step in order; any failure propagates and stops the run."""
        self.warn_unknown_names()
        self.set_app_installed(False)

        for step in STEPS:
            self.run_step(step)

        self.set_app_installed(True)

        if not self.filters.only:
            ui.info("🥳 All tasks completed successfully.")

    def plan(self) -> Table:
        """Describe what :meth:`run` would do without doing any of it."""
        table = Table(title="Setup Plan", show_header=True)
        table.add_column("Step", style="cyan")
        table.add_column("Command", style="blue")
        table.add_column("Status")

        toggle = "[green]▶ Run[/green]" if self.filters.allows(APP_INSTALLED) else "[dim]Skip[/dim]"
        table.add_row(APP_INSTALLED, f"{self.installed_key}=false", toggle)

        for step in STEPS:
            if step.name == "cp_env":
                command = f"cp {self.env_example.name} {self.env_file.name}"
            else:
                command = self.command_for(step)
            status = "[green]▶ Run[/green]" if self.filters.allows(step.name) else "[dim]Skip[/dim]"
            table.add_row(step.name, Text(command), status)

        table.add_row(APP_INSTALLED, f"{self.installed_key}=true", toggle)
        return table
