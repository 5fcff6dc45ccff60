"""Error types raised while bootstrapping a project."""


class SetupError(Exception):
    """Base class for every failure that aborts a setup run."""

    exit_code = 1


class UsageError(SetupError):
    """Raised when the command line contains an unknown argument."""

    def __init__(self, argument: str):
        self.argument = argument
        super().__init__(f"Unknown argument: {argument}")


class ProjectEnvironmentError(SetupError):
    """Raised when the working directory is not a usable project root."""


class StepExecutionError(SetupError):
    """Raised when a step's command exits with a non-zero status."""

    def __init__(self, command: str, returncode: int = 1):
        self.command = command
        self.returncode = returncode
        super().__init__(f"Error occurred while executing: {command}")


class ConfigError(SetupError):
    """Raised when the configuration file cannot be used."""
