"""Setup orchestration for Laravel projects."""

from .bootstrap import StepRunner, run_command
from .steps import APP_INSTALLED, STEPS, FilterState, Step, should_run

__all__ = [
    "APP_INSTALLED",
    "STEPS",
    "FilterState",
    "Step",
    "StepRunner",
    "run_command",
    "should_run",
]
