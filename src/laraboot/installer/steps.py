"""The fixed, ordered table of setup steps and the filter gate."""

from dataclasses import dataclass
from typing import AbstractSet, Optional

APP_INSTALLED = "app_installed"


@dataclass(frozen=True)
class Step:
    """One named, independently skippable unit of setup work."""

    name: str
    description: str
    message: str
    icon: str
    command: Optional[str] = None

    @property
    def progress(self) -> str:
        return f"{self.icon} {self.message}"


STEPS = (
    Step("cp_env", "Copy .env.example to .env", "Copying .env.example to .env...", "📰"),
    Step("composer", "Install Composer Dependencies", "Running dependency install...", "⚗️",
         "composer install"),
    Step("key_generate", "Generate Application Key", "Generating application key...", "🔑",
         "php artisan key:generate"),
    Step("storage_link", "Create Storage Symlink", "Linking storage...", "🔗",
         "php artisan storage:link --force"),
    Step("npm_install", "Install NPM Packages", "Installing frontend packages...", "⚗️",
         "npm install"),
    Step("npm_build", "Build Frontend Assets", "Running frontend build...", "🏗️",
         "npm run build"),
    Step("migrate", "Run Database Migrations", "Running migrations...", "🗄️",
         "php artisan migrate"),
    Step("seed", "Seed Database", "Seeding database...", "🌱",
         "php artisan db:seed"),
    Step("optimize", "Clear Application Cache", "Clearing cache...", "🧹",
         "php artisan optimize:clear"),
    Step("ide_helper", "Generate IDE Helper Files", "Generating IDE helper docs...", "📝",
         "php artisan ide-helper:generate && php artisan ide-helper:meta"),
)

STEP_NAMES = tuple(step.name for step in STEPS)

# Every token accepted by --only / --skip
KNOWN_NAMES = frozenset(STEP_NAMES) | {APP_INSTALLED}


def should_run(name: str, only: AbstractSet[str], skip: AbstractSet[str]) -> bool:
    """Return True if ``name`` passes the include/exclude filters."""
    return (not only or name in only) and name not in skip


@dataclass(frozen=True)
class FilterState:
    """The --only / --skip filters, fixed once the command line is parsed."""

    skip: frozenset = frozenset()
    only: frozenset = frozenset()

    def allows(self, name: str) -> bool:
        return should_run(name, self.only, self.skip)
