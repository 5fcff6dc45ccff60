"""Read-modify-write helpers for line-oriented ``KEY=value`` files."""

import logging
import re
from pathlib import Path

from laraboot.errors import ProjectEnvironmentError

logger = logging.getLogger(__name__)

# Undecodable bytes survive a read/write cycle unchanged
ENCODING = "utf-8"
ERRORS = "surrogateescape"


def _line_pattern(key: str) -> "re.Pattern[str]":
    return re.compile(rf"^{re.escape(key)}=[^\r\n]*", re.MULTILINE)


def update_content(content: str, key: str, value: str) -> str:
    """Replace the ``key`` line in ``content`` or append one if it is missing.

    Every other line is kept byte for byte, including its line ending.
    """
    pattern = _line_pattern(key)
    line = f"{key}={value}"

    if pattern.search(content):
        return pattern.sub(lambda _: line, content)

    if content and not content.endswith("\n"):
        content += "\n"
    return content + line + "\n"


def set_value(path: Path, key: str, value: str) -> None:
    """Persist ``key=value`` in ``path`` by rewriting the whole file.

    The file must already exist; it is never created here.
    """
    try:
        with open(path, encoding=ENCODING, errors=ERRORS, newline="") as f:
            content = f.read()

        updated = update_content(content, key, value)

        with open(path, "r+", encoding=ENCODING, errors=ERRORS, newline="") as f:
            f.write(updated)
            f.truncate()
    except OSError as e:
        raise ProjectEnvironmentError(f"Could not update {path.name}: {e.strerror or e}") from e

    logger.debug("Wrote %s=%s to %s", key, value, path)
