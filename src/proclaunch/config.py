"""Launch files: ProcessSettings persisted as JSON."""

import logging
import os
import time
from pathlib import Path

from proclaunch.models import ProcessSettings, check_command

log = logging.getLogger(__name__)

DEFAULT_SETTINGS_FILE = Path("proclaunch.json")


def get_settings_path() -> Path:
    """Return the launch file path from env or default."""
    override = os.environ.get("PROCLAUNCH_FILE", "").strip()
    return Path(override) if override else DEFAULT_SETTINGS_FILE


def load_settings(path: Path | None = None) -> ProcessSettings:
    """Read and validate a launch file."""
    path = path or get_settings_path()
    log.debug("loading launch settings from %s", path)
    text = path.read_text(encoding="utf-8")
    settings = ProcessSettings.model_validate_json(text)
    log.debug("loaded command=%s", settings.command)
    return settings


def save_settings(settings: ProcessSettings, path: Path | None = None) -> Path:
    """Write a launch file atomically and return its path."""
    path = path or get_settings_path()
    # The command list is returned by reference, so it may have been mutated
    # in place since it was last validated.
    check_command(settings.command)
    ProcessSettings.model_validate(settings.model_dump())
    if path.parent != Path():
        os.makedirs(path.parent, exist_ok=True)
    temp_file = path.with_name(f".{path.name}.{os.getpid()}.{time.time_ns()}.tmp")
    try:
        with open(temp_file, "w", encoding="utf-8") as f:
            f.write(settings.model_dump_json(indent=2))
            f.write("\n")
            f.flush()
            os.fsync(f.fileno())
        os.replace(temp_file, path)
    except OSError:
        temp_file.unlink(missing_ok=True)
        raise
    log.debug("saved launch settings to %s", path)
    return path
