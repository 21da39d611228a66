"""Process launch configuration consumed by an external process launcher."""

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from proclaunch.models.stream_settings import InputStreamSettings, OutputStreamSettings

log = logging.getLogger(__name__)


def check_command(command: Any) -> Any:
    """Reject a missing command or one containing missing arguments."""
    if command is None:
        raise ValueError("Command is not allowed to be null")
    if isinstance(command, (list, tuple)) and any(arg is None for arg in command):
        raise ValueError("Command is not allowed to contain nulls")
    return command


def check_input_settings(settings: Any) -> Any:
    """Return a fresh neutral InputStreamSettings in place of None."""
    if settings is None:
        log.debug("no stdin settings given, using neutral defaults")
        return InputStreamSettings()
    return settings


def check_output_settings(settings: Any) -> Any:
    """Return a fresh neutral OutputStreamSettings in place of None."""
    if settings is None:
        log.debug("no output settings given, using neutral defaults")
        return OutputStreamSettings()
    return settings


class ProcessSettings(BaseModel):
    """How to launch an external process, without launching it.

    Every assignment is validated the same way construction is: the command
    must be present and free of None arguments, and a stream slot assigned
    None receives a new neutral settings object. A failed assignment leaves
    the previous value in place.

    `environment=None` means "inherit the ambient environment"; an empty dict
    means "run with no environment variables at all". `directory=None` runs
    the process in the launcher's current directory.
    """

    model_config = ConfigDict(validate_assignment=True)

    command: list[str]
    redirect_error_stream: bool = False
    directory: Path | None = None
    environment: dict[str, str] | None = None
    stdin_settings: InputStreamSettings = Field(default_factory=InputStreamSettings)
    stdout_settings: OutputStreamSettings = Field(default_factory=OutputStreamSettings)
    stderr_settings: OutputStreamSettings = Field(default_factory=OutputStreamSettings)

    def __init__(
        self,
        command: list[str] | None,
        redirect_error_stream: bool = False,
        directory: str | Path | None = None,
        environment: dict[str, str] | None = None,
        stdin_settings: InputStreamSettings | None = None,
        stdout_settings: OutputStreamSettings | None = None,
        stderr_settings: OutputStreamSettings | None = None,
    ) -> None:
        super().__init__(
            command=command,
            redirect_error_stream=redirect_error_stream,
            directory=directory,
            environment=environment,
            stdin_settings=stdin_settings,
            stdout_settings=stdout_settings,
            stderr_settings=stderr_settings,
        )

    @field_validator("command", mode="before")
    @classmethod
    def validate_command(cls, value: Any) -> Any:
        return check_command(value)

    @field_validator("stdin_settings", mode="before")
    @classmethod
    def validate_stdin_settings(cls, value: Any) -> Any:
        return check_input_settings(value)

    @field_validator("stdout_settings", "stderr_settings", mode="before")
    @classmethod
    def validate_output_settings(cls, value: Any) -> Any:
        return check_output_settings(value)
