"""Model package for proclaunch."""

from proclaunch.models.process_settings import (
    ProcessSettings,
    check_command,
    check_input_settings,
    check_output_settings,
)
from proclaunch.models.stream_location import StreamLocation
from proclaunch.models.stream_settings import InputStreamSettings, OutputStreamSettings

__all__ = [
    "InputStreamSettings",
    "OutputStreamSettings",
    "ProcessSettings",
    "StreamLocation",
    "check_command",
    "check_input_settings",
    "check_output_settings",
]
