"""Validated configuration for launching external processes."""

from proclaunch.models import (
    InputStreamSettings,
    OutputStreamSettings,
    ProcessSettings,
    StreamLocation,
)

__version__ = "0.1.0"

__all__ = [
    "InputStreamSettings",
    "OutputStreamSettings",
    "ProcessSettings",
    "StreamLocation",
    "__version__",
]
