"""Settings for feeding a process's stdin and capturing its stdout/stderr.

A freshly constructed instance is neutral: no stream location is selected,
so the launcher neither feeds input nor captures output for that stream.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from proclaunch.models.stream_location import StreamLocation

UNBOUNDED_BUFFER = -1


class _StreamSettings(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    stream_locations: set[StreamLocation] = Field(default_factory=set)

    @property
    def is_neutral(self) -> bool:
        return not self.stream_locations

    def _select(self, location: StreamLocation, enabled: bool) -> None:
        if enabled:
            self.stream_locations.add(location)
        else:
            self.stream_locations.discard(location)

    @field_serializer("stream_locations")
    def serialize_locations(self, locations: set[StreamLocation]) -> list[str]:
        return sorted(location.value for location in locations)


class InputStreamSettings(_StreamSettings):
    """Where the process reads its stdin from."""

    model_config = ConfigDict(
        validate_assignment=True,
        ser_json_bytes="base64",
        val_json_bytes="base64",
    )

    input_buffer: bytes | None = None
    input_file: Path | None = None

    @classmethod
    def from_buffer(cls, data: str | bytes) -> "InputStreamSettings":
        settings = cls()
        settings.set_input_buffer(data)
        return settings

    @classmethod
    def from_file(cls, path: str | Path) -> "InputStreamSettings":
        settings = cls()
        settings.set_input_file(path)
        return settings

    def set_input_buffer(self, data: str | bytes) -> None:
        """Feed a fixed byte sequence; text is encoded as UTF-8."""
        if isinstance(data, str):
            data = data.encode("utf-8")
        self.input_buffer = data
        self._select(StreamLocation.BUFFER, True)

    def clear_input_buffer(self) -> None:
        self.input_buffer = None
        self._select(StreamLocation.BUFFER, False)

    def set_input_file(self, path: str | Path) -> None:
        self.input_file = Path(path)
        self._select(StreamLocation.FILE, True)

    def clear_input_file(self) -> None:
        self.input_file = None
        self._select(StreamLocation.FILE, False)

    def set_input_standard(self, enabled: bool) -> None:
        """Pass the parent's own stdin through to the process."""
        self._select(StreamLocation.STANDARD, enabled)


class OutputStreamSettings(_StreamSettings):
    """Where the process's stdout or stderr ends up."""

    buffer_size: int = Field(default=0, ge=UNBOUNDED_BUFFER)
    output_file: Path | None = None
    append_file: bool = False

    def set_buffer_size(self, size: int) -> None:
        """Capture up to `size` bytes in memory, or everything when size is -1."""
        if size < UNBOUNDED_BUFFER:
            raise ValueError(f"Buffer size must be -1 (unbounded) or non-negative, got {size}")
        self.buffer_size = size
        self._select(StreamLocation.BUFFER, True)

    def clear_buffer_size(self) -> None:
        self.buffer_size = 0
        self._select(StreamLocation.BUFFER, False)

    def set_output_file(self, path: str | Path, append: bool = False) -> None:
        self.output_file = Path(path)
        self.append_file = append
        self._select(StreamLocation.FILE, True)

    def clear_output_file(self) -> None:
        self.output_file = None
        self.append_file = False
        self._select(StreamLocation.FILE, False)

    def set_output_standard(self, enabled: bool) -> None:
        """Echo the stream to the parent's corresponding stream."""
        self._select(StreamLocation.STANDARD, enabled)
