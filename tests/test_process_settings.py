"""Unit tests for proclaunch.models.process_settings."""

from pathlib import Path

import pytest

from proclaunch.models import (
    InputStreamSettings,
    OutputStreamSettings,
    ProcessSettings,
    check_command,
    check_input_settings,
    check_output_settings,
)


class TestConstruction:
    def test_command_only_uses_defaults(self):
        settings = ProcessSettings(["ls", "-la"])
        assert settings.command == ["ls", "-la"]
        assert settings.redirect_error_stream is False
        assert settings.directory is None
        assert settings.environment is None
        assert isinstance(settings.stdin_settings, InputStreamSettings)
        assert isinstance(settings.stdout_settings, OutputStreamSettings)
        assert isinstance(settings.stderr_settings, OutputStreamSettings)
        assert settings.stdin_settings.is_neutral
        assert settings.stdout_settings.is_neutral
        assert settings.stderr_settings.is_neutral

    def test_full_form_with_absent_values(self):
        settings = ProcessSettings(["echo", "hi"], True, None, None, None, None, None)
        assert settings.command == ["echo", "hi"]
        assert settings.redirect_error_stream is True
        assert settings.directory is None
        assert settings.environment is None
        assert settings.stdin_settings is not None
        assert settings.stdout_settings is not None
        assert settings.stderr_settings is not None

    def test_full_form_keeps_given_stream_settings(self):
        stdin = InputStreamSettings.from_buffer("data")
        stdout = OutputStreamSettings()
        stderr = OutputStreamSettings()
        settings = ProcessSettings(
            ["cat"],
            redirect_error_stream=False,
            directory="/tmp",
            environment={"LANG": "C"},
            stdin_settings=stdin,
            stdout_settings=stdout,
            stderr_settings=stderr,
        )
        assert settings.stdin_settings is stdin
        assert settings.stdout_settings is stdout
        assert settings.stderr_settings is stderr
        assert settings.directory == Path("/tmp")
        assert settings.environment == {"LANG": "C"}

    @pytest.mark.parametrize(
        "command",
        [["true"], ["git", "commit", "-m", "a message"], ["printf", ""], []],
    )
    def test_command_is_returned_as_given(self, command):
        assert ProcessSettings(command).command == command

    def test_tuple_command_is_accepted(self):
        assert ProcessSettings(("echo", "hi")).command == ["echo", "hi"]

    def test_null_command_is_rejected(self):
        with pytest.raises(ValueError, match="not allowed to be null"):
            ProcessSettings(None)

    def test_command_containing_null_is_rejected(self):
        with pytest.raises(ValueError, match="not allowed to contain nulls"):
            ProcessSettings(["run", None, "x"])

    def test_non_string_argument_is_rejected(self):
        with pytest.raises(ValueError):
            ProcessSettings(["sleep", 5])

    def test_defaults_are_not_shared_between_instances(self):
        first = ProcessSettings(["a"])
        second = ProcessSettings(["b"])
        assert first.stdin_settings is not second.stdin_settings
        assert first.stdout_settings is not second.stdout_settings
        assert first.stdout_settings is not first.stderr_settings

        first.stdout_settings.set_output_standard(True)
        assert second.stdout_settings.is_neutral
        assert first.stderr_settings.is_neutral


class TestCommandAssignment:
    def test_valid_command_replaces_previous(self):
        settings = ProcessSettings(["echo", "hi"])
        settings.command = ["echo", "bye"]
        assert settings.command == ["echo", "bye"]

    def test_null_command_fails_and_keeps_previous(self):
        settings = ProcessSettings(["echo", "hi"])
        with pytest.raises(ValueError, match="not allowed to be null"):
            settings.command = None
        assert settings.command == ["echo", "hi"]

    def test_command_with_null_fails_and_keeps_previous(self):
        settings = ProcessSettings(["echo", "hi"])
        with pytest.raises(ValueError, match="contain nulls"):
            settings.command = ["echo", None]
        assert settings.command == ["echo", "hi"]


class TestStreamSettingsAssignment:
    @pytest.mark.parametrize("attr", ["stdout_settings", "stderr_settings"])
    def test_none_output_settings_become_neutral(self, attr):
        settings = ProcessSettings(["ls"])
        previous = getattr(settings, attr)
        previous.set_buffer_size(10)
        setattr(settings, attr, None)
        value = getattr(settings, attr)
        assert isinstance(value, OutputStreamSettings)
        assert value.is_neutral
        assert value is not previous

    def test_none_input_settings_become_neutral(self):
        settings = ProcessSettings(["ls"])
        settings.stdin_settings = None
        assert isinstance(settings.stdin_settings, InputStreamSettings)
        assert settings.stdin_settings.is_neutral

    @pytest.mark.parametrize("attr", ["stdout_settings", "stderr_settings"])
    def test_output_settings_are_stored_by_reference(self, attr):
        settings = ProcessSettings(["ls"])
        given = OutputStreamSettings()
        setattr(settings, attr, given)
        assert getattr(settings, attr) is given

    def test_input_settings_are_stored_by_reference(self):
        settings = ProcessSettings(["ls"])
        given = InputStreamSettings.from_file("input.txt")
        settings.stdin_settings = given
        assert settings.stdin_settings is given


class TestPlainAttributes:
    def test_redirect_error_stream(self):
        settings = ProcessSettings(["ls"])
        settings.redirect_error_stream = True
        assert settings.redirect_error_stream is True

    def test_directory_accepts_path_string_and_none(self):
        settings = ProcessSettings(["ls"])
        settings.directory = "/var/log"
        assert settings.directory == Path("/var/log")
        settings.directory = None
        assert settings.directory is None

    def test_directory_is_not_checked_for_existence(self):
        settings = ProcessSettings(["ls"], directory="/does/not/exist")
        assert settings.directory == Path("/does/not/exist")

    def test_empty_environment_is_distinct_from_none(self):
        settings = ProcessSettings(["env"], environment={})
        assert settings.environment == {}
        settings.environment = None
        assert settings.environment is None

    def test_environment_replaced_wholesale(self):
        settings = ProcessSettings(["env"], environment={"A": "1"})
        settings.environment = {"B": "2"}
        assert settings.environment == {"B": "2"}


class TestScenario:
    def test_echo_with_redirect(self):
        settings = ProcessSettings(
            ["echo", "hi"],
            redirect_error_stream=True,
            directory=None,
            environment=None,
        )
        assert settings.command == ["echo", "hi"]
        assert settings.redirect_error_stream is True
        assert settings.directory is None
        assert settings.environment is None
        assert settings.stdin_settings is not None
        assert settings.stdout_settings is not None
        assert settings.stderr_settings is not None


class TestCheckFunctions:
    def test_check_command_returns_argument(self):
        command = ["a", "b"]
        assert check_command(command) is command

    def test_check_command_rejects_none(self):
        with pytest.raises(ValueError, match="null"):
            check_command(None)

    def test_check_command_rejects_none_element(self):
        with pytest.raises(ValueError, match="contain nulls"):
            check_command([None])

    def test_check_input_settings(self):
        given = InputStreamSettings()
        assert check_input_settings(given) is given
        assert isinstance(check_input_settings(None), InputStreamSettings)
        assert check_input_settings(None) is not check_input_settings(None)

    def test_check_output_settings(self):
        given = OutputStreamSettings()
        assert check_output_settings(given) is given
        assert isinstance(check_output_settings(None), OutputStreamSettings)
        assert check_output_settings(None) is not check_output_settings(None)
