"""Unit tests for the ccswitch use and reset commands."""

import json
from unittest.mock import patch

from ccswitch.cli import main
from ccswitch.profile_store import MODEL_TIER_VARIABLES


def _use(runner, profiles_file, settings_file, *args, **kwargs):
    return runner.invoke(
        main,
        ["use", *args, "--profiles", str(profiles_file), "--settings", str(settings_file)],
        **kwargs,
    )


class TestUseCommand:
    """Test 'ccswitch use'."""

    def test_use_profile_with_model(self, runner, profiles_file, settings_file, read_json):
        result = _use(runner, profiles_file, settings_file, "a")

        assert result.exit_code == 0, result.output
        assert "Switched to profile: a" in result.output
        data = read_json(settings_file)
        assert data["model"] == "m1"
        assert all(data["env"][key] == "m1" for key in MODEL_TIER_VARIABLES)

    def test_use_profile_without_model(
        self, runner, profiles_file, settings_file, write_json, read_json
    ):
        write_json(settings_file, {"env": {"X": "1"}, "model": "old", "theme": "dark"})

        result = _use(runner, profiles_file, settings_file, "b")

        assert result.exit_code == 0, result.output
        assert read_json(settings_file) == {"env": {}, "theme": "dark"}

    def test_use_prints_details(self, runner, profiles_file, settings_file):
        result = _use(runner, profiles_file, settings_file, "deepseek")

        assert result.exit_code == 0, result.output
        assert "URL: https://api.deepseek.com/anthropic" in result.output
        assert "Fast Model: deepseek-lite" in result.output

    def test_aliases(self, runner, profiles_file, settings_file, read_json):
        for alias in ("switch", "set"):
            result = runner.invoke(
                main,
                [alias, "b", "--profiles", str(profiles_file), "--settings", str(settings_file)],
            )
            assert result.exit_code == 0, result.output
            assert read_json(settings_file)["env"] == {}

    def test_no_profile_non_interactive_uses_default(
        self, runner, profiles_file, settings_file, read_json
    ):
        result = _use(runner, profiles_file, settings_file)

        assert result.exit_code == 0, result.output
        assert "Switched to profile: a" in result.output
        assert read_json(settings_file)["model"] == "m1"

    def test_unknown_profile(self, runner, profiles_file, settings_file, write_json):
        """Test that an unknown profile exits 1 and leaves settings untouched."""
        write_json(settings_file, {"env": {"KEEP": "1"}})
        before = settings_file.read_text()

        result = _use(runner, profiles_file, settings_file, "zzz")

        assert result.exit_code == 1
        assert "Profile 'zzz' not found" in result.output
        assert " * a" in result.output
        assert settings_file.read_text() == before

    def test_missing_profiles_file(self, runner, tmp_path, settings_file):
        result = _use(runner, tmp_path / "none.json", settings_file, "a")

        assert result.exit_code == 1
        assert "Profiles file not found" in result.output
        assert not settings_file.exists()

    def test_malformed_settings(self, runner, profiles_file, settings_file):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text("{oops")

        result = _use(runner, profiles_file, settings_file, "a")

        assert result.exit_code == 1
        assert "Invalid JSON in settings file" in result.output
        assert settings_file.read_text() == "{oops"

    def test_settings_not_utf8(self, runner, profiles_file, settings_file):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_bytes(b'{"x": "\xff"}')

        result = _use(runner, profiles_file, settings_file, "a")

        assert result.exit_code == 1
        assert "Invalid JSON in settings file" in result.output
        assert "Unexpected error" not in result.output

    def test_settings_path_from_profiles_file(
        self, runner, tmp_path, sample_profiles, write_json, read_json
    ):
        target = tmp_path / "configured" / "settings.json"
        sample_profiles["settingsPath"] = str(target)
        profiles = write_json(tmp_path / "ccs.json", sample_profiles)

        result = runner.invoke(main, ["use", "a", "--profiles", str(profiles)])

        assert result.exit_code == 0, result.output
        assert read_json(target)["model"] == "m1"

    def test_settings_envvar(self, runner, profiles_file, tmp_path, read_json):
        target = tmp_path / "env-settings.json"
        result = runner.invoke(
            main,
            ["use", "a", "--profiles", str(profiles_file)],
            env={"CCSWITCH_SETTINGS": str(target)},
        )

        assert result.exit_code == 0, result.output
        assert read_json(target)["model"] == "m1"

    def test_default_settings_location(self, runner, profiles_file, isolate_home):
        """Test that ~/.claude/settings.json is used when nothing is configured."""
        result = runner.invoke(main, ["use", "a", "--profiles", str(profiles_file)])

        assert result.exit_code == 0, result.output
        data = json.loads((isolate_home / ".claude" / "settings.json").read_text())
        assert data["model"] == "m1"


class TestUseInteractive:
    """Test interactive profile selection."""

    @patch("ccswitch.commands.switch.stdin_is_interactive", return_value=True)
    def test_select_by_number(self, _mock_tty, runner, profiles_file, settings_file, read_json):
        # Names are sorted: 1=a, 2=b, 3=deepseek
        result = _use(runner, profiles_file, settings_file, input="3\n")

        assert result.exit_code == 0, result.output
        assert "Switched to profile: deepseek" in result.output
        assert read_json(settings_file)["model"] == "deepseek-chat"

    @patch("ccswitch.commands.switch.stdin_is_interactive", return_value=True)
    def test_enter_selects_default(self, _mock_tty, runner, profiles_file, settings_file):
        result = _use(runner, profiles_file, settings_file, input="\n")

        assert result.exit_code == 0, result.output
        assert "Switched to profile: a" in result.output

    @patch("ccswitch.commands.switch.stdin_is_interactive", return_value=True)
    def test_invalid_then_valid(self, _mock_tty, runner, profiles_file, settings_file):
        result = _use(runner, profiles_file, settings_file, input="9\n2\n")

        assert result.exit_code == 0, result.output
        assert "Invalid selection" in result.output
        assert "Switched to profile: b" in result.output

    @patch("ccswitch.commands.switch.stdin_is_interactive", return_value=True)
    def test_quit(self, _mock_tty, runner, profiles_file, settings_file):
        result = _use(runner, profiles_file, settings_file, input="q\n")

        assert result.exit_code == 0, result.output
        assert "Operation cancelled" in result.output
        assert not settings_file.exists()


class TestResetCommand:
    """Test 'ccswitch reset'."""

    def test_reset(self, runner, profiles_file, settings_file, write_json, read_json):
        """Test reset removes model, empties env and keeps other fields."""
        write_json(settings_file, {"env": {"X": "1"}, "model": "m", "other": True})

        result = runner.invoke(
            main, ["reset", "--profiles", str(profiles_file), "--settings", str(settings_file)]
        )

        assert result.exit_code == 0, result.output
        assert "reset to default" in result.output
        assert read_json(settings_file) == {"env": {}, "other": True}

    def test_reset_without_profiles_file(self, runner, tmp_path, settings_file, read_json):
        result = runner.invoke(
            main,
            ["reset", "--profiles", str(tmp_path / "none.json"), "--settings", str(settings_file)],
        )

        assert result.exit_code == 0, result.output
        assert read_json(settings_file) == {"env": {}}

    def test_reset_malformed_settings(self, runner, settings_file):
        settings_file.parent.mkdir(parents=True)
        settings_file.write_text("[]")

        result = runner.invoke(main, ["reset", "--settings", str(settings_file)])

        assert result.exit_code == 1
        assert "must contain a JSON object" in result.output
