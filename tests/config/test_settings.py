"""Tests for PatternSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from patternctl.config.settings import PatternSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = PatternSettings.from_cli(search_from=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.chain.foods == ["Nut", "Banana", "Cup of coffee"]
        assert settings.state.initial == "Initial state"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = PatternSettings.from_cli(search_from=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "patternctl.toml"
        toml.write_text('[state]\ninitial = "draft"\n[chain]\nsubchain_entry = "dog"\n')
        settings = PatternSettings.from_cli(search_from=tmp_path)
        assert settings.config_path == toml
        assert settings.state.initial == "draft"
        assert settings.state.second == "Second state"  # default preserved
        assert settings.chain.subchain_entry == "dog"

    def test_discovered_from_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / "patternctl.toml").write_text('[command]\nsimple_payload = "Yo"\n')
        deep = tmp_path / "a" / "b"
        deep.mkdir(parents=True)
        settings = PatternSettings.from_cli(search_from=deep)
        assert settings.command.simple_payload == "Yo"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[state]\ngreeting = "Hey"\n')
        settings = PatternSettings.from_cli(config_path=str(custom), search_from=tmp_path)
        assert settings.state.greeting == "Hey"
        assert settings.config_path == custom

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = PatternSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None
        assert settings.state.greeting == "Hello, World!"

    def test_invalid_toml_raises_click_exception(self, tmp_path: Path) -> None:
        (tmp_path / "patternctl.toml").write_text("[state\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            PatternSettings.from_cli(search_from=tmp_path)


class TestPriority:
    def test_cli_flags_override(self, tmp_path: Path) -> None:
        settings = PatternSettings.from_cli(search_from=tmp_path, json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / "patternctl.toml").write_text("quiet = true\n")
        settings = PatternSettings.from_cli(search_from=tmp_path, quiet=False)
        assert settings.quiet is False

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("PATTERNCTL_QUIET", "true")
        settings = PatternSettings.from_cli(search_from=tmp_path)
        assert settings.quiet is True

    def test_nested_env_var_beats_toml(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        (tmp_path / "patternctl.toml").write_text('[state]\ninitial = "from toml"\n')
        monkeypatch.setenv("PATTERNCTL_STATE__INITIAL", "from env")
        settings = PatternSettings.from_cli(search_from=tmp_path)
        assert settings.state.initial == "from env"
