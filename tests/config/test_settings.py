"""Tests for JcreateSettings: CLI flags, env vars, and TOML in one object."""

from __future__ import annotations

from pathlib import Path

import click
import pytest

from jcreate.config.settings import JcreateSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = JcreateSettings.from_cli(cwd=tmp_path)
        assert settings.cwd == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.no_interact is False
        assert settings.options.java_version == 17
        assert settings.templates["record"].startswith("package %s;")

    def test_cwd_defaults_to_process_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.chdir(tmp_path)
        assert JcreateSettings.from_cli().cwd == Path.cwd()

    def test_frozen(self, tmp_path: Path) -> None:
        settings = JcreateSettings.from_cli(cwd=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        (tmp_path / "jcreate.toml").write_text(
            "[options]\njava_version = 11\nauto_open = false\n"
            '[templates]\nclass = "package %s;\\n\\nfinal class %s {}"\n'
        )
        settings = JcreateSettings.from_cli(cwd=tmp_path)
        assert settings.options.java_version == 11
        assert settings.options.auto_open is False
        assert settings.options.use_notify is True
        assert settings.templates["class"] == "package %s;\n\nfinal class %s {}"
        assert "public enum %s" in settings.templates["enum"]
        assert settings.config_path == (tmp_path / "jcreate.toml").resolve()

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir()
        custom.write_text("[options]\njava_version = 21\n")
        settings = JcreateSettings.from_cli(config_path=str(custom), cwd=tmp_path)
        assert settings.options.java_version == 21
        assert settings.config_path == custom

    def test_missing_explicit_config(self, tmp_path: Path) -> None:
        with pytest.raises(click.ClickException, match="Config file not found"):
            JcreateSettings.from_cli(config_path=str(tmp_path / "nope.toml"), cwd=tmp_path)

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "jcreate.toml").write_text("[options\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            JcreateSettings.from_cli(cwd=tmp_path)

    def test_invalid_template(self, tmp_path: Path) -> None:
        (tmp_path / "jcreate.toml").write_text('[templates]\nclass = "class %s"\n')
        with pytest.raises(click.ClickException, match="Invalid configuration"):
            JcreateSettings.from_cli(cwd=tmp_path)

    def test_invalid_option_type(self, tmp_path: Path) -> None:
        (tmp_path / "jcreate.toml").write_text('[options]\njava_version = "new"\n')
        with pytest.raises(click.ClickException, match="Invalid configuration"):
            JcreateSettings.from_cli(cwd=tmp_path)


class TestPriority:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "jcreate.toml").write_text("[options]\njava_version = 11\n")
        monkeypatch.setenv("JCREATE_OPTIONS__JAVA_VERSION", "21")
        assert JcreateSettings.from_cli(cwd=tmp_path).options.java_version == 21

    def test_cli_flags_override_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("JCREATE_QUIET", "false")
        assert JcreateSettings.from_cli(cwd=tmp_path, quiet=True).quiet is True

    def test_env_var_config_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        custom = tmp_path / "elsewhere.toml"
        custom.write_text("[options]\njava_version = 8\n")
        monkeypatch.setenv("JCREATE_CONFIG", str(custom))
        settings = JcreateSettings.from_cli(cwd=tmp_path)
        assert settings.options.java_version == 8
        assert settings.config_path == custom
