"""Unit tests for the config commands."""

from pathlib import Path

from pathtree.cli.main import app
from pathtree.core.config import PathTreeConfig, load_config
from typer.testing import CliRunner

runner = CliRunner()


class TestConfigInit:
    """Tests for pathtree config init."""

    def test_writes_default_config(self, isolated_config_home: Path) -> None:
        """init writes the default config to the XDG location."""
        result = runner.invoke(app, ["config", "init"])

        target = isolated_config_home / "pathtree" / "config.toml"
        assert result.exit_code == 0
        assert target.exists()
        assert load_config(target) == PathTreeConfig()

    def test_existing_config_kept(self, tmp_path: Path) -> None:
        """init does not overwrite without --force."""
        target = tmp_path / "config.toml"
        target.write_text("max_depth = 2\n")

        result = runner.invoke(app, ["--config", str(target), "config", "init"])

        assert result.exit_code == 0
        assert "already exists" in result.output
        assert load_config(target).max_depth == 2

    def test_force_overwrites(self, tmp_path: Path) -> None:
        """--force replaces an existing config."""
        target = tmp_path / "config.toml"
        target.write_text("max_depth = 2\n")

        result = runner.invoke(app, ["--config", str(target), "config", "init", "--force"])

        assert result.exit_code == 0
        assert load_config(target).max_depth is None


class TestConfigShow:
    """Tests for pathtree config show."""

    def test_shows_defaults(self) -> None:
        """show prints the effective settings as TOML."""
        result = runner.invoke(app, ["config", "show"])

        assert result.exit_code == 0
        assert "use_git_ignore = false" in result.output
        assert "show_hidden = true" in result.output

    def test_shows_file_values(self, tmp_path: Path) -> None:
        """Values from --config are shown."""
        target = tmp_path / "config.toml"
        target.write_text("max_depth = 4\n")

        result = runner.invoke(app, ["--config", str(target), "config", "show"])

        assert result.exit_code == 0
        assert "max_depth = 4" in result.output
