"""Tests for ConfigManager."""

from pathlib import Path

import pytest
import yaml

from podnote.config.manager import ConfigManager
from podnote.config.schema import PodnoteConfig
from podnote.services.resolver import PodcastService
from podnote.templates.engine import DEFAULT_TEMPLATE
from podnote.utils.errors import InvalidConfigError


class TestConfigManager:
    """Tests for ConfigManager class."""

    def test_init_with_custom_dir(self, tmp_path: Path) -> None:
        """Test ConfigManager initialization with custom directory."""
        manager = ConfigManager(config_dir=tmp_path)

        assert manager.config_dir == tmp_path
        assert manager.config_file == tmp_path / "config.yaml"

    def test_init_uses_xdg_config_home(self, tmp_path: Path, monkeypatch) -> None:
        """Default directory honors XDG_CONFIG_HOME."""
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

        manager = ConfigManager()

        assert manager.config_dir == tmp_path / "podnote"

    def test_load_config_creates_default_if_missing(self, tmp_path: Path) -> None:
        """Test that load_config writes defaults if file doesn't exist."""
        manager = ConfigManager(config_dir=tmp_path)

        config = manager.load_config()

        assert isinstance(config, PodnoteConfig)
        assert config.podcast_template == DEFAULT_TEMPLATE
        assert config.podcast_service == PodcastService.APPLE
        assert config.at_cursor is True
        assert manager.config_file.exists()

    def test_missing_keys_default_and_unknown_keys_ignored(self, tmp_path: Path) -> None:
        """Partial files load; unknown keys are dropped."""
        (tmp_path / "config.yaml").write_text(
            yaml.safe_dump({"folder": "Podcasts/", "theme": "dark"})
        )
        manager = ConfigManager(config_dir=tmp_path)

        config = manager.load_config()

        assert config.folder == "Podcasts/"
        assert config.file_name == "{{Title}}"
        assert not hasattr(config, "theme")

    def test_save_and_reload(self, tmp_path: Path) -> None:
        """Saved values survive a reload."""
        manager = ConfigManager(config_dir=tmp_path)
        config = PodnoteConfig(
            at_cursor=False,
            podcast_service=PodcastService.SPOTIFY,
            vault_dir=tmp_path / "vault",
        )

        manager.save_config(config)
        loaded = manager.load_config()

        assert loaded.at_cursor is False
        assert loaded.podcast_service == PodcastService.SPOTIFY
        assert loaded.vault_dir == tmp_path / "vault"

        with open(manager.config_file) as f:
            data = yaml.safe_load(f)
        assert data["podcast_service"] == "spotify"

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Unparseable YAML raises InvalidConfigError."""
        (tmp_path / "config.yaml").write_text("folder: [unclosed")

        with pytest.raises(InvalidConfigError):
            ConfigManager(config_dir=tmp_path).load_config()

    def test_invalid_value(self, tmp_path: Path) -> None:
        """Invalid values raise InvalidConfigError."""
        (tmp_path / "config.yaml").write_text("podcast_service: youtube\n")

        with pytest.raises(InvalidConfigError):
            ConfigManager(config_dir=tmp_path).load_config()

    def test_non_mapping(self, tmp_path: Path) -> None:
        """A YAML list is not a valid config."""
        (tmp_path / "config.yaml").write_text("- a\n- b\n")

        with pytest.raises(InvalidConfigError):
            ConfigManager(config_dir=tmp_path).load_config()


class TestSetValue:
    """Tests for ConfigManager.set_value."""

    @pytest.mark.parametrize(("raw", "expected"), [("false", False), ("yes", True), ("1", True)])
    def test_bool_conversion(self, tmp_path: Path, raw: str, expected: bool) -> None:
        """Boolean keys accept common spellings."""
        manager = ConfigManager(config_dir=tmp_path)

        config = manager.set_value("at_cursor", raw)

        assert config.at_cursor is expected
        assert manager.load_config().at_cursor is expected

    def test_set_service(self, tmp_path: Path) -> None:
        """Enum values are validated."""
        manager = ConfigManager(config_dir=tmp_path)

        config = manager.set_value("podcast_service", "spotify")

        assert config.podcast_service == PodcastService.SPOTIFY

    def test_unknown_key(self, tmp_path: Path) -> None:
        """Unknown keys are rejected."""
        with pytest.raises(InvalidConfigError, match="Unknown config key"):
            ConfigManager(config_dir=tmp_path).set_value("nope", "x")

    def test_invalid_value(self, tmp_path: Path) -> None:
        """Invalid values are rejected and not saved."""
        manager = ConfigManager(config_dir=tmp_path)

        with pytest.raises(InvalidConfigError):
            manager.set_value("podcast_service", "youtube")

        assert manager.load_config().podcast_service == PodcastService.APPLE

    def test_stored_file_has_no_version_key(self, tmp_path: Path) -> None:
        """Only real settings are persisted or settable."""
        manager = ConfigManager(config_dir=tmp_path)
        manager.load_config()

        data = yaml.safe_load(manager.config_file.read_text())

        assert "version" not in data
        with pytest.raises(InvalidConfigError, match="Unknown config key"):
            manager.set_value("version", "2")
