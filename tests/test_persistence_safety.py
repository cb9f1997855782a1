"""Tests for persistence safety features (backups, atomic writes, corruption handling)."""

from pathlib import Path

import pytest

from colourmodel.exceptions import ConfigFileInvalidError, ConfigurationError
from colourmodel.models import ColourConfig
from colourmodel.utils import PydanticPersistence


class TestPersistenceSafety:
    """Test safety features of PydanticPersistence."""

    @pytest.mark.unit
    def test_save_creates_backup(self, tmp_path: Path):
        """Test that save_json creates a .bak file before overwriting."""
        config_path = tmp_path / "config.json"

        PydanticPersistence.save_json(ColourConfig(default_adjust=1), config_path, backup=False)
        PydanticPersistence.save_json(ColourConfig(default_adjust=2), config_path, backup=True)

        backup_path = config_path.with_suffix(".json.bak")
        assert backup_path.exists()
        assert PydanticPersistence.load_json(backup_path, ColourConfig).default_adjust == 1
        assert PydanticPersistence.load_json(config_path, ColourConfig).default_adjust == 2

    @pytest.mark.unit
    def test_save_without_backup(self, tmp_path: Path):
        """Test that backup can be disabled."""
        config_path = tmp_path / "config.json"

        PydanticPersistence.save_json(ColourConfig(), config_path, backup=False)
        PydanticPersistence.save_json(ColourConfig(), config_path, backup=False)

        assert not config_path.with_suffix(".json.bak").exists()

    @pytest.mark.unit
    def test_no_temp_file_left_behind(self, tmp_path: Path):
        """Test that the atomic write cleans up its temp file."""
        config_path = tmp_path / "config.json"

        PydanticPersistence.save_json(ColourConfig(), config_path)

        assert config_path.exists()
        assert not config_path.with_suffix(".json.tmp").exists()

    @pytest.mark.unit
    def test_creates_parent_directories(self, tmp_path: Path):
        config_path = tmp_path / "nested" / "dir" / "config.json"

        PydanticPersistence.save_json(ColourConfig(), config_path)

        assert config_path.exists()

    @pytest.mark.unit
    def test_load_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            PydanticPersistence.load_json(tmp_path / "missing.json", ColourConfig)

    @pytest.mark.unit
    def test_load_or_default_uses_factory(self, tmp_path: Path):
        config = PydanticPersistence.load_json_or_default(
            tmp_path / "missing.json",
            ColourConfig,
            default_factory=lambda: ColourConfig(default_adjust=42),
        )
        assert config.default_adjust == 42

    @pytest.mark.unit
    def test_corrupted_file_raises_instead_of_defaulting(self, tmp_path: Path):
        """A corrupted file must not be silently replaced by defaults."""
        config_path = tmp_path / "config.json"
        config_path.write_text('{"default_adjust": 5,')

        with pytest.raises(ConfigurationError):
            PydanticPersistence.load_json_or_default(config_path, ColourConfig)

    @pytest.mark.unit
    def test_trailing_comma_message(self, tmp_path: Path):
        config_path = tmp_path / "config.json"
        config_path.write_text('{"default_adjust": 5,}')

        with pytest.raises(ConfigFileInvalidError) as exc_info:
            PydanticPersistence.load_json(config_path, ColourConfig)
        assert str(config_path) in exc_info.value.recovery_hint
