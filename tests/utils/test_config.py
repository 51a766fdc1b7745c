"""
Unit tests for configuration validation

Tests the configuration system including:
- Field validators and the field size check
- Context manager for temporary config changes
- JSON save/load
"""

import json

import pytest
from pydantic import ValidationError

from ping_pong.utils.config import (
    GameConfig,
    game_config,
    game_config_tmp,
    load_config_from_file,
)


class TestGameConfigValidation:
    """Test game configuration validation"""

    def test_valid_default_config(self):
        config = GameConfig()

        assert config.FIELD_WIDTH == 800
        assert config.FIELD_HEIGHT == 600
        assert config.PADDLE_HEIGHT == 200
        assert config.BALL_RADIUS == 15
        assert config.CLAMP_PLAYER_PADDLE is False
        assert config.CORRECT_WALL_OVERSHOOT is False

    def test_negative_field_dimensions(self):
        with pytest.raises(ValidationError):
            GameConfig(FIELD_WIDTH=-800)

    def test_field_too_small_for_paddles(self):
        with pytest.raises(ValidationError):
            GameConfig(FIELD_HEIGHT=150)

        with pytest.raises(ValidationError):
            GameConfig(FIELD_WIDTH=50)

    def test_invalid_color_on_assignment(self):
        config = GameConfig()

        with pytest.raises(ValidationError):
            config.BALL_COLOR = (256, 0, 0)

        assert config.BALL_COLOR == (255, 255, 255)

    def test_reset_to_defaults(self):
        config = GameConfig()
        config.FPS = 30
        config.NET_COLOR = (10, 20, 30)

        config.reset_to_defaults()

        assert config.FPS == 60
        assert config.NET_COLOR == (255, 255, 255)


class TestConfigContextManager:
    def test_game_config_tmp_restores(self):
        original = game_config.FPS

        with game_config_tmp(FPS=144, CLAMP_PLAYER_PADDLE=True):
            assert game_config.FPS == 144
            assert game_config.CLAMP_PLAYER_PADDLE is True

        assert game_config.FPS == original
        assert game_config.CLAMP_PLAYER_PADDLE is False

    def test_game_config_tmp_restores_on_error(self):
        original = game_config.FPS

        with pytest.raises(RuntimeError):
            with game_config_tmp(FPS=30):
                raise RuntimeError("boom")

        assert game_config.FPS == original

    def test_game_config_tmp_validates(self):
        with pytest.raises(ValidationError):
            with game_config_tmp(FPS=0):
                pass

        assert game_config.FPS == 60


class TestConfigFiles:
    """Test JSON persistence of the configuration"""

    def test_save_and_load(self, tmp_path):
        path = tmp_path / "config.json"
        config = GameConfig(FPS=30, BACKGROUND_COLOR=(10, 10, 10))

        config.save_to_file(str(path))
        loaded = GameConfig.load_from_file(str(path))

        assert json.loads(path.read_text())["FPS"] == 30
        assert loaded.FPS == 30
        assert loaded.BACKGROUND_COLOR == (10, 10, 10)

    def test_load_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            GameConfig.load_from_file(str(tmp_path / "missing.json"))

        assert load_config_from_file(str(tmp_path / "missing.json")) is False

    def test_load_invalid_file(self, tmp_path, capsys):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"FPS": -1}))

        assert load_config_from_file(str(path)) is False
        assert "Error loading config" in capsys.readouterr().out
        assert game_config.FPS == 60

    def test_load_into_global_config(self, tmp_path):
        path = tmp_path / "config.json"
        GameConfig(FPS=90).save_to_file(str(path))

        try:
            assert load_config_from_file(str(path)) is True
            assert game_config.FPS == 90
        finally:
            game_config.reset_to_defaults()

        assert game_config.FPS == 60
