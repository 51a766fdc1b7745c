"""
Ping Pong display and geometry configuration with Pydantic validation
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from pydantic import BaseModel
from pydantic import Field
from pydantic import field_validator
from pydantic import model_validator

Color = tuple[int, int, int]


class GameConfig(BaseModel):
    """Main game configuration with Pydantic validation"""

    # Allow mutation for compatibility with existing code
    model_config = {"validate_assignment": True}

    # Field dimensions
    FIELD_WIDTH: int = Field(default=800, gt=0, description="Field width in pixels")
    FIELD_HEIGHT: int = Field(default=600, gt=0, description="Field height in pixels")

    # Entity geometry
    PADDLE_WIDTH: float = Field(default=20.0, gt=0, description="Paddle width in pixels")
    PADDLE_HEIGHT: float = Field(default=200.0, gt=0, description="Paddle height in pixels")
    BALL_RADIUS: float = Field(default=15.0, gt=0, description="Ball radius in pixels")

    # Display
    FPS: int = Field(default=60, gt=0, description="Frames per second")
    WINDOW_CAPTION: str = Field(default="Ping Pong", description="Window title")
    BACKGROUND_COLOR: Color = Field(default=(0, 0, 0), description="RGB color")
    BALL_COLOR: Color = Field(default=(255, 255, 255), description="RGB color")
    PADDLE_COLOR: Color = Field(default=(255, 255, 255), description="RGB color")
    NET_COLOR: Color = Field(default=(255, 255, 255), description="RGB color")
    TEXT_COLOR: Color = Field(default=(255, 255, 255), description="RGB color")

    # Net and score text
    NET_DASH_LENGTH: float = Field(default=25.0, gt=0, description="Length of a net dash")
    NET_GAP_LENGTH: float = Field(default=10.0, ge=0, description="Gap between net dashes")
    NET_LINE_WIDTH: int = Field(default=3, gt=0, description="Net stroke width")
    SCORE_FONT_NAME: str | None = Field(default="Century Gothic", description="Score font")
    SCORE_FONT_SIZE: int = Field(default=45, gt=0, description="Score font size in pixels")

    # Optional hardening, both off to keep the classic behaviour
    CLAMP_PLAYER_PADDLE: bool = Field(
        default=False, description="Keep the pointer-driven paddle inside the field"
    )
    CORRECT_WALL_OVERSHOOT: bool = Field(
        default=False, description="Push the ball back inside after a wall bounce"
    )

    @field_validator(
        "BACKGROUND_COLOR", "BALL_COLOR", "PADDLE_COLOR", "NET_COLOR", "TEXT_COLOR"
    )
    @classmethod
    def validate_color(cls, v: Color) -> Color:
        """Validate that every RGB channel fits in a byte"""
        if any(channel < 0 or channel > 255 for channel in v):
            raise ValueError(f"Color channels must be in 0..255, got {v}")
        return v

    @model_validator(mode="after")
    def validate_field_dimensions(self) -> "GameConfig":
        """Validate field is large enough for game elements"""
        min_width = 2 * self.PADDLE_WIDTH + 4 * self.BALL_RADIUS
        if self.FIELD_WIDTH < min_width:
            raise ValueError(f"FIELD_WIDTH must be at least {min_width} pixels")

        min_height = max(self.PADDLE_HEIGHT, 2 * self.BALL_RADIUS)
        if self.FIELD_HEIGHT < min_height:
            raise ValueError(f"FIELD_HEIGHT must be at least {min_height} pixels")

        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert config to dictionary for serialization"""
        return self.model_dump()

    def save_to_file(self, filepath: str = "ping_pong_config.json") -> None:
        """Save configuration to a JSON file"""
        import json
        from pathlib import Path

        config_path = Path(filepath)

        with open(config_path, "w") as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def load_from_file(cls, filepath: str = "ping_pong_config.json") -> "GameConfig":
        """Load configuration from a JSON file"""
        import json
        from pathlib import Path

        config_path = Path(filepath)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {filepath}")

        with open(config_path) as f:
            config_dict = json.load(f)

        return cls(**config_dict)

    def reset_to_defaults(self) -> None:
        """Reset all fields to their default values"""
        defaults = GameConfig()
        for field_name in type(self).model_fields.keys():
            setattr(self, field_name, getattr(defaults, field_name))


# Global configuration instance with validation
game_config = GameConfig()


def load_config_from_file(filepath: str = "ping_pong_config.json") -> bool:
    """Load configuration from file into global game_config"""
    try:
        loaded_config = GameConfig.load_from_file(filepath)
    except FileNotFoundError:
        return False
    except ValueError as e:
        print(f"Error loading config: {e}")
        return False

    # Bypass per-field validation: the loaded model was validated as a whole
    for field_name in GameConfig.model_fields.keys():
        object.__setattr__(game_config, field_name, getattr(loaded_config, field_name))
    return True


def _change_values(obj: BaseModel, **kwargs: Any) -> dict[str, Any]:
    """Helper to change config values temporarily"""
    old_values: dict[str, Any] = {}
    for name, new_value in kwargs.items():
        old_values[name] = getattr(obj, name)
        setattr(obj, name, new_value)
    return old_values


@contextmanager
def game_config_tmp(**kwargs: Any) -> Iterator[None]:
    """Temporarily modify game config (with validation)"""
    old_values = _change_values(game_config, **kwargs)
    try:
        yield
    finally:
        _change_values(game_config, **old_values)
