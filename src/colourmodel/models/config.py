"""Application configuration model."""

from pathlib import Path

from pydantic import BaseModel, Field

from colourmodel.utils.persistence import PydanticPersistence

DEFAULT_CONFIG_PATH = Path.home() / ".colourmodel" / "config.json"


class ColourConfig(BaseModel):
    """Defaults for derived colours and CSS output."""

    default_adjust: int = Field(
        default=10,
        ge=0,
        le=100,
        description="Percentage points used by darken/lighten/gradient when no amount is given",
    )
    light_threshold: float = Field(
        default=130, ge=0, le=255, description="Luma above which a colour is light"
    )
    dark_threshold: float = Field(
        default=130, ge=0, le=255, description="Luma at or below which a colour is dark"
    )

    # CSS gradient output
    vintage_browsers: bool = Field(
        default=False,
        description="Include -webkit-gradient, -moz- and -o- prefixed gradient declarations",
    )
    css_prefix: str = Field(default="", description="Text placed before every CSS line")
    css_suffix: str = Field(default="\n", description="Text placed after every CSS line")

    @classmethod
    def load_or_default(cls, path: Path | None = None) -> "ColourConfig":
        """
        Load config from file or return default.

        Args:
            path: Path to config file. If None, uses default location
                  (~/.colourmodel/config.json).

        Raises:
            ConfigFileInvalidError: If config file has invalid JSON syntax
            ConfigValidationError: If config values fail validation
        """
        if path is None:
            path = DEFAULT_CONFIG_PATH

        return PydanticPersistence.load_json_or_default(path, cls)

    def save(self, path: Path | None = None) -> None:
        """Save config to file."""
        if path is None:
            path = DEFAULT_CONFIG_PATH

        PydanticPersistence.save_json(self, path)
