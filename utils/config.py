"""
Configuration management for the Ingredily recipes screen.

Handles environment variables for layout, image and logging settings.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass
class Config:
    """Application configuration settings"""

    # Layout settings
    dual_pane_min_width: int = 840
    default_viewport_width: int = 412

    # Recipe card image settings
    image_height_px: int = 200
    image_corner_radius_px: int = 16
    crossfade_ms: int = 300

    # Sample search results
    sample_data_path: str = str(Path(__file__).parent.parent / "data" / "sample_recipes.json")

    # Streamlit settings
    debug_mode: bool = False

    # Logging
    log_level: str = "INFO"
    log_file: str = "logs/ingredily.log"

    def __post_init__(self):
        """Validate values that the layout depends on"""
        if self.dual_pane_min_width <= 0:
            raise ValueError("dual_pane_min_width must be positive")
        if self.default_viewport_width <= 0:
            raise ValueError("default_viewport_width must be positive")
        if self.crossfade_ms < 0:
            raise ValueError("crossfade_ms must not be negative")

    @classmethod
    def from_environment(cls) -> 'Config':
        """Create configuration from environment variables"""
        defaults = cls()
        return cls(
            # Layout
            dual_pane_min_width=int(os.getenv("INGREDILY_DUAL_PANE_MIN_WIDTH", str(defaults.dual_pane_min_width))),
            default_viewport_width=int(os.getenv("INGREDILY_VIEWPORT_WIDTH", str(defaults.default_viewport_width))),

            # Images
            image_height_px=int(os.getenv("INGREDILY_IMAGE_HEIGHT", str(defaults.image_height_px))),
            image_corner_radius_px=int(os.getenv("INGREDILY_IMAGE_RADIUS", str(defaults.image_corner_radius_px))),
            crossfade_ms=int(os.getenv("INGREDILY_CROSSFADE_MS", str(defaults.crossfade_ms))),

            # Data
            sample_data_path=os.getenv("INGREDILY_SAMPLE_DATA", defaults.sample_data_path),

            # Streamlit
            debug_mode=os.getenv("INGREDILY_DEBUG", "false").lower() == "true",

            # Logging
            log_level=os.getenv("INGREDILY_LOG_LEVEL", defaults.log_level),
            log_file=os.getenv("INGREDILY_LOG_FILE", defaults.log_file)
        )

    def ensure_directories(self):
        """Create necessary directories"""
        log_dir = Path(self.log_file).parent
        if log_dir != Path("."):
            log_dir.mkdir(parents=True, exist_ok=True)


# Global configuration instance
_config: Optional[Config] = None


def get_config() -> Config:
    """Get global configuration instance"""
    global _config
    if _config is None:
        _config = Config.from_environment()
        _config.ensure_directories()
    return _config


def reload_config():
    """Reload configuration from environment"""
    global _config
    _config = None
    return get_config()
