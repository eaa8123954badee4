"""
Transitboard Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


def _env_flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


class Config:
    """Application configuration loaded from environment variables."""

    # Board Configuration
    GRID_SIZE: int = int(os.getenv("GRID_SIZE", "11"))
    BOARD_MARGIN: int = int(os.getenv("BOARD_MARGIN", "50"))

    # Movement Configuration
    DEFAULT_LAYER: str = os.getenv("DEFAULT_LAYER", "SIDEWALKS")
    # Treat every declared edge as traversable in both directions
    BIDIRECTIONAL: bool = _env_flag("BIDIRECTIONAL", "true")
    # Comma separated, in order of preference
    START_LAYERS: list[str] = [
        layer.strip().upper()
        for layer in os.getenv("START_LAYERS", "SIDEWALKS").split(",")
        if layer.strip()
    ]

    # Logging
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    VERBOSE: bool = _env_flag("TRANSITBOARD_VERBOSE")

    # Project Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    DATA_DIR: Path = Path(os.getenv("DATA_DIR", str(PROJECT_ROOT / "examples" / "boards")))

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are unusable."""
        if cls.GRID_SIZE < 1:
            raise ValueError(f"GRID_SIZE must be a positive integer, got {cls.GRID_SIZE}")

        if cls.BOARD_MARGIN < 0:
            raise ValueError(f"BOARD_MARGIN cannot be negative, got {cls.BOARD_MARGIN}")

        # Imported lazily so config stays importable on its own
        from .layers import Layer

        known = {layer.value for layer in Layer}
        if cls.DEFAULT_LAYER not in known:
            raise ValueError(
                f"DEFAULT_LAYER '{cls.DEFAULT_LAYER}' is not a known layer. "
                f"Choose one of: {', '.join(sorted(known))}"
            )

        unknown = [layer for layer in cls.START_LAYERS if layer not in known]
        if unknown:
            raise ValueError(
                f"START_LAYERS contains unknown layers: {unknown}. "
                f"Choose from: {', '.join(sorted(known))}"
            )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Transitboard Configuration:",
            f"  Grid: {cls.GRID_SIZE}x{cls.GRID_SIZE} (margin {cls.BOARD_MARGIN}px)",
            f"  Default Layer: {cls.DEFAULT_LAYER}",
            f"  Start Layers: {', '.join(cls.START_LAYERS) or '-'}",
            f"  Bidirectional Edges: {cls.BIDIRECTIONAL}",
            f"  Data Dir: {cls.DATA_DIR}",
        ]
        return "\n".join(lines)
