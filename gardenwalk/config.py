"""
Gardenwalk Configuration

Loads configuration from environment variables with sensible defaults.
"""

import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()

STRATEGIES = ("auto", "fast-periodic", "brute-force", "single-tile")


class Config:
    """Application configuration loaded from environment variables."""

    # Query defaults (overridden by CLI flags)
    STEP_COUNT: int = int(os.getenv("GARDENWALK_STEP_COUNT", "26501365"))
    STRATEGY: str = os.getenv("GARDENWALK_STRATEGY", "auto")

    # Brute-force simulation explores a (2N+1)^2 box, so cap N
    BRUTE_FORCE_LIMIT: int = int(os.getenv("GARDENWALK_BRUTE_FORCE_LIMIT", "1000"))

    # Project Paths
    PROJECT_ROOT: Path = Path(__file__).parent.parent
    MAPS_DIR: Path = PROJECT_ROOT / "examples" / "maps"

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors if values are out of range."""
        if cls.STRATEGY not in STRATEGIES:
            raise ValueError(
                f"GARDENWALK_STRATEGY must be one of {', '.join(STRATEGIES)}; got '{cls.STRATEGY}'"
            )

        if cls.STEP_COUNT < 0:
            raise ValueError("GARDENWALK_STEP_COUNT must be non-negative")

        if cls.BRUTE_FORCE_LIMIT < 0:
            raise ValueError("GARDENWALK_BRUTE_FORCE_LIMIT must be non-negative")

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        lines = [
            "Gardenwalk Configuration:",
            f"  Step Count: {cls.STEP_COUNT}",
            f"  Strategy: {cls.STRATEGY}",
            f"  Brute-Force Limit: {cls.BRUTE_FORCE_LIMIT} steps",
        ]
        return "\n".join(lines)
