"""
Campus Directory Configuration

Loads configuration from environment variables with sensible defaults.
"""

import logging
import os

from dotenv import load_dotenv

# Load .env file if it exists
load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    # Logging
    LOG_LEVEL: str = os.getenv("CAMPUS_LOG_LEVEL", "WARNING").upper()

    # Standard coffee order used by Cafe.sell_default()
    STANDARD_COFFEE_OUNCES: int = int(os.getenv("CAMPUS_STANDARD_COFFEE_OUNCES", "4"))
    STANDARD_SUGAR_PACKETS: int = int(os.getenv("CAMPUS_STANDARD_SUGAR_PACKETS", "2"))
    STANDARD_CREAM_PORTIONS: int = int(os.getenv("CAMPUS_STANDARD_CREAM_PORTIONS", "1"))

    @classmethod
    def validate(cls) -> None:
        """Validate configuration and raise errors for unusable values."""
        if not isinstance(logging.getLevelName(cls.LOG_LEVEL), int):
            raise ValueError(
                f"CAMPUS_LOG_LEVEL must be a logging level name, got '{cls.LOG_LEVEL}'"
            )

        for key in (
            "STANDARD_COFFEE_OUNCES",
            "STANDARD_SUGAR_PACKETS",
            "STANDARD_CREAM_PORTIONS",
        ):
            if getattr(cls, key) < 0:
                raise ValueError(f"CAMPUS_{key} must not be negative")

    @classmethod
    def standard_order(cls) -> tuple[int, int, int]:
        """(ounces, sugar packets, cream portions) of a standard coffee."""
        return (
            cls.STANDARD_COFFEE_OUNCES,
            cls.STANDARD_SUGAR_PACKETS,
            cls.STANDARD_CREAM_PORTIONS,
        )

    @classmethod
    def display(cls) -> str:
        """Return a formatted string showing current configuration."""
        ounces, sugar, cream = cls.standard_order()
        lines = [
            "Campus Directory Configuration:",
            f"  Log Level: {cls.LOG_LEVEL}",
            f"  Standard Coffee: {ounces} oz, {sugar} sugar, {cream} cream",
        ]
        return "\n".join(lines)
