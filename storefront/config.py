"""
Settings: thin configuration passed explicitly to the composition root.
"""

from __future__ import annotations

from dataclasses import dataclass

_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True, slots=True)
class Settings:
    """Runtime knobs for one storefront process."""
    pool_size: int = 2
    processing_delay: float = 2.0  # seconds
    discount_percent: float = 10.0
    currency: str = "₹"
    drain_timeout: float | None = None  # None = wait for everything
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.pool_size < 1:
            raise ValueError(f"pool_size must be >= 1, got {self.pool_size}")
        if self.processing_delay < 0:
            raise ValueError(f"processing_delay must be >= 0, got {self.processing_delay}")
        if self.drain_timeout is not None and self.drain_timeout < 0:
            raise ValueError(f"drain_timeout must be >= 0, got {self.drain_timeout}")
        if self.log_level.upper() not in _LEVELS:
            raise ValueError(f"log_level must be one of {_LEVELS}, got {self.log_level!r}")


__all__ = ("Settings",)
