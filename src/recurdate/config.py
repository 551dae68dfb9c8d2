"""Module-level configuration for recurdate defaults."""

import threading
from dataclasses import dataclass
from typing import Literal

from recurdate.validation import validate_weekday

BackendName = Literal["pandas", "polars"]


@dataclass
class RecurdateConfig:
    """Configuration for recurdate defaults."""

    default_week_start: int = 1  # Monday, as in RFC 5545 WKST
    default_backend: BackendName = "pandas"


# Module-level singleton
_recurdate_config: RecurdateConfig | None = None
_config_lock = threading.Lock()


def get_recurdate_config() -> RecurdateConfig:
    """Get the global recurdate configuration singleton."""
    global _recurdate_config
    if _recurdate_config is None:
        with _config_lock:
            if _recurdate_config is None:
                _recurdate_config = RecurdateConfig()
    return _recurdate_config


def configure_recurdate(
    default_week_start: int | None = None,
    default_backend: BackendName | None = None,
) -> None:
    """Configure default recurdate settings.

    Args:
        default_week_start: Weekday (0=Sunday .. 6=Saturday) used as the
            first day of the week when a weekly enumerator is built without
            an explicit week start.
        default_backend: DataFrame backend used by ``to_frame`` when none
            is given ("pandas" or "polars").

    Example:
        from recurdate import configure_recurdate, weekly

        # Weeks start on Sunday from now on
        configure_recurdate(default_week_start=0)

        enum = weekly(date(2021, 8, 4))  # wkst=0
    """
    if default_week_start is not None:
        validate_weekday(default_week_start, "default_week_start")
    if default_backend is not None and default_backend not in ("pandas", "polars"):
        raise ValueError(f"Unknown backend: {default_backend}")

    config = get_recurdate_config()
    with _config_lock:
        if default_week_start is not None:
            config.default_week_start = default_week_start
        if default_backend is not None:
            config.default_backend = default_backend


def get_default_week_start() -> int:
    """Get the default week start weekday."""
    return get_recurdate_config().default_week_start


def get_default_backend() -> BackendName:
    """Get the default DataFrame backend name."""
    return get_recurdate_config().default_backend


def reset_recurdate_config() -> None:
    """Reset configuration to defaults. Useful for testing."""
    global _recurdate_config
    with _config_lock:
        _recurdate_config = RecurdateConfig()
