from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Settings:
    repr_max_items: int = 64


_settings = Settings()


def get_settings() -> Settings:
    """Return the process-wide settings."""
    return _settings


def configure(**changes) -> Settings:
    """
    Replace the process-wide settings with an updated copy.

    Args:
        **changes: Settings fields to override

    Returns:
        The new Settings instance

    Raises:
        ValueError: If repr_max_items is negative
    """
    global _settings

    updated = replace(_settings, **changes)
    if updated.repr_max_items < 0:
        raise ValueError(f"repr_max_items must be >= 0, got {updated.repr_max_items}")

    _settings = updated
    return _settings
