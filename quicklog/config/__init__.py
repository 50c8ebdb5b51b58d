"""Runtime configuration helpers."""

from quicklog.config.settings import Settings, normalize_base_url, resolve_rounding_mode, resolve_settings

__all__ = ["Settings", "normalize_base_url", "resolve_rounding_mode", "resolve_settings"]
