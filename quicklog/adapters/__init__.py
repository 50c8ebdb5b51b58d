"""Adapters for external services."""

from quicklog.adapters.tempo_client import TempoClient, tempo_day_url, tempo_week_url

__all__ = ["TempoClient", "tempo_day_url", "tempo_week_url"]
