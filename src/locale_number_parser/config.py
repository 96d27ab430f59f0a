"""Application configuration via environment variables with NUMBER_PARSER_ prefix."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Number parser configuration.

    All settings are read from environment variables prefixed with ``NUMBER_PARSER_``.
    An empty language or region code falls back to ``en_US`` at parse time.
    """

    model_config = SettingsConfigDict(env_prefix="NUMBER_PARSER_")

    # ── Locale ─────────────────────────────────────────────────────────────
    language_code: str = "en"
    region_code: str = "US"

    # ── Strategy ───────────────────────────────────────────────────────────
    # When true, the locale formatter runs before the separator heuristic
    prefer_locale_formatting: bool = False

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: str = "INFO"
