"""Configuration system using pydantic-settings with environment variable loading."""

from decimal import Decimal

from pydantic_settings import BaseSettings, SettingsConfigDict


class FeedSettings(BaseSettings):
    """Price feed endpoint settings."""

    model_config = SettingsConfigDict(env_prefix="FEED_")

    url: str = "https://interview.switcheo.com/prices.json"
    timeout_seconds: float = 10.0


class SessionSettings(BaseSettings):
    """Swap session behaviour.

    The simulated submission delay and failure switch exist so a demo
    deployment can exercise both settle and fail paths.
    """

    model_config = SettingsConfigDict(env_prefix="SESSION_")

    submit_delay_seconds: float = 2.0
    simulate_failure: bool = False
    default_source: str = "ETH"
    default_dest: str = "USDC"
    default_slippage: Decimal = Decimal("0.5")  # percent


class DashboardSettings(BaseSettings):
    """Dashboard server configuration."""

    model_config = SettingsConfigDict(env_prefix="DASHBOARD_")

    host: str = "0.0.0.0"
    port: int = 8080
    enabled: bool = True


class AppSettings(BaseSettings):
    """Root application settings, composing all sub-settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
    )

    log_level: str = "INFO"
    feed: FeedSettings = FeedSettings()
    session: SessionSettings = SessionSettings()
    dashboard: DashboardSettings = DashboardSettings()
