"""
Application settings using Pydantic Settings.
All configuration is loaded from environment variables or .env file.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class RiskSettings(BaseSettings):
    """Rule violation thresholds."""

    model_config = SettingsConfigDict(
        env_prefix="RISK_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    fallback_max_risk: float = Field(
        default=2000.0,
        description="Max risk per trade in currency when no profile is supplied",
    )
    max_loss_multiplier: float = Field(
        default=1.5, description="Loss above risk x multiplier is flagged"
    )
    revenge_window_minutes: float = Field(
        default=30.0, description="Entries this soon after a loss are flagged"
    )


class ProfileSettings(BaseSettings):
    """Defaults for a user profile that has not been configured."""

    model_config = SettingsConfigDict(
        env_prefix="PROFILE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    name: str = Field(default="Trader", description="Display name")
    account_type: str = Field(default="Standard Account", description="Account label")
    start_balance: float = Field(default=10000.0, description="Starting balance")
    currency: str = Field(default="USD", description="ISO currency code")
    max_risk_per_trade: float = Field(default=2.0, description="Max risk per trade in %")
    max_daily_loss: float = Field(default=5.0, description="Max daily loss in %")
    monthly_goal: float = Field(default=10.0, description="Monthly return goal in %")


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Logging level"
    )
    log_to_file: bool = Field(default=False, description="Log to file")
    log_path: str = Field(default="logs/", description="Log directory")

    # Report
    recent_trades_limit: int = Field(default=5, description="Trades shown as recent")

    # Sub-settings
    risk: RiskSettings = Field(default_factory=RiskSettings)
    profile: ProfileSettings = Field(default_factory=ProfileSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
