"""Configuration management using Pydantic settings."""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Default game parameters loaded from ANTDEFENSE_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ANTDEFENSE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Colony
    starting_food: int = Field(default=2, ge=0)
    num_tunnels: int = Field(default=3, ge=1)
    tunnel_length: int = Field(default=8, ge=1)
    moat_frequency: int = Field(default=0, ge=0)  # 0 = no water locations

    # Hive
    bee_armor: int = Field(default=3, ge=1)
    bee_damage: int = Field(default=1, ge=0)

    # Randomness (None = nondeterministic)
    seed: Optional[int] = None


settings = Settings()
