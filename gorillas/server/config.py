# gorillas/server/config.py
"""Controller settings, overridable via environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from ..constants import EXPLOSION_RADIUS


class Settings(BaseSettings):
    """Server settings, overridable via environment variables."""

    # Server
    HOST: str = "127.0.0.1"
    PORT: int = 8091

    # Match
    SEED: int | None = None
    TIME_SCALE: float = 1.0
    EXPLOSION_RADIUS: float = EXPLOSION_RADIUS
    MAX_FLIGHT_TICKS: int = 10_000

    model_config = SettingsConfigDict(env_prefix="GORILLAS_", env_file=".env", extra="ignore")


settings = Settings()
