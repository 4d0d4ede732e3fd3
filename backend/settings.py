"""Runtime settings, read from the environment (``RF_`` prefix) or a ``.env`` file."""

from pydantic_settings import BaseSettings, SettingsConfigDict

from core.metrics import ColorScheme, RangeProfile


class Settings(BaseSettings):
    # Comma-separated origins whose Origin header is reflected back; others get "*".
    cors_origins: str = ""
    # Remote generator the client service prefers over local generation.
    rf_data_endpoint: str | None = None
    rf_data_timeout_s: float = 8.0
    metric_range_profile: RangeProfile = RangeProfile.NARROW
    color_scheme: ColorScheme = ColorScheme.RGB
    points_per_building: int = 200

    model_config = SettingsConfigDict(env_prefix="RF_", env_file=".env", env_file_encoding="utf-8")

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()


def get_settings() -> Settings:
    return settings
