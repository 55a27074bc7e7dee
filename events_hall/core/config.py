from pydantic_settings import BaseSettings, SettingsConfigDict


def _split_csv(value: str) -> list[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


class Settings(BaseSettings):
    app_env: str = "dev"
    app_host: str = "0.0.0.0"
    port: int = 3000
    log_level: str = "INFO"

    cors_origins: str = "*"
    cors_methods: str = "GET,POST,PUT,DELETE"
    cors_headers: str = "Content-Type,Authorization"

    health_message: str = "Events Hall Backend Running"
    booked_dates_seed: str = ""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    def cors_origin_list(self) -> list[str]:
        return _split_csv(self.cors_origins)

    def cors_method_list(self) -> list[str]:
        return _split_csv(self.cors_methods)

    def cors_header_list(self) -> list[str]:
        return _split_csv(self.cors_headers)

    def booked_dates_seed_list(self) -> list[str]:
        return _split_csv(self.booked_dates_seed)


settings = Settings()
