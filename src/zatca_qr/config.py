from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="ZATCA_QR_", env_file=".env", extra="ignore"
    )

    SERVER_NAME: str = "zatca-qr"
    LOG_LEVEL: str = "INFO"


settings = Settings()
