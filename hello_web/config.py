from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="Hello World", alias="APP_NAME")
    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=4567, alias="PORT")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    welcome_message: str = Field(default="Welcome to the Hello World web service!", alias="WELCOME_MESSAGE")
    hello_message: str = Field(default="Hello, World!", alias="HELLO_MESSAGE")

    metrics_path: str = Field(default="/metrics", alias="METRICS_PATH")
    enable_metrics_endpoint: bool = Field(default=True, alias="ENABLE_METRICS_ENDPOINT")

    @property
    def base_url(self) -> str:
        return f"http://{self.host}:{self.port}"

    @property
    def metrics_url(self) -> str:
        return f"{self.base_url}{self.metrics_path}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
