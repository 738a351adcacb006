"""Application configuration via Pydantic Settings.

NOTE: Each setting is mapped to an explicit environment variable name
(ACCESS_TOKEN_SECRET, ADDRESSES_PATH, ...) to avoid silent misconfiguration.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Auth
    access_token_secret: str = Field(default="", validation_alias="ACCESS_TOKEN_SECRET")

    # Dataset
    addresses_path: str = Field(default="addresses.json", validation_alias="ADDRESSES_PATH")
    stream_chunk_size: int = Field(default=64 * 1024, ge=1, validation_alias="STREAM_CHUNK_SIZE")

    # App
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=8080, validation_alias="PORT")
    log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")
    debug: bool = Field(default=False, validation_alias="DEBUG")

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
