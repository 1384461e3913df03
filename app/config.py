from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_prefix": "BI_", "env_file": ".env", "env_file_encoding": "utf-8"}

    writer_url: str = Field(default="http://localhost:5000/api/bulk-import/comprehensive-paste")
    writer_api_key: str = Field(default="")
    # None leaves timeouts to the writer
    writer_timeout: float | None = Field(default=None, gt=0)
    session_ttl_minutes: int = Field(default=60, ge=1)
    log_level: str = Field(default="INFO")
    log_json: bool = Field(default=False)
    cors_origins: str = Field(default="http://localhost:3000")


settings = Settings()
