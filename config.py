from typing import List

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    database_url: str = Field("sqlite:///./products.db")
    cors_origins: str = Field("http://localhost:3000")
    api_base_url: str = Field("http://localhost:8000")
    request_timeout: float = Field(10.0, gt=0)
    log_level: str = Field("INFO")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


settings = Settings()
