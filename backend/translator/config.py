import os
from typing import List, Optional
from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()

DEFAULT_ORIGINS = "http://localhost:3000,http://localhost:8000"


class Settings(BaseModel):
    deepl_api_key: Optional[str] = None
    deepl_api_url: Optional[str] = None
    deepl_timeout: float = 20.0
    allowed_origins: List[str] = []
    host: str = "127.0.0.1"
    port: int = 8000

    @property
    def is_configured(self) -> bool:
        return bool(self.deepl_api_key) and bool(self.deepl_api_url)

    @classmethod
    def from_env(cls) -> "Settings":
        origins = os.getenv("ALLOWED_ORIGINS", DEFAULT_ORIGINS).split(",")
        return cls(
            deepl_api_key=os.getenv("DEEPL_API_KEY"),
            deepl_api_url=os.getenv("DEEPL_API_URL"),
            deepl_timeout=float(os.getenv("DEEPL_TIMEOUT", "20.0")),
            allowed_origins=[origin.strip() for origin in origins if origin.strip()],
            host=os.getenv("HOST", "127.0.0.1"),
            port=int(os.getenv("PORT", "8000")),
        )


def get_settings() -> Settings:
    """Читает настройки из окружения заново на каждый запрос."""
    return Settings.from_env()
