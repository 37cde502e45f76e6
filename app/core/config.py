import os
from functools import lru_cache
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

class Settings:
    # =========================
    # INFERENCE PROVIDER (Groq, OpenAI 호환 API)
    # =========================
    GROQ_API_KEY: str = os.getenv("GROQ_API_KEY", "")
    GROQ_API_BASE: str = os.getenv("GROQ_API_BASE", "https://api.groq.com/openai/v1")

    VISION_MODEL: str = os.getenv(
        "VISION_MODEL",
        "meta-llama/llama-4-scout-17b-16e-instruct"
    )
    VISION_TEMPERATURE: float = float(os.getenv("VISION_TEMPERATURE", "0"))
    VISION_TOP_P: float = float(os.getenv("VISION_TOP_P", "1"))
    VISION_MAX_TOKENS: int = int(os.getenv("VISION_MAX_TOKENS", "4870"))

    # =========================
    # SERVER
    # =========================
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", "4000"))
    UPLOAD_DIR: Path = Path(os.getenv("UPLOAD_DIR", "uploads"))
    CORS_ORIGINS: str = os.getenv("CORS_ORIGINS", "*")

    @property
    def cors_origin_list(self) -> list:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    return Settings()
