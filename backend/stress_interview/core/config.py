import os
from typing import Optional
from dotenv import load_dotenv
load_dotenv()

DEFAULT_GATEWAY_URL = "https://ai.gateway.lovable.dev/v1/chat/completions"
DEFAULT_MODEL = "google/gemini-2.5-flash"
DEFAULT_MAX_TOKENS = 300


class ConfigurationError(RuntimeError):
    pass


class Settings:
    """Gateway settings, read from the environment when constructed.

    A fresh instance is built per request so a rotated key is picked up
    without a restart.
    """

    def __init__(self):
        self.api_key: Optional[str] = os.getenv("LOVABLE_API_KEY")
        self.gateway_url: str = os.getenv("AI_GATEWAY_URL", DEFAULT_GATEWAY_URL)
        self.model: str = os.getenv("AI_GATEWAY_MODEL", DEFAULT_MODEL)
        self.max_tokens: int = int(os.getenv("AI_GATEWAY_MAX_TOKENS", DEFAULT_MAX_TOKENS))

        timeout = os.getenv("AI_GATEWAY_TIMEOUT")
        # None disables the httpx timeout entirely
        self.timeout: Optional[float] = float(timeout) if timeout else None

    def require_api_key(self) -> str:
        if not self.api_key:
            raise ConfigurationError("LOVABLE_API_KEY is not configured")
        return self.api_key


def get_settings() -> Settings:
    return Settings()


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
