"""Pause configuration."""

import os
import plistlib
from dataclasses import dataclass, field
from typing import Optional

from dotenv import load_dotenv

from .errors import SecretsError

load_dotenv()


@dataclass
class Config:
    """Configuration loaded from environment variables."""

    # Server
    host: str = field(default_factory=lambda: os.getenv("PAUSE_HOST", "0.0.0.0"))
    port: int = field(default_factory=lambda: int(os.getenv("PAUSE_PORT", "8000")))
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))

    # Groq
    groq_url: str = field(default_factory=lambda: os.getenv(
        "GROQ_URL", "https://api.groq.com/openai/v1/chat/completions"))
    groq_model: str = field(default_factory=lambda: os.getenv("GROQ_MODEL", "llama3-8b-8192"))
    temperature: float = field(default_factory=lambda: float(os.getenv("GROQ_TEMPERATURE", "0.7")))
    max_tokens: int = field(default_factory=lambda: int(os.getenv("GROQ_MAX_TOKENS", "120")))
    request_timeout: float = field(default_factory=lambda: float(os.getenv("GROQ_TIMEOUT", "30")))

    # Secrets
    secrets_path: str = field(default_factory=lambda: os.getenv("PAUSE_SECRETS_PATH", "secrets.plist"))


API_KEY_NAME = "GROQ_API_KEY"


def load_api_key(path: Optional[str] = None) -> str:
    """
    Load the Groq credential.

    The environment wins; otherwise the key is read from a property-list
    secrets file. Anything missing or malformed raises SecretsError, which
    the application treats as fatal at startup.
    """
    key = os.getenv(API_KEY_NAME)
    if key:
        return key

    path = path or config.secrets_path
    try:
        with open(path, "rb") as fp:
            secrets = plistlib.load(fp)
    except FileNotFoundError:
        raise SecretsError(f"{path} not found or malformed.")
    except (plistlib.InvalidFileException, ValueError) as e:
        raise SecretsError(f"{path} not found or malformed: {e}")

    if not isinstance(secrets, dict):
        raise SecretsError(f"{path} not found or malformed.")

    key = secrets.get(API_KEY_NAME)
    if not isinstance(key, str) or not key:
        raise SecretsError(f"{API_KEY_NAME} not found in {path}. Please add it.")
    return key


# Global config instance
config = Config()
