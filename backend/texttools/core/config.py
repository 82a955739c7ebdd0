import os
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()

# Upper bound for top_n on the word frequency endpoint
MAX_TOP_WORDS = 100


def _int_from_env(name: str, default: int, maximum: Optional[int] = None) -> int:
    """Reads a positive integer setting from the environment.

    Args:
        name (str): The environment variable name.
        default (int): Value used when the variable is unset or empty.
        maximum (Optional[int]): Largest accepted value, unbounded if None.

    Returns:
        int: The parsed value.

    Raises:
        ValueError: If the value is not a positive integer or exceeds maximum.
    """
    raw = os.environ.get(name)
    if not raw:
        return default

    value = int(raw)
    if value <= 0:
        raise ValueError(f"{name} must be a positive integer.")
    if maximum is not None and value > maximum:
        raise ValueError(f"{name} must not exceed {maximum}.")
    return value


def _origins_from_env() -> List[str]:
    raw = os.environ.get("ALLOWED_ORIGINS", "http://localhost:3000")
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


ALLOWED_ORIGINS = _origins_from_env()

# Largest text (in characters) the API accepts
MAX_TEXT_LENGTH = _int_from_env("MAX_TEXT_LENGTH", 1_000_000)

DEFAULT_TOP_WORDS = _int_from_env("DEFAULT_TOP_WORDS", 10, maximum=MAX_TOP_WORDS)

HOST = os.environ.get("HOST", "127.0.0.1")
PORT = _int_from_env("PORT", 8000, maximum=65535)
