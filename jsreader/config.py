from __future__ import annotations
from pydantic_settings import BaseSettings
from pydantic import Field

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)

class Settings(BaseSettings):
    # Workers
    THREADS: int = Field(default=1, ge=1)
    RESULTS_BUFFER: int = Field(default=100, ge=1)

    # Networking
    TIMEOUT_S: float = Field(default=15, gt=0)
    USER_AGENT: str = DEFAULT_USER_AGENT
    FOLLOW_REDIRECTS: bool = True
    PROXY_URL: str | None = None

    # Output
    OUTPUT_FILE: str | None = None
    PIPE_MODE: bool = False  # findings and errors only on stdout

    # Matching
    DEDUP_SCOPE: str = Field(default="value", pattern="^(category|value)$")

    model_config = {"env_prefix": "JSR_", "env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}
