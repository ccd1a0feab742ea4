"""
Application settings loaded from environment variables.
"""

from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "User Auth Service"

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 3000
    host: str = "0.0.0.0"
    debug: bool = False
    cors_origins: list = ["*"]

    # ── Password hashing ─────────────────────────────────────────────────
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)   # work factor for new salts

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
    }


config = Settings()
