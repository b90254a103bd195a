# File: api/config.py
import os
from typing import Optional, Tuple

from dotenv import load_dotenv
from fastapi import Request
from pydantic import BaseModel, ConfigDict, Field


class Settings(BaseModel):
    """Process-wide configuration, created once at start-up and never changed."""
    model_config = ConfigDict(frozen=True)

    auth_tokens: Tuple[str, ...] = Field(
        (),
        description="Accepted API tokens; empty disables authentication",
    )
    timeout: Optional[float] = Field(
        None,
        description="Seconds to wait for the stock page; None waits indefinitely",
    )


def _split_tokens(raw: str) -> Tuple[str, ...]:
    return tuple(t.strip() for t in raw.split(",") if t.strip())


def load_settings() -> Settings:
    """Build Settings from the environment (and a .env file, if present)."""
    load_dotenv()
    timeout = os.getenv("STOCK_API_TIMEOUT", "").strip()
    return Settings(
        auth_tokens=_split_tokens(os.getenv("STOCK_API_TOKENS", "")),
        timeout=float(timeout) if timeout else None,
    )


def get_settings(request: Request) -> Settings:
    """FastAPI dependency returning the settings the app was created with."""
    return request.app.state.settings
