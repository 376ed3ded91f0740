# -*- coding: utf-8 -*-
"""Centralized configuration, read from environment variables."""

from __future__ import annotations

import os
from pathlib import Path
from typing import List

_DEFAULT_CLIENT_ORIGINS = (
    "http://localhost:5173",
    "http://127.0.0.1:5500",
)


class Settings:
    """Centralized configuration for the wellness backend and client."""

    def __init__(self) -> None:
        base_dir = Path(__file__).resolve().parent
        data_root_default = base_dir.parent / "data"

        self.data_root: Path = Path(
            os.environ.get("WELLNESS_DATA_ROOT") or data_root_default
        ).expanduser()
        self.db_path: Path = Path(
            os.environ.get("WELLNESS_DB_PATH") or (self.data_root / "wellness.db")
        ).expanduser()
        # In production you MUST set WELLNESS_JWT_SECRET. The fallback only exists for local runs.
        self.jwt_secret: str = os.environ.get("WELLNESS_JWT_SECRET") or "dev-secret-change-me"
        self.token_ttl_days: int = int(os.environ.get("WELLNESS_TOKEN_TTL_DAYS") or "7")

        self.host: str = os.environ.get("HOST") or "127.0.0.1"
        self.port: int = int(os.environ.get("PORT") or "8080")
        self.log_level: str = (os.environ.get("WELLNESS_LOG_LEVEL") or "INFO").upper()

        # Client side (the dashboard talks to the API over HTTP).
        self.api_base_url: str = os.environ.get(
            "WELLNESS_API_BASE_URL", "http://localhost:8080/api"
        )
        self.client_timeout: float = float(os.environ.get("WELLNESS_CLIENT_TIMEOUT") or "10")

        client_origin = os.environ.get("CLIENT_ORIGIN", "http://localhost:5173")
        cors = os.environ.get("WELLNESS_CORS_ORIGINS", "")
        if cors.strip() == "*":
            self.cors_origins: List[str] = ["*"]
        elif cors.strip():
            self.cors_origins = [
                origin.strip() for origin in cors.split(",") if origin.strip()
            ]
        else:
            self.cors_origins = list(dict.fromkeys([client_origin, *_DEFAULT_CLIENT_ORIGINS]))


settings = Settings()
