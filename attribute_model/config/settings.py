from __future__ import annotations

import os


class Settings:
    # Logging
    LOG_LEVEL: str = os.getenv("MODEL_LOG_LEVEL", "warning")
    LOG_FORMAT: str = os.getenv(
        "MODEL_LOG_FORMAT", "[%(asctime)s] %(levelname)s in %(name)s: %(message)s"
    )
    LOG_DATE_FORMAT: str = os.getenv("MODEL_LOG_DATE_FORMAT", "%Y-%m-%d %H:%M:%S")

    # Serialization
    JSON_OPTIONS: int = int(os.getenv("MODEL_JSON_OPTIONS", "0"))


settings = Settings()
