"""
config.py
─────────
Server settings, overridable through REMINDERS_* environment variables
(e.g. REMINDERS_DATA_FILE=/var/lib/reminders.json, REMINDERS_PORT=9000).
"""

import os
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

# Data directory lives next to this file
_BASE_DIR  = os.path.dirname(os.path.abspath(__file__))
_DATA_FILE = os.path.join(_BASE_DIR, "data", "reminders.json")


class Settings(BaseSettings):
    data_file: str = _DATA_FILE
    host: str = "0.0.0.0"
    port: int = 8080
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="REMINDERS_")


settings = Settings()
