from __future__ import annotations

from pathlib import Path

APP_NAME = "title-mirror"

def app_data_dir() -> Path:
    return Path.home() / f".{APP_NAME}"

def logs_dir() -> Path:
    return app_data_dir() / "logs"

def log_path() -> Path:
    return logs_dir() / "app.log"

def ensure_app_dirs() -> None:
    app_data_dir().mkdir(parents=True, exist_ok=True)
    logs_dir().mkdir(parents=True, exist_ok=True)
