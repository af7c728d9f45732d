# === FILE: console_scout/config.py ===
"""
Конфигурация одного запуска ConsoleScout.
Используется Pydantic для описания схемы и проверки данных.

Файла конфигурации нет: значения собираются из опций CLI,
переменной окружения ``TARGET_URL`` и значений по умолчанию (в этом порядке).
"""
from __future__ import annotations

import os
from typing import Any, Literal, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TARGET_URL = "http://localhost:3000"
TARGET_URL_ENV = "TARGET_URL"

_ALLOWED_SCHEMES = ("http", "https", "file")


class CheckerConfig(BaseModel):
    """Конфигурация для одного запуска проверки."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    target_url: str = Field(DEFAULT_TARGET_URL, description="URL проверяемой страницы.")
    browser: Literal["chromium", "firefox", "webkit"] = Field(
        "chromium", description="Движок браузера Playwright."
    )
    headless: bool = Field(True, description="Запускать браузер без окна.")
    navigation_timeout: float = Field(
        30.0, gt=0, description="Жёсткий таймаут навигации (секунд)."
    )
    settle_time: float = Field(
        3.0, ge=0, description="Пауза после загрузки для поздних сигналов (секунд)."
    )
    home_dir: Optional[str] = Field(
        "/tmp", description="Значение HOME перед запуском браузера (None: не трогать)."
    )

    @field_validator("target_url", mode="before")
    def _check_target_url(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
            parsed = urlparse(v)
            if parsed.scheme not in _ALLOWED_SCHEMES:
                raise ValueError(f"неподдерживаемая схема URL: {v!r}")
            if parsed.scheme != "file" and not parsed.netloc:
                raise ValueError(f"в URL нет хоста: {v!r}")
        return v


def resolve_target_url(explicit: Optional[str] = None) -> str:
    """Явный URL, иначе ``$TARGET_URL``, иначе адрес по умолчанию."""
    return explicit or os.environ.get(TARGET_URL_ENV) or DEFAULT_TARGET_URL


def load_config(target_url: Optional[str] = None, **overrides: Any) -> CheckerConfig:
    """
    Собирает и проверяет CheckerConfig.
    Переопределения со значением None игнорируются, чтобы опции CLI
    без значения не затирали значения по умолчанию.
    """
    data = {key: value for key, value in overrides.items() if value is not None}
    return CheckerConfig(target_url=resolve_target_url(target_url), **data)


__all__ = [
    "CheckerConfig",
    "DEFAULT_TARGET_URL",
    "TARGET_URL_ENV",
    "load_config",
    "resolve_target_url",
]
