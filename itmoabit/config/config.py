# itmoabit/config/config.py
from pathlib import Path
from typing import Any, Literal
from zoneinfo import ZoneInfo

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_PROJECT_ROOT = Path(__file__).resolve().parents[2]

_DEFAULT_API_URL = "https://abitlk.itmo.ru/api/v1/rating/master/budget?program_id={program_id}"
_DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (X11; Linux x86_64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) "
    "Chrome/127.0 Safari/537.36"
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=_PROJECT_ROOT / ".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        populate_by_name=True,
        extra="ignore",
    )

    # окружение
    env: str = Field("dev", alias="ENV")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] | None = Field(None, alias="LOG_LEVEL")

    # таймзона, в которой показываем время обновления списка
    timezone_name: str = Field("Europe/Moscow", alias="TIMEZONE")

    # ───────────────── API рейтинга ИТМО ─────────────────
    # https://abit.itmo.ru/rating/master/budget/7431
    program_id: int = Field(7431, alias="PROGRAM_ID")
    # шаблон URL, обязан содержать {program_id}
    api_url: str = Field(_DEFAULT_API_URL, alias="API_URL")
    # таймаут одного запроса, секунды
    api_timeout: float = Field(20.0, alias="API_TIMEOUT")
    user_agent: str = Field(_DEFAULT_USER_AGENT, alias="USER_AGENT")

    @model_validator(mode="before")
    def _preprocess(cls, values: dict[str, Any]) -> dict[str, Any]:
        for key in ("LOG_LEVEL", "log_level"):
            raw = values.get(key)
            if isinstance(raw, str):
                values[key] = raw.strip().upper() or None
        return values

    @field_validator("api_url")
    @classmethod
    def _check_api_url(cls, value: str) -> str:
        if "{program_id}" not in value:
            raise ValueError("API_URL должен содержать плейсхолдер {program_id}")
        try:
            value.format(program_id=0)
        except (KeyError, IndexError, ValueError) as e:
            raise ValueError(f"API_URL: кроме {{program_id}} допустимых плейсхолдеров нет ({e!r})") from e
        return value

    @property
    def timezone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone_name)

    def rating_url(self, program_id: int) -> str:
        return self.api_url.format(program_id=program_id)


settings = Settings()
