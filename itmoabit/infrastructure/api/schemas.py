"""
Схема ответа API рейтинга ИТМО (/api/v1/rating/master/budget).

Проверяем только то, что нужно для расчёта. Поля со значением null
приводятся к нулевым значениям.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from itmoabit.domain.models import ApplicantRecord, ProgramMeta


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class DirectionSchema(_Payload):
    name: str = Field("", alias="direction_title")
    quota: int = Field(0, alias="budget_min")
    target: int = Field(0, alias="target_reception")

    @field_validator("name", mode="before")
    @classmethod
    def _null_str(cls, v: Any) -> Any:
        return "" if v is None else v

    @field_validator("quota", "target", mode="before")
    @classmethod
    def _null_int(cls, v: Any) -> Any:
        return 0 if v is None else v


class ApplicantSchema(_Payload):
    diploma_average: float = Field(0.0, alias="diploma_average")
    score: float = Field(0.0, alias="total_scores")
    priority: int = Field(0, alias="priority")
    originals: bool = Field(False, alias="is_send_original")
    snils: str = Field("", alias="snils")
    status: str = Field("", alias="status")

    @field_validator("diploma_average", "score", "priority", mode="before")
    @classmethod
    def _null_number(cls, v: Any) -> Any:
        return 0 if v is None else v

    @field_validator("originals", mode="before")
    @classmethod
    def _null_bool(cls, v: Any) -> Any:
        return False if v is None else v

    @field_validator("snils", "status", mode="before")
    @classmethod
    def _null_str(cls, v: Any) -> Any:
        return "" if v is None else str(v)

    def to_domain(self) -> ApplicantRecord:
        return ApplicantRecord(
            national_id=self.snils,
            diploma_average=self.diploma_average,
            total_score=self.score,
            priority=self.priority,
            originals_submitted=self.originals,
            status=self.status,
        )


class RatingResultSchema(_Payload):
    direction: DirectionSchema = Field(default_factory=DirectionSchema)
    applicants: List[ApplicantSchema] = Field(default_factory=list, alias="general_competition")
    timestamp: Optional[datetime] = Field(None, alias="update_time")

    @field_validator("direction", mode="before")
    @classmethod
    def _null_direction(cls, v: Any) -> Any:
        return {} if v is None else v

    @field_validator("applicants", mode="before")
    @classmethod
    def _null_list(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("timestamp", mode="before")
    @classmethod
    def _empty_timestamp(cls, v: Any) -> Any:
        return None if v in ("", None) else v

    def to_meta(self) -> ProgramMeta:
        return ProgramMeta(
            name=self.direction.name,
            budget_quota=self.direction.quota,
            target_reception=self.direction.target,
            updated_at=self.timestamp,
        )


class RatingResponseSchema(_Payload):
    ok: bool = False
    message: Optional[str] = None
    result: Optional[RatingResultSchema] = None
