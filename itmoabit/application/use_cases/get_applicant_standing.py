# itmoabit/application/use_cases/get_applicant_standing.py
from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Optional, Protocol
from zoneinfo import ZoneInfo

from itmoabit.config.config import settings
from itmoabit.config.logger import logger
from itmoabit.domain.models import AdmissionSnapshot, StandingReport
from itmoabit.services.rank_projector import project_rank

# API отдаёт время по СПб; наивные метки считаем московскими
_SOURCE_TZ = ZoneInfo("Europe/Moscow")


class AdmissionsSource(Protocol):
    """Откуда берётся конкурсный список (ItmoRatingClient или заглушка)."""

    def fetch(self, program_id: int) -> AdmissionSnapshot: ...


class GetApplicantStandingUseCase:
    """
    Загружает конкурсный список направления и считает места абитуриента.
    Источник передаётся снаружи, см. AdmissionsSource.
    """

    def __init__(self, source: AdmissionsSource, tz: Optional[ZoneInfo] = None):
        self._source = source
        self._tz = tz or settings.timezone

    def _localize(self, dt: datetime | None) -> datetime | None:
        if dt is None:
            return None
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=_SOURCE_TZ)
        return dt.astimezone(self._tz)

    def execute(self, national_id: str, program_id: int) -> StandingReport:
        logger.info("Ищем %s в списке программы %s", national_id, program_id)
        snapshot = self._source.fetch(program_id)

        projection = project_rank(snapshot.applicants, national_id)
        applicant = snapshot.applicants[projection.index]
        logger.debug("Найден на позиции %d из %d", projection.raw_place, len(snapshot.applicants))

        meta = replace(snapshot.meta, updated_at=self._localize(snapshot.meta.updated_at))
        return StandingReport(
            program_id=snapshot.program_id,
            meta=meta,
            applicant=applicant,
            projection=projection,
        )
