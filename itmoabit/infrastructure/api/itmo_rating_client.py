from __future__ import annotations

from typing import Optional

import requests
from pydantic import ValidationError

from itmoabit.config.config import settings
from itmoabit.config.logger import logger
from itmoabit.domain.errors import AdmissionsSourceError
from itmoabit.domain.models import AdmissionSnapshot
from itmoabit.infrastructure.api.schemas import RatingResponseSchema


class ItmoRatingClient:
    """
    Забирает конкурсный список магистратуры (бюджет) из API abitlk.itmo.ru.
    Один запрос на вызов, без повторов.
    """

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        *,
        url_template: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self._session = session or requests.Session()
        self._user_agent = settings.user_agent
        self._url_template = url_template
        self._timeout = timeout if timeout is not None else settings.api_timeout

    def _url(self, program_id: int) -> str:
        if self._url_template is None:
            return settings.rating_url(program_id)
        try:
            return self._url_template.format(program_id=program_id)
        except (KeyError, IndexError, ValueError) as e:
            raise AdmissionsSourceError(f"Некорректный шаблон URL {self._url_template!r}: {e!r}", program_id) from e

    def _get_json(self, program_id: int) -> object:
        url = self._url(program_id)
        logger.debug("GET %s (timeout=%ss)", url, self._timeout)
        try:
            resp = self._session.get(
                url,
                headers={"User-Agent": self._user_agent},
                timeout=self._timeout,
            )
            resp.raise_for_status()
        except requests.RequestException as e:
            logger.warning("Не удалось загрузить %s: %s", url, e)
            raise AdmissionsSourceError(f"Не удалось загрузить {url}: {e}", program_id) from e

        try:
            return resp.json()
        except ValueError as e:
            logger.warning("Ответ %s не является JSON: %s", url, e)
            raise AdmissionsSourceError("Can not unmarshal JSON", program_id) from e

    def fetch(self, program_id: int) -> AdmissionSnapshot:
        raw = self._get_json(program_id)

        try:
            data = RatingResponseSchema.model_validate(raw)
        except ValidationError as e:
            logger.warning("Неожиданный формат ответа для программы %s: %s", program_id, e)
            raise AdmissionsSourceError(f"Неожиданный формат ответа: {e}", program_id) from e

        if not data.ok or data.result is None:
            reason = data.message or "API вернуло ok=false"
            logger.warning("API отказало для программы %s: %s", program_id, reason)
            raise AdmissionsSourceError(reason, program_id)

        applicants = tuple(a.to_domain() for a in data.result.applicants)
        meta = data.result.to_meta()
        logger.info(
            "Программа %s: «%s», мест=%d, целевых=%d, заявок=%d",
            program_id, meta.name, meta.budget_quota, meta.target_reception, len(applicants),
        )
        return AdmissionSnapshot(program_id=program_id, meta=meta, applicants=applicants)

    def close(self) -> None:
        self._session.close()
