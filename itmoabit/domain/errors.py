from __future__ import annotations

from typing import Optional


class ItmoAbitError(Exception):
    """Базовое исключение проекта."""


class InvalidInputError(ItmoAbitError):
    """Пустой или битый конкурсный список, пустой СНИЛС."""


class ApplicantNotFoundError(ItmoAbitError):
    """СНИЛС отсутствует в конкурсном списке."""

    def __init__(self, national_id: str):
        self.national_id = national_id
        super().__init__(f"Снилс {national_id} не найден в списке поступающих")


class AdmissionsSourceError(ItmoAbitError):
    """
    Любой сбой источника: сеть, HTTP-статус, невалидный JSON, ok=false.
    """

    def __init__(self, message: str, program_id: Optional[int] = None):
        self.program_id = program_id
        super().__init__(message)
