# itmoabit/services/rank_projector.py
"""
Оценки места абитуриента в конкурсном списке.

Список приходит уже упорядоченным (индекс 0 лучший), здесь его только
фильтруем и считаем, порядок не меняем. Все оценки считаются чистыми функциями
от (список, СНИЛС), вход не мутируется.
"""
from __future__ import annotations

from typing import Tuple

from itmoabit.domain.errors import ApplicantNotFoundError, InvalidInputError
from itmoabit.domain.models import ApplicantRecord, RankedList, RankProjection

# Балл ВИ+ИД ниже порога: экзамен не сдан или ещё не проверен
EXAM_PENDING_SCORE_THRESHOLD = 10
TOP_PRIORITY = 1


def is_exam_pending(record: ApplicantRecord) -> bool:
    return record.total_score < EXAM_PENDING_SCORE_THRESHOLD


def has_partial_score(record: ApplicantRecord) -> bool:
    """
    Какой-то балл уже проставлен (например, только ИД), хотя экзамена нет.
    """
    return record.total_score != 0


def is_top_priority(record: ApplicantRecord) -> bool:
    # приоритет 0 (не указан) считаем первым
    return record.priority <= TOP_PRIORITY


def _validate(applicants: RankedList, national_id: str) -> None:
    if not national_id or not national_id.strip():
        raise InvalidInputError("СНИЛС не указан")
    if not applicants:
        raise InvalidInputError("Конкурсный список пуст")
    for i, rec in enumerate(applicants):
        if not isinstance(rec, ApplicantRecord):
            raise InvalidInputError(f"Элемент списка #{i} не является записью абитуриента: {rec!r}")


def locate_applicant(applicants: RankedList, national_id: str) -> int:
    """
    Индекс абитуриента в списке. При дублях СНИЛС побеждает последняя запись.
    Индекс 0 является нормальным результатом. Если СНИЛС нет, ApplicantNotFoundError.
    """
    found = None
    for i, rec in enumerate(applicants):
        if rec.national_id == national_id:
            found = i
    if found is None:
        raise ApplicantNotFoundError(national_id)
    return found


def raw_place(index: int) -> int:
    return index + 1


def priority_places(applicants: RankedList, index: int) -> Tuple[int, int]:
    """
    Место среди стоящих выше с приоритетом 1 (и среди них с оригиналами).
    """
    p10, p11 = 0, 0
    for rec in applicants[:index]:
        if not is_top_priority(rec):
            continue
        p10 += 1
        if rec.originals_submitted:
            p11 += 1
    return p10 + 1, p11 + 1


def _overtakes(rec: ApplicantRecord, target: ApplicantRecord) -> bool:
    # ещё без экзамена, но по диплому сильнее либо уже есть частичный балл
    return is_exam_pending(rec) and (
        rec.diploma_average > target.diploma_average or has_partial_score(rec)
    )


def projected_places(applicants: RankedList, index: int) -> Tuple[int, int, int]:
    """
    Место, если стоящие ниже и не сдавшие ВИ окажутся выше.
    """
    target = applicants[index]
    p20, p21, p22 = 0, 0, 0
    for rec in applicants[index + 1:]:
        if not _overtakes(rec, target):
            continue
        p20 += 1
        if is_top_priority(rec):
            p21 += 1
            if rec.originals_submitted:
                p22 += 1
    base = raw_place(index)
    return base + p20, base + p21, base + p22


def recommended_places(applicants: RankedList, index: int) -> Tuple[int, int]:
    """
    Место в списке рекомендованных; сам абитуриент учитывается всегда.
    """
    p30, p31 = 0, 0
    for rec in applicants[:index]:
        if rec.is_recommended:
            p30 += 1
            if rec.originals_submitted:
                p31 += 1
    return p30 + 1, p31 + 1


def project_rank(applicants: RankedList, national_id: str) -> RankProjection:
    _validate(applicants, national_id)
    cai = locate_applicant(applicants, national_id)

    p1 = priority_places(applicants, cai)
    p2 = projected_places(applicants, cai)
    p3 = recommended_places(applicants, cai)

    return RankProjection(
        index=cai,
        raw_place=raw_place(cai),
        priority_place=p1[0],
        priority_originals_place=p1[1],
        projected_place=p2[0],
        projected_priority_place=p2[1],
        projected_priority_originals_place=p2[2],
        recommended_place=p3[0],
        recommended_originals_place=p3[1],
    )
