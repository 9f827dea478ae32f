from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Sequence, Tuple

# Статус «рекомендован к зачислению» в выгрузке ИТМО
RECOMMENDED_STATUS = "recommended"


@dataclass(frozen=True)
class ApplicantRecord:
    """
    Строка конкурсного списка.
    Отсутствующие в выгрузке поля приходят нулевыми значениями.
    """
    national_id: str  # СНИЛС
    diploma_average: float = 0.0  # средний балл диплома
    total_score: float = 0.0  # Балл ВИ+ИД, 0 — экзамен ещё не учтён
    priority: int = 0  # приоритет направления (1 — самый высокий)
    originals_submitted: bool = False  # подан оригинал документов
    status: str = ""  # 'recommended' — рекомендован к зачислению

    @property
    def is_recommended(self) -> bool:
        return self.status == RECOMMENDED_STATUS


# Порядок элементов — конкурсное место (0 — лучший). Не пересортировывать.
RankedList = Sequence[ApplicantRecord]


@dataclass(frozen=True)
class ProgramMeta:
    """
    Описание направления. В расчётах не участвует, только выводится.
    """
    name: str
    budget_quota: int  # бюджетные места
    target_reception: int  # целевая квота
    updated_at: Optional[datetime] = None  # время формирования списка


@dataclass(frozen=True)
class AdmissionSnapshot:
    """
    Один ответ источника: метаданные направления + упорядоченный список.
    """
    program_id: int
    meta: ProgramMeta
    applicants: Tuple[ApplicantRecord, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class RankProjection:
    """
    Пять оценок места абитуриента в списке.
    """
    index: int  # индекс абитуриента в списке (с нуля)
    raw_place: int
    priority_place: int
    priority_originals_place: int
    projected_place: int
    projected_priority_place: int
    projected_priority_originals_place: int
    recommended_place: int
    recommended_originals_place: int

    @property
    def priority_places(self) -> Tuple[int, int]:
        return self.priority_place, self.priority_originals_place

    @property
    def projected_places(self) -> Tuple[int, int, int]:
        return (
            self.projected_place,
            self.projected_priority_place,
            self.projected_priority_originals_place,
        )

    @property
    def recommended_places(self) -> Tuple[int, int]:
        return self.recommended_place, self.recommended_originals_place


@dataclass(frozen=True)
class StandingReport:
    """
    Всё, что нужно для вывода: направление, сам абитуриент и его места.
    """
    program_id: int
    meta: ProgramMeta
    applicant: ApplicantRecord
    projection: RankProjection
