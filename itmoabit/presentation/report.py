"""
Вывод отчёта о месте абитуриента: текст (как в терминале) и JSON.
"""
from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Dict, List

from itmoabit.domain.models import StandingReport

SEPARATOR = "-" * 49


def _fmt_dt(dt: datetime | None) -> str:
    return dt.strftime("%d.%m.%Y %H:%M") if dt else "нет данных"


def _fmt_number(x: float) -> str:
    # 72.0 → "72", 72.5 → "72.5"
    return str(int(x)) if float(x).is_integer() else str(x)


def _fmt_bool(flag: bool) -> str:
    return "Да" if flag else "Нет"


def render_header(report: StandingReport) -> List[str]:
    meta = report.meta
    return [
        f"Направление: {meta.name}",
        f"Бюджетные места: {meta.budget_quota}",
        f"Целевая квота: {meta.target_reception}",
        f"Данные от: {_fmt_dt(meta.updated_at)}",
    ]


def render_text(report: StandingReport) -> str:
    a = report.applicant
    p = report.projection

    lines = render_header(report)
    lines += [
        SEPARATOR,
        f"Балл ВИ+ИД: {_fmt_number(a.total_score)}",
        f"Средний балл: {a.diploma_average:.4f}",
        f"Текущее место: {p.raw_place}",
        f"Оригиналы: {_fmt_bool(a.originals_submitted)}",
        SEPARATOR,
        f"Место относительно приоритета 1: {p.priority_place}",
        f"Место относительно приоритета 1 и оригиналов: {p.priority_originals_place}",
        SEPARATOR,
        f"Место с учетом не сдавших ВИ (считаем их 100): {p.projected_place}",
        f"Место с учетом не сдавших ВИ c приоритетом 1: {p.projected_priority_place}",
        f"Место с учетом не сдавших ВИ c приоритетом 1 и оригиналами: "
        f"{p.projected_priority_originals_place}",
        SEPARATOR,
        f"Место в списке рекомендованных к зачислению: {p.recommended_place}",
        f"Место в списке рекомендованных к зачислению (только оригиналы): "
        f"{p.recommended_originals_place}",
    ]
    return "\n".join(lines)


def report_to_dict(report: StandingReport) -> Dict[str, Any]:
    meta = report.meta
    a = report.applicant
    p = report.projection
    return {
        "program_id": report.program_id,
        "direction": {
            "name": meta.name,
            "budget_quota": meta.budget_quota,
            "target_reception": meta.target_reception,
            "updated_at": meta.updated_at.isoformat() if meta.updated_at else None,
        },
        "applicant": {
            "snils": a.national_id,
            "total_score": a.total_score,
            "diploma_average": a.diploma_average,
            "originals_submitted": a.originals_submitted,
            "priority": a.priority,
            "status": a.status,
        },
        "places": {
            "raw": p.raw_place,
            "priority": list(p.priority_places),
            "projected": list(p.projected_places),
            "recommended": list(p.recommended_places),
        },
    }


def render_json(report: StandingReport) -> str:
    return json.dumps(report_to_dict(report), ensure_ascii=False, indent=2)
