"""
ItmoAbit CLI: место абитуриента в конкурсном списке магистратуры ИТМО.

    itmoabit [-p ID_ПРОГРАММЫ] [--json] СНИЛС
"""
from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from itmoabit.application.use_cases.get_applicant_standing import AdmissionsSource, GetApplicantStandingUseCase
from itmoabit.config.config import settings
from itmoabit.config.logger import logger
from itmoabit.domain.errors import AdmissionsSourceError, ApplicantNotFoundError, InvalidInputError
from itmoabit.infrastructure.api.itmo_rating_client import ItmoRatingClient
from itmoabit.presentation.report import SEPARATOR, render_json, render_text


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="itmoabit",
        description="ItmoAbit CLI (v.1)",
    )
    parser.add_argument("snils", nargs="?", default="", help="Снилс")
    parser.add_argument(
        "-p", "--program",
        type=int,
        default=settings.program_id,
        help=f"ID программы (по умолчанию {settings.program_id})",
    )
    parser.add_argument("--json", action="store_true", help="вывести отчёт в JSON")
    return parser


def main(argv: Optional[List[str]] = None, client: Optional[AdmissionsSource] = None) -> int:
    args = create_parser().parse_args(argv)

    snils = args.snils.strip()
    if not snils:
        print("Снилс не указан")
        return 1

    own_client = client is None
    client = client or ItmoRatingClient()
    try:
        report = GetApplicantStandingUseCase(client).execute(snils, args.program)
    except AdmissionsSourceError as e:
        logger.warning("Ошибка источника для программы %s: %s", args.program, e)
        print("Ошибка. Возможно не правильно указан ID програмы")
        print(f"({e})", file=sys.stderr)
        return 1
    except ApplicantNotFoundError as e:
        logger.warning("СНИЛС %s не найден в программе %s", snils, args.program)
        print(SEPARATOR)
        print(e)
        return 1
    except InvalidInputError as e:
        logger.warning("Некорректные данные: %s", e)
        print(f"❌ {e}", file=sys.stderr)
        return 1
    finally:
        if own_client:
            client.close()

    print(render_json(report) if args.json else render_text(report))
    return 0


if __name__ == "__main__":
    sys.exit(main())
