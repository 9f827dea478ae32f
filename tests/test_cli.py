"""
Tests for the command line entry point.

The admissions source is injected, so nothing goes to the network.
"""

import json
import logging

from itmoabit.config.config import settings
from itmoabit.presentation.cli import create_parser, main


class TestParser:

    def test_program_defaults_to_settings(self):
        args = create_parser().parse_args(["123"])
        assert args.program == settings.program_id
        assert args.json is False

    def test_program_flag(self):
        args = create_parser().parse_args(["-p", "42", "123"])
        assert args.program == 42
        assert args.snils == "123"


class TestMain:

    def test_prints_report(self, fake_source, capsys):
        code = main(["-p", "7431", "C"], client=fake_source)
        out = capsys.readouterr().out

        assert code == 0
        assert fake_source.calls == [7431]
        assert "Текущее место: 3" in out
        assert "Место в списке рекомендованных к зачислению: 2" in out

    def test_json_output(self, fake_source, capsys):
        code = main(["--json", "C"], client=fake_source)
        data = json.loads(capsys.readouterr().out)

        assert code == 0
        assert data["places"]["raw"] == 3

    def test_missing_snils(self, fake_source, capsys):
        code = main([], client=fake_source)

        assert code == 1
        assert "Снилс не указан" in capsys.readouterr().out
        assert fake_source.calls == []

    def test_snils_not_found(self, fake_source, capsys, caplog):
        with caplog.at_level(logging.WARNING, logger="itmoabit"):
            code = main(["-p", "7431", "nobody"], client=fake_source)
        out = capsys.readouterr().out

        assert code == 1
        assert "Снилс nobody не найден в списке поступающих" in out
        assert "СНИЛС nobody не найден в программе 7431" in caplog.text

    def test_source_error(self, failing_source, capsys):
        code = main(["-p", "1", "C"], client=failing_source)

        assert code == 1
        assert "Ошибка. Возможно не правильно указан ID програмы" in capsys.readouterr().out

    def test_empty_list(self, make_source, capsys):
        code = main(["C"], client=make_source([]))

        assert code == 1
        assert "Конкурсный список пуст" in capsys.readouterr().err
