from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from itmoabit.application.use_cases.get_applicant_standing import GetApplicantStandingUseCase
from itmoabit.domain.errors import AdmissionsSourceError, ApplicantNotFoundError, InvalidInputError
from itmoabit.domain.models import ProgramMeta

YEKT = ZoneInfo("Asia/Yekaterinburg")


def test_report_carries_applicant_and_places(fake_source):
    report = GetApplicantStandingUseCase(fake_source, tz=YEKT).execute("C", 7431)

    assert fake_source.calls == [7431]
    assert report.program_id == 7431
    assert report.applicant.national_id == "C"
    assert report.projection.raw_place == 3
    assert report.meta.name == "Программная инженерия"


def test_naive_timestamp_is_moscow_time(sample_list, make_source):
    meta = ProgramMeta("ПИ", 30, 2, updated_at=datetime(2023, 8, 3, 12, 30))
    report = GetApplicantStandingUseCase(make_source(sample_list, meta=meta), tz=YEKT).execute("A", 1)

    assert report.meta.updated_at.utcoffset() == timedelta(hours=5)
    assert report.meta.updated_at.hour == 14


def test_aware_timestamp_keeps_instant(sample_list, make_source):
    moment = datetime(2023, 8, 3, 9, 0, tzinfo=timezone.utc)
    meta = ProgramMeta("ПИ", 30, 2, updated_at=moment)
    report = GetApplicantStandingUseCase(make_source(sample_list, meta=meta), tz=YEKT).execute("A", 1)

    assert report.meta.updated_at == moment
    assert report.meta.updated_at.hour == 14


def test_missing_timestamp_stays_missing(fake_source):
    report = GetApplicantStandingUseCase(fake_source, tz=YEKT).execute("A", 1)
    assert report.meta.updated_at is None


def test_not_found_propagates(fake_source):
    with pytest.raises(ApplicantNotFoundError):
        GetApplicantStandingUseCase(fake_source).execute("nobody", 7431)


def test_empty_list_is_invalid(make_source):
    with pytest.raises(InvalidInputError):
        GetApplicantStandingUseCase(make_source([])).execute("A", 7431)


def test_source_error_propagates(failing_source):
    with pytest.raises(AdmissionsSourceError):
        GetApplicantStandingUseCase(failing_source).execute("A", 1)
