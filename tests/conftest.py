from typing import List

import pytest

from itmoabit.domain.errors import AdmissionsSourceError
from itmoabit.domain.models import AdmissionSnapshot, ApplicantRecord, ProgramMeta


class FakeSource:
    """Источник с заранее заданным снимком списка."""

    def __init__(self, applicants=(), meta=None, error=None):
        self.snapshot_meta = meta or ProgramMeta(name="Программная инженерия", budget_quota=30, target_reception=2)
        self.applicants = tuple(applicants)
        self.error = error
        self.calls: List[int] = []

    def fetch(self, program_id: int) -> AdmissionSnapshot:
        self.calls.append(program_id)
        if self.error is not None:
            raise self.error
        return AdmissionSnapshot(program_id=program_id, meta=self.snapshot_meta, applicants=self.applicants)


@pytest.fixture
def sample_list():
    """A рекомендован, C искомый и стоит последним."""
    return [
        ApplicantRecord("A", diploma_average=4.0, total_score=50, priority=1,
                        originals_submitted=True, status="recommended"),
        ApplicantRecord("B", diploma_average=4.5, total_score=0, priority=2,
                        originals_submitted=False, status=""),
        ApplicantRecord("C", diploma_average=3.0, total_score=0, priority=1,
                        originals_submitted=True, status=""),
    ]


@pytest.fixture
def fake_source(sample_list):
    return FakeSource(sample_list)


@pytest.fixture
def failing_source():
    return FakeSource(error=AdmissionsSourceError("program not found", 1))


@pytest.fixture
def make_source():
    return FakeSource
