import pytest
from main import app_state, init_state
from admissions.patient_record import ArrivalCounter, PatientRecord, TriageLevel

TEST_CAPACITY = 7


@pytest.fixture(autouse=True)
def reset_app_state():
    """Reset all shared state before each test to prevent cross-test contamination."""
    init_state(TEST_CAPACITY)

    yield

    app_state["admissions"] = None
    app_state["seen_patients"] = None
    app_state["arrivals"] = None


@pytest.fixture
def arrivals():
    return ArrivalCounter()


@pytest.fixture
def make_record(arrivals):
    """Build records from a shared counter so arrival order follows call order."""
    def _make(triage=TriageLevel.YELLOW, gender="X", age=30):
        return PatientRecord.create(gender, age, TriageLevel(triage), arrivals)
    return _make
