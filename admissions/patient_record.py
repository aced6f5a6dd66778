from enum import Enum
from dataclasses import dataclass, field


class TriageLevel(str, Enum):
    RED = "RED"
    YELLOW = "YELLOW"
    GREEN = "GREEN"

    @property
    def rank(self) -> int:
        return _TRIAGE_RANKS[self]

    def __str__(self):
        return self.value


# Definition order: RED is the most urgent
_TRIAGE_RANKS = {level: rank for rank, level in enumerate(TriageLevel)}


GENDER_BASES = {
    "F": 10000,
    "M": 20000,
    "X": 30000,
}
DEFAULT_GENDER_BASE = 40000


def generate_case_number(gender: str, age: int, sequence: int) -> int:
    """Build the five-digit case number shown next to a patient.

    First digit comes from the gender marker (F=1, M=2, X=3, anything else 4),
    the next two are the age mod 100 and the last two the arrival sequence
    mod 100. A 27-year-old X patient arriving 20th gets 32720.
    """
    base = GENDER_BASES.get(gender, DEFAULT_GENDER_BASE)
    return base + (age % 100) * 100 + sequence % 100


class ArrivalCounter:
    """Monotonic arrival sequence shared by every record one owner creates."""

    def __init__(self):
        self.value = 0

    def next(self) -> int:
        self.value += 1
        return self.value

    def reset(self):
        """Only meant for test harnesses that need a known starting point."""
        self.value = 0


@dataclass(frozen=True, eq=False)
class PatientRecord:
    gender: str
    age: int
    triage: TriageLevel
    arrival_order: int
    case_number: int
    seen: bool = field(default=False, init=False)

    @classmethod
    def create(cls, gender: str, age: int, triage: TriageLevel, arrivals: ArrivalCounter):
        sequence = arrivals.next()
        return cls(
            gender=gender,
            age=age,
            triage=TriageLevel(triage),
            arrival_order=sequence,
            case_number=generate_case_number(gender, age, sequence),
        )

    def see(self):
        """Mark this patient as seen. There is no way back."""
        object.__setattr__(self, "seen", True)

    def compare_to(self, other: "PatientRecord") -> int:
        if self.triage.rank != other.triage.rank:
            return -1 if self.triage.rank < other.triage.rank else 1
        if self.arrival_order != other.arrival_order:
            return -1 if self.arrival_order < other.arrival_order else 1
        return 0

    def __lt__(self, other):
        return self.compare_to(other) < 0

    def __le__(self, other):
        return self.compare_to(other) <= 0

    def __gt__(self, other):
        return self.compare_to(other) > 0

    def __ge__(self, other):
        return self.compare_to(other) >= 0

    def __eq__(self, other):
        if not isinstance(other, PatientRecord):
            return NotImplemented
        return self.case_number == other.case_number

    def __hash__(self):
        return hash(self.case_number)

    def display(self) -> str:
        state = "seen" if self.seen else "not seen"
        return f"{self.case_number}: {self.age}{self.gender} ({self.triage.value}) - {state}"

    def __str__(self):
        return self.display()
