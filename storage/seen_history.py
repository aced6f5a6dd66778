from typing import List

from admissions.patient_record import PatientRecord


class SeenPatientHistory:
    """Patients already seen, most recent first."""

    def __init__(self):
        self._records: List[PatientRecord] = []

    def add(self, record: PatientRecord):
        self._records.insert(0, record)

    def records(self) -> List[PatientRecord]:
        return list(self._records)

    def size(self):
        return len(self._records)

    def __iter__(self):
        return iter(list(self._records))

    def __str__(self):
        return "".join(f"{record}\n" for record in self._records)
