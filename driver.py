import sys
import logging

from config import ADMISSIONS_CAPACITY, configure_logging
from admissions.commands import SYNTAX_ERROR_MSG, parse_admission
from admissions.errors import AdmissionsError
from admissions.patient_record import ArrivalCounter, PatientRecord
from admissions.priority_heap import PriorityCareAdmissions
from storage.seen_history import SeenPatientHistory

logger = logging.getLogger(__name__)

WELCOME_MSG = "--- Welcome to the Priority Care Admissions App! ----"
GOOD_BYE_MSG = "---------- BYE! Thanks for using our App! ----------"
CLOSED_MSG = "Sorry! We are closed due to out of control circumstances!"
PROMPT = "ENTER COMMAND: "
MENU = """
==================== MENU ====================
Enter one of the following options:
[1 <age> <M/F/X> <RED/YELLOW/GREEN>] Add a new patient record
[2] Show next patient
[3] See next patient
[4] List all unseen patient records
[5] List seen patients
[6] Clear the care admission queue
[7] Logout and EXIT
----------------------------------------------"""


class CareAdmissionDriver:
    """Console front end over one admissions queue and its seen-patient list."""

    def __init__(self, capacity: int = ADMISSIONS_CAPACITY, stdin=None, stdout=None):
        self.queue = PriorityCareAdmissions(capacity)
        self.seen_patients = SeenPatientHistory()
        self.arrivals = ArrivalCounter()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout

    def _print(self, text: str = "", end: str = "\n"):
        print(text, end=end, file=self.stdout)

    def _read_command(self):
        self._print(MENU)
        self._print(PROMPT, end="")
        line = self.stdin.readline()
        if not line:
            return None
        return line.strip()

    def run_application(self):
        self._print(WELCOME_MSG)
        self.process_user_commands()
        self._print(GOOD_BYE_MSG)

    def process_user_commands(self):
        command = self._read_command()
        while command is not None and not command.startswith("7"):
            try:
                self.handle_command(command)
            except AdmissionsError as e:
                self._print(str(e))
            command = self._read_command()

    def handle_command(self, command: str):
        option = command[:1]

        if option == "1":
            self.add_patient_record(command)
        elif option == "2":
            self._print(self.queue.peek())
            self._print()
        elif option == "3":
            patient = self.queue.extract_min()
            patient.see()
            self.seen_patients.add(patient)
            self._print(patient)
        elif option == "4":
            self._print("List of unseen patients:")
            self._print(str(self.queue))
        elif option == "5":
            self._print("List of seen patients:")
            for patient in self.seen_patients:
                self._print(patient)
        elif option == "6":
            self._print(CLOSED_MSG)
            logger.info("Queue cleared with %d unseen patients", self.queue.size())
            self.queue.clear()
        else:
            self._print(SYNTAX_ERROR_MSG)

    def add_patient_record(self, command_line: str) -> PatientRecord:
        request = parse_admission(command_line)
        patient = PatientRecord.create(request.gender, request.age, request.triage, self.arrivals)
        self.queue.insert(patient)
        return patient


def main():
    configure_logging()
    CareAdmissionDriver(ADMISSIONS_CAPACITY).run_application()


if __name__ == "__main__":
    main()
