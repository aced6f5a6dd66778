from typing import NamedTuple

from .errors import CommandSyntaxError
from .patient_record import TriageLevel

SYNTAX_ERROR_MSG = "Syntax Error: Please enter a valid command!"
INVALID_AGE_MSG = SYNTAX_ERROR_MSG + " Invalid age!"
INVALID_GENDER_MSG = (
    SYNTAX_ERROR_MSG + " Gender can be M (for Male), F (for Female), or X (for Other), only."
)
INVALID_TRIAGE_MSG = SYNTAX_ERROR_MSG + " Invalid triage level! Should be either RED/YELLOW/GREEN"


class ParsedAdmission(NamedTuple):
    age: int
    gender: str
    triage: TriageLevel


def parse_triage(token: str) -> TriageLevel:
    try:
        return TriageLevel(token.strip().upper())
    except ValueError:
        raise CommandSyntaxError(INVALID_TRIAGE_MSG) from None


def parse_admission(command_line: str) -> ParsedAdmission:
    """Parse ``1 <age> <M/F/X> <RED/YELLOW/GREEN>`` into its three fields."""
    parts = command_line.split()
    if len(parts) < 4:
        raise CommandSyntaxError(SYNTAX_ERROR_MSG)

    try:
        age = int(parts[1])
    except ValueError:
        raise CommandSyntaxError(INVALID_AGE_MSG) from None
    if age < 0:
        raise CommandSyntaxError(INVALID_AGE_MSG)

    if len(parts[2]) != 1:
        raise CommandSyntaxError(INVALID_GENDER_MSG)
    gender = parts[2].upper()

    return ParsedAdmission(age=age, gender=gender, triage=parse_triage(parts[3]))
