from .errors import AdmissionsError, CommandSyntaxError, EmptyQueue, InvalidCapacity, NullRecord, QueueFull
from .patient_record import ArrivalCounter, PatientRecord, TriageLevel, generate_case_number
from .priority_heap import OrderedListing, PriorityCareAdmissions

__all__ = [
    'AdmissionsError', 'CommandSyntaxError', 'EmptyQueue', 'InvalidCapacity', 'NullRecord', 'QueueFull',
    'ArrivalCounter', 'PatientRecord', 'TriageLevel', 'generate_case_number',
    'OrderedListing', 'PriorityCareAdmissions',
]
