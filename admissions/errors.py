class AdmissionsError(Exception):
    pass


class InvalidCapacity(AdmissionsError, ValueError):
    def __init__(self, message: str = "Error! You need to input a capacity greater than 0"):
        super().__init__(message)


class NullRecord(AdmissionsError, TypeError):
    def __init__(self, message: str = "Cannot add a missing patient record"):
        super().__init__(message)


class QueueFull(AdmissionsError):
    def __init__(self, message: str = "Warning: Full Admissions Queue!"):
        super().__init__(message)


class EmptyQueue(AdmissionsError, LookupError):
    def __init__(self, message: str = "Warning: Empty Admissions Queue!"):
        super().__init__(message)


class CommandSyntaxError(AdmissionsError, ValueError):
    """Raised when a console command line cannot be turned into an admission."""
