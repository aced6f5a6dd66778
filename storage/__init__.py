from .seen_history import SeenPatientHistory

__all__ = ['SeenPatientHistory']
