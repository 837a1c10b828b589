"""
Failure conditions raised by parsing and registration.
"""

from typing import Iterable, Optional, Sequence, Tuple


class RegistrationError(Exception):
    """Base class for every registration failure."""


class MalformedInputError(RegistrationError, ValueError):
    """Scanner report text could not be parsed."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class AmbiguousMatchError(RegistrationError):
    """More than one translation met the vote threshold for one orientation."""

    def __init__(
        self,
        known_id: int,
        candidate_id: int,
        orientation: Tuple[int, int],
        vectors: Sequence
    ):
        self.known_id = known_id
        self.candidate_id = candidate_id
        self.orientation = orientation
        self.vectors = list(vectors)
        super().__init__(
            f"Scanner {candidate_id} has {len(self.vectors)} candidate positions "
            f"relative to scanner {known_id} in orientation {orientation}"
        )


class UnresolvableScannersError(RegistrationError):
    """Some scanners cannot be linked to the reference scanner."""

    def __init__(self, unresolved_ids: Iterable[int]):
        self.unresolved_ids = sorted(unresolved_ids)
        super().__init__(f"Could not resolve scanners {self.unresolved_ids}")
