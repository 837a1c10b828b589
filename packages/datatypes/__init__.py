"""
Core datatypes for scanner registration.
"""

from .datatypes import Position, Scanner, ORIGIN
from .errors import (
    RegistrationError,
    MalformedInputError,
    AmbiguousMatchError,
    UnresolvableScannersError,
)

__all__ = [
    'Position',
    'Scanner',
    'ORIGIN',
    'RegistrationError',
    'MalformedInputError',
    'AmbiguousMatchError',
    'UnresolvableScannersError',
]
