"""
Registration of every scanner relative to a reference scanner.
"""

from .propagator import RegistrationPropagator, RegistrationResult

__all__ = ['RegistrationPropagator', 'RegistrationResult']
