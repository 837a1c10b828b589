"""
Scanner report input, run configuration and map export.
"""

from .config import RegistrationConfig
from .parser import parse_scanner_report, read_scanner_report
from .export import beacons_to_dataframe, scanners_to_dataframe, write_map_csv

__all__ = [
    'RegistrationConfig',
    'parse_scanner_report',
    'read_scanner_report',
    'beacons_to_dataframe',
    'scanners_to_dataframe',
    'write_map_csv',
]
