"""
Configuration for a registration run.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RegistrationConfig:
    """Registration settings."""
    match_threshold: int = 12                   # coinciding beacons needed for an overlap
    reference_scanner_id: Optional[int] = None  # None = first scanner in the report
    max_workers: int = 1                        # matcher threads per sweep
    memoize_rejections: bool = True             # skip pairs already known not to overlap

    def __post_init__(self):
        if self.match_threshold < 1:
            raise ValueError(f"match_threshold must be positive, got {self.match_threshold}")
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {self.max_workers}")
