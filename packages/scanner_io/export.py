"""
Tabular export of a global beacon map.
"""

from pathlib import Path
from typing import Union

import pandas as pd

from packages.registration_algos.mapping.global_map import GlobalMap


def beacons_to_dataframe(global_map: GlobalMap) -> pd.DataFrame:
    """One row per distinct beacon, sorted by x, y, z."""
    rows = [(b.x, b.y, b.z) for b in global_map.beacons]
    df = pd.DataFrame(rows, columns=['x', 'y', 'z'], dtype='int64')
    return df.sort_values(['x', 'y', 'z']).reset_index(drop=True)


def scanners_to_dataframe(global_map: GlobalMap) -> pd.DataFrame:
    """One row per scanner position, sorted by scanner id."""
    rows = [(sid, p.x, p.y, p.z) for sid, p in sorted(global_map.scanner_positions.items())]
    return pd.DataFrame(rows, columns=['scanner_id', 'x', 'y', 'z'], dtype='int64')


def write_map_csv(global_map: GlobalMap, path: Union[str, Path]) -> Path:
    """Write the beacon table to CSV and return the path."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    beacons_to_dataframe(global_map).to_csv(out, index=False)
    return out
