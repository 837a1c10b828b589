"""
3D scatter plot of a registered beacon map.
"""

from pathlib import Path
from typing import Optional, Union

import matplotlib
matplotlib.use('Agg')  # non-interactive backend for saving figures
import matplotlib.pyplot as plt
import numpy as np

from packages.registration_algos.mapping.global_map import GlobalMap


def plot_global_map(
    global_map: GlobalMap,
    out_path: Union[str, Path],
    title: Optional[str] = None
) -> Path:
    """Draw beacons and scanner positions and save the figure to `out_path`."""
    out = Path(out_path)
    out.parent.mkdir(parents=True, exist_ok=True)

    fig = plt.figure(figsize=(8, 7))
    ax = fig.add_subplot(111, projection='3d')

    if global_map.beacons:
        b = np.array([[p.x, p.y, p.z] for p in global_map.beacons])
        ax.scatter(b[:, 0], b[:, 1], b[:, 2], marker='o', s=8, color='#b39ddb',
                   linewidths=0, label='Beacons')

    # Scanners
    for sid, pos in sorted(global_map.scanner_positions.items()):
        ax.scatter(pos.x, pos.y, pos.z, marker='s', s=40, color='#9e9e9e', alpha=0.8)
        ax.text(pos.x, pos.y, pos.z, f"S{sid}", color='#757575', fontsize=7)

    ax.set_xlabel('x')
    ax.set_ylabel('y')
    ax.set_zlabel('z')
    ax.set_title(title or f"{global_map.beacon_count} beacons, "
                          f"{len(global_map.scanner_positions)} scanners")
    if global_map.beacons:
        ax.legend(loc='upper right', fontsize=8)

    fig.tight_layout()
    fig.savefig(out, dpi=150)
    plt.close(fig)
    return out
