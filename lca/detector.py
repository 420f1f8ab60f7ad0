# Filename: lca/detector.py
# Purpose: Threshold check for the accumulator race.

import numpy as np


def detect_winner(x, threshold):
    """
    Checks whether any accumulator has reached the threshold.

    Accumulators are scanned in index order and the first one at or above
    the threshold wins, so simultaneous crossings go to the lowest index.

    Args:
        x (np.ndarray): Post-update (pre-clamp) accumulator values.
        threshold (float): Decision threshold Z.

    Returns:
        int or None: 1-based index of the winning accumulator, or None.
    """
    crossed = np.flatnonzero(x >= threshold)
    if crossed.size == 0:
        return None
    return int(crossed[0]) + 1
