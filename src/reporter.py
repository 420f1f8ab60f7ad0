# Filename: src/reporter.py
# Purpose: Turns simulated responses and decision times into a trial table.

import numpy as np
import pandas as pd

from src.lca_config import CORRECT_RESPONSE, RT_DECIMALS


def build_results_frame(responses, rts, ndt, correct_response=CORRECT_RESPONSE,
                        decimals=RT_DECIMALS):
    """
    Assembles the per-trial results.

    Args:
        responses (array-like): Winning accumulator per trial (1-based, -1 = none).
        rts (array-like): Decision times in seconds.
        ndt (float): Non-decision time in seconds, added to every decision time.
        correct_response (int): Accumulator that codes the correct answer.
        decimals (int): Rounding of the reported rt.

    Returns:
        pd.DataFrame: Columns 'rt', 'response', 'corr', one row per trial.
    """
    responses = np.asarray(responses, dtype=np.int64)
    rts = np.asarray(rts, dtype=np.float64)
    if responses.shape != rts.shape:
        raise ValueError("responses and rts must have the same length.")

    results_df = pd.DataFrame({'rt': rts, 'response': responses})
    results_df['corr'] = results_df['response'] == correct_response
    results_df['rt'] = (results_df['rt'] + ndt).round(decimals)
    return results_df
