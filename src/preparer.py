# Filename: src/preparer.py
# Purpose: Checks and normalises user-facing LCA arguments into LCAParameters.

import logging
import math

import numpy as np

from lca.parameters import LCAParameters
from src.lca_config import DT, MAX_TIME, NDT_MS_CUTOFF, NON_LINEAR, NOISE_SD

logger = logging.getLogger(__name__)


def normalize_ndt(ndt):
    """
    Returns the non-decision time in seconds.

    Values above one are taken to be milliseconds and divided by 1000.
    """
    ndt = float(ndt)
    if ndt < 0:
        raise ValueError("Non-decision time cannot be negative.")
    if ndt > NDT_MS_CUTOFF:
        logger.warning("The non-decision time provided is larger than 1. "
                       "Assuming %s milliseconds.", ndt)
        ndt = ndt / 1000.0
    return ndt


def max_iterations(max_time, dt):
    """
    Number of time points in [0, max_time] sampled every dt.

    Equals len(seq(0, max_time, by=dt)); the small fuzz keeps e.g.
    5 / 0.001 from rounding down to 4999.
    """
    if dt <= 0:
        raise ValueError("Time step dt must be positive.")
    if max_time <= 0:
        raise ValueError("Maximum decision time must be positive.")
    return int(math.floor(max_time / dt + 1e-10)) + 1


def prepare_parameters(I, kappa, beta, Z, s=NOISE_SD, dt=DT, max_time=MAX_TIME,
                       non_linear=NON_LINEAR, x0=None):
    """
    Builds validated model parameters from wrapper arguments.

    Args:
        I (sequence of float): Input per accumulator; its length sets n_acc.
        kappa (float): Leak.
        beta (float): Inhibition.
        Z (float): Threshold.
        s (float): Noise standard deviation.
        dt (float): Time step in seconds.
        max_time (float): Maximum decision time in seconds.
        non_linear (bool): Floor accumulators at zero.
        x0 (sequence of float): Start points; None means all zeros.

    Returns:
        LCAParameters
    """
    I = np.atleast_1d(np.asarray(I, dtype=np.float64))
    if x0 is None:
        x0 = np.zeros(I.size)
    else:
        x0 = np.atleast_1d(np.asarray(x0, dtype=np.float64))
        if x0.size != I.size:
            raise ValueError("The number of accumulators in I is not the same as "
                             "the number of accumulators in x0.")

    return LCAParameters(
        I=I,
        kappa=kappa,
        beta=beta,
        Z=Z,
        s=s,
        dt=dt,
        max_iter=max_iterations(max_time, dt),
        non_linear=non_linear,
        x0=x0,
    )
