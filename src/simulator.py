# Filename: src/simulator.py
# Purpose: Simulates LCA trials from user-facing arguments and returns a trial table.

import logging
import time

from lca.random_source import RandomSource
from lca.trial_driver import NO_RESPONSE, simulate_trials
from src.lca_config import DT, MAX_TIME, N_TRIALS, NON_LINEAR, NOISE_SD
from src.preparer import normalize_ndt, prepare_parameters
from src.reporter import build_results_frame

# Set up logging
logger = logging.getLogger(__name__)
if not logger.hasHandlers():
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(name)s - %(message)s')


def simulate_lca(I, kappa, beta, Z, ndt, n_trials=N_TRIALS, s=NOISE_SD, dt=DT,
                 max_time=MAX_TIME, non_linear=NON_LINEAR, x0=None, rng=None):
    """
    Simulates the Leaky, Competing Accumulator model (Usher & McClelland, 2001).

    Args:
        I (sequence of float): Input per accumulator, e.g. [1.2, 1, 1] for three
            accumulators.
        kappa (float): Leakage.
        beta (float): Inhibition.
        Z (float): Threshold of accumulation.
        ndt (float): Non-decision time in seconds (values > 1 are read as ms).
        n_trials (int): Number of trials to simulate.
        s (float): Standard deviation of the Gaussian noise.
        dt (float): Temporal resolution; 0.001 is millisecond resolution.
        max_time (float): Maximum decision time in seconds.
        non_linear (bool): Include the non-linearity of the original model
            (no negative accumulator values).
        x0 (sequence of float): Start point per accumulator; None means zeros.
        rng (RandomSource | int | None): Random stream to continue, or a seed.

    Returns:
        pd.DataFrame: Columns 'rt' (including ndt, rounded to ms), 'response'
                      (1-based accumulator, -1 = no response) and 'corr'
                      (response == 1).
    """
    ndt = normalize_ndt(ndt)
    params = prepare_parameters(I, kappa, beta, Z, s=s, dt=dt, max_time=max_time,
                                non_linear=non_linear, x0=x0)
    rng = RandomSource.coerce(rng)

    logger.info("Simulating %d LCA trials: I=%s, kappa=%s, beta=%s, Z=%s, s=%s, dt=%s, "
                "non_linear=%s", n_trials, params.I.tolist(), params.kappa, params.beta,
                params.Z, params.s, params.dt, params.non_linear)
    start_time = time.time()
    responses, rts = simulate_trials(params, n_trials, rng)
    logger.info("Simulation finished in %.2f seconds.", time.time() - start_time)

    n_timeouts = int((responses == NO_RESPONSE).sum())
    if n_timeouts:
        logger.info("%d of %d trials reached the maximum time of %.3f s without a response.",
                    n_timeouts, n_trials, max_time)

    return build_results_frame(responses, rts, ndt)
