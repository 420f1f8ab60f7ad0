# Filename: lca/trial_driver.py
# Purpose: Runs LCA trials: the per-trial race loop and the outer loop over trials.

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np

from lca.detector import detect_winner
from lca.integrator import apply_nonlinearity, integrate_step
from lca.random_source import RandomSource

logger = logging.getLogger(__name__)

NO_RESPONSE = -1


class TrialState(Enum):
    RUNNING = "running"
    WON = "won"
    TIMED_OUT = "timed_out"


@dataclass
class TrialResult:
    response: int
    rt: float
    n_iter: int
    state: TrialState
    trace: Optional[np.ndarray] = None

    @property
    def timed_out(self):
        return self.state is TrialState.TIMED_OUT


def reaction_time(n_iter, dt):
    """Crossing is assumed to happen mid-way through the last step."""
    return n_iter * dt - dt / 2.0


def run_trial(params, rng, x=None, noise=None, record_trace=False):
    """
    Simulates a single trial until an accumulator wins or time runs out.

    Args:
        params (LCAParameters): Model parameters.
        rng (RandomSource): Shared random stream; consumes n_acc draws per step.
        x (np.ndarray): Optional scratch buffer of length n_acc for the
            accumulator state. It is overwritten with x0 first.
        noise (np.ndarray): Optional scratch buffer of length n_acc for the noise.
        record_trace (bool): Keep the accumulator values after every step.

    Returns:
        TrialResult: response (1-based winner or NO_RESPONSE), rt in seconds,
                     number of steps taken and final state.
    """
    if x is None:
        x = np.empty(params.n_acc)
    x[:] = params.x0
    trace = [x.copy()] if record_trace else None

    state = TrialState.RUNNING
    winner = None
    n_iter = 0
    while state is TrialState.RUNNING:
        integrate_step(x, params, rng, out=x, noise=noise)
        n_iter += 1

        # Detection sees the pre-clamp values; the clamp still covers every accumulator.
        winner = detect_winner(x, params.Z)
        if params.non_linear:
            apply_nonlinearity(x)
        if record_trace:
            trace.append(x.copy())

        if winner is not None:
            state = TrialState.WON
        elif n_iter >= params.max_iter:
            state = TrialState.TIMED_OUT

    response = winner if state is TrialState.WON else NO_RESPONSE
    return TrialResult(
        response=response,
        rt=reaction_time(n_iter, params.dt),
        n_iter=n_iter,
        state=state,
        trace=np.vstack(trace) if record_trace else None,
    )


def simulate_trials(params, n_trials, rng=None):
    """
    Runs `n_trials` independent trials in order on one shared random stream.

    Args:
        params (LCAParameters): Model parameters.
        n_trials (int): Number of trials (>= 0).
        rng (RandomSource | int | None): Random stream, or a seed to start one.

    Returns:
        tuple: (responses, rts) numpy arrays of length n_trials, aligned with
               trial order. Timed-out trials have response NO_RESPONSE and
               rt = max_iter*dt - dt/2.
    """
    if int(n_trials) != n_trials or n_trials < 0:
        raise ValueError("n_trials must be a non-negative integer.")
    n_trials = int(n_trials)
    rng = RandomSource.coerce(rng)

    responses = np.full(n_trials, NO_RESPONSE, dtype=np.int64)
    rts = np.zeros(n_trials, dtype=np.float64)

    # Scratch buffers reused across trials; run_trial resets the state to x0.
    x = np.empty(params.n_acc)
    noise = np.empty(params.n_acc)

    logger.debug("Simulating %d trials with %d accumulators (max_iter=%d)",
                 n_trials, params.n_acc, params.max_iter)
    start_time = time.time()
    for i in range(n_trials):
        result = run_trial(params, rng, x=x, noise=noise)
        responses[i] = result.response
        rts[i] = result.rt
    logger.debug("Finished %d trials in %.2f s", n_trials, time.time() - start_time)

    return responses, rts
