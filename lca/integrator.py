# Filename: lca/integrator.py
# Purpose: One Euler-Maruyama step of the coupled LCA accumulators.

import numpy as np


def lateral_inhibition(x, dt, beta):
    """
    Inhibition each accumulator receives from all *other* accumulators.

    Every accumulator exerts x[z] * dt * beta on the rest of the system.
    Subtracting the system total and adding the own contribution back gives
    sum_{k != z} x[k] * dt * beta, so there is no self-inhibition.

    Args:
        x (np.ndarray): Current accumulator values.
        dt (float): Time step.
        beta (float): Inhibition strength.

    Returns:
        np.ndarray: Inhibition received per accumulator (positive = suppression).
    """
    inhib = x * dt * beta
    return inhib.sum() - inhib


def apply_nonlinearity(x):
    """Floors accumulator values at zero, in place."""
    np.maximum(x, 0.0, out=x)
    return x


def integrate_step(x, params, rng, out=None, noise=None):
    """
    Advances the accumulator vector by one time step.

    x <- x + dt*I - kappa*x*dt - (inhibition from the others) + sqrt(dt)*s*N(0, 1)

    The nonlinearity is NOT applied here so the caller can check the
    threshold on the post-update values first; see apply_nonlinearity.

    Args:
        x (np.ndarray): Current accumulator values (length n_acc).
        params (LCAParameters): Model parameters.
        rng (RandomSource): Stream to draw the n_acc noise variates from.
        out (np.ndarray): Optional buffer for the result; may be `x` itself.
        noise (np.ndarray): Optional scratch buffer of length n_acc for the draws.

    Returns:
        np.ndarray: The updated accumulator values.
    """
    dt = params.dt
    inhibition = lateral_inhibition(x, dt, params.beta)
    drift = dt * params.I - params.kappa * x * dt - inhibition
    eps = rng.standard_normal(params.n_acc, out=noise)

    if out is None:
        out = np.empty_like(x)
    np.add(x, drift, out=out)
    out += params.noise_scale * eps
    return out
