# Filename: lca/parameters.py
# Purpose: Immutable parameter set for one LCA simulation run.

from dataclasses import dataclass

import numpy as np


def _frozen_vector(values, name):
    arr = np.array(values, dtype=np.float64).reshape(-1)
    if not np.all(np.isfinite(arr)):
        raise ValueError(f"{name} must contain only finite values.")
    arr.setflags(write=False)
    return arr


@dataclass(frozen=True)
class LCAParameters:
    """
    Model parameters of the Leaky, Competing Accumulator.

    Attributes:
        I: Input drive per accumulator.
        kappa: Leak.
        beta: Lateral inhibition.
        Z: Decision threshold.
        s: Standard deviation of the Gaussian noise.
        dt: Integration step in seconds.
        max_iter: Iteration budget per trial.
        non_linear: Floor accumulator values at zero after every step.
        x0: Start point per accumulator.
    """
    I: np.ndarray
    kappa: float
    beta: float
    Z: float
    s: float
    dt: float
    max_iter: int
    non_linear: bool
    x0: np.ndarray

    def __post_init__(self):
        I = _frozen_vector(self.I, "I")
        x0 = _frozen_vector(self.x0, "x0")
        object.__setattr__(self, 'I', I)
        object.__setattr__(self, 'x0', x0)
        for name in ('kappa', 'beta', 'Z', 's', 'dt'):
            value = float(getattr(self, name))
            if not np.isfinite(value):
                raise ValueError(f"{name} must be a finite number.")
            object.__setattr__(self, name, value)
        if not isinstance(self.non_linear, (bool, np.bool_)) and self.non_linear not in (0, 1):
            raise ValueError("non_linear must be a boolean.")
        object.__setattr__(self, 'non_linear', bool(self.non_linear))

        if I.size < 1:
            raise ValueError("At least one accumulator is required.")
        if x0.size != I.size:
            raise ValueError("The number of accumulators in I is not the same as "
                             "the number of accumulators in x0.")
        if self.dt <= 0:
            raise ValueError("Time step dt must be positive.")
        if self.Z <= 0:
            raise ValueError("Threshold Z must be positive.")
        if self.s < 0:
            raise ValueError("Noise standard deviation cannot be negative.")
        if int(self.max_iter) != self.max_iter or self.max_iter < 1:
            raise ValueError("max_iter must be a positive integer.")
        object.__setattr__(self, 'max_iter', int(self.max_iter))

    @property
    def n_acc(self):
        return self.I.size

    @property
    def noise_scale(self):
        """Standard deviation of the per-step noise increment, sqrt(dt) * s."""
        return np.sqrt(self.dt) * self.s

    @property
    def max_rt(self):
        """Response time reported for a trial that runs out of iterations."""
        return self.max_iter * self.dt - self.dt / 2.0
