import numpy as np
import pytest

from lca.parameters import LCAParameters


@pytest.fixture
def make_params():
    """Builds LCAParameters with noise-free defaults that tests override as needed."""
    def _make(**overrides):
        values = dict(I=[1.0], kappa=0.0, beta=0.0, Z=1.0, s=0.0, dt=0.25,
                      max_iter=100, non_linear=True, x0=None)
        values.update(overrides)
        if values['x0'] is None:
            values['x0'] = np.zeros(len(values['I']))
        return LCAParameters(**values)
    return _make


@pytest.fixture
def three_acc_kwargs():
    # Example parameter set of the original LCA package
    return dict(I=[1.2, 1.0, 1.0], kappa=3.0, beta=3.0, Z=0.2, s=0.1,
                dt=0.001, x0=[0.01, 0.02, 0.03])
