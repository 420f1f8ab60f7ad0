import numpy as np
import pandas as pd
import pytest

from lca.random_source import RandomSource
from src.simulator import simulate_lca


@pytest.mark.parametrize("non_linear", [True, False])
def test_three_accumulator_example(three_acc_kwargs, non_linear):
    df = simulate_lca(ndt=0.45, n_trials=100, max_time=2.0, non_linear=non_linear,
                      rng=RandomSource(2017), **three_acc_kwargs)
    assert list(df.columns) == ['rt', 'response', 'corr']
    assert len(df) == 100
    assert df['response'].isin([-1, 1, 2, 3]).all()
    assert (df['rt'] >= 0.45).all()
    assert (df['corr'] == (df['response'] == 1)).all()


def test_ndt_given_in_milliseconds(three_acc_kwargs):
    in_ms = simulate_lca(ndt=450, n_trials=20, max_time=1.0, rng=5, **three_acc_kwargs)
    in_s = simulate_lca(ndt=0.45, n_trials=20, max_time=1.0, rng=5, **three_acc_kwargs)
    pd.testing.assert_frame_equal(in_ms, in_s)


def test_seeded_runs_are_identical(three_acc_kwargs):
    first = simulate_lca(ndt=0.3, n_trials=30, max_time=1.0, rng=77, **three_acc_kwargs)
    second = simulate_lca(ndt=0.3, n_trials=30, max_time=1.0, rng=77, **three_acc_kwargs)
    pd.testing.assert_frame_equal(first, second)


def test_timeouts_report_max_time():
    df = simulate_lca(I=[0.0, 0.0], kappa=1.0, beta=0.0, Z=1.0, ndt=0.2, n_trials=4,
                      s=0.0, dt=0.01, max_time=0.5, rng=0)
    assert (df['response'] == -1).all()
    assert not df['corr'].any()
    # 51 steps of 10 ms minus half a step, plus ndt
    assert np.allclose(df['rt'], 0.505 + 0.2, atol=1e-3)


def test_mismatched_start_points():
    with pytest.raises(ValueError):
        simulate_lca(I=[1.0, 1.0], kappa=1, beta=1, Z=1, ndt=0.3, x0=[0.0])
