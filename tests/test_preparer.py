import logging

import numpy as np
import pytest

from src.preparer import max_iterations, normalize_ndt, prepare_parameters


@pytest.mark.parametrize("max_time, dt, expected", [
    (5.0, 0.001, 5001),
    (1.0, 0.25, 5),
    (0.3, 0.1, 4),
    (0.0001, 0.001, 1),
])
def test_max_iterations_counts_time_points(max_time, dt, expected):
    assert max_iterations(max_time, dt) == expected


def test_max_iterations_rejects_bad_values():
    with pytest.raises(ValueError):
        max_iterations(5.0, 0.0)
    with pytest.raises(ValueError):
        max_iterations(0.0, 0.001)


def test_start_points_default_to_zero():
    params = prepare_parameters(I=[1.2, 1.0, 1.0], kappa=3, beta=3, Z=0.2)
    assert np.array_equal(params.x0, np.zeros(3))
    assert params.max_iter == 5001
    assert params.s == pytest.approx(0.1)
    assert params.non_linear is True


def test_scalar_input_means_one_accumulator():
    params = prepare_parameters(I=1.5, kappa=0, beta=0, Z=1)
    assert params.n_acc == 1


def test_start_point_length_mismatch():
    with pytest.raises(ValueError, match="not the same"):
        prepare_parameters(I=[1.0, 1.0], kappa=1, beta=1, Z=1, x0=[0.1, 0.2, 0.3])


def test_non_positive_threshold():
    with pytest.raises(ValueError):
        prepare_parameters(I=[1.0], kappa=1, beta=1, Z=0)


def test_ndt_in_seconds_is_kept():
    assert normalize_ndt(0.45) == pytest.approx(0.45)
    assert normalize_ndt(1) == pytest.approx(1.0)


def test_ndt_in_milliseconds_is_rescaled(caplog):
    with caplog.at_level(logging.WARNING, logger="src.preparer"):
        assert normalize_ndt(450) == pytest.approx(0.45)
    assert "milliseconds" in caplog.text


def test_negative_ndt():
    with pytest.raises(ValueError):
        normalize_ndt(-0.1)
