import numpy as np
import pytest

from rankmetrics.eval.regression import mae, r2, regression_report, rmse, std_dev_res


@pytest.fixture
def exp_pred():
    return [1.0, 2.0, 3.0, 4.0], [1.5, 2.0, 2.0, 4.5]


def test_rmse_mae(exp_pred):
    y, p = exp_pred
    assert rmse(y, p) == pytest.approx(np.sqrt(1.5 / 4))
    assert mae(y, p) == pytest.approx(2.0 / 4)


def test_std_dev_res(exp_pred):
    y, p = exp_pred
    assert std_dev_res(y, p) == pytest.approx(np.sqrt(1.5 / 2))


def test_r2(exp_pred):
    y, p = exp_pred
    assert r2(y, p) == pytest.approx(1.0 - 1.5 / 5.0)
    assert r2(y, y) == 1.0


def test_report_keys(exp_pred):
    assert set(regression_report(*exp_pred)) == {"rmse", "mae", "std_dev_res", "r2"}


def test_length_mismatch_raises():
    with pytest.raises(ValueError):
        rmse([1.0, 2.0], [1.0])
