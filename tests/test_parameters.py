import math

import pytest

from synthmarket.exceptions import InvalidConfiguration, SynthMarketError
from synthmarket.parameters import (
    GBMParams,
    MertonParams,
    OrderFlowParams,
    SimulationConfig,
)


def test_defaults_and_derived_values():
    config = SimulationConfig()
    assert (config.n, config.T, config.h, config.s0) == (1, 252, 1.0, 100.0)
    assert config.dt == 1.0 / 252
    assert config.r0 == 1.0


def test_dt_is_horizon_over_observations():
    config = SimulationConfig(T=100, h=2.0, s0=3.0)
    assert config.dt == pytest.approx(0.02)
    assert config.r0 == pytest.approx(0.03)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"n": 0},
        {"n": 2.5},
        {"T": 1},
        {"T": True},
        {"h": 0.0},
        {"h": -1.0},
        {"s0": -5.0},
        {"s0": math.nan},
        {"sigma_intensity": math.inf},
        {"s0": "100"},
    ],
)
def test_invalid_configuration_fails_fast(kwargs):
    with pytest.raises(InvalidConfiguration):
        SimulationConfig(**kwargs)


def test_invalid_configuration_is_a_value_error():
    with pytest.raises(ValueError):
        SimulationConfig(T=0)
    assert issubclass(InvalidConfiguration, SynthMarketError)


def test_gbm_defaults_to_variable_noise():
    assert GBMParams().sto_vol is True


def test_process_parameters_are_validated():
    with pytest.raises(InvalidConfiguration):
        MertonParams(lambda_j=0.0)
    with pytest.raises(InvalidConfiguration):
        MertonParams(sigma=math.nan)
    with pytest.raises(InvalidConfiguration):
        OrderFlowParams(eta=1.0)
    with pytest.raises(InvalidConfiguration):
        OrderFlowParams(M=0.0)
