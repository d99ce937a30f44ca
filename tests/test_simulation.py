import numpy as np
import pytest

from synthmarket import InvalidConfiguration, RandomProcesses, SimulationConfig, SimulationEngine
from synthmarket.processes import BrownianMotion

FAMILIES = ["brownian", "gbm", "merton", "heston", "vasicek", "cir"]


@pytest.mark.parametrize("family", FAMILIES)
def test_multi_path_shape_and_initial_levels(family):
    sim = RandomProcesses(n=4, T=120, h=1.0, s0=50.0, rng=1)
    paths = getattr(sim, family)()

    assert paths.shape == (120, 4)
    start = sim.r0 if family in ("vasicek", "cir") else 50.0
    np.testing.assert_array_equal(paths[0], np.full(4, start))
    # every column draws its own noise
    assert not np.allclose(paths[:, 0], paths[:, 1])


@pytest.mark.parametrize("family", FAMILIES)
def test_single_path_is_returned_as_a_vector(family):
    sim = RandomProcesses(SimulationConfig(n=1, T=60), rng=2)
    path = getattr(sim, family)()
    assert path.shape == (60,)


def test_merton_paths_open_at_s0_with_rare_jumps():
    paths = RandomProcesses(n=200, T=100, s0=100.0, rng=0).merton(lambda_j=0.5)

    np.testing.assert_array_equal(paths[0], np.full(200, 100.0))


def test_seeded_runs_are_reproducible():
    first = RandomProcesses(n=3, T=80, rng=99).gbm(mu=0.05, sigma=0.2)
    second = RandomProcesses(n=3, T=80, rng=99).gbm(mu=0.05, sigma=0.2)
    np.testing.assert_array_equal(first, second)


def test_accepts_a_generator():
    rng = np.random.default_rng(5)
    sim = RandomProcesses(T=30, rng=rng)
    assert sim.rng is rng


def test_facade_passes_named_parameters():
    sim = RandomProcesses(T=20, h=2.0, s0=4.0, rng=0)
    rates = sim.vasicek(mu=0.5, sigma=0.0, lambda_r=1.0)

    decay = (1 - sim.dt) ** np.arange(20)
    np.testing.assert_allclose(rates, 0.5 + (0.04 - 0.5) * decay)


def test_facade_rejects_config_and_fields_together():
    with pytest.raises(TypeError):
        RandomProcesses(SimulationConfig(), T=10)


def test_facade_validates_configuration():
    with pytest.raises(InvalidConfiguration):
        RandomProcesses(n=-1)
    with pytest.raises(InvalidConfiguration):
        RandomProcesses(T=10).merton(lambda_j=-1.0)


def test_engine_type_checks_collaborators():
    with pytest.raises(TypeError):
        SimulationEngine("brownian", SimulationConfig())
    with pytest.raises(TypeError):
        SimulationEngine(BrownianMotion(), {"n": 1})


def test_order_flow_and_bars_through_the_facade():
    sim = RandomProcesses(T=400, rng=11)
    prices = sim.heston(rf=0.04, k=0.8, theta=0.9, sigma=1.0)
    volume = sim.order_flow(prices, eta=0.1, M=0.2)
    ticks = np.column_stack([prices, volume])

    for sampler in (sim.tick_imbalance_bars, sim.volume_imbalance_bars, sim.dollar_imbalance_bars):
        bars = sampler(ticks, window=15)
        assert list(bars.columns) == ["open", "high", "low", "close", "volume"]
        assert len(bars) < len(ticks)
