import numpy as np

from synthmarket.noise import (
    NoiseMode,
    correlated_pair,
    random_disturbance,
    spawn_generators,
    standard_noise,
    variable_noise,
)


def test_noise_lengths(rng):
    assert standard_noise(50, rng).shape == (50,)
    assert variable_noise(50, rng).shape == (50,)


def test_noise_mode_from_flag():
    assert NoiseMode.from_flag(True) is NoiseMode.VARIABLE
    assert NoiseMode.from_flag(False) is NoiseMode.WHITE


def test_variable_noise_has_a_third_of_the_variance(rng):
    white = random_disturbance(100_000, NoiseMode.WHITE, rng)
    variable = random_disturbance(100_000, NoiseMode.VARIABLE, rng)

    assert abs(white.var() - 1.0) < 0.02
    # E[U^2] * E[Z^2] = 1/3
    assert abs(variable.var() - 1.0 / 3.0) < 0.015


def test_correlated_pair_matches_drawn_rho(rng):
    for _ in range(20):
        pair = correlated_pair(5_000, rng)
        assert 0.0 <= pair.rho < 1.0
        assert pair.w1.shape == pair.w2.shape == (5_000,)
        sample_corr = np.corrcoef(pair.w1, pair.w2)[0, 1]
        assert abs(sample_corr - pair.rho) < 0.06


def test_correlated_pair_legs_have_unit_variance(rng):
    pair = correlated_pair(50_000, rng)
    assert abs(pair.w1.var() - 1.0) < 0.05
    assert abs(pair.w2.var() - 1.0) < 0.05


def test_spawned_generators_are_reproducible_and_distinct():
    first = [g.standard_normal(5) for g in spawn_generators(7, 3)]
    again = [g.standard_normal(5) for g in spawn_generators(7, 3)]

    for a, b in zip(first, again):
        np.testing.assert_array_equal(a, b)
    assert not np.allclose(first[0], first[1])
