from dataclasses import dataclass
from enum import Enum

import numpy as np


class NoiseMode(Enum):
    """Disturbance driving the diffusion term of a process."""
    WHITE = "white"        # Standard normal draws
    VARIABLE = "variable"  # U(0,1) * N(0,1), a variable-variance disturbance

    @classmethod
    def from_flag(cls, sto_vol: bool) -> "NoiseMode":
        return cls.VARIABLE if sto_vol else cls.WHITE


@dataclass(frozen=True)
class CorrelatedNoisePair:
    """Two noise sequences sharing a single correlation coefficient rho."""
    w1: np.ndarray
    w2: np.ndarray
    rho: float


def standard_noise(T: int, rng: np.random.Generator) -> np.ndarray:
    return rng.standard_normal(T)


def variable_noise(T: int, rng: np.random.Generator) -> np.ndarray:
    """U * Z with U ~ U(0,1) and Z ~ N(0,1), drawn independently per step."""
    return rng.random(T) * rng.standard_normal(T)


def random_disturbance(T: int, mode: NoiseMode, rng: np.random.Generator) -> np.ndarray:
    """
    Draws the disturbance sequence for one path.

    Args:
        T: Number of observations in the path.
        mode: Which disturbance to draw.
        rng: Random source, consumed by the draw.

    Returns:
        Array of length T.
    """
    if mode is NoiseMode.VARIABLE:
        return variable_noise(T, rng)
    return standard_noise(T, rng)


def correlated_pair(T: int, rng: np.random.Generator) -> CorrelatedNoisePair:
    """
    Builds two correlated standard-normal sequences from two independent ones.

    A single rho ~ U[0,1) is drawn for the whole pair:
        w1 = c1*z1 + c2*z2,  w2 = c1*z1 - c2*z2
    with c1 = sqrt((1+rho)/2) and c2 = sqrt((1-rho)/2), so Var(w) = 1 and
    Corr(w1, w2) = c1^2 - c2^2 = rho.
    """
    z1 = standard_noise(T, rng)
    z2 = standard_noise(T, rng)
    rho = float(rng.random())
    c1 = np.sqrt((1 + rho) / 2)
    c2 = np.sqrt((1 - rho) / 2)
    return CorrelatedNoisePair(w1=c1 * z1 + c2 * z2, w2=c1 * z1 - c2 * z2, rho=rho)


def spawn_generators(seed, n: int) -> list:
    """Independent child generators, one per path, for callers running paths in parallel."""
    return [np.random.default_rng(child) for child in np.random.SeedSequence(seed).spawn(n)]
