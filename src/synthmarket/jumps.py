import numpy as np
from scipy import stats

from synthmarket.exceptions import InvalidConfiguration


def compound_poisson_jumps(T: int, lambda_j: float, rng: np.random.Generator) -> np.ndarray:
    """
    Generates the piecewise-constant jump contribution of a Merton path.

    A virtual clock advances by exponential inter-arrival times with mean T/lambda_j,
    one draw per index after the first, so the path still opens at
    its initial level. Whenever the clock passes the horizon T a jump of magnitude
    (mean(Poisson) * U + std(Poisson)) ** (+/-1) is written over every remaining
    index, replacing whatever earlier arrivals left there, and the clock restarts.

    Args:
        T: Number of observations in the path.
        lambda_j: Jump intensity over the horizon, must be positive.
        rng: Random source.

    Returns:
        Array of length T with the jump level at each index.
    """
    if lambda_j <= 0:
        raise InvalidConfiguration(f"Jump intensity must be positive, got {lambda_j}")

    arrivals = stats.poisson(lambda_j)
    jump_mean, jump_std = arrivals.mean(), arrivals.std()
    step = -(T / lambda_j)

    jumps = np.zeros(T)
    t = 0.0
    for i in range(1, T):
        t += step * np.log(rng.random())
        if t > T:
            exponent = rng.choice((-1, 1))
            jumps[i:] = (jump_mean * rng.random() + jump_std) ** exponent
            # restart one mean inter-arrival behind the origin
            t = step
    return jumps
