import logging

import numpy as np

from synthmarket.exceptions import InvalidConfiguration
from synthmarket.parameters import OrderFlowParams

logger = logging.getLogger(__name__)


def order_flow(prices, sigma_intensity: float, params: OrderFlowParams = None,
               rng: np.random.Generator = None) -> np.ndarray:
    """
    Generates traded volume for a price path from an informed/uninformed trader split.

    Each price change is read as a trading signal and scaled by the market's
    sensitivity to asymmetric information:
        lambda = sqrt(m*(sigma_v^2 + sigma_e^2)) / ((m + 1)*sqrt(n*sigma_u))
        beta   = sqrt(n*sigma_u / (m*sigma_v^2*sigma_e^2))
        volume = |signal * (1/(2*lambda) - (m - 1)/2 * beta)|
    where sigma_u, sigma_v split the trading intensity between uninformed and
    informed traders, m, n split the liquidity seekers the same way and
    sigma_e ~ U(0,1) is the noise of the informed signal.

    Args:
        prices: Price path of length N.
        sigma_intensity: Overall trading intensity, must be positive.
        params: Informed share eta and liquidity-seeker mass M.
        rng: Random source for the first signal and sigma_e.

    Returns:
        Non-negative volumes, one per price.
    """
    params = params or OrderFlowParams()
    rng = rng if rng is not None else np.random.default_rng()
    if not np.isfinite(sigma_intensity) or sigma_intensity <= 0:
        raise InvalidConfiguration(f"sigma_intensity must be positive, got {sigma_intensity}")

    prices = np.asarray(prices, dtype=float)
    if prices.ndim != 1 or prices.size == 0:
        raise ValueError("order_flow expects a non-empty one-dimensional price path")

    # the first price has no change before it, a random signal stands in
    signals = np.concatenate(([rng.standard_normal()], np.diff(prices)))

    sigma_u = (1 - params.eta) * sigma_intensity
    sigma_v = params.eta * sigma_intensity
    sigma_e = rng.random()
    m = params.eta * params.M
    n = (1 - params.eta) * params.M

    lam = np.sqrt(m * (sigma_v ** 2 + sigma_e ** 2)) / ((m + 1) * np.sqrt(n * sigma_u))
    beta = np.sqrt((n * sigma_u) / (m * (sigma_v ** 2 * sigma_e ** 2)))
    asymmetric_info = 1 / (2 * lam) - ((m - 1) / 2) * beta
    logger.debug("order flow: lambda=%.4f beta=%.4f scale=%.4f", lam, beta, asymmetric_info)

    return np.abs(signals * asymmetric_info)
