"""
Information-driven bars sampled from a tick series.

A bar is closed whenever the cumulative signed order flow (the imbalance) grows
beyond what an exponentially weighted estimate of the flow would predict. Three
flavours share the same sampler and differ only in how each tick is signed:

* tick imbalance bars: tick rule on the price changes,
* volume imbalance bars: tick rule times the sign of the volume changes,
* dollar imbalance bars: tick rule times the sign of the traded value changes.
"""
import logging
import numbers

import numpy as np
import pandas as pd

from synthmarket.exceptions import InvalidConfiguration

logger = logging.getLogger(__name__)

BAR_COLUMNS = ["open", "high", "low", "close", "volume"]
DEFAULT_WINDOW = 15


def _empty_bars() -> pd.DataFrame:
    return pd.DataFrame(np.empty((0, len(BAR_COLUMNS))), columns=BAR_COLUMNS)


def _as_tick_array(ticks) -> np.ndarray:
    """Accepts an (N, 2) array of (price, volume), a single (price, volume) pair or a DataFrame."""
    if isinstance(ticks, pd.DataFrame):
        return ticks[["price", "volume"]].to_numpy(dtype=float)

    arr = np.asarray(ticks, dtype=float)
    if arr.size == 0:
        return arr.reshape(0, 2)
    if arr.shape == (2,):
        # a single tick given as a flat (price, volume) pair
        return arr.reshape(1, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError(f"Ticks must be an (N, 2) array of price and volume, got shape {arr.shape}")
    return arr


def tick_rule(diffs: np.ndarray) -> np.ndarray:
    """
    Signs each change: +1 / -1 for a move, the previous sign when nothing moved.

    The sign before the first change is taken as 0, so a series opening with
    unchanged values is unsigned until its first move.
    """
    signs = np.zeros(len(diffs))
    previous = 0.0
    for i, change in enumerate(diffs):
        if change != 0:
            previous = np.sign(change)
        signs[i] = previous
    return signs


def ewma(values: np.ndarray, window: int) -> np.ndarray:
    """
    Exponentially weighted average with weights exp(linspace(-1, 0, window)).

    The kernel is applied as a centred convolution trimmed to len(values), so each
    point also sees half a window of later values.
    """
    weights = np.exp(np.linspace(-1, 0, window))
    weights /= weights.sum()
    full = np.convolve(values, weights)
    start = window // 2
    return full[start:start + len(values)]


def _sample_bars(ticks: np.ndarray, signed_flow: np.ndarray, window: int) -> pd.DataFrame:
    prices, volumes = ticks[:, 0], ticks[:, 1]

    theta = np.cumsum(signed_flow)
    expected_theta = ewma(theta, window) * np.abs(ewma(signed_flow, window))

    bars = np.zeros((len(theta), len(BAR_COLUMNS)))
    last = 0
    for j in range(len(theta)):
        if theta[j] != 0 and abs(theta[j]) >= expected_theta[j]:
            span = slice(last, j + 1)
            bars[j] = (
                prices[last],
                prices[span].max(),
                prices[span].min(),
                prices[j],
                volumes[span].sum(),
            )
            last = j

    # rows never triggered keep a zero open
    bars = bars[bars[:, 0] != 0]
    return pd.DataFrame(bars, columns=BAR_COLUMNS)


def _imbalance_bars(ticks, window: int, weight: str) -> pd.DataFrame:
    if isinstance(window, bool) or not isinstance(window, numbers.Integral) or window < 1:
        raise InvalidConfiguration(f"window must be a positive integer, got {window!r}")

    tick_array = _as_tick_array(ticks)
    if len(tick_array) < 2:
        logger.debug("%s imbalance bars: %d ticks, no bars possible", weight, len(tick_array))
        return _empty_bars()
    if window > len(tick_array) - 1:
        logger.warning(
            "EWMA window (%d) is longer than the %d price changes available", window, len(tick_array) - 1
        )

    prices, volumes = tick_array[:, 0], tick_array[:, 1]
    signed_flow = tick_rule(np.diff(prices))
    if weight == "volume":
        signed_flow = signed_flow * tick_rule(np.diff(volumes))
    elif weight == "dollar":
        signed_flow = signed_flow * tick_rule(np.diff(prices * volumes))

    bars = _sample_bars(tick_array, signed_flow, window)
    logger.debug("%s imbalance bars: %d bars from %d ticks", weight, len(bars), len(tick_array))
    return bars


def tick_imbalance_bars(ticks, window: int = DEFAULT_WINDOW) -> pd.DataFrame:
    """
    Samples OHLCV bars on the cumulative tick-rule imbalance.

    Args:
        ticks: (N, 2) array of (price, volume) or a DataFrame with 'price' and 'volume'.
        window: Length of the EWMA kernel used for the expected imbalance.

    Returns:
        DataFrame with columns open, high, low, close, volume, one row per bar.
    """
    return _imbalance_bars(ticks, window, "tick")


def volume_imbalance_bars(ticks, window: int = DEFAULT_WINDOW) -> pd.DataFrame:
    """Same as tick_imbalance_bars, each tick signed by the direction of the volume change too."""
    return _imbalance_bars(ticks, window, "volume")


def dollar_imbalance_bars(ticks, window: int = DEFAULT_WINDOW) -> pd.DataFrame:
    """Same as tick_imbalance_bars, each tick signed by the direction of the traded value change too."""
    return _imbalance_bars(ticks, window, "dollar")
