"""Synthetic price and rate paths from discretised SDEs, plus imbalance bars for tick data."""

from synthmarket.bars import dollar_imbalance_bars, tick_imbalance_bars, volume_imbalance_bars
from synthmarket.exceptions import InvalidConfiguration, SynthMarketError
from synthmarket.noise import NoiseMode
from synthmarket.parameters import SimulationConfig
from synthmarket.simulation import RandomProcesses, SimulationEngine

__all__ = [
    "InvalidConfiguration",
    "NoiseMode",
    "RandomProcesses",
    "SimulationConfig",
    "SimulationEngine",
    "SynthMarketError",
    "dollar_imbalance_bars",
    "tick_imbalance_bars",
    "volume_imbalance_bars",
]
