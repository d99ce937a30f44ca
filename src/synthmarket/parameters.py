import math
import numbers
from dataclasses import dataclass, fields

from synthmarket.exceptions import InvalidConfiguration


def _require_finite(record) -> None:
    """Rejects any numeric field of a parameter record that is not a finite real."""
    for f in fields(record):
        value = getattr(record, f.name)
        if isinstance(value, bool):
            continue
        if not isinstance(value, numbers.Real):
            raise InvalidConfiguration(
                f"{type(record).__name__}.{f.name} must be a real number, got {value!r}"
            )
        if not math.isfinite(value):
            raise InvalidConfiguration(
                f"{type(record).__name__}.{f.name} must be finite, got {value!r}"
            )


def _require_positive_int(name: str, value, minimum: int = 1) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value < minimum:
        raise InvalidConfiguration(f"{name} must be an integer >= {minimum}, got {value!r}")


@dataclass(frozen=True)
class SimulationConfig:
    """Parameters shared by every path generated in one study."""
    n: int = 1                    # Number of paths to generate
    T: int = 252                  # Number of observations per path
    h: float = 1.0                # Total horizon length
    s0: float = 100.0             # Initial price (read as a percentage for rates)
    sigma_intensity: float = 1.0  # Trading intensity, only used for order-flow volume

    def __post_init__(self):
        _require_finite(self)
        _require_positive_int("n", self.n)
        _require_positive_int("T", self.T, minimum=2)
        if self.h <= 0:
            raise InvalidConfiguration(f"Horizon h must be positive, got {self.h}")
        if self.s0 <= 0:
            raise InvalidConfiguration(f"Initial level s0 must be positive, got {self.s0}")

    @property
    def dt(self) -> float:
        """Step size between two observations."""
        return self.h / self.T

    @property
    def r0(self) -> float:
        """Initial rate, interpreting s0 as a percentage."""
        return self.s0 / 100


@dataclass(frozen=True)
class BrownianParams:
    """Parameters for the Brownian motion price process."""
    mu: float = 0.0        # Drift of returns
    sigma: float = 1.0     # Volatility of returns
    sto_vol: bool = False  # Use the variable (U*Z) disturbance instead of white noise

    def __post_init__(self):
        _require_finite(self)


@dataclass(frozen=True)
class GBMParams(BrownianParams):
    """Same recurrence as Brownian motion, variable disturbance on by default."""
    sto_vol: bool = True


@dataclass(frozen=True)
class MertonParams:
    """Parameters for the diffusion and jump components of Merton's model."""
    mu: float = 0.0         # Drift of returns
    sigma: float = 1.0      # Volatility of returns
    lambda_j: float = 50.0  # Jump intensity over the whole horizon
    sto_vol: bool = True

    def __post_init__(self):
        _require_finite(self)
        if self.lambda_j <= 0:
            raise InvalidConfiguration(f"Jump intensity lambda_j must be positive, got {self.lambda_j}")


@dataclass(frozen=True)
class MeanReversionParams:
    """Parameters for the mean-reverting rate processes (Vasicek, CIR)."""
    mu: float = 0.0        # Long-term mean level
    sigma: float = 1.0     # Instantaneous volatility
    lambda_r: float = 0.5  # Speed of reversion towards mu
    sto_vol: bool = False

    def __post_init__(self):
        _require_finite(self)


@dataclass(frozen=True)
class HestonParams:
    """Parameters for the price and variance legs of the Heston model."""
    rf: float = 0.02     # Risk-free rate, drift of the price leg
    k: float = 0.5       # Rate of reversion to the long-term variance
    theta: float = 1.0   # Long-term variance
    sigma: float = 1.0   # Volatility of the variance

    def __post_init__(self):
        _require_finite(self)


@dataclass(frozen=True)
class OrderFlowParams:
    """Split of traders between informed and uninformed liquidity seekers."""
    eta: float = 0.1  # Share of informed traders
    M: float = 0.3    # Mass of liquidity seekers

    def __post_init__(self):
        _require_finite(self)
        if not 0 < self.eta < 1:
            raise InvalidConfiguration(f"eta must lie in (0, 1), got {self.eta}")
        if self.M <= 0:
            raise InvalidConfiguration(f"M must be positive, got {self.M}")
