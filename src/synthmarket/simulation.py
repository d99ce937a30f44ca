import logging

import numpy as np

from synthmarket import bars
from synthmarket.order_flow import order_flow
from synthmarket.parameters import (
    BrownianParams,
    GBMParams,
    HestonParams,
    MeanReversionParams,
    MertonParams,
    OrderFlowParams,
    SimulationConfig,
)
from synthmarket.processes import (
    BrownianMotion,
    CoxIngersollRoss,
    GeometricBrownianMotion,
    HestonModel,
    MertonJumpDiffusion,
    StochasticProcess,
    VasicekModel,
)

logger = logging.getLogger(__name__)


class SimulationEngine:
    """
    Runs Monte Carlo simulations using a specified process strategy (Context).
    """

    def __init__(self, process_strategy: StochasticProcess, sim_config: SimulationConfig,
                 rng: np.random.Generator = None):
        if not isinstance(process_strategy, StochasticProcess):
            raise TypeError("process_strategy must be an instance of StochasticProcess")
        if not isinstance(sim_config, SimulationConfig):
            raise TypeError("sim_config must be an instance of SimulationConfig")

        self.process = process_strategy
        self.config = sim_config
        self.rng = rng if rng is not None else np.random.default_rng()

    def run_simulation(self) -> np.ndarray:
        """
        Performs the Monte Carlo simulation.

        Returns:
            A NumPy array containing the simulated paths, one per column.
            Shape: (T, n), or (T,) when a single path is requested.
        """
        paths = np.empty((self.config.T, self.config.n))
        # Paths are independent: each one draws its own noise from the shared generator
        for col in range(self.config.n):
            paths[:, col] = self.process.generate_path(self.config, self.rng)

        logger.debug(
            "%s: simulated %d path(s) of %d observations (dt=%g)",
            type(self.process).__name__, self.config.n, self.config.T, self.config.dt,
        )
        if self.config.n == 1:
            return paths[:, 0]
        return paths


class RandomProcesses:
    """
    Facade over the price and rate processes sharing one SimulationConfig.

    Example:
        sim = RandomProcesses(n=5, T=252, h=1, s0=100, rng=42)
        prices = sim.merton(mu=0.04, sigma=0.15, lambda_j=30)
    """

    def __init__(self, config: SimulationConfig = None, rng=None, **config_kwargs):
        if config is None:
            config = SimulationConfig(**config_kwargs)
        elif config_kwargs:
            raise TypeError("Pass either a SimulationConfig or its fields, not both")
        self.config = config
        self.rng = rng if isinstance(rng, np.random.Generator) else np.random.default_rng(rng)

    @property
    def dt(self) -> float:
        return self.config.dt

    @property
    def r0(self) -> float:
        return self.config.r0

    def _run(self, process: StochasticProcess) -> np.ndarray:
        return SimulationEngine(process, self.config, self.rng).run_simulation()

    # --- Stock prices ---

    def brownian(self, mu: float = 0.0, sigma: float = 1.0, sto_vol: bool = False) -> np.ndarray:
        """Brownian motion prices, white noise by default."""
        return self._run(BrownianMotion(BrownianParams(mu=mu, sigma=sigma, sto_vol=sto_vol)))

    def gbm(self, mu: float = 0.0, sigma: float = 1.0, sto_vol: bool = True) -> np.ndarray:
        """Geometric Brownian motion prices, variable disturbance by default."""
        return self._run(GeometricBrownianMotion(GBMParams(mu=mu, sigma=sigma, sto_vol=sto_vol)))

    def merton(self, mu: float = 0.0, sigma: float = 1.0, lambda_j: float = 50.0,
               sto_vol: bool = True) -> np.ndarray:
        """Merton jump-diffusion prices; lambda_j is the jump intensity over the horizon."""
        params = MertonParams(mu=mu, sigma=sigma, lambda_j=lambda_j, sto_vol=sto_vol)
        return self._run(MertonJumpDiffusion(params))

    def heston(self, rf: float = 0.02, k: float = 0.5, theta: float = 1.0,
               sigma: float = 1.0) -> np.ndarray:
        """Heston prices with correlated price and variance shocks."""
        return self._run(HestonModel(HestonParams(rf=rf, k=k, theta=theta, sigma=sigma)))

    # --- Bond rates ---

    def vasicek(self, mu: float = 0.0, sigma: float = 1.0, lambda_r: float = 0.5,
                sto_vol: bool = False) -> np.ndarray:
        """Vasicek rates starting from r0."""
        return self._run(VasicekModel(MeanReversionParams(mu=mu, sigma=sigma, lambda_r=lambda_r, sto_vol=sto_vol)))

    def cir(self, mu: float = 0.0, sigma: float = 1.0, lambda_r: float = 0.5,
            sto_vol: bool = False) -> np.ndarray:
        """Cox-Ingersoll-Ross rates starting from r0."""
        return self._run(CoxIngersollRoss(MeanReversionParams(mu=mu, sigma=sigma, lambda_r=lambda_r, sto_vol=sto_vol)))

    # --- Volumes and bars ---

    def order_flow(self, market_prices, eta: float = 0.1, M: float = 0.3) -> np.ndarray:
        return order_flow(market_prices, self.config.sigma_intensity,
                          OrderFlowParams(eta=eta, M=M), self.rng)

    def tick_imbalance_bars(self, ticks, window: int = bars.DEFAULT_WINDOW):
        return bars.tick_imbalance_bars(ticks, window)

    def volume_imbalance_bars(self, ticks, window: int = bars.DEFAULT_WINDOW):
        return bars.volume_imbalance_bars(ticks, window)

    def dollar_imbalance_bars(self, ticks, window: int = bars.DEFAULT_WINDOW):
        return bars.dollar_imbalance_bars(ticks, window)
