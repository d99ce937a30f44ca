from abc import ABC, abstractmethod

import numpy as np

from synthmarket.jumps import compound_poisson_jumps
from synthmarket.noise import NoiseMode, correlated_pair, random_disturbance
from synthmarket.parameters import (
    BrownianParams,
    GBMParams,
    HestonParams,
    MeanReversionParams,
    MertonParams,
    SimulationConfig,
)


class StochasticProcess(ABC):
    """
    Abstract Base Class for the price and rate evolution models (Strategy Interface).
    """
    noise_mode: NoiseMode = NoiseMode.WHITE

    def initial_level(self, config: SimulationConfig) -> float:
        """Level the path starts from, s0 for prices."""
        return config.s0

    @abstractmethod
    def evolve(self, x_t: float, dt: float, w: float) -> float:
        """
        Evolves the state variable by one time step dt (Euler-Maruyama).

        Args:
            x_t: Current value of the state variable.
            dt: Time step size.
            w: Disturbance drawn for this step (not yet scaled by sqrt(dt)).

        Returns:
            The value of the state variable at the next observation.
        """
        pass

    def generate_path(self, config: SimulationConfig, rng: np.random.Generator) -> np.ndarray:
        """Integrates one path of length T, drawing a fresh disturbance sequence."""
        disturbance = random_disturbance(config.T, self.noise_mode, rng)
        path = np.empty(config.T)
        path[0] = self.initial_level(config)
        for k in range(1, config.T):
            path[k] = self.evolve(path[k - 1], config.dt, disturbance[k])
        return path


# --- Stock prices ---

class BrownianMotion(StochasticProcess):
    """dX = mu*X*dt + sigma*X*dW."""

    def __init__(self, params: BrownianParams = None):
        self.params = params or BrownianParams()
        self.noise_mode = NoiseMode.from_flag(self.params.sto_vol)

    def evolve(self, x_t: float, dt: float, w: float) -> float:
        drift_term = self.params.mu * x_t * dt
        diffusion_term = self.params.sigma * x_t * np.sqrt(dt) * w
        return x_t + drift_term + diffusion_term


class GeometricBrownianMotion(BrownianMotion):
    """
    Brownian recurrence driven by the variable disturbance, so the effective
    volatility changes from one step to the next.
    """

    def __init__(self, params: BrownianParams = None):
        super().__init__(params or GBMParams())


class MertonJumpDiffusion(StochasticProcess):
    """Brownian path plus an independently drawn compound-Poisson jump series."""

    def __init__(self, params: MertonParams = None):
        self.params = params or MertonParams()
        self.diffusion = BrownianMotion(
            BrownianParams(mu=self.params.mu, sigma=self.params.sigma, sto_vol=self.params.sto_vol)
        )
        self.noise_mode = self.diffusion.noise_mode

    def evolve(self, x_t: float, dt: float, w: float) -> float:
        return self.diffusion.evolve(x_t, dt, w)

    def generate_path(self, config: SimulationConfig, rng: np.random.Generator) -> np.ndarray:
        diffusion_path = self.diffusion.generate_path(config, rng)
        return diffusion_path + compound_poisson_jumps(config.T, self.params.lambda_j, rng)


class HestonModel(StochasticProcess):
    """
    Price leg dS = rf*S*dt + sqrt(V)*S*dW1 with a CIR-type variance leg
    dV = k*(theta - V)*dt + sigma*sqrt(V)*dW2, W1 and W2 correlated.
    """

    def __init__(self, params: HestonParams = None):
        self.params = params or HestonParams()

    def evolve(self, x_t: float, dt: float, w: float, v: float = 0.0) -> float:
        """Price step, given the variance v reached at the same observation."""
        drift_term = self.params.rf * x_t * dt
        diffusion_term = np.sqrt(abs(v) * dt) * x_t * w
        return x_t + drift_term + diffusion_term

    def evolve_variance(self, v_t: float, dt: float, w: float) -> float:
        # abs() lets the variance go transiently negative instead of truncating at zero
        reversion = self.params.k * (self.params.theta - v_t) * dt
        diffusion_term = self.params.sigma * np.sqrt(abs(v_t) * dt) * w
        return v_t + reversion + diffusion_term

    def variance_path(self, T: int, dt: float, w2: np.ndarray) -> np.ndarray:
        variance = np.empty(T)
        variance[0] = w2[0]
        for k in range(1, T):
            variance[k] = self.evolve_variance(variance[k - 1], dt, w2[k])
        return variance

    def generate_path(self, config: SimulationConfig, rng: np.random.Generator) -> np.ndarray:
        noise = correlated_pair(config.T, rng)
        variance = self.variance_path(config.T, config.dt, noise.w2)

        path = np.empty(config.T)
        path[0] = self.initial_level(config)
        for k in range(1, config.T):
            path[k] = self.evolve(path[k - 1], config.dt, noise.w1[k], variance[k])
        return path


# --- Bond rates ---

class VasicekModel(StochasticProcess):
    """dr = lambda*(mu - r)*dt + sigma*dW."""

    def __init__(self, params: MeanReversionParams = None):
        self.params = params or MeanReversionParams()
        self.noise_mode = NoiseMode.from_flag(self.params.sto_vol)

    def initial_level(self, config: SimulationConfig) -> float:
        return config.r0

    def evolve(self, x_t: float, dt: float, w: float) -> float:
        reversion = self.params.lambda_r * (self.params.mu - x_t) * dt
        diffusion_term = self.params.sigma * np.sqrt(dt) * w
        return x_t + reversion + diffusion_term


class CoxIngersollRoss(VasicekModel):
    """dr = lambda*(mu - r)*dt + sigma*sqrt(r)*dW."""

    def evolve(self, x_t: float, dt: float, w: float) -> float:
        # sqrt(|r|): negative rates are carried forward rather than raising
        reversion = self.params.lambda_r * (self.params.mu - x_t) * dt
        diffusion_term = self.params.sigma * np.sqrt(abs(x_t) * dt) * w
        return x_t + reversion + diffusion_term
