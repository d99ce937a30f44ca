import logging

import numpy as np
from matplotlib import pyplot as plt

from synthmarket import RandomProcesses, SimulationConfig


def main(show: bool = True, seed: int = None) -> dict:
    rng = np.random.default_rng(seed)

    # --- Configuration ---
    stocks = RandomProcesses(SimulationConfig(n=1, T=1000, h=1.0, s0=100.0), rng=rng)
    rates = RandomProcesses(SimulationConfig(n=1, T=1000, h=1.0, s0=1.0), rng=rng)  # r0 = 1%

    # --- Stock prices ---
    prices = {
        "Brownian": stocks.brownian(mu=0.1, sigma=0.3),
        "GBM": stocks.gbm(mu=0.1, sigma=0.3),
        "Merton": stocks.merton(mu=0.1, sigma=0.3, lambda_j=252),
        "Heston": stocks.heston(rf=0.04, k=0.8, theta=0.9, sigma=1.0),
    }

    # --- Bond rates ---
    rate_levels = {
        "Vasicek": rates.vasicek(mu=0.015, sigma=0.0015, lambda_r=0.3),
        "CIR": rates.cir(mu=0.015, sigma=0.0015, lambda_r=0.3),
    }

    # --- Volumes and information-driven bars for the Heston sample ---
    heston_volume = stocks.order_flow(prices["Heston"], eta=0.1, M=0.2)
    ticks = np.column_stack([prices["Heston"], heston_volume])
    info_bars = {
        "tick": stocks.tick_imbalance_bars(ticks, window=15),
        "volume": stocks.volume_imbalance_bars(ticks, window=15),
        "dollar": stocks.dollar_imbalance_bars(ticks, window=15),
    }

    # --- Output/Plotting ---
    print("Simulation complete.")
    for name, path in {**prices, **rate_levels}.items():
        print(f"{name:>9}: final level {path[-1]:.4f}")
    for name, frame in info_bars.items():
        print(f"{name:>9} imbalance bars: {len(frame)} from {len(ticks)} ticks")

    if show:
        fig, (ax_prices, ax_rates) = plt.subplots(2, 1, figsize=(10, 8))
        for name, path in prices.items():
            ax_prices.plot(path, label=name)
        ax_prices.set_title('Simulated prices')
        ax_prices.set_ylabel('Prices')
        ax_prices.legend()
        ax_prices.grid(True)

        for name, path in rate_levels.items():
            ax_rates.plot(path, label=name)
        ax_rates.set_title('Simulated rates')
        ax_rates.set_xlabel('Time step')
        ax_rates.set_ylabel('Rates')
        ax_rates.legend()
        ax_rates.grid(True)
        plt.show()

    return {"prices": prices, "rates": rate_levels, "volume": heston_volume, "bars": info_bars}


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    main()
