import importlib.util
import pathlib

import matplotlib

matplotlib.use("Agg")

SCRIPT = pathlib.Path(__file__).resolve().parents[1] / "scripts" / "run_example_simulation.py"


def _load_script():
    spec = importlib.util.spec_from_file_location("run_example_simulation", SCRIPT)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_example_simulation_runs_end_to_end(capsys):
    results = _load_script().main(show=False, seed=0)

    assert set(results["prices"]) == {"Brownian", "GBM", "Merton", "Heston"}
    assert set(results["rates"]) == {"Vasicek", "CIR"}
    assert all(len(path) == 1000 for path in results["prices"].values())
    assert results["rates"]["CIR"][0] == 0.01
    assert len(results["volume"]) == 1000
    for frame in results["bars"].values():
        assert len(frame) < 1000
    assert "Simulation complete." in capsys.readouterr().out
