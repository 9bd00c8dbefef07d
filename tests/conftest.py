# conftest.py
"""
Pytest configuration:
- Forces the non-interactive Agg backend before any figure is created.
- Provides small Kaya and fuel mix frames shared by the chart tests.
"""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import pytest

from kaya.config import PlotStyle


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


@pytest.fixture
def style():
    return PlotStyle()


@pytest.fixture
def kaya_series():
    """Ten years of base Kaya columns, 1975..1984."""
    years = list(range(1975, 1985))
    return pd.DataFrame(
        {
            "year": years,
            "P": [4.0 + 0.1 * i for i in range(10)],
            "G": [20.0 + 1.0 * i for i in range(10)],
            "E": [250.0 + 5.0 * i for i in range(10)],
            "F": [5000.0 + 50.0 * i for i in range(10)],
        }
    )


@pytest.fixture
def fuel_mix():
    """Same three fuels reported for 2010, 2015 and 2020."""
    rows = []
    for year, scale in [(2010, 1.0), (2015, 1.5), (2020, 2.0)]:
        quads = {"Oil": 5.0 * scale, "Coal": 10.0 * scale, "Nuclear": 3.0 * scale}
        total = sum(quads.values())
        for fuel, q in quads.items():
            rows.append({"year": year, "fuel": fuel, "quads": q, "pct": 100.0 * q / total})
    return pd.DataFrame(rows)
