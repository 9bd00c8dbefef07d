from __future__ import annotations

import pandas as pd

# Kaya identity: F = P * g * e * f
KAYA_LABELS: dict[str, str] = {
    "P": "Population (billions)",
    "G": "Gross Domestic Product ($ trillion)",
    "E": "Energy consumption (quads)",
    "F": "Fossil-fuel carbon emissions (million metric tons)",
    "g": "Per-capita GDP ($ thousand)",
    "e": "Energy intensity of economy (quads per $trillion)",
    "f": "Carbon intensity of energy supply (MMT per quad)",
    "ef": "Carbon intensity of economy (tons CO2 per $million)",
}

# derived column -> (numerator, denominator)
DERIVED_FACTORS: dict[str, tuple[str, str]] = {
    "g": ("G", "P"),
    "e": ("E", "G"),
    "f": ("F", "E"),
    "ef": ("F", "G"),
}


def resolve_label(variable: str, y_label: str | None = None) -> str:
    """Axis label for *variable*; an explicit *y_label* wins, unknown names give ""."""
    if y_label is not None:
        return y_label
    return KAYA_LABELS.get(variable, "")


def add_kaya_factors(df: pd.DataFrame) -> pd.DataFrame:
    """
    Return a copy of *df* with the intensity ratios g, e, f and ef computed
    from the base columns P, G, E and F.
    """
    out = pd.DataFrame(df).copy()
    for col, (num, den) in DERIVED_FACTORS.items():
        out[col] = out[num] / out[den]
    return out
