from __future__ import annotations

import logging

import pandas as pd

logger = logging.getLogger(__name__)


def latest_year(fuel_mix: pd.DataFrame) -> pd.DataFrame:
    # Single-year data passes through untouched
    df = pd.DataFrame(fuel_mix)
    if df["year"].nunique() > 1:
        df = df.loc[df["year"] == df["year"].max()]
    return df


def fuel_wedges(fuel_mix: pd.DataFrame) -> pd.DataFrame:
    """
    Reduce *fuel_mix* to its most recent year, one row per fuel in
    alphabetical order, and add the cumulative ``qmin``/``qmax`` boundaries
    of each fuel's wedge. Repeated fuels have their quads and pct summed.

    The wedges partition [0, total quads) with no gaps: each ``qmin`` is the
    previous fuel's ``qmax``.
    """
    fd = (
        latest_year(fuel_mix)
        .groupby("fuel", as_index=False, sort=True)
        .agg(year=("year", "max"), quads=("quads", "sum"), pct=("pct", "sum"))
    )
    qmax = fd["quads"].cumsum()
    fd = fd.assign(qmin=qmax.shift(1, fill_value=0.0), qmax=qmax)

    if not fd.empty:
        logger.debug(
            "fuel mix year=%s fuels=%d total=%.3f quads",
            fd["year"].iloc[0],
            len(fd),
            fd["qmax"].iloc[-1],
        )
    return fd


def _round_text(value: float, digits: int) -> str:
    text = f"{value:.{digits}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def fuel_label(fuel: str, quads: float, pct: float) -> str:
    return f"{fuel}: {_round_text(quads, 2)} quads ({_round_text(pct, 1)}%)"


def fuel_labels(wedges: pd.DataFrame) -> dict[str, str]:
    """Legend text keyed by fuel name, in wedge order."""
    return {
        row.fuel: fuel_label(row.fuel, row.quads, row.pct)
        for row in wedges.itertuples(index=False)
    }
