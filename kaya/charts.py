from __future__ import annotations

import logging

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
from scipy import stats
from sklearn.linear_model import LinearRegression

from kaya.config import PlotStyle
from kaya.factors import resolve_label
from kaya.fuel_mix import fuel_labels, fuel_wedges
from kaya.ranges import RANGE_COLUMN, RangeTag, annotate_range

logger = logging.getLogger(__name__)

# Chart library for Kaya identity analysis

GRID_COLOR = "#ebebeb"
BAND_COLOR = "grey"
BAND_ALPHA = 0.4
BAND_LABEL = "trend band"
TREND_LABEL = "trend"

# In-range bucket is drawn last so it sits on top at the boundary years
DRAW_ORDER = (RangeTag.PRE, RangeTag.POST, RangeTag.IN_RANGE)


def _white_theme(fig: plt.Figure, ax: plt.Axes, style: PlotStyle) -> None:
    fig.set_facecolor("white")
    ax.set_facecolor("white")
    ax.tick_params(labelsize=style.base_font_size * 0.8)


def _confidence_band(
    model: LinearRegression,
    x: np.ndarray,
    y: np.ndarray,
    xs: np.ndarray,
    level: float = 0.95,
) -> tuple[np.ndarray, np.ndarray]:
    """Pointwise confidence interval of the fitted mean at *xs*."""
    n = len(x)
    resid = y - model.predict(x)
    sigma = np.sqrt(np.sum(resid ** 2) / (n - 2))
    xbar = x.mean()
    sxx = np.sum((x - xbar) ** 2)
    se = sigma * np.sqrt(1.0 / n + (xs - xbar) ** 2 / sxx)
    half = stats.t.ppf((1 + level) / 2, n - 2) * se
    fit = model.predict(xs.reshape(-1, 1))
    return fit - half, fit + half


def _add_trend(
    ax: plt.Axes,
    rows: pd.DataFrame,
    variable: str,
    log_scale: bool,
    style: PlotStyle,
) -> None:
    if len(rows) < 2:
        logger.warning(
            "trend line for %s skipped: %d in-range row(s), need at least 2",
            variable,
            len(rows),
        )
        return

    x = rows["year"].to_numpy(dtype=float).reshape(-1, 1)
    y = rows[variable].to_numpy(dtype=float)
    # On a log axis the line is fitted in log space so it draws straight
    if log_scale:
        y = np.log10(y)

    model = LinearRegression().fit(x, y)
    xs = np.unique(x)
    fit = model.predict(xs.reshape(-1, 1))

    # Two points leave no residual degrees of freedom for a band
    if len(rows) > 2:
        lower, upper = _confidence_band(model, x.ravel(), y, xs)
        if log_scale:
            lower, upper = 10 ** lower, 10 ** upper
        ax.fill_between(xs, lower, upper, color=BAND_COLOR, alpha=BAND_ALPHA, linewidth=0, label=BAND_LABEL)

    if log_scale:
        fit = 10 ** fit

    logger.debug("trend %s: slope=%.6g intercept=%.6g", variable, model.coef_[0], model.intercept_)
    ax.plot(xs, fit, color=style.in_range_color, linewidth=style.line_width, label=TREND_LABEL)


def build_time_series_chart(
    data: pd.DataFrame,
    variable: str,
    start_year: int | None = None,
    stop_year: int | None = None,
    y_label: str | None = None,
    log_scale: bool = False,
    trend_line: bool = False,
    style: PlotStyle | None = None,
) -> plt.Figure:
    """
    Line-and-point chart of one Kaya variable against year.

    Years between *start_year* (default 1980) and *stop_year* (default: last
    year in *data*) are highlighted; the optional trend line is a linear fit
    over the highlighted years only.
    """
    style = style or PlotStyle.from_env()
    df = annotate_range(data, start_year, stop_year)
    ylabel = resolve_label(variable, y_label)
    colors = style.range_colors()

    fig, ax = plt.subplots(figsize=style.figsize())
    for tag in DRAW_ORDER:
        part = df.loc[df[RANGE_COLUMN] == tag.value].sort_values("year")
        if part.empty:
            continue
        ax.plot(
            part["year"],
            part[variable],
            color=colors[tag.value],
            linewidth=style.line_width,
            marker="o",
            markersize=style.marker_size,
            label=tag.value,
        )

    if log_scale:
        ax.set_yscale("log")

    if trend_line:
        _add_trend(ax, df.loc[df[RANGE_COLUMN] == RangeTag.IN_RANGE.value], variable, log_scale, style)

    ax.set_xlabel("Year", fontsize=style.base_font_size, labelpad=4)
    ax.set_ylabel(ylabel, fontsize=style.base_font_size, labelpad=12)
    ax.grid(True, color=GRID_COLOR)
    ax.set_axisbelow(True)
    _white_theme(fig, ax, style)
    return fig


def build_fuel_mix_chart(
    fuel_mix: pd.DataFrame,
    style: PlotStyle | None = None,
) -> plt.Figure:
    """
    Donut chart of the fuel mix in the most recent year of *fuel_mix*.

    Expects ``year``, ``fuel``, ``quads`` and ``pct`` columns. Wedges run
    clockwise from 12 o'clock in alphabetical fuel order.
    """
    style = style or PlotStyle.from_env()
    fd = fuel_wedges(fuel_mix)
    labels = fuel_labels(fd)

    total = float(fd["qmax"].iloc[-1]) if not fd.empty else 0.0
    scale = 2 * np.pi / total if total else 0.0

    fig, ax = plt.subplots(figsize=style.figsize(), subplot_kw=dict(polar=True))
    ax.set_theta_zero_location("N")
    ax.set_theta_direction(-1)

    handles = []
    for row in fd.itertuples(index=False):
        bars = ax.bar(
            row.qmin * scale,
            style.donut_outer - style.donut_inner,
            width=(row.qmax - row.qmin) * scale,
            bottom=style.donut_inner,
            align="edge",
            color=style.fuel_colors.get(row.fuel),
            label=labels[row.fuel],
        )
        handles.append(bars.patches[0])

    ax.set_ylim(0, style.donut_limit)
    ax.set_xticks([])
    ax.set_yticks([])
    ax.grid(False)
    ax.spines["polar"].set_visible(False)

    ax.legend(
        handles,
        list(labels.values()),
        title="Fuel",
        loc="center left",
        bbox_to_anchor=(1.05, 0.5),
        frameon=False,
        fontsize=style.base_font_size * 0.8,
        title_fontsize=style.base_font_size,
    )
    _white_theme(fig, ax, style)
    return fig
