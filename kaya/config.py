from __future__ import annotations

import os
from dataclasses import dataclass, field

# Fixed fuel -> color palette for the fuel mix donut
FUEL_COLORS: dict[str, str] = {
    "Coal": "#e31a1c",
    "Natural Gas": "#fdbf6f",
    "Oil": "#ff7f00",
    "Nuclear": "#b2df8a",
    "Renewables": "#33a02c",
    "Total": "#a6cee3",
}


@dataclass(frozen=True)
class PlotStyle:
    base_font_size: float = 20
    fig_width: float = 10
    fig_height: float = 7
    line_width: float = 1.5
    marker_size: float = 7

    in_range_color: str = "darkblue"
    out_of_range_color: str = "cornflowerblue"

    # Donut ring band, radial axis runs 0..donut_limit
    donut_inner: float = 2.0
    donut_outer: float = 4.0
    donut_limit: float = 4.0

    fuel_colors: dict[str, str] = field(default_factory=lambda: dict(FUEL_COLORS), hash=False)

    @staticmethod
    def from_env() -> "PlotStyle":
        return PlotStyle(
            base_font_size=float(os.getenv("KAYA_BASE_FONT_SIZE", "20")),
            fig_width=float(os.getenv("KAYA_FIG_WIDTH", "10")),
            fig_height=float(os.getenv("KAYA_FIG_HEIGHT", "7")),
            line_width=float(os.getenv("KAYA_LINE_WIDTH", "1.5")),
            marker_size=float(os.getenv("KAYA_MARKER_SIZE", "7")),
        )

    def figsize(self) -> tuple[float, float]:
        return (self.fig_width, self.fig_height)

    def range_colors(self) -> dict[str, str]:
        return {
            "PRE": self.out_of_range_color,
            "IN_RANGE": self.in_range_color,
            "POST": self.out_of_range_color,
        }
