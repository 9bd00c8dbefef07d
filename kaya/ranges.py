from __future__ import annotations

import logging
from enum import Enum

import pandas as pd

logger = logging.getLogger(__name__)

DEFAULT_START_YEAR = 1980
RANGE_COLUMN = "in_range"


class RangeTag(str, Enum):
    PRE = "PRE"
    IN_RANGE = "IN_RANGE"
    POST = "POST"


def annotate_range(
    data: pd.DataFrame,
    start_year: int | None = None,
    stop_year: int | None = None,
) -> pd.DataFrame:
    """
    Stack three filtered views of *data*, each tagged in ``in_range``:

    - PRE:      year <= start_year
    - POST:     year >= stop_year
    - IN_RANGE: start_year <= year <= stop_year

    Boundary years land in two views on purpose so every bucket draws as a
    complete segment. Nothing is deduplicated or validated; an inverted
    range just leaves IN_RANGE empty.
    """
    df = pd.DataFrame(data)
    if start_year is None:
        start_year = DEFAULT_START_YEAR
    if stop_year is None:
        stop_year = df["year"].max()

    year = df["year"]
    views = [
        df.loc[year <= start_year].assign(**{RANGE_COLUMN: RangeTag.PRE.value}),
        df.loc[year >= stop_year].assign(**{RANGE_COLUMN: RangeTag.POST.value}),
        df.loc[year.between(start_year, stop_year)].assign(**{RANGE_COLUMN: RangeTag.IN_RANGE.value}),
    ]
    tagged = pd.concat(views, ignore_index=True)

    logger.debug(
        "range %s..%s: %s",
        start_year,
        stop_year,
        tagged[RANGE_COLUMN].value_counts().to_dict(),
    )
    return tagged
