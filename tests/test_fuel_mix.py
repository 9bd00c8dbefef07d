import pandas as pd
import pytest

from kaya.fuel_mix import fuel_label, fuel_labels, fuel_wedges, latest_year


@pytest.fixture
def single_year():
    return pd.DataFrame(
        {
            "year": [2020, 2020, 2020],
            "fuel": ["Coal", "Oil", "Nuclear"],
            "quads": [10.0, 5.0, 3.0],
            "pct": [100 * 10 / 18, 100 * 5 / 18, 100 * 3 / 18],
        }
    )


def test_only_latest_year_is_kept(fuel_mix):
    wedges = fuel_wedges(fuel_mix)

    assert set(wedges["year"]) == {2020}
    assert len(wedges) == 3


def test_single_year_passes_through(single_year):
    pd.testing.assert_frame_equal(latest_year(single_year), single_year)


def test_wedges_sorted_alphabetically_and_gapless(single_year):
    wedges = fuel_wedges(single_year)

    assert wedges["fuel"].tolist() == ["Coal", "Nuclear", "Oil"]
    assert wedges["qmin"].tolist() == [0.0, 10.0, 13.0]
    assert wedges["qmax"].tolist() == [10.0, 13.0, 18.0]
    assert wedges["qmin"].iloc[1:].tolist() == wedges["qmax"].iloc[:-1].tolist()


def test_wedge_widths_sum_to_total(fuel_mix):
    wedges = fuel_wedges(fuel_mix)
    total = fuel_mix.loc[fuel_mix["year"] == 2020, "quads"].sum()

    assert (wedges["qmax"] - wedges["qmin"]).sum() == pytest.approx(total)
    assert wedges["qmax"].iloc[-1] == pytest.approx(total)


def test_labels_keyed_by_fuel_in_wedge_order(single_year):
    labels = fuel_labels(fuel_wedges(single_year))

    assert list(labels) == ["Coal", "Nuclear", "Oil"]
    assert labels["Coal"] == "Coal: 10 quads (55.6%)"
    assert labels["Nuclear"] == "Nuclear: 3 quads (16.7%)"
    assert labels["Oil"] == "Oil: 5 quads (27.8%)"


@pytest.mark.parametrize(
    "quads, pct, expected",
    [
        (12.3456, 40.0, "Natural Gas: 12.35 quads (40%)"),
        (12.5, 33.33, "Natural Gas: 12.5 quads (33.3%)"),
        (0.0, 0.0, "Natural Gas: 0 quads (0%)"),
    ],
)
def test_fuel_label_rounding(quads, pct, expected):
    assert fuel_label("Natural Gas", quads, pct) == expected


def test_repeated_fuel_rows_are_summed():
    data = pd.DataFrame(
        {
            "year": [2020, 2020, 2020, 2019],
            "fuel": ["Oil", "Coal", "Oil", "Oil"],
            "quads": [2.0, 6.0, 2.0, 50.0],
            "pct": [20.0, 60.0, 20.0, 100.0],
        }
    )
    wedges = fuel_wedges(data)

    assert wedges["fuel"].tolist() == ["Coal", "Oil"]
    assert wedges["quads"].tolist() == [6.0, 4.0]
    assert wedges["qmax"].tolist() == [6.0, 10.0]
    assert fuel_labels(wedges)["Oil"] == "Oil: 4 quads (40%)"
