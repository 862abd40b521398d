import pandas as pd
import pytest

from shrimp_pricing.data.price_tables import (
    RANGE_COLUMNS,
    base_table_from_frame,
    load_base_table,
    price_range_frame,
)
from shrimp_pricing.engine import AnchorPoint, resolve_price_range


def test_load_base_table_from_csv(tmp_path):
    path = tmp_path / "prices.csv"
    path.write_text(" Size , PRICE \n30,80000\n20,\"88,000\"\n\n40,77000.5\n", encoding="utf-8")

    table = load_base_table(path)

    assert table == [
        AnchorPoint(30, 80000),
        AnchorPoint(20, 88000),
        AnchorPoint(40, 77000.5),
    ]
    assert all(type(a.size) is int for a in table)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_base_table(tmp_path / "missing.csv")


def test_missing_column():
    with pytest.raises(ValueError, match="price"):
        base_table_from_frame(pd.DataFrame({"size": [20]}))


def test_non_numeric_cell():
    df = pd.DataFrame({"size": [20, "big"], "price": [88000, 80000]})
    with pytest.raises(ValueError, match="'big'"):
        base_table_from_frame(df)


def test_numeric_frame():
    df = pd.DataFrame({"size": [20, 25], "price": [88000.0, 87000.0]})
    assert base_table_from_frame(df) == [AnchorPoint(20, 88000), AnchorPoint(25, 87000)]


def test_price_range_frame(base_table):
    df = price_range_frame(resolve_price_range(19, 21, base_table))

    assert list(df.columns) == RANGE_COLUMNS
    assert df["size"].tolist() == [19, 20, 21]
    assert df["kind"].tolist() == ["error", "exact", "interpolated"]
    assert pd.isna(df.loc[0, "price"])
    assert df.loc[0, "error_code"] == "SizeTooSmall"
    assert df.loc[1, "price"] == 88000
    assert df.loc[2, "price"] == 88000


def test_empty_range_frame(base_table):
    df = price_range_frame([])
    assert df.empty
    assert list(df.columns) == RANGE_COLUMNS
