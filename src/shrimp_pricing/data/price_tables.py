"""
Pricing table I/O - loads GM base tables and exports range results.

Base tables are CSVs with `size` and `price` columns, one anchor per row.
"""
import pandas as pd
from pathlib import Path
from typing import Iterable, Optional

from ..config.settings import get_settings, Settings
from ..engine.models import AnchorPoint, RangeEntry


BASE_TABLE_COLUMNS = ('size', 'price')
RANGE_COLUMNS = ['size', 'price', 'kind', 'formula', 'error_code']


def _native_number(value):
    """Plain int for whole numbers, float otherwise (drops numpy scalar types)."""
    number = float(value)
    return int(number) if number.is_integer() else number


def base_table_from_frame(df: pd.DataFrame) -> list[AnchorPoint]:
    """
    Build a base table from a DataFrame with size and price columns.

    Header case and surrounding whitespace are ignored; fully blank rows are
    dropped. The returned anchors are not validated, that is the resolver's job.

    Raises:
        ValueError: missing columns or non-numeric cells
    """
    df = df.copy()
    df.columns = [str(c).strip().lower() for c in df.columns]

    missing = [c for c in BASE_TABLE_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Base table is missing column(s): {', '.join(missing)}")

    df = df[list(BASE_TABLE_COLUMNS)].dropna(how='all').copy()

    for col in BASE_TABLE_COLUMNS:
        raw = df[col]
        numeric = pd.to_numeric(raw.astype(str).str.replace(',', '', regex=False).str.strip(), errors='coerce')
        bad_rows = numeric.isna()
        if bad_rows.any():
            bad_values = ", ".join(repr(v) for v in raw[bad_rows].tolist())
            raise ValueError(f"Base table column '{col}' has non-numeric value(s): {bad_values}")
        df[col] = numeric

    return [
        AnchorPoint(size=_native_number(row.size), price=_native_number(row.price))
        for row in df.itertuples(index=False)
    ]


def load_base_table(path: Path) -> list[AnchorPoint]:
    """Load a base table from a CSV file."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Base table not found at {path}")
    df = pd.read_csv(path, dtype=str, skipinitialspace=True)
    return base_table_from_frame(df)


def sample_base_table(settings: Optional[Settings] = None) -> list[AnchorPoint]:
    """Load the sample base table shipped with the package (sizes 20-100)."""
    settings = settings or get_settings()
    return load_base_table(settings.sample_base_table)


def price_range_frame(entries: Iterable[RangeEntry]) -> pd.DataFrame:
    """
    Tabulate range results, one row per size.

    Error rows keep their error_code and have a missing price.
    """
    rows = [
        {
            'size': entry.size,
            'price': None if entry.result.is_error else entry.result.price,
            'kind': entry.result.kind.value,
            'formula': entry.result.formula,
            'error_code': entry.result.error_code,
        }
        for entry in entries
    ]
    df = pd.DataFrame(rows, columns=RANGE_COLUMNS)
    df['price'] = pd.to_numeric(df['price'])
    return df
