"""Shared parsing utilities for tabular ingestion."""
from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation
from io import BytesIO
from pathlib import Path
from typing import Sequence

import pandas as pd

XLSX_MAGIC = b"PK\x03\x04"


def ensure_bytes(source: BytesIO | Path | str | bytes) -> bytes:
    if isinstance(source, bytes):
        return source
    if isinstance(source, BytesIO):
        return source.getvalue()
    if isinstance(source, (Path, str)):
        return Path(source).read_bytes()
    raise TypeError(f"Unsupported source type: {type(source)!r}")


def is_excel(raw: bytes) -> bool:
    return raw.startswith(XLSX_MAGIC)


def parse_decimal(value: object) -> Decimal | None:
    """Parse a spreadsheet cell into a Decimal, or None when it holds no number."""
    if value is None:
        return None
    s = str(value).strip()
    if not s or s.upper() == "NAN":
        return None
    negative = False
    if s.startswith("(") and s.endswith(")"):
        negative = True
        s = s[1:-1]
    for ch in [",", "$", "€", "£", "¥", " "]:
        s = s.replace(ch, "")
    try:
        result = Decimal(s)
    except InvalidOperation:
        return None
    if not result.is_finite():
        return None
    if negative:
        result = -result
    return result


def parse_date(value: object) -> date | None:
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    parsed = pd.to_datetime(value, errors="coerce")
    if pd.isna(parsed):
        return None
    return parsed.date()


def parse_text(value: object) -> str:
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return ""
    return str(value).strip()


def parse_currency(value: object) -> str:
    s = "" if value is None else str(value).strip().upper()
    if s == "NAN":
        return ""
    return s


def find_column(df: pd.DataFrame, candidates: Sequence[str]) -> str | None:
    lower_map = {str(name).strip().lower(): name for name in df.columns}
    for candidate in candidates:
        if candidate.lower() in lower_map:
            return lower_map[candidate.lower()]
    return None
