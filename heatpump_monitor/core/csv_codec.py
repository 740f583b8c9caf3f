"""
CSV codec for the listing history table

The header and its order are part of the file format and must stay
compatible with existing tables:

    Model,ProductCode,Manufacturer,Price (inc VAT),Rating,ReviewCount,Features,IsEnergyEfficient,Guarantee

Features are stored in a single cell as a comma-joined list. Other columns
are converted with plain int/float/bool parsing; bad values raise ValueError.
"""

import csv
import logging
from pathlib import Path
from typing import Any, Callable, Iterable, List, NamedTuple, Optional, TextIO, Union

from .models import ProductRecord

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def encode_features(value: Any) -> str:
    """["A", "B"] -> "A,B"; empty or non-list values -> "" """
    if not isinstance(value, (list, tuple)):
        return ""
    return ",".join(value)


def decode_features(text: Optional[str]) -> List[str]:
    """"A,,B, C" -> ["A", "B", "C"]; empty or missing -> []"""
    if not text:
        return []
    return [part.strip() for part in text.split(",") if part.strip()]


def _encode_bool(value: bool) -> str:
    return "True" if value else "False"


def _decode_bool(text: str) -> bool:
    lowered = text.strip().lower()
    if lowered == "true":
        return True
    if lowered == "false":
        return False
    raise ValueError(f"Invalid boolean value: {text!r}")


def _encode_number(value: float) -> str:
    return format(value, 'g')


class Column(NamedTuple):
    header: str
    attribute: str
    encode: Callable[[Any], str]
    decode: Callable[[str], Any]


COLUMNS = [
    Column('Model', 'model', str, str),
    Column('ProductCode', 'product_code', str, str),
    Column('Manufacturer', 'manufacturer', str, str),
    Column('Price (inc VAT)', 'price', str, str),
    Column('Rating', 'rating', _encode_number, float),
    Column('ReviewCount', 'review_count', str, int),
    Column('Features', 'features', encode_features, decode_features),
    Column('IsEnergyEfficient', 'is_energy_efficient', _encode_bool, _decode_bool),
    Column('Guarantee', 'guarantee', str, str),
]

HEADER = [column.header for column in COLUMNS]


def encode_row(record: ProductRecord) -> List[str]:
    return [column.encode(getattr(record, column.attribute)) for column in COLUMNS]


def decode_row(row: dict) -> ProductRecord:
    values = {}
    for column in COLUMNS:
        raw = row.get(column.header)
        values[column.attribute] = column.decode(raw if raw is not None else "")
    return ProductRecord(**values)


def write_records_to(stream: TextIO, records: Iterable[ProductRecord]) -> int:
    """Write header plus one row per record; returns the row count"""
    writer = csv.writer(stream)
    writer.writerow(HEADER)
    count = 0
    for record in records:
        writer.writerow(encode_row(record))
        count += 1
    return count


def read_records_from(stream: TextIO) -> List[ProductRecord]:
    """
    Decode every data row; a header-only (or empty) table gives []

    Raises ValueError when the header lacks any of the expected columns.
    """
    reader = csv.DictReader(stream)
    if reader.fieldnames is None:
        return []

    missing = [header for header in HEADER if header not in reader.fieldnames]
    if missing:
        raise ValueError(f"CSV header is missing columns: {', '.join(missing)}")

    return [decode_row(row) for row in reader]


def write_records(records: Iterable[ProductRecord], path: PathLike) -> int:
    """
    Overwrite the table at path with records

    Missing directories or permission problems surface as OSError.
    """
    with open(path, 'w', newline='', encoding='utf-8') as f:
        count = write_records_to(f, records)
    logger.info(f"Saved {count} records to {path}")
    return count


def read_records(path: PathLike) -> List[ProductRecord]:
    """Load every record from the table at path (FileNotFoundError if absent)"""
    with open(path, 'r', newline='', encoding='utf-8-sig') as f:
        records = read_records_from(f)
    logger.info(f"Loaded {len(records)} records from {path}")
    return records
