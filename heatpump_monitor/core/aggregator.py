"""
Summary statistics over the listing history
"""

import re
import logging
from collections import Counter
from datetime import datetime, timezone
from decimal import Decimal
from typing import Dict, List, Optional, Sequence

from .models import ProductRecord, SummaryStatistics

logger = logging.getLogger(__name__)

DEFAULT_TOP_FEATURES = 5

_PRICE_NOISE = ('£', ',', 'Inc Vat')
_PLAIN_DECIMAL = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)$')


def parse_price(price: Optional[str]) -> Optional[Decimal]:
    """
    Parse stored price text into a Decimal

    Returns None for empty or non-numeric text so the caller can leave the
    record out of the average instead of counting it as zero.

    Examples:
        "£2999.99 Inc Vat" -> Decimal("2999.99")
        "£3,999.99"        -> Decimal("3999.99")
        "garbage"          -> None
    """
    if not price:
        return None

    cleaned = price
    for noise in _PRICE_NOISE:
        cleaned = cleaned.replace(noise, "")
    cleaned = cleaned.strip()
    if not cleaned:
        return None

    # Plain decimal notation only; Decimal() alone would also take "1e3", "1_000" and "NaN"
    if not _PLAIN_DECIMAL.match(cleaned):
        return None

    return Decimal(cleaned)


def average_price(records: Sequence[ProductRecord]) -> Decimal:
    prices = [p for p in (parse_price(r.price) for r in records) if p is not None]
    if not prices:
        return Decimal(0)

    skipped = len(records) - len(prices)
    if skipped:
        logger.debug(f"{skipped} records without a usable price left out of the average")

    return sum(prices, Decimal(0)) / len(prices)


def top_features(records: Sequence[ProductRecord], limit: int = DEFAULT_TOP_FEATURES) -> Dict[str, int]:
    """Most frequent features, ties kept in first-seen order"""
    counts = Counter(feature for r in records for feature in r.features)
    return dict(counts.most_common(limit))


def manufacturer_count(records: Sequence[ProductRecord]) -> Dict[str, int]:
    return dict(Counter(r.manufacturer for r in records))


def summarize_records(
    records: List[ProductRecord],
    top_feature_limit: int = DEFAULT_TOP_FEATURES
) -> SummaryStatistics:
    """
    Compute summary statistics for a list of records

    An empty list gives an all-zero summary, never an error.
    """
    generated_at = datetime.now(timezone.utc)

    if not records:
        return SummaryStatistics(generated_at=generated_at)

    return SummaryStatistics(
        total_products=len(records),
        average_price=average_price(records),
        average_rating=sum(r.rating for r in records) / len(records),
        total_reviews=sum(r.review_count for r in records),
        energy_efficient_count=sum(1 for r in records if r.is_energy_efficient),
        top_features=top_features(records, top_feature_limit),
        manufacturer_count=manufacturer_count(records),
        generated_at=generated_at,
    )
