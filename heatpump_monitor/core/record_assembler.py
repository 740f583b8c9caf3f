"""
Record Assembler - turns a listing page into ProductRecords

One product card is the unit of failure: a card that blows up during
assembly is reported and skipped, the rest of the page still comes through.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional, Union
from bs4 import BeautifulSoup, Tag

from . import page_selectors as selectors
from .field_extractor import (
    extract_model,
    extract_product_code,
    extract_price,
    extract_features,
    extract_rating,
    extract_review_count,
    is_energy_efficient,
    extract_guarantee,
)
from .models import ProductRecord

logger = logging.getLogger(__name__)


@dataclass
class FragmentResult:
    """Either an assembled record or the error that stopped it"""
    index: int
    record: Optional[ProductRecord] = None
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def build_record(fragment: Tag, manufacturer: str = selectors.DEFAULT_MANUFACTURER) -> ProductRecord:
    """Build a record from one product card, field by field"""
    features = extract_features(fragment)
    return ProductRecord(
        model=extract_model(fragment),
        product_code=extract_product_code(fragment),
        manufacturer=manufacturer,
        price=extract_price(fragment),
        rating=extract_rating(fragment),
        review_count=extract_review_count(fragment),
        features=features,
        is_energy_efficient=is_energy_efficient(fragment),
        guarantee=extract_guarantee(features),
    )


def assemble_fragment(
    index: int,
    fragment: Tag,
    manufacturer: str = selectors.DEFAULT_MANUFACTURER
) -> FragmentResult:
    try:
        return FragmentResult(index=index, record=build_record(fragment, manufacturer))
    except Exception as e:
        logger.error(f"Error extracting product data from card {index}: {e}", exc_info=True)
        return FragmentResult(index=index, error=e)


def iter_fragment_results(
    page: Union[str, BeautifulSoup],
    manufacturer: str = selectors.DEFAULT_MANUFACTURER
) -> Iterator[FragmentResult]:
    """Yield one FragmentResult per product card, in document order"""
    soup = page if isinstance(page, BeautifulSoup) else BeautifulSoup(page, 'html.parser')

    fragments = soup.select(selectors.PRODUCT_CONTAINER)
    if not fragments:
        logger.warning("No product cards found on page")
        return

    logger.info(f"Found {len(fragments)} product cards")
    for index, fragment in enumerate(fragments):
        yield assemble_fragment(index, fragment, manufacturer)


def extract_products(
    page: Union[str, BeautifulSoup],
    manufacturer: str = selectors.DEFAULT_MANUFACTURER
) -> List[ProductRecord]:
    """
    Extract every product on a listing page

    Args:
        page: Raw HTML or an already parsed document
        manufacturer: Manufacturer stamped on every record

    Returns:
        Records in page order; empty if the page has no product cards
    """
    results = list(iter_fragment_results(page, manufacturer))
    products = [r.record for r in results if r.ok]

    skipped = len(results) - len(products)
    if skipped:
        logger.warning(f"Skipped {skipped} of {len(results)} product cards")

    return products
