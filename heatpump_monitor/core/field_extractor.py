"""
Field Extractor - pulls single values out of one product card

Every function takes a product fragment (a BeautifulSoup Tag) and returns the
field value, or the field's default when the selector matches nothing or the
text is unusable. None of them raise for missing or malformed markup.
"""

import re
import logging
from typing import List, Tuple
from bs4 import Tag

from . import page_selectors as selectors

logger = logging.getLogger(__name__)

_FIRST_INTEGER = re.compile(r'\d+')


def extract_text(fragment: Tag, selector: str) -> str:
    """Trimmed text of the first node matching selector, or ''"""
    node = fragment.select_one(selector)
    if node is None:
        return ""
    return node.get_text().strip()


def strip_wrapping(text: str, pair: Tuple[str, str] = ('(', ')')) -> str:
    """Remove a single leading opener and a single trailing closer"""
    opener, closer = pair
    if text.startswith(opener):
        text = text[len(opener):]
    if text.endswith(closer):
        text = text[:-len(closer)]
    return text


def extract_model(fragment: Tag) -> str:
    return extract_text(fragment, selectors.MODEL)


def extract_product_code(fragment: Tag) -> str:
    """Product code is shown as "(ABC123)" on the card"""
    return strip_wrapping(extract_text(fragment, selectors.PRODUCT_CODE))


def extract_price(fragment: Tag) -> str:
    """
    Price text with currency, VAT suffix and thousands separators removed

    Kept as text: "£2,999.99 Inc Vat" -> "2999.99". Not parsed here.
    """
    price = extract_text(fragment, selectors.PRICE)
    for noise in selectors.PRICE_NOISE:
        price = price.replace(noise, "")
    return price.strip()


def extract_features(fragment: Tag) -> List[str]:
    """Feature bullet points in document order (duplicates kept, blanks dropped)"""
    features = []
    for item in fragment.select(selectors.FEATURE_ITEMS):
        text = item.get_text().strip()
        if text:
            features.append(text)
    return features


def extract_rating(fragment: Tag) -> float:
    """First integer in the rating indicator's title, e.g. "... 4 stars out of 5" -> 4.0"""
    node = fragment.select_one(selectors.RATING)
    if node is None:
        return 0.0

    title = node.get(selectors.RATING_ATTRIBUTE)
    if isinstance(title, list):
        title = " ".join(title)
    if not title:
        return 0.0

    match = _FIRST_INTEGER.search(title)
    return float(match.group()) if match else 0.0


def extract_review_count(fragment: Tag) -> int:
    """Review count is rendered as "(15)"; anything unparsable counts as 0"""
    text = extract_text(fragment, selectors.REVIEW_COUNT)
    if not text:
        return 0

    try:
        count = int(strip_wrapping(text))
    except ValueError:
        logger.debug(f"Unparsable review count: {text!r}")
        return 0
    return max(count, 0)


def is_energy_efficient(fragment: Tag) -> bool:
    """True when the energy marker node exists anywhere in the card"""
    return fragment.select_one(selectors.ENERGY_EFFICIENT_MARKER) is not None


def extract_guarantee(features: List[str]) -> str:
    """First feature mentioning a guarantee, else 'Not specified'"""
    for feature in features:
        if selectors.GUARANTEE_KEYWORD in feature:
            return feature
    return selectors.GUARANTEE_DEFAULT
