"""
Selectors for the Screwfix heat pump listing page

The markup (including the generated class names) belongs to the scraped site
and changes without notice. Keep every site-specific marker in this module.
"""

# One product card per match
PRODUCT_CONTAINER = 'div[class*="x1__pJ"]'

MODEL = 'h3 span'
PRODUCT_CODE = 'span[class*="I7_YA7"]'
PRICE = 'span[class*="_2_gOH8"]'
FEATURE_ITEMS = 'ul[class*="z_Eq10"] li'
REVIEW_COUNT = 'span[aria-hidden*="true"]'

# Rating lives in an attribute: title="Product rating 4 stars out of 5"
RATING = 'div[class*="vQBT0O"]'
RATING_ATTRIBUTE = 'title'

# Presence-only signal
ENERGY_EFFICIENT_MARKER = 'div[class*="BPu2wi"]'

PRICE_NOISE = ('£', 'Inc Vat', ',')
GUARANTEE_KEYWORD = 'Guarantee'
GUARANTEE_DEFAULT = 'Not specified'

# The listing is pre-filtered by brand, so the manufacturer is not in the markup
DEFAULT_MANUFACTURER = 'Samsung'
