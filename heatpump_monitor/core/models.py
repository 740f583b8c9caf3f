"""
Value objects shared by the extractor, the CSV codec and the aggregator
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Dict, List, Any


@dataclass
class ProductRecord:
    """One heat pump listing as observed on the listing page"""
    model: str = ""
    product_code: str = ""
    manufacturer: str = ""
    price: str = ""  # Cleaned price text, e.g. "2999.99" (may be empty)
    rating: float = 0.0
    review_count: int = 0
    features: List[str] = field(default_factory=list)
    is_energy_efficient: bool = False
    guarantee: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return {
            'model': self.model,
            'productCode': self.product_code,
            'manufacturer': self.manufacturer,
            'price': self.price,
            'rating': self.rating,
            'reviewCount': self.review_count,
            'features': list(self.features),
            'isEnergyEfficient': self.is_energy_efficient,
            'guarantee': self.guarantee,
        }


@dataclass(frozen=True)
class SummaryStatistics:
    """
    Snapshot of the accumulated listing history

    Built fresh for every summary request and never persisted.
    """
    total_products: int = 0
    average_price: Decimal = Decimal(0)
    average_rating: float = 0.0
    total_reviews: int = 0
    energy_efficient_count: int = 0
    top_features: Dict[str, int] = field(default_factory=dict)
    manufacturer_count: Dict[str, int] = field(default_factory=dict)
    generated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready representation (decimal rendered as a float)"""
        return {
            'totalProducts': self.total_products,
            'averagePrice': float(self.average_price),
            'averageRating': self.average_rating,
            'totalReviews': self.total_reviews,
            'energyEfficientCount': self.energy_efficient_count,
            'topFeatures': dict(self.top_features),
            'manufacturerCount': dict(self.manufacturer_count),
            'generatedAt': self.generated_at.isoformat(),
        }


@dataclass
class ListingResult:
    """Outcome of a scrape-and-save run"""
    products: List[ProductRecord] = field(default_factory=list)
    success: bool = True

    @property
    def count(self) -> int:
        return len(self.products)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'success': self.success,
            'count': self.count,
            'products': [p.to_dict() for p in self.products],
        }
