"""
Basic Usage Example
Scrape the current listings, save them, then summarize the history
"""

import json
from heatpump_monitor import HeatPumpMonitor, MonitorConfig


def main():
    config = MonitorConfig.from_env()

    with HeatPumpMonitor(config=config) as monitor:
        # Fetch and persist the current listings
        result = monitor.scrape_and_save()
        print(f"\n✅ Extracted {result.count} heat pumps")

        for i, product in enumerate(result.products[:3], 1):
            print(f"\nProduct {i}:")
            print(f"  Model: {product.model} ({product.product_code})")
            print(f"  Price: £{product.price or 'n/a'}")
            print(f"  Rating: {product.rating:.0f}/5 from {product.review_count} reviews")
            print(f"  Guarantee: {product.guarantee}")

        # Summarize everything in the table
        summary = monitor.summarize(top_feature_limit=5)
        print("\n📊 Summary:")
        print(json.dumps(summary.to_dict(), indent=2))


if __name__ == '__main__':
    main()
