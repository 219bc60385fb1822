"""Product and delivery time lookups"""

from datetime import date, timedelta
from typing import Optional

from ..database.delivery_times import DeliveryTimeDatabase
from ..database.products import ProductDatabase
from ..models.product import DeliveryTime, Product


class CatalogService:
    def __init__(self, products: ProductDatabase, delivery_times: DeliveryTimeDatabase):
        self.products = products
        self.delivery_times = delivery_times

    def get_product(self, product_id: int) -> Optional[Product]:
        return self.products.get_product(product_id)

    def get_delivery_time(self, delivery_time_id: Optional[int]) -> Optional[DeliveryTime]:
        return self.delivery_times.get_delivery_time(delivery_time_id)

    def formatted_delivery_date(
        self, delivery_time: DeliveryTime, today: Optional[date] = None
    ) -> Optional[str]:
        """
        Expected delivery date, e.g. "Oct 21" or "Oct 21 - Oct 24".

        Days count from today. Delivery times without a day range have no date.
        """
        if delivery_time.min_days is None and delivery_time.max_days is None:
            return None

        today = today or date.today()
        min_days = delivery_time.min_days if delivery_time.min_days is not None else delivery_time.max_days
        max_days = delivery_time.max_days if delivery_time.max_days is not None else min_days

        earliest = today + timedelta(days=min_days)
        latest = today + timedelta(days=max(min_days, max_days))
        if earliest == latest:
            return _format_day(earliest)
        return f"{_format_day(earliest)} - {_format_day(latest)}"


def _format_day(day: date) -> str:
    return f"{day:%b} {day.day}"
