"""Delivery times products can be assigned to"""

from typing import Optional

from ..models.product import DeliveryTime

DELIVERY_TIMES: list[DeliveryTime] = [
    DeliveryTime(id=1, name="Ready to ship", color_hex_value="#008000", min_days=1, max_days=1, display_order=1),
    DeliveryTime(id=2, name="2-5 working days", color_hex_value="#FFFF00", min_days=2, max_days=5, display_order=2),
    DeliveryTime(id=3, name="7 working days", color_hex_value="#FF9900", min_days=7, max_days=7, display_order=3),
    DeliveryTime(id=4, name="On request", color_hex_value="#FF0000", display_order=4),
]


class DeliveryTimeDatabase:
    """In-memory delivery time storage"""

    def __init__(self):
        self.delivery_times = {d.id: d for d in DELIVERY_TIMES}

    def get_delivery_time(self, delivery_time_id: Optional[int]) -> Optional[DeliveryTime]:
        if not delivery_time_id:
            return None
        return self.delivery_times.get(delivery_time_id)


# Singleton instance
delivery_time_db = DeliveryTimeDatabase()
