"""Countries and states available for shipping"""

from ..models.customer import Country, StateProvince

COUNTRIES: list[Country] = [
    Country(id=1, name="United States", two_letter_iso_code="US", display_order=1),
    Country(id=2, name="Canada", two_letter_iso_code="CA", display_order=2),
    Country(id=3, name="Germany", two_letter_iso_code="DE", display_order=3),
    Country(id=4, name="Antarctica", two_letter_iso_code="AQ", allows_shipping=False, display_order=99),
]

STATES: list[StateProvince] = [
    StateProvince(id=5, country_id=1, name="California", abbreviation="CA"),
    StateProvince(id=33, country_id=1, name="New York", abbreviation="NY"),
    StateProvince(id=44, country_id=1, name="Texas", abbreviation="TX"),
    StateProvince(id=60, country_id=2, name="Ontario", abbreviation="ON"),
    StateProvince(id=61, country_id=2, name="Quebec", abbreviation="QC"),
]


class ShippingDatabase:
    """In-memory country and state catalog"""

    def __init__(self):
        self.countries = list(COUNTRIES)
        self.states = list(STATES)

    def countries_for_shipping(self) -> list[Country]:
        """Countries that allow shipping, in display order"""
        return sorted(
            (c for c in self.countries if c.allows_shipping),
            key=lambda c: c.display_order,
        )

    def states_for(self, country_id: int) -> list[StateProvince]:
        """States of a country, in display order"""
        return sorted(
            (s for s in self.states if s.country_id == country_id),
            key=lambda s: (s.display_order, s.name),
        )


# Singleton instance
shipping_db = ShippingDatabase()
