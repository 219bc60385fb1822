"""
Attribute selection codec

An attribute selection maps attribute ids to one or more selected values.
It is stored as a single opaque string per customer (checkout attributes)
or per cart line item (product attributes).
"""

import json
import logging
import re
from datetime import date
from typing import Iterator, Optional, Union

logger = logging.getLogger(__name__)

AttributeScalar = Union[int, str, date]

INTEGER_TOKEN = re.compile(r"^[+-]?\d+$")


class AttributeSelection:
    """
    Ordered multimap of attribute id to selected values.

    Values are stringified when added, so a decoded selection compares
    equal to the one that was encoded. Callers recover the value kind from
    the attribute definition they match against.
    """

    def __init__(self):
        self._map: dict[int, list[str]] = {}

    def add_value(self, attribute_id: int, value: AttributeScalar) -> None:
        """Append a value to the attribute's value list"""
        self._map.setdefault(int(attribute_id), []).append(_stringify(value))

    def values_for(self, attribute_id: int) -> list[str]:
        return list(self._map.get(attribute_id, []))

    def first_value(self, attribute_id: int) -> Optional[str]:
        values = self._map.get(attribute_id)
        return values[0] if values else None

    def value_ids(self, attribute_id: int) -> list[int]:
        """Values of the attribute that are list value ids"""
        ids = []
        for value in self._map.get(attribute_id, []):
            if INTEGER_TOKEN.match(value):
                ids.append(int(value))
        return ids

    @property
    def attribute_ids(self) -> list[int]:
        return list(self._map)

    def items(self) -> Iterator[tuple[int, list[str]]]:
        for attribute_id, values in self._map.items():
            yield attribute_id, list(values)

    def to_dict(self) -> dict[int, list[str]]:
        return {attribute_id: list(values) for attribute_id, values in self._map.items()}

    def __contains__(self, attribute_id: int) -> bool:
        return attribute_id in self._map

    def __len__(self) -> int:
        return len(self._map)

    def __bool__(self) -> bool:
        return bool(self._map)

    def __eq__(self, other) -> bool:
        if not isinstance(other, AttributeSelection):
            return NotImplemented
        return list(self._map.items()) == list(other._map.items())

    def __repr__(self) -> str:
        return f"AttributeSelection({self._map!r})"


def _stringify(value: AttributeScalar) -> str:
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


def encode(selection: AttributeSelection) -> str:
    """Serialize a selection, an empty selection becomes an empty string"""
    if not selection:
        return ""
    return json.dumps(
        [{"id": attribute_id, "values": values} for attribute_id, values in selection.items()],
        separators=(",", ":"),
    )


def decode(blob: Optional[str]) -> AttributeSelection:
    """
    Parse a stored selection.

    Empty or missing input yields an empty selection. A malformed blob is
    logged and treated as empty.
    """
    selection = AttributeSelection()
    if not blob or not blob.strip():
        return selection

    try:
        entries = json.loads(blob)
        for entry in entries:
            attribute_id = int(entry["id"])
            for value in entry["values"]:
                selection.add_value(attribute_id, value)
    except (ValueError, TypeError, KeyError, RecursionError) as e:
        logger.warning(f"Ignoring malformed attribute selection: {e}")
        return AttributeSelection()

    return selection
