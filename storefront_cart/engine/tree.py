"""Cart item tree construction"""

import logging
from dataclasses import dataclass, field
from typing import Iterator, Sequence

from ..models.cart import CartLineItem

logger = logging.getLogger(__name__)


@dataclass
class ResolvedCartItem:
    """A cart line item together with its bundle child items"""
    item: CartLineItem
    children: list["ResolvedCartItem"] = field(default_factory=list)

    @property
    def id(self) -> int:
        return self.item.id

    @property
    def is_bundle_item(self) -> bool:
        return self.item.bundle_item is not None

    def walk(self) -> Iterator["ResolvedCartItem"]:
        """This node followed by all descendants, depth first"""
        yield self
        for child in self.children:
            yield from child.walk()


class CartItemTreeBuilder:
    """
    Builds cart item trees from flat line item lists.

    A line item is never its own child, even if the source data lists it
    under itself (bundle parents commonly reference their own id). Items
    already placed in the tree are not placed again, which also stops
    parent cycles such as A -> B -> A.
    """

    def organize(self, items: Sequence[CartLineItem]) -> list[ResolvedCartItem]:
        """Build one tree per root item, keeping input order"""
        known_ids = {item.id for item in items}
        candidates_by_parent = self._group_by_parent(items)

        roots = [
            item for item in items
            if item.parent_item_id is None
            or item.parent_item_id == item.id
            or item.parent_item_id not in known_ids
        ]

        visited: set[int] = set()
        trees = [self._build_node(root, candidates_by_parent, visited) for root in roots]

        # Items whose parent chain only loops back on itself have no root
        for item in items:
            if item.id not in visited:
                logger.warning(
                    f"Cart item {item.id} is only reachable through a parent cycle, "
                    f"treating it as a root item"
                )
                trees.append(self._build_node(item, candidates_by_parent, visited))

        return trees

    def build(
        self,
        root: CartLineItem,
        candidates: Sequence[CartLineItem],
    ) -> ResolvedCartItem:
        """Build the tree below a single root from its candidate child items"""
        return self._build_node(root, self._group_by_parent(candidates), set())

    def _build_node(
        self,
        item: CartLineItem,
        candidates_by_parent: dict[int, list[CartLineItem]],
        visited: set[int],
    ) -> ResolvedCartItem:
        visited.add(item.id)
        children = []

        for candidate in candidates_by_parent.get(item.id, []):
            if candidate.id == item.id:
                continue
            if candidate.id in visited:
                logger.warning(
                    f"Skipping cart item {candidate.id} below {item.id}: already part of the tree"
                )
                continue
            children.append(self._build_node(candidate, candidates_by_parent, visited))

        return ResolvedCartItem(item=item, children=children)

    @staticmethod
    def _group_by_parent(items: Sequence[CartLineItem]) -> dict[int, list[CartLineItem]]:
        grouped: dict[int, list[CartLineItem]] = {}
        for item in items:
            if item.parent_item_id is not None:
                grouped.setdefault(item.parent_item_id, []).append(item)
        return grouped
