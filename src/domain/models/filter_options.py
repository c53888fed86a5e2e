"""Rows displayed by the hierarchical category exclusion list."""

from dataclasses import dataclass
from typing import Literal


FilterOptionKind = Literal["HEADER", "VIRTUAL_HEADER", "ITEM"]


@dataclass(frozen=True)
class FilterOption:
    """One row of the category exclusion list.

    Attributes:
        key: Name stored in the exclusion list when the row is toggled.
            Virtual headers are never stored; their key is the group name.
        label: Display label.
        kind: ``HEADER`` for a group seen as a bare category,
            ``VIRTUAL_HEADER`` for a group seen only as a prefix,
            ``ITEM`` for a sub-category.
        group: Group the row belongs to.
        excluded: Effective exclusion state.
        locked: True when the state is inherited from the parent group and
            cannot be toggled directly.
        child_keys: Keys of the sub-category rows under a header.
    """

    key: str
    label: str
    kind: FilterOptionKind
    group: str
    excluded: bool = False
    locked: bool = False
    child_keys: tuple[str, ...] = ()

    @property
    def is_header(self) -> bool:
        return self.kind != "ITEM"


__all__ = ["FilterOption", "FilterOptionKind"]
