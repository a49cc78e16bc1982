"""
Data models for brand resolution.

This module contains the value types shared by the grouping and title matching
stages: brand groups, the read-only group index, per-brand match results and
the candidates collected while resolving one product title.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, FrozenSet, Iterator, Mapping, Optional, Set

BrandGraph = Dict[str, Set[str]]


@dataclass(frozen=True)
class BrandGroup:
    """A connected set of brand names sharing one canonical label."""
    canonical_brand: str
    all_brands: FrozenSet[str]


@dataclass(frozen=True)
class GroupIndex:
    """Read-only mapping from every known brand to its group."""
    groups: Mapping[str, BrandGroup] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "groups", MappingProxyType(dict(self.groups)))

    def __contains__(self, brand: object) -> bool:
        return brand in self.groups

    def __iter__(self) -> Iterator[str]:
        return iter(self.groups)

    def __len__(self) -> int:
        return len(self.groups)

    def get(self, brand: str) -> Optional[BrandGroup]:
        return self.groups.get(brand)

    def brands(self) -> list[str]:
        return list(self.groups)

    def group_count(self) -> int:
        return len({group.canonical_brand for group in self.groups.values()})


@dataclass(frozen=True)
class BrandMatch:
    """Result of matching one brand against one title."""
    is_valid: bool
    match_index: Optional[int] = None

    @classmethod
    def invalid(cls) -> "BrandMatch":
        return cls(is_valid=False)


@dataclass(frozen=True)
class MatchCandidate:
    brand: str
    match_index: int
    is_beginning: bool

    def sort_key(self) -> tuple[bool, int, str]:
        # brand name only settles candidates tied on position
        return (not self.is_beginning, self.match_index, self.brand)


@dataclass(frozen=True)
class BrandResolution:
    """Winning brand for a title together with its group's canonical label."""
    matched_brand: str
    canonical_brand: str
    match_index: int
