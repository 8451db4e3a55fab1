"""Records passed between the pipeline stages."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class TestCase:
    """A raw ``patrolTest`` description and the file it was found in."""

    __test__ = False  # not a pytest class

    description: str
    source_file: str


@dataclass(frozen=True)
class Specification:
    description: str
    source_file: str


@dataclass(frozen=True)
class Requirement:
    tag: str
    description: str


# Tag -> specifications, in first-seen tag order.
SpecificationMap = Dict[str, List[Specification]]
