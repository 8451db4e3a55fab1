"""Group specifications by tag."""
from __future__ import annotations

from typing import Iterable, List, Tuple

from .models import Specification, SpecificationMap, TestCase
from .tags import to_specification


def create_specification_map(
    test_cases: Iterable[TestCase],
) -> Tuple[SpecificationMap, List[Specification]]:
    """Fold test cases into a tag map and an untagged list.

    Tags keep the order they were first seen in and each bucket keeps the
    order its specifications were encountered in.
    """
    spec_map: SpecificationMap = {}
    untagged: List[Specification] = []
    for test_case in test_cases:
        tags, spec = to_specification(test_case)
        for tag in tags:
            spec_map.setdefault(tag, []).append(spec)
        if not tags:
            untagged.append(spec)
    return spec_map, untagged
