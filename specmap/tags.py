"""Split a test description into its tag and specification body.

A tag is the run of non-whitespace characters before the first colon at the
very start of the description::

    "checkout: user can pay"  -> ("checkout",), "user can pay"
    "A: B: rest"              -> ("A",), "B: rest"
    "no tag here"             -> (), "no tag here"

Only the leading token is considered, so a description carries at most one
tag.  Callers still receive a tuple so the aggregator can file a
specification under every tag it reports.
"""
from __future__ import annotations

import re
from typing import Tuple

from .errors import SpecMapInternalError
from .models import Specification, TestCase

TAG_RE = re.compile(r"^(?P<tag>[^\s:]+):(?P<body>.*)$", re.DOTALL)


def split_tag(description: str) -> Tuple[Tuple[str, ...], str]:
    """Return ``(tags, body)`` for ``description``."""
    if not description:
        # the extractor only yields non-empty literals
        raise SpecMapInternalError(
            f"cannot split empty test description {description!r}"
        )
    match = TAG_RE.match(description)
    if match is None:
        return (), description.strip()
    return (match.group("tag"),), match.group("body").strip()


def to_specification(test_case: TestCase) -> Tuple[Tuple[str, ...], Specification]:
    tags, body = split_tag(test_case.description)
    return tags, Specification(description=body, source_file=test_case.source_file)
