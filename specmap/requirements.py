"""Read requirement rows from a markdown table.

Only rows shaped like ``| TAG | free text |`` are recognised; everything
else in the document (prose, headings, separator rows) is ignored.  The text
column accepts word characters and whitespace only.
"""
from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator, List

from .errors import SpecMapIOError
from .models import Requirement

logger = logging.getLogger(__name__)

ROW_RE = re.compile(r"\|\s*(?P<tag>[^\s|]+)\s*\|\s*(?P<description>[\w\s]+?)\s*\|")
HEADER_LABELS = ("tag", "description")


def iter_requirements(text: str) -> Iterator[Requirement]:
    """Yield requirements in document order, header rows excluded."""
    for line in text.splitlines():
        match = ROW_RE.search(line)
        if match is None:
            continue
        tag = match.group("tag").strip()
        description = match.group("description").strip()
        if tag.lower() in HEADER_LABELS or description.lower() in HEADER_LABELS:
            continue
        yield Requirement(tag=tag, description=description)


def parse_requirements_file(path: str) -> List[Requirement]:
    """Parse the requirement table at ``path``.

    An empty path disables reconciliation and returns no requirements.
    """
    if not path:
        return []
    try:
        text = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SpecMapIOError(path, f"cannot read requirements file ({exc})") from exc
    requirements = list(iter_requirements(text))
    logger.debug("Read %d requirement(s) from %s", len(requirements), path)
    return requirements
