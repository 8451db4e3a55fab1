"""Locate ``patrolTest`` descriptions in test sources.

Extraction is plain pattern matching over the whole file: the call token, an
opening parenthesis, optional whitespace and a quoted literal.  The literal
runs greedily up to the last quote of the same kind on its line, so nested
quotes and multi-line descriptions are not supported.
"""
from __future__ import annotations

import logging
import re
from glob import glob, has_magic
from pathlib import Path
from typing import Iterable, Iterator, List, Pattern

from .errors import SpecMapIOError
from .models import TestCase

logger = logging.getLogger(__name__)

DEFAULT_CALL_TOKEN = "patrolTest"


def call_pattern(call_token: str = DEFAULT_CALL_TOKEN) -> Pattern[str]:
    """Return the compiled pattern matching ``<call_token>('description'``."""
    return re.compile(re.escape(call_token) + r"\(\s*(['\"])(?P<description>.+)\1")


def iter_test_cases(
    text: str, source_file: str, call_token: str = DEFAULT_CALL_TOKEN
) -> Iterator[TestCase]:
    """Yield a :class:`TestCase` per call found in ``text``, in textual order."""
    for match in call_pattern(call_token).finditer(text):
        yield TestCase(description=match.group("description"), source_file=source_file)


def read_source(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SpecMapIOError(path, f"cannot read test file ({exc})") from exc


def parse_test_files(
    paths: Iterable[str], call_token: str = DEFAULT_CALL_TOKEN
) -> List[TestCase]:
    """Extract test cases from every file, keeping the order files are given in.

    The first unreadable file raises :class:`SpecMapIOError`; nothing is
    returned for the files read before it.
    """
    test_cases: List[TestCase] = []
    for path in paths:
        found = list(iter_test_cases(read_source(path), path, call_token))
        logger.debug("Found %d %s call(s) in %s", len(found), call_token, path)
        test_cases.extend(found)
    return test_cases


def expand_test_paths(patterns: Iterable[str]) -> List[str]:
    """Expand glob patterns among ``patterns``.

    Matches of one pattern are sorted; a pattern matching nothing is kept as
    given so that reading it reports the missing file.
    """
    paths: List[str] = []
    for pattern in patterns:
        if not has_magic(pattern):
            paths.append(pattern)
            continue
        matches = sorted(p for p in glob(pattern, recursive=True) if Path(p).is_file())
        if not matches:
            logger.warning("Pattern %s matched no files", pattern)
            paths.append(pattern)
        paths.extend(matches)
    return paths
