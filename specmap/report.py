"""Reconcile the specification map with requirements and render it.

Sections are ordered as follows:

  1. every requirement, in the order it appears in the requirement table,
     with its specifications or an explicit placeholder;
  2. tags with specifications but no requirement ("orphans"), in the order
     the tags were first seen;
  3. the untagged specifications, when there are any.

The console and markdown renderers share this ordering through
:func:`build_sections`.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Sequence

from .errors import SpecMapIOError
from .models import Requirement, Specification, SpecificationMap

MARKDOWN_TITLE = "# Specifications Map (generated)"
NO_SPECIFICATIONS = "(no specifications found)"
NO_REQUIREMENT = "(no requirement description available)"
UNTAGGED_TITLE = "(untagged specifications)"

REQUIREMENT = "requirement"
ORPHAN = "orphan"
UNTAGGED = "untagged"


@dataclass
class Section:
    kind: str
    tag: str = ""
    requirement: str = ""
    specifications: List[Specification] = field(default_factory=list)

    def console_title(self) -> str:
        if self.kind == REQUIREMENT:
            return f"{self.tag}: {self.requirement}"
        if self.kind == ORPHAN:
            return f"{self.tag}: {NO_REQUIREMENT}"
        return UNTAGGED_TITLE

    def markdown_title(self) -> str:
        if self.kind == REQUIREMENT:
            return f"- **{self.tag}: {self.requirement}**"
        if self.kind == ORPHAN:
            return f"- **{self.tag}:** {NO_REQUIREMENT}"
        return f"- **{UNTAGGED_TITLE}**"


def build_sections(
    spec_map: SpecificationMap,
    untagged: Sequence[Specification],
    requirements: Sequence[Requirement],
) -> List[Section]:
    sections: List[Section] = []
    required_tags = set()
    for requirement in requirements:
        required_tags.add(requirement.tag)
        sections.append(
            Section(
                kind=REQUIREMENT,
                tag=requirement.tag,
                requirement=requirement.description,
                specifications=list(spec_map.get(requirement.tag, [])),
            )
        )
    for tag, specs in spec_map.items():
        if tag in required_tags:
            continue
        sections.append(Section(kind=ORPHAN, tag=tag, specifications=list(specs)))
    if untagged:
        sections.append(Section(kind=UNTAGGED, specifications=list(untagged)))
    return sections


def render_console(
    spec_map: SpecificationMap,
    untagged: Sequence[Specification],
    requirements: Sequence[Requirement],
) -> str:
    """Render the report as plain text, one blank line after each section."""
    lines: List[str] = []
    for section in build_sections(spec_map, untagged, requirements):
        lines.append(section.console_title())
        if not section.specifications:
            lines.append(f"  {NO_SPECIFICATIONS}")
        for spec in section.specifications:
            lines.append(f"  - {spec.description} ({spec.source_file})")
        lines.append("")
    return "".join(line + "\n" for line in lines)


def render_markdown(
    spec_map: SpecificationMap,
    untagged: Sequence[Specification],
    requirements: Sequence[Requirement],
) -> str:
    """Render the report as a nested markdown list."""
    lines: List[str] = [MARKDOWN_TITLE, ""]
    for section in build_sections(spec_map, untagged, requirements):
        lines.append(section.markdown_title())
        if not section.specifications:
            lines.append(f"    {NO_SPECIFICATIONS}")
        for spec in section.specifications:
            lines.append(f"    - {spec.description} *({spec.source_file})*")
    return "".join(line + "\n" for line in lines)


def store_markdown(destination: str | Path, content: str) -> Path:
    """Write ``content`` to ``destination``, replacing any existing file."""
    path = Path(destination)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(content)
    except OSError as exc:
        raise SpecMapIOError(str(path), f"cannot write specification map ({exc})") from exc
    return path
