"""Row expansion: a record's nested fields as a labeled hierarchy.

Nothing here is stored between events. The hierarchy is rebuilt from the
record every time a row is expanded.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from .values import capitalize_label, format_scalar, is_nested, nested_items


@dataclass
class ExpansionLine:
    label: str
    value: str = ''
    children: List['ExpansionLine'] = field(default_factory=list)


@dataclass
class ExpansionSection:
    heading: str
    lines: List[ExpansionLine] = field(default_factory=list)


def partition_fields(record: Dict[str, Any]) -> Tuple[Dict[str, Any], Dict[str, Any]]:
    """Split a record into (scalar fields, nested fields), keeping key order."""
    scalars: Dict[str, Any] = {}
    nested: Dict[str, Any] = {}
    for key, value in record.items():
        if is_nested(value):
            nested[key] = value
        else:
            scalars[key] = value
    return scalars, nested


def build_lines(value: Any) -> List[ExpansionLine]:
    """Recursively turn a nested value into labeled lines.

    Assumes acyclic input (decoded JSON); recursion depth follows the data.
    """
    lines: List[ExpansionLine] = []
    for key, child in nested_items(value):
        label = capitalize_label(key)
        if is_nested(child):
            lines.append(ExpansionLine(label=label, children=build_lines(child)))
        else:
            lines.append(ExpansionLine(label=label, value=format_scalar(child)))
    return lines


def build_expansion(record: Dict[str, Any]) -> List[ExpansionSection]:
    _, nested = partition_fields(record)
    return [
        ExpansionSection(heading=capitalize_label(key), lines=build_lines(value))
        for key, value in nested.items()
    ]


def _markdown_lines(lines: List[ExpansionLine], depth: int = 0) -> List[str]:
    out: List[str] = []
    indent = '  ' * depth
    for line in lines:
        text = f"{indent}- **{line.label}:**"
        if line.value:
            text += f" {line.value}"
        out.append(text)
        out.extend(_markdown_lines(line.children, depth + 1))
    return out


def render_expansion_markdown(record: Dict[str, Any]) -> str:
    sections = build_expansion(record)
    blocks = []
    for section in sections:
        body = '\n'.join(_markdown_lines(section.lines))
        blocks.append(f"#### {section.heading}\n\n{body}" if body else f"#### {section.heading}")
    return '\n\n'.join(blocks)


def _text_lines(lines: List[ExpansionLine], depth: int) -> List[str]:
    out: List[str] = []
    for line in lines:
        out.append(f"{'  ' * depth}{line.label}: {line.value}".rstrip())
        out.extend(_text_lines(line.children, depth + 1))
    return out


def render_expansion_text(record: Dict[str, Any]) -> str:
    """Plain-text form, e.g. for logs: headings flush left, lines indented beneath."""
    out: List[str] = []
    for section in build_expansion(record):
        out.append(section.heading)
        out.extend(_text_lines(section.lines, 1))
    return '\n'.join(out)
