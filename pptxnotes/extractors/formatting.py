"""
Flattening of DrawingML runs and paragraphs into inline HTML-like markup.

Run flags nest in a fixed order, outermost first: bold, italic, underline,
strikethrough. The order the attributes appear in ``a:rPr`` has no effect.
"""

import re

from pptxnotes.extractors.data_types import Paragraph, Run
from pptxnotes.extractors.xml_tree import ElementNode

A_R = "a:r"
A_T = "a:t"
A_RPR = "a:rPr"
A_PPR = "a:pPr"

# Attribute values meaning "off" for underline and strike
UNDERLINE_NONE = "none"
STRIKE_NONE = "noStrike"

TAB_MARKER = "&#9;"
BULLET_MARKER = "&#x2022;"

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_int_attribute(value: str | None) -> int | None:
    """Parse the leading integer of an attribute value, e.g. ``"2"`` or ``"1 "``."""
    if value is None:
        return None
    match = _LEADING_INT.match(value)
    return int(match.group(1)) if match else None


def is_bold_set(value: str | None) -> bool:
    return bool(parse_int_attribute(value))


def is_italic_set(value: str | None) -> bool:
    return bool(parse_int_attribute(value))


def is_underline_set(value: str | None) -> bool:
    return bool(value) and value != UNDERLINE_NONE


def is_strikethrough_set(value: str | None) -> bool:
    return bool(value) and value != STRIKE_NONE


def read_run(element: ElementNode) -> Run:
    """Build a :class:`Run` from an ``a:r`` element."""
    text_elem = element.find_descendant(A_T)
    text = text_elem.text_content() if text_elem is not None else None

    formatting = element.find_descendant(A_RPR)
    if formatting is None:
        return Run(text=text)

    return Run(
        text=text,
        bold=is_bold_set(formatting.get_attribute("b")),
        italic=is_italic_set(formatting.get_attribute("i")),
        underline=is_underline_set(formatting.get_attribute("u")),
        strikethrough=is_strikethrough_set(formatting.get_attribute("strike")),
    )


def read_paragraph(element: ElementNode) -> Paragraph:
    """Build a :class:`Paragraph` from an ``a:p`` element."""
    indent_level = 0
    properties = element.find_descendant(A_PPR)
    if properties is not None:
        level = parse_int_attribute(properties.get_attribute("lvl")) or 0
        indent_level = max(level, 0)

    runs = tuple(read_run(run) for run in element.iter_descendants(A_R))
    return Paragraph(runs=runs, indent_level=indent_level)


def format_run(run: Run) -> str:
    """
    Wrap the run text in ``<b>``, ``<i>``, ``<u>`` and ``<s>`` as flagged.

    An absent text payload renders as the empty string; the tags are still
    emitted.
    """
    opening: list[str] = []
    closing: list[str] = []
    for tag, is_set in (
        ("b", run.bold),
        ("i", run.italic),
        ("u", run.underline),
        ("s", run.strikethrough),
    ):
        if is_set:
            opening.append(f"<{tag}>")
            closing.insert(0, f"</{tag}>")
    return "".join(opening) + (run.text or "") + "".join(closing)


def indent_prefix(indent_level: int) -> str:
    if indent_level <= 0:
        return ""
    return TAB_MARKER * indent_level + BULLET_MARKER


def format_paragraph(paragraph: Paragraph) -> str:
    parts = ["<p>", indent_prefix(paragraph.indent_level)]
    for run in paragraph.runs:
        parts.append(" ")
        parts.append(format_run(run))
    parts.append("</p>")
    return "".join(parts)
