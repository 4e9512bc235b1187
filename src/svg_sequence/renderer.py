from __future__ import annotations

from .styles import (
    ARROW_END_GAP,
    COLORS,
    DASH_ARRAY_SIZE,
    DESCRIPTION_OFFSET,
    DESCRIPTION_OFFSET_FACTOR,
    FONT_SIZES,
    SECTION_FILL_OPACITY,
    SELF_CALL_RADIUS,
    STROKE_WIDTHS,
)
from .theme import build_style_block, marker_defs, svg_open_tag
from .types import Lifeline, PositionedActor, PositionedSection, PositionedSequence, PositionedStep

# ============================================================================
# Sequence SVG renderer
#
# Renders a positioned sequence to an SVG string. Only reads the geometry.
#
# Render order (back to front):
#   1. Background
#   2. Actor lifelines and labels
#   3. Section boxes and labels
#   4. Steps (self-call dots or arrows) with their descriptions
# ============================================================================


def render_sequence_svg(diagram: PositionedSequence) -> str:
    """Render a positioned sequence as an SVG document string."""
    parts: list[str] = []

    parts.append(
        svg_open_tag(
            _escape_xml(diagram.canvas_width),
            _escape_xml(diagram.canvas_height),
            diagram.width,
            diagram.height,
        )
    )
    parts.append("<defs>")
    parts.append(build_style_block())
    parts.append(marker_defs())
    parts.append("</defs>")

    # 1. Background
    parts.append(
        f'<rect x="0" y="0" width="{diagram.width}" height="{diagram.height}" '
        f'fill="{COLORS["background"]}" />'
    )

    # 2. Actors
    for actor, lifeline in zip(diagram.actors, diagram.lifelines):
        parts.append(_render_lifeline(lifeline))
        parts.append(_render_actor(actor))

    # 3. Sections
    for section in diagram.sections:
        parts.append(_render_section(section, diagram.vertical_section_text))

    # 4. Steps
    for step in diagram.steps:
        parts.append(_render_step(step))

    parts.append("</svg>")
    return "\n".join(parts) + "\n"


# ============================================================================
# Component renderers
# ============================================================================


def _render_lifeline(lifeline: Lifeline) -> str:
    x = _num(lifeline.x)
    return (
        f'<line x1="{x}" y1="{_num(lifeline.top_y)}" x2="{x}" y2="{_num(lifeline.bottom_y)}" '
        f'stroke="{COLORS["lifeline"]}" stroke-dasharray="{DASH_ARRAY_SIZE} {DASH_ARRAY_SIZE}" '
        f'stroke-width="{STROKE_WIDTHS["lifeline"]}" />'
    )


def _render_actor(actor: PositionedActor) -> str:
    return (
        f'<text x="{_num(actor.x)}" y="{_num(actor.y)}" font-size="{FONT_SIZES["actor_label"]}" '
        f'stroke="none" fill="{COLORS["actor_label"]}" text-anchor="middle">'
        f"{_escape_xml(actor.id)}</text>"
    )


def _render_section(section: PositionedSection, vertical_text: bool) -> str:
    """Render a section box and its label."""
    color = _escape_xml(section.color)
    name = _escape_xml(section.name)
    x, y, height = section.x, section.y, section.height

    if vertical_text:
        # Rotated label running up the left edge of the box
        label = (
            f'<text x="{_num(x)}" y="{_num(y - height // 2)}" '
            f'transform="rotate(180,{int(x - 4)},{int(y)})" fill="{color}" stroke="none" '
            f'font-size="{FONT_SIZES["section_label"]}" text-anchor="middle" writing-mode="tb">'
            f"{name}</text>"
        )
    else:
        # Shrink the box a little to leave room for the label above it
        height -= 4
        y += 2
        label = (
            f'<text x="{_num(x)}" y="{_num(y - 2)}" fill="{color}" stroke="none" '
            f'font-size="{FONT_SIZES["section_label"]}" text-anchor="start">'
            f"{name}</text>"
        )

    box = (
        f'<rect x="{_num(x)}" y="{_num(y)}" width="{_num(section.width)}" height="{_num(height)}" '
        f'fill="{color}" fill-opacity="{SECTION_FILL_OPACITY}" stroke="{color}" '
        f'stroke-width="{STROKE_WIDTHS["section"]}" />'
    )
    return f"{box}\n{label}"


def _render_step(step: PositionedStep) -> str:
    """Render a step mark (dot for self calls, arrow otherwise) and its description."""
    parts: list[str] = []
    color = _escape_xml(step.color)

    if step.is_self:
        parts.append(
            f'<circle cx="{_num(step.x1)}" cy="{_num(step.y)}" r="{SELF_CALL_RADIUS}" '
            f'fill="{color}" />'
        )
    else:
        end_x = step.x2 - ARROW_END_GAP if step.x1 < step.x2 else step.x2 + ARROW_END_GAP
        parts.append(
            f'<line x1="{_num(step.x1)}" y1="{_num(step.y)}" x2="{_num(end_x)}" y2="{_num(step.y)}" '
            f'fill="{color}" stroke="{color}" stroke-width="{STROKE_WIDTHS["step"]}" '
            f'marker-start="url(#seq-dot)" marker-end="url(#seq-arrow)" />'
        )

    if step.description:
        # Last line sits just above the step, earlier lines stack upward
        mid_x = _num((step.x1 + step.x2) / 2)
        offset = DESCRIPTION_OFFSET
        for line in reversed(step.lines):
            parts.append(
                f'<text class="seq-desc" x="{mid_x}" y="{_num(step.y - offset)}" fill="{color}" '
                f'stroke="none" font-size="{FONT_SIZES["description"]}" text-anchor="middle">'
                f"{_escape_xml(line)}</text>"
            )
            offset += DESCRIPTION_OFFSET * DESCRIPTION_OFFSET_FACTOR

    return "\n".join(parts)


# ============================================================================
# Utilities
# ============================================================================


def _num(value: float) -> str:
    """Format a coordinate without a trailing .0 for whole numbers."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _escape_xml(text: str) -> str:
    """Escape special XML characters in text content."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )
