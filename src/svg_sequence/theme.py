from __future__ import annotations

# ============================================================================
# Static SVG assets -- embedded style sheet, marker library, root tag.
# ============================================================================

SVG_NAMESPACE = "http://www.w3.org/2000/svg"

DEFAULT_FONT = "system-ui, -apple-system, 'Segoe UI', Roboto, sans-serif"

DEFAULT_CSS = f"""
    text {{ font-family: {DEFAULT_FONT}; }}
    .seq-desc {{ paint-order: stroke; stroke: #FFFFFF; stroke-width: 3px; stroke-linejoin: round; }}
"""


def build_style_block(css: str = DEFAULT_CSS) -> str:
    """Wrap the style sheet in a <style> element."""
    return f"<style>{css}</style>"


def marker_defs() -> str:
    """Marker definitions referenced by step arrows.

    seq-dot marks where an arrow starts, seq-arrow where it ends. Both take
    the color of the line that uses them.
    """
    return (
        '  <marker id="seq-dot" viewBox="0 0 10 10" markerWidth="5" markerHeight="5" '
        'refX="5" refY="5">\n'
        '    <circle cx="5" cy="5" r="3" fill="context-fill" />\n'
        "  </marker>\n"
        '  <marker id="seq-arrow" viewBox="0 0 10 10" markerWidth="5" markerHeight="5" '
        'refX="5" refY="5" orient="auto-start-reverse">\n'
        '    <path d="M 0 0 L 10 5 L 0 10 z" fill="context-fill" />\n'
        "  </marker>"
    )


def svg_open_tag(
    canvas_width: str,
    canvas_height: str,
    view_width: int,
    view_height: int,
) -> str:
    """Build the SVG opening tag.

    canvas_width/canvas_height are CSS sizes for the element itself; the
    viewBox always matches the computed diagram size.
    """
    return (
        f'<svg xmlns="{SVG_NAMESPACE}" width="{canvas_width}" height="{canvas_height}" '
        f'viewBox="0 0 {view_width} {view_height}" preserveAspectRatio="xMinYMin meet">'
    )
