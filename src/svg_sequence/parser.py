from __future__ import annotations

import logging
from pathlib import Path

from .errors import ConfigParseError, ConfigReadError
from .sequence import Sequence
from .styles import DEFAULT_DISTANCE, DEFAULT_STEP_HEIGHT

logger = logging.getLogger(__name__)

# ============================================================================
# .cfg parser
#
# Line-oriented front-end that drives the Sequence builder.
#
# Supported syntax:
#   # comment
#   distance_between_actors = 200
#   width = 800px
#   height = 100%
#   step_height = 60
#   vertical_section_text = true
#   @actors Bob, Maria
#   @start Section name, #ff0000
#   @step Bob, Maria, Hello\nthere, #00aa00
#   @end
# ============================================================================

_TRUE_VALUES = {"1", "true", "yes", "on"}


def parse_config(text: str) -> Sequence:
    """Parse .cfg text into a Sequence ready to be finalized."""
    seq = Sequence()

    # Only \n ends a line. str.splitlines() would also break on form feeds
    # and Unicode separators that may appear inside a description.
    for line_num, raw in enumerate(text.split("\n"), start=1):
        line = raw.removesuffix("\r").strip()

        # --- Blank lines and comments ---
        if not line or line.startswith("#"):
            continue

        # --- Directives ---
        if line.startswith("@"):
            _apply_directive(seq, line, line_num)
            continue

        # --- key = value options ---
        key, sep, value = line.partition("=")
        if sep:
            _apply_option(seq, key.strip(), value.strip())

    return seq


def parse_config_file(path: str | Path) -> Sequence:
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConfigReadError(str(path), str(exc)) from exc
    logger.debug("Parsing %s", path)
    return parse_config(text)


def generate_from_cfg(path: str | Path) -> str:
    """Read a .cfg file and return the rendered SVG document."""
    return parse_config_file(path).generate()


def _apply_option(seq: Sequence, key: str, value: str) -> None:
    if key == "distance_between_actors":
        seq.set_actor_distance(_parse_int(value, DEFAULT_DISTANCE))
    elif key == "width":
        seq.set_canvas_width(value)
    elif key == "height":
        seq.set_canvas_height(value)
    elif key == "step_height":
        seq.set_step_height(_parse_int(value, DEFAULT_STEP_HEIGHT))
    elif key == "vertical_section_text":
        seq.set_section_label_orientation(value.lower() in _TRUE_VALUES)
    else:
        logger.debug("Ignoring unknown option %r", key)


def _apply_directive(seq: Sequence, line: str, line_num: int) -> None:
    directive = line.split()[0]
    values = _parse_values(line[len(directive):])

    if directive == "@actors":
        seq.register_actors(*values)

    elif directive == "@start":
        if len(values) == 0:
            raise ConfigParseError("section needs a name", line_num, directive)
        name = values[0]
        color = values[1] if len(values) > 1 else ""
        seq.open_section(name, color)

    elif directive == "@end":
        seq.close_section()

    elif directive == "@step":
        if len(values) < 2:
            raise ConfigParseError("not enough values for step", line_num, directive)
        source, target = values[0], values[1]
        description = values[2] if len(values) > 2 else ""
        color = values[3] if len(values) > 3 else ""
        seq.add_step(source, target, description, color)

    else:
        raise ConfigParseError(f'unknown property: "{directive}"', line_num, directive)


def _parse_values(rest: str) -> list[str]:
    """Split comma separated directive values, dropping empty ones.

    A literal backslash-n in a value becomes a line break.
    """
    values: list[str] = []
    for part in rest.split(","):
        value = part.strip().replace("\\n", "\n")
        if value:
            values.append(value)
    return values


def _parse_int(value: str, default: int) -> int:
    try:
        return int(value)
    except ValueError:
        return default
