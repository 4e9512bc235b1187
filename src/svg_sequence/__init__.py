"""svg-sequence -- Render sequence diagrams to SVG."""

from __future__ import annotations

from .types import (
    SequenceOptions,
    StepRequest,
    PositionedSequence,
    PositionedActor,
    Lifeline,
    PositionedSection,
    PositionedStep,
)
from .errors import (
    SequenceError,
    ModelIncompleteError,
    InvalidStepError,
    UnclosedSectionError,
    ConfigParseError,
    ConfigReadError,
)
from .sequence import Sequence
from .layout import layout_sequence
from .renderer import render_sequence_svg
from .parser import parse_config, parse_config_file, generate_from_cfg

__all__ = [
    "Sequence",
    "SequenceOptions",
    "StepRequest",
    "PositionedSequence",
    "PositionedActor",
    "Lifeline",
    "PositionedSection",
    "PositionedStep",
    "SequenceError",
    "ModelIncompleteError",
    "InvalidStepError",
    "UnclosedSectionError",
    "ConfigParseError",
    "ConfigReadError",
    "layout_sequence",
    "render_sequence_svg",
    "parse_config",
    "parse_config_file",
    "generate_from_cfg",
    "render_sequence_config",
]


def render_sequence_config(text: str) -> str:
    """Render .cfg text to an SVG string."""
    return parse_config(text).generate()
