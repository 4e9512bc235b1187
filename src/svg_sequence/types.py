from __future__ import annotations

from dataclasses import dataclass, field

from .styles import (
    DEFAULT_CANVAS_SIZE,
    DEFAULT_COLOR,
    DEFAULT_DISTANCE,
    DEFAULT_STEP_HEIGHT,
)

# ============================================================================
# Sequence options -- user-facing configuration
# ============================================================================


@dataclass(slots=True)
class SequenceOptions:
    # SVG width/height attributes; any CSS size (not the viewBox)
    width: str = DEFAULT_CANVAS_SIZE
    height: str = DEFAULT_CANVAS_SIZE
    # Horizontal distance between actor lanes
    distance: int = DEFAULT_DISTANCE
    # Base height of a single-line step
    step_height: int = DEFAULT_STEP_HEIGHT
    # Draw section labels rotated along the left edge of the box
    vertical_section_text: bool = False
    # Color for steps and sections that don't set one
    default_color: str = DEFAULT_COLOR


# ============================================================================
# Model under construction -- what callers build up step by step
# ============================================================================


@dataclass(frozen=True, slots=True)
class StepRequest:
    """One interaction as the caller described it. Never mutated."""
    source: str
    target: str
    description: str = ""
    color: str = DEFAULT_COLOR

    @property
    def lines(self) -> list[str]:
        return self.description.split("\n")

    @property
    def is_self(self) -> bool:
        return self.source == self.target


@dataclass(slots=True)
class Section:
    name: str
    color: str
    # Index of the first step added while the section was open
    first_step_index: int | None = None
    # Index of the last step when the section was closed
    last_step_index: int | None = None

    @property
    def is_open(self) -> bool:
        return self.last_step_index is None

    @property
    def has_steps(self) -> bool:
        return self.first_step_index is not None


@dataclass(slots=True)
class Step:
    request: StepRequest
    index: int
    # Vertical position of the step line
    y: float
    # Innermost section that was open when the step was added
    section: Section | None = None


# ============================================================================
# Positioned sequence -- produced by finalization, ready for SVG rendering
# ============================================================================


@dataclass(slots=True)
class PositionedActor:
    id: str
    # Lane center x
    x: float
    # Label baseline y
    y: float


@dataclass(slots=True)
class Lifeline:
    """Dashed vertical line under an actor label."""
    actor_id: str
    x: float
    top_y: float
    bottom_y: float


@dataclass(slots=True)
class PositionedSection:
    name: str
    color: str
    x: float
    x2: float
    y: float
    width: float
    height: float
    first_step_index: int
    last_step_index: int


@dataclass(slots=True)
class PositionedStep:
    source: str
    target: str
    description: str
    color: str
    # Source and target lane x
    x1: float
    x2: float
    y: float
    # Vertical space this step takes, including extra description lines
    height: float
    is_self: bool
    # Name of the section whose box this step contributes to
    section: str | None = None

    @property
    def lines(self) -> list[str]:
        return self.description.split("\n")


@dataclass(slots=True)
class PositionedSequence:
    # viewBox size
    width: int
    height: int
    # SVG width/height attributes
    canvas_width: str
    canvas_height: str
    vertical_section_text: bool = False
    actors: list[PositionedActor] = field(default_factory=list)
    lifelines: list[Lifeline] = field(default_factory=list)
    sections: list[PositionedSection] = field(default_factory=list)
    steps: list[PositionedStep] = field(default_factory=list)
