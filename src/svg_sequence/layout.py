from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidStepError, ModelIncompleteError
from .sections import SectionTracker
from .steps import StepSequencer
from .styles import DASH_ARRAY_SIZE, MARGIN, SECTION_HEIGHT_OFFSET, STEP_ORIGIN_Y
from .types import (
    Lifeline,
    PositionedActor,
    PositionedSection,
    PositionedSequence,
    PositionedStep,
    Section,
    SequenceOptions,
)

# ============================================================================
# Sequence layout engine
#
# One pass over the accumulated model. Vertical positions were fixed when the
# steps were added, so this only has to:
#   1. Validate the model
#   2. Assign each actor a lane x, in registry order
#   3. Resolve step endpoints from the lanes
#   4. Grow each section's box around the steps it owns
#   5. Size the canvas
#
# The builder is only read, never written, so finalizing twice gives the
# same result.
# ============================================================================


@dataclass(slots=True)
class _SectionBox:
    """Running bounding box of a section. None means no step folded in yet."""
    section: Section
    height: float = SECTION_HEIGHT_OFFSET
    x: float | None = None
    x2: float | None = None
    y: float | None = None
    width: float = 0


def layout_sequence(
    actor_ids: list[str],
    sequencer: StepSequencer,
    tracker: SectionTracker,
    options: SequenceOptions,
) -> PositionedSequence:
    """Lay out a sequence.

    Raises ModelIncompleteError, InvalidStepError or UnclosedSectionError
    when the model can't be drawn.
    """
    steps = sequencer.steps
    if len(actor_ids) == 0:
        raise ModelIncompleteError("sequence has no actors")
    if len(steps) == 0:
        raise ModelIncompleteError("sequence has no steps")
    for step in steps:
        if not step.request.source or not step.request.target:
            raise InvalidStepError(step.index + 1)
    sections = tracker.completed()

    distance = options.distance
    half_distance = distance / 2
    base_height = sequencer.step_height

    # 1. Actor lanes
    lanes: dict[str, float] = {}
    actors: list[PositionedActor] = []
    for i, actor_id in enumerate(actor_ids):
        x = MARGIN + half_distance + i * distance
        lanes[actor_id] = x
        actors.append(PositionedActor(id=actor_id, x=x, y=STEP_ORIGIN_Y))

    # 2. Step endpoints, folding each step into its section's box
    boxes: dict[int, _SectionBox] = {id(s): _SectionBox(section=s) for s in sections}
    positioned_steps: list[PositionedStep] = []
    for step in steps:
        request = step.request
        x1 = lanes[request.source]
        x2 = lanes[request.target]
        height = sequencer.height_of(request)

        box = boxes.get(id(step.section)) if step.section is not None else None
        if box is not None:
            _fold_step(box, x1, x2, step.y, height, base_height, half_distance)

        positioned_steps.append(
            PositionedStep(
                source=request.source,
                target=request.target,
                description=request.description,
                color=request.color,
                x1=x1,
                x2=x2,
                y=step.y,
                height=height,
                is_self=request.is_self,
                section=step.section.name if box is not None else None,
            )
        )

    # 3. Section boxes, in the order the sections were opened. A section
    #    whose steps all went to an inner section has nothing to draw.
    positioned_sections: list[PositionedSection] = []
    for section in sections:
        box = boxes[id(section)]
        if box.x is None or box.x2 is None or box.y is None:
            continue
        positioned_sections.append(
            PositionedSection(
                name=section.name,
                color=section.color,
                x=box.x,
                x2=box.x2,
                y=box.y,
                width=box.width,
                height=box.height,
                first_step_index=section.first_step_index,  # type: ignore[arg-type]
                last_step_index=section.last_step_index,  # type: ignore[arg-type]
            )
        )

    # 4. Canvas
    total_width = MARGIN * 2 + distance * len(actor_ids)
    total_height = _total_height(sequencer)

    lifelines = [
        Lifeline(
            actor_id=a.id,
            x=a.x,
            top_y=STEP_ORIGIN_Y + DASH_ARRAY_SIZE,
            bottom_y=total_height,
        )
        for a in actors
    ]

    return PositionedSequence(
        width=total_width,
        height=total_height,
        canvas_width=options.width,
        canvas_height=options.height,
        vertical_section_text=options.vertical_section_text,
        actors=actors,
        lifelines=lifelines,
        sections=positioned_sections,
        steps=positioned_steps,
    )


def _fold_step(
    box: _SectionBox,
    x1: float,
    x2: float,
    y: float,
    height: float,
    base_height: float,
    half_distance: float,
) -> None:
    """Grow a section box so it covers one more step."""
    box.height += height

    min_y = max(0, y - height + base_height / 2)
    box.y = min_y if box.y is None else min(box.y, min_y)

    min_x = max(1.0, min(x1, x2) - half_distance)
    box.x = min_x if box.x is None else min(box.x, min_x)

    max_x = max(x1, x2) + half_distance
    box.x2 = max_x if box.x2 is None else max(box.x2, max_x)

    box.width = max(box.width, abs(box.x - box.x2))


def _total_height(sequencer: StepSequencer) -> int:
    height = STEP_ORIGIN_Y
    for step in sequencer.steps:
        height += sequencer.height_of(step.request)
    # extra bottom margin
    height += sequencer.step_height // 2
    # round up so the dashed lifelines end on a full dash
    remainder = height % DASH_ARRAY_SIZE
    if remainder:
        height += DASH_ARRAY_SIZE - remainder
    return height
