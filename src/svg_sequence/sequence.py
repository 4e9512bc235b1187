from __future__ import annotations

import dataclasses

from .layout import layout_sequence
from .registry import ActorRegistry
from .renderer import render_sequence_svg
from .sections import SectionTracker
from .steps import StepSequencer
from .types import PositionedSequence, Section, SequenceOptions, Step, StepRequest

# ============================================================================
# Sequence -- the model callers build before finalization
# ============================================================================


class Sequence:
    """A sequence diagram under construction.

    Register actors, add steps, and wrap runs of steps in sections, then call
    finalize() for the geometry or generate() for the SVG document. Nothing is
    validated until finalization.

    Example:
        seq = Sequence()
        seq.register_actors("Bob", "Maria")
        seq.add_step("Bob", "Maria", "Hi!")
        seq.open_section("response")
        seq.add_step("Maria", "Bob", "Fine!")
        seq.close_section()
        svg = seq.generate()
    """

    def __init__(self, options: SequenceOptions | None = None) -> None:
        # Copied so mutations through one Sequence never reach another
        self.options = dataclasses.replace(options) if options is not None else SequenceOptions()
        self._actors = ActorRegistry()
        self._steps = StepSequencer(self.options)
        self._sections = SectionTracker()

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    @property
    def actors(self) -> list[str]:
        return self._actors.ids

    @property
    def steps(self) -> list[Step]:
        return self._steps.steps

    @property
    def sections(self) -> list[Section]:
        return self._sections.sections

    # ------------------------------------------------------------------
    # Display options
    # ------------------------------------------------------------------

    def set_canvas_width(self, width: str) -> None:
        """Set the SVG width attribute. Any CSS size works, e.g. "600px" or "100%"."""
        self.options.width = width

    def set_canvas_height(self, height: str) -> None:
        """Set the SVG height attribute. Any CSS size works, e.g. "600px" or "100%"."""
        self.options.height = height

    def set_actor_distance(self, distance: int) -> None:
        self.options.distance = distance

    def set_step_height(self, height: int) -> None:
        self.options.step_height = height

    def set_section_label_orientation(self, vertical: bool) -> None:
        self.options.vertical_section_text = vertical

    # ------------------------------------------------------------------
    # Model construction
    # ------------------------------------------------------------------

    def register_actors(self, *actor_ids: str) -> None:
        """Register actors in this order, moving already-known ones to the front."""
        self._actors.set_order(actor_ids)

    def add_step(
        self,
        source: str,
        target: str,
        description: str = "",
        color: str = "",
    ) -> None:
        """Append a step. source may equal target for a self call."""
        request = StepRequest(
            source=source,
            target=target,
            description=description,
            color=color or self.options.default_color,
        )
        section = self._sections.attach(len(self._steps))
        self._steps.add(request, section)
        self._actors.ensure(source)
        self._actors.ensure(target)

    def open_section(self, name: str, color: str = "") -> None:
        """Open a section; every step until the matching close belongs to it.

        An empty name is ignored.
        """
        self._sections.open(name, color or self.options.default_color)

    def close_section(self) -> None:
        self._sections.close(self._steps.last_index)

    def close_all_sections(self) -> None:
        """Close every open section.

        Use only when open/close calls can't be kept balanced.
        """
        self._sections.close_all(self._steps.last_index)

    # ------------------------------------------------------------------
    # Finalization
    # ------------------------------------------------------------------

    def finalize(self) -> PositionedSequence:
        """Compute all geometry. Raises a SequenceError if the model is invalid."""
        return layout_sequence(
            self._actors.ids,
            self._steps,
            self._sections,
            self.options,
        )

    def generate(self) -> str:
        return render_sequence_svg(self.finalize())
