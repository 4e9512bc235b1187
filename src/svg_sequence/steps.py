from __future__ import annotations

from .styles import STEP_ORIGIN_Y, extra_height
from .types import Section, SequenceOptions, Step, StepRequest

# ============================================================================
# Step sequencer
#
# Steps are append-only. Each one sits below the previous by the base step
# height plus the extra room its own description needs:
#
#   y[0] = STEP_ORIGIN_Y + h(step[0])
#   y[i] = y[i-1] + h(step[i])
#   h(s) = step_height + extra_height(s.description)
#
# The base step height is read from the options on every access. When it
# differs from the height the steps were laid out with, they are reflowed.
# ============================================================================


class StepSequencer:
    def __init__(self, options: SequenceOptions) -> None:
        self._options = options
        self._steps: list[Step] = []
        self._flowed_height = options.step_height

    def __len__(self) -> int:
        return len(self._steps)

    @property
    def steps(self) -> list[Step]:
        self._sync()
        return list(self._steps)

    @property
    def last_index(self) -> int:
        return len(self._steps) - 1

    @property
    def step_height(self) -> int:
        return self._options.step_height

    def height_of(self, request: StepRequest) -> int:
        return self.step_height + extra_height(request.description)

    def add(self, request: StepRequest, section: Section | None = None) -> Step:
        self._sync()
        previous_y = self._steps[-1].y if self._steps else STEP_ORIGIN_Y
        step = Step(
            request=request,
            index=len(self._steps),
            y=previous_y + self.height_of(request),
            section=section,
        )
        self._steps.append(step)
        return step

    def _sync(self) -> None:
        if self._flowed_height != self.step_height:
            self._reflow()

    def _reflow(self) -> None:
        y: float = STEP_ORIGIN_Y
        for step in self._steps:
            y += self.height_of(step.request)
            step.y = y
        self._flowed_height = self.step_height
