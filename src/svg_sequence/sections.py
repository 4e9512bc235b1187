from __future__ import annotations

from .errors import UnclosedSectionError
from .types import Section

# ============================================================================
# Section tracker
#
# Sections open and close LIFO around runs of steps. They are kept in an
# insertion-ordered list so the innermost open section is always the last
# open one in the list.
# ============================================================================


class SectionTracker:
    def __init__(self) -> None:
        self._sections: list[Section] = []

    @property
    def sections(self) -> list[Section]:
        return list(self._sections)

    @property
    def open_sections(self) -> list[Section]:
        return [s for s in self._sections if s.is_open]

    def open(self, name: str, color: str) -> Section | None:
        if not name:
            return None
        section = Section(name=name, color=color)
        self._sections.append(section)
        return section

    def attach(self, step_index: int) -> Section | None:
        """Record a new step against the open sections.

        Every open section still waiting for its first step takes this one.
        Returns the innermost open section, which owns the step's geometry.
        """
        innermost: Section | None = None
        for section in self._sections:
            if not section.is_open:
                continue
            if section.first_step_index is None:
                section.first_step_index = step_index
            innermost = section
        return innermost

    def close(self, last_step_index: int) -> None:
        """Close the most recently opened section that has steps and is still open.

        Open sections without steps are skipped and stay open; if they never
        get a step they are dropped later by completed() or close_all().
        """
        for section in reversed(self._sections):
            if section.has_steps and section.is_open:
                section.last_step_index = last_step_index
                return

    def close_all(self, last_step_index: int) -> None:
        """Close everything still open and drop sections without steps."""
        for section in self._sections:
            if section.has_steps and section.is_open:
                section.last_step_index = last_step_index
        self._sections = [s for s in self._sections if s.has_steps]

    def completed(self) -> list[Section]:
        """Sections with steps, after checking none of them is still open."""
        filled = [s for s in self._sections if s.has_steps]
        for section in filled:
            if section.is_open:
                raise UnclosedSectionError(section.name)
        return filled
