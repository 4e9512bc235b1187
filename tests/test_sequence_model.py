"""Tests for the model-building side: actor registry, step sequencer, section tracker.

These drive the Sequence builder (and its parts) directly and inspect the
bookkeeping before any layout happens.
"""
from __future__ import annotations

import pytest

from svg_sequence import Sequence, SequenceOptions
from svg_sequence.registry import ActorRegistry
from svg_sequence.sections import SectionTracker
from svg_sequence.steps import StepSequencer
from svg_sequence.types import StepRequest


# ============================================================================
# Actor registry
# ============================================================================


class TestActorRegistry:
    def test_ensure_appends_new_actors_in_order(self):
        reg = ActorRegistry()
        reg.ensure("A")
        reg.ensure("B")
        reg.ensure("A")
        assert reg.ids == ["A", "B"]
        assert len(reg) == 2
        assert "B" in reg

    def test_ensure_ignores_empty_ids(self):
        reg = ActorRegistry()
        reg.ensure("")
        assert len(reg) == 0

    def test_set_order_moves_named_actors_to_the_front(self):
        reg = ActorRegistry()
        for a in ("A", "B", "C"):
            reg.ensure(a)
        reg.set_order(["C", "A"])
        assert reg.ids == ["C", "A", "B"]

    def test_set_order_creates_unknown_actors(self):
        reg = ActorRegistry()
        reg.ensure("A")
        reg.set_order(["X", "Y"])
        assert reg.ids == ["X", "Y", "A"]

    def test_set_order_collapses_duplicates_and_skips_empty_ids(self):
        reg = ActorRegistry()
        reg.set_order(["A", "", "B", "A", ""])
        assert reg.ids == ["A", "B"]

    def test_set_order_mixing_known_and_new_ids(self):
        reg = ActorRegistry()
        for a in ("A", "B", "C"):
            reg.ensure(a)
        reg.set_order(["B", "New"])
        assert reg.ids == ["B", "New", "A", "C"]


# ============================================================================
# Step sequencer
# ============================================================================


class TestStepSequencer:
    def test_first_step_starts_below_the_actor_labels(self):
        seq = StepSequencer(SequenceOptions(step_height=50))
        step = seq.add(StepRequest("A", "B"))
        assert step.y == 18 + 50
        assert step.index == 0

    def test_each_step_adds_its_own_height(self):
        seq = StepSequencer(SequenceOptions(step_height=50))
        seq.add(StepRequest("A", "B", "one"))
        seq.add(StepRequest("A", "B", "one\ntwo\nthree"))
        seq.add(StepRequest("A", "B", "one\ntwo"))
        ys = [s.y for s in seq.steps]
        assert ys[1] - ys[0] == 50 + 14 * 2
        assert ys[2] - ys[1] == 50 + 14

    def test_height_of_counts_description_lines(self):
        seq = StepSequencer(SequenceOptions(step_height=40))
        assert seq.height_of(StepRequest("A", "B")) == 40
        assert seq.height_of(StepRequest("A", "B", "a\nb")) == 54

    def test_changing_step_height_reflows_existing_steps(self):
        opts = SequenceOptions(step_height=50)
        seq = StepSequencer(opts)
        seq.add(StepRequest("A", "B"))
        seq.add(StepRequest("A", "B", "x\ny"))
        opts.step_height = 30
        assert seq.step_height == 30
        assert [s.y for s in seq.steps] == [48, 48 + 30 + 14]

    def test_add_after_height_change_continues_from_reflowed_steps(self):
        opts = SequenceOptions(step_height=50)
        seq = StepSequencer(opts)
        seq.add(StepRequest("A", "B"))
        opts.step_height = 20
        step = seq.add(StepRequest("B", "A"))
        assert step.y == 18 + 20 + 20


# ============================================================================
# Section tracker
# ============================================================================


class TestSectionTracker:
    def test_open_ignores_empty_names(self):
        tracker = SectionTracker()
        assert tracker.open("", "#000") is None
        assert tracker.sections == []

    def test_attach_returns_innermost_open_section(self):
        tracker = SectionTracker()
        outer = tracker.open("outer", "#000")
        inner = tracker.open("inner", "#000")
        assert tracker.attach(0) is inner
        assert outer.first_step_index == 0
        assert inner.first_step_index == 0

    def test_close_is_lifo(self):
        tracker = SectionTracker()
        outer = tracker.open("outer", "#000")
        tracker.attach(0)
        inner = tracker.open("inner", "#000")
        tracker.attach(1)
        tracker.close(1)
        assert inner.last_step_index == 1
        assert outer.is_open

    def test_close_skips_open_sections_without_steps(self):
        tracker = SectionTracker()
        outer = tracker.open("outer", "#000")
        tracker.attach(0)
        inner = tracker.open("inner", "#000")
        tracker.close(0)
        assert outer.last_step_index == 0
        assert inner.is_open
        assert not inner.has_steps

    def test_close_with_only_empty_sections_is_a_no_op(self):
        tracker = SectionTracker()
        empty = tracker.open("empty", "#000")
        tracker.close(-1)
        assert tracker.sections == [empty]
        assert empty.is_open
        assert tracker.completed() == []

    def test_close_without_open_sections_is_a_no_op(self):
        tracker = SectionTracker()
        tracker.close(3)
        assert tracker.sections == []

    def test_close_all_closes_and_drops_empty_sections(self):
        tracker = SectionTracker()
        a = tracker.open("a", "#000")
        tracker.attach(0)
        tracker.open("b", "#000")
        tracker.close_all(0)
        assert tracker.sections == [a]
        assert a.last_step_index == 0


# ============================================================================
# Sequence builder
# ============================================================================


class TestSequenceBuilder:
    def test_steps_register_their_actors(self):
        s = Sequence()
        s.add_step("Bob", "Maria")
        s.add_step("Maria", "Eve")
        assert s.actors == ["Bob", "Maria", "Eve"]

    def test_empty_actor_ids_are_not_registered(self):
        s = Sequence()
        s.add_step("Bob", "")
        assert s.actors == ["Bob"]
        assert len(s.steps) == 1

    def test_register_actors_reorders_after_the_fact(self):
        s = Sequence()
        s.add_step("A", "B")
        s.add_step("B", "C")
        s.register_actors("C", "A")
        assert s.actors == ["C", "A", "B"]

    def test_unset_colors_use_the_default(self):
        s = Sequence()
        s.add_step("A", "B")
        s.open_section("sec")
        assert s.steps[0].request.color == "#000000"
        assert s.sections[0].color == "#000000"

    def test_default_color_comes_from_options(self):
        s = Sequence(SequenceOptions(default_color="#123456"))
        s.add_step("A", "B", color="")
        s.add_step("A", "B", color="red")
        assert [st.request.color for st in s.steps] == ["#123456", "red"]

    def test_nested_sections_assign_steps_to_the_innermost(self):
        s = Sequence()
        s.open_section("outer")
        s.add_step("A", "B", "1")
        s.open_section("inner")
        s.add_step("B", "C", "2")
        s.close_section()
        s.add_step("C", "A", "3")
        s.close_section()

        outer, inner = s.sections
        assert [st.section.name for st in s.steps] == ["outer", "inner", "outer"]
        assert (outer.first_step_index, outer.last_step_index) == (0, 2)
        assert (inner.first_step_index, inner.last_step_index) == (1, 1)

    def test_steps_outside_sections_have_no_section(self):
        s = Sequence()
        s.open_section("sec")
        s.add_step("A", "B")
        s.close_section()
        s.add_step("B", "A")
        assert s.steps[1].section is None

    def test_close_with_an_empty_inner_section_closes_the_outer_one(self):
        s = Sequence()
        s.open_section("A")
        s.add_step("X", "Y")
        s.open_section("B")
        s.close_section()
        s.add_step("Y", "X")
        s.close_section()

        a, b = s.sections
        assert (a.first_step_index, a.last_step_index) == (0, 0)
        assert (b.first_step_index, b.last_step_index) == (1, 1)
        assert [st.section.name for st in s.steps] == ["A", "B"]

    @pytest.mark.parametrize("height", [20, 50, 75])
    def test_set_step_height_applies_to_steps_already_added(self, height):
        s = Sequence()
        s.add_step("A", "B")
        s.set_step_height(height)
        assert s.steps[0].y == 18 + height

    def test_step_height_set_directly_on_options_is_honored(self):
        s = Sequence()
        s.add_step("A", "B")
        s.options.step_height = 80
        assert s.steps[0].y == 98
        assert s.finalize().steps[0].y == 98

    def test_sequences_sharing_options_do_not_affect_each_other(self):
        shared = SequenceOptions(step_height=40)
        first = Sequence(shared)
        second = Sequence(shared)
        first.set_step_height(90)
        first.set_canvas_width("300px")

        second.add_step("A", "B")
        assert shared.step_height == 40
        assert shared.width == "100%"
        assert second.options.step_height == 40
        assert second.steps[0].y == 18 + 40
