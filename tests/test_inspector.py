"""Tests for the property inspector form builder."""

import pytest

from compositeviz.graph import CompositingNode, TransitionNode
from compositeviz.inspector import build_control_form


class TestBuildControlForm:
    def test_scalar_property(self):
        node = TransitionNode("fade", properties={"mix": 0.25})
        form = build_control_form(node, "Crossfade")

        assert form.title == "Crossfade"
        (slider,) = form["mix"].sliders
        assert (slider.min, slider.max, slider.step) == (0.0, 1.0, None)
        assert slider.value == 0.25
        assert slider.index is None

    def test_list_property_gets_slider_per_element(self):
        node = CompositingNode("comp", properties={"color": [0.1, 0.2, 0.3, 1.0]})
        form = build_control_form(node)

        sliders = form["color"].sliders
        assert [s.index for s in sliders] == [0, 1, 2, 3]
        assert [s.value for s in sliders] == [0.1, 0.2, 0.3, 1.0]
        assert all(s.step == 0.01 for s in sliders)

    def test_other_values_have_no_controls(self):
        node = TransitionNode("fade", properties={"label": "hello", "enabled": True})
        form = build_control_form(node)

        assert [c.name for c in form.controls] == ["label", "enabled"]
        assert form.sliders == []

    def test_missing_control(self):
        form = build_control_form(TransitionNode("fade"))
        with pytest.raises(KeyError):
            form["mix"]


class TestSliderBinding:
    def test_scalar_writes_back(self):
        node = TransitionNode("fade", properties={"mix": 0.0})
        slider = build_control_form(node)["mix"].sliders[0]

        assert slider.set("0.75") == 0.75
        assert node.properties["mix"] == 0.75
        assert slider.value == 0.75

    def test_list_element_writes_back(self):
        color = [0.0, 0.0, 0.0]
        node = CompositingNode("comp", properties={"color": color})
        form = build_control_form(node)

        form["color"].sliders[1].set(0.5)
        assert node.properties["color"] == [0.0, 0.5, 0.0]
        assert node.properties["color"] is color
