"""Property inspector: slider controls bound to live node properties.

A ControlForm describes one slider per editable value of a node. Moving a
slider (``Slider.set``) writes the new value straight back into the node's
``properties`` mapping, so the graph sees the change on its next frame.
UI toolkits render the form however they like.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from numbers import Real
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from compositeviz.graph.nodes import Node


@dataclass
class Slider:
    """Range control for one numeric value.

    Attributes:
        node: Node whose property this slider edits
        property_name: Property edited
        index: Element index for list-valued properties, None for scalars
        value: Initial value
        min: Lower bound of the range
        max: Upper bound of the range
        step: Increment, or None for the toolkit default
    """

    node: Node
    property_name: str
    value: float
    index: int | None = None
    min: float = 0.0
    max: float = 1.0
    step: float | None = None

    def set(self, value: Any) -> float:
        """Write ``value`` (coerced to float) back into the node."""
        value = float(value)
        if self.index is None:
            self.node.properties[self.property_name] = value
        else:
            self.node.properties[self.property_name][self.index] = value
        self.value = value
        return value


@dataclass
class PropertyControl:
    """All sliders for one property (none for non-numeric values)."""

    name: str
    sliders: list[Slider] = field(default_factory=list)


@dataclass
class ControlForm:
    """Inspector form for a single node."""

    node: Node
    title: str | None = None
    controls: list[PropertyControl] = field(default_factory=list)

    def __getitem__(self, name: str) -> PropertyControl:
        for control in self.controls:
            if control.name == name:
                return control
        raise KeyError(name)

    @property
    def sliders(self) -> list[Slider]:
        return [s for c in self.controls for s in c.sliders]


def _is_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def build_control_form(node: Node, title: str | None = None) -> ControlForm:
    """Build an inspector form for ``node``.

    Numbers get one slider over [0, 1]; lists get one slider per element
    with a 0.01 step. Other values are listed without controls.
    """
    form = ControlForm(node=node, title=title)
    for name, value in node.properties.items():
        control = PropertyControl(name=name)
        if _is_number(value):
            control.sliders.append(Slider(node=node, property_name=name, value=float(value)))
        elif isinstance(value, list):
            for i, element in enumerate(value):
                control.sliders.append(
                    Slider(node=node, property_name=name, value=float(element), index=i, step=0.01)
                )
        form.controls.append(control)
    return form
