"""Diagnostic formatting of analysis nodes for error messages."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..model.capture import NO_ID

if TYPE_CHECKING:
    from ..model.analysis_node import AnalysisNode


def simple_class_name(class_name: str) -> str:
    """Return the part of a class name after the last dot."""
    return class_name[class_name.rfind(".") + 1 :]


def path_element(node: AnalysisNode) -> str:
    """Format one node as ``SimpleClassName[:resource_id]``."""
    element = simple_class_name(node.class_name)
    if node.resource_id != NO_ID:
        element += ":" + node.resource_id
    return element


def path_from_root(node: AnalysisNode) -> str:
    """Build the ``|``-separated class path from the root down to a node.

    Args:
        node: Node to describe

    Returns:
        Path string with the root leftmost, e.g. ``DragLayer|Workspace:workspace``
    """
    elements = []
    current: AnalysisNode | None = node
    while current is not None:
        elements.append(path_element(current))
        current = current.parent
    return "|".join(reversed(elements))


def describe_node(node: AnalysisNode) -> str:
    """Describe a node's window coordinates and class path."""
    return (
        f"window coordinates: ({node.left}, {node.top}), "
        f"class path from the root: {path_from_root(node)}"
    )
