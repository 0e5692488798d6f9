"""Analysis node.

A view from a capture converted to a form that's convenient for detecting
anomalies: geometry in window coordinates, and scale and alpha composed
with every ancestor.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .capture import ViewNode


@dataclass(eq=False)
class AnalysisNode:
    """Snapshot of one view in one frame.

    Parents are linked from children only; the analysis tree never holds
    references downward.
    """

    class_name: str
    resource_id: str
    parent: AnalysisNode | None

    # Window coordinates of the view
    left: float
    top: float

    # Visible scale and alpha, built recursively from the ancestor list
    scale_x: float
    scale_y: float
    alpha: float

    frame_n: int
    view_node: ViewNode

    ignore_alpha_jumps: bool = False

    # Per-detector records, keyed by detector name
    detector_state: dict[str, Any] = field(default_factory=dict)

    @property
    def hashcode(self) -> int:
        """Identity of the underlying view."""
        return self.view_node.hashcode

    def __str__(self) -> str:
        from ..diagnostics.node_path import describe_node

        return describe_node(self)
