"""Frame walker.

Walks the frames of one window in order, converting every visible view
into an AnalysisNode and handing consecutive snapshots of the same view to
the detectors.
"""

from collections.abc import Sequence

from ..detectors.anomaly_detector import AnomalyDetector
from ..exceptions import MalformedCaptureError
from ..logging import get_logger
from ..model.analysis_node import AnalysisNode
from ..model.capture import Capture, ViewNode, WindowData

logger = get_logger(__name__)


def visible_alpha(node: ViewNode, parent_alpha: float) -> float:
    """Effective alpha of a view given the effective alpha of its parent."""
    if not node.is_visible:
        return 0.0
    return parent_alpha * max(0.0, min(node.alpha, 1.0))


class WindowAnalyzer:
    """Analyzes the frames of a single window.

    Keeps, for every view hashcode, the newest AnalysisNode seen so far in
    this window. A view that stops being visible stays in the map with its
    last snapshot.
    """

    def __init__(
        self,
        capture: Capture,
        detectors: Sequence[AnomalyDetector],
        scrim_class_index: int = -1,
    ) -> None:
        """Initialize the window analyzer.

        Args:
            capture: Capture the window belongs to, used to resolve class names
            detectors: Detectors to invoke, in invocation order
            scrim_class_index: Class index that stops child traversal, -1 for none
        """
        self.capture = capture
        self.detectors = detectors
        self.scrim_class_index = scrim_class_index
        self.last_seen: dict[int, AnalysisNode] = {}

    def analyze_window(self, window: WindowData) -> None:
        """Analyze every frame of the window in order.

        Raises:
            AnomalyError: On the first anomaly reported by a detector
        """
        for frame_n, frame in enumerate(window.frames):
            self.analyze_frame(frame_n, frame.root)

    def analyze_frame(self, frame_n: int, root: ViewNode) -> None:
        """Analyze one frame: descend the tree, then sweep for disappearances."""
        self.analyze_view(root, None, frame_n, 0.0, 0.0)

        # Views visible in the previous frame but not in this one
        for info in list(self.last_seen.values()):
            if info.frame_n == frame_n - 1 and not info.view_node.will_not_draw:
                for detector in self.detectors:
                    detector.detect_anomalies(info, None, frame_n)

    def analyze_view(
        self,
        node: ViewNode,
        parent: AnalysisNode | None,
        frame_n: int,
        left_shift: float,
        top_shift: float,
    ) -> None:
        """Analyze a view and, unless it is invisible, its subtree.

        Args:
            node: View to analyze
            parent: Analysis node of the parent view, None for the root
            frame_n: Current frame number
            left_shift: Window-space left of the parent's content origin
            top_shift: Window-space top of the parent's content origin
        """
        # Skip invisible views together with their subtrees
        alpha = visible_alpha(node, parent.alpha if parent is not None else 1.0)
        if alpha <= 0.0:
            return

        parent_scale_x = parent.scale_x if parent is not None else 1.0
        parent_scale_y = parent.scale_y if parent is not None else 1.0
        scale_x = parent_scale_x * node.scale_x
        scale_y = parent_scale_y * node.scale_y

        left = (
            left_shift
            + (node.left + node.translation_x) * parent_scale_x
            + node.width * (parent_scale_x - scale_x) / 2
        )
        top = (
            top_shift
            + (node.top + node.translation_y) * parent_scale_y
            + node.height * (parent_scale_y - scale_y) / 2
        )

        analysis_node = AnalysisNode(
            class_name=self._class_name(node),
            resource_id=node.resource_id,
            parent=parent,
            left=left,
            top=top,
            scale_x=scale_x,
            scale_y=scale_y,
            alpha=alpha,
            frame_n=frame_n,
            view_node=node,
        )
        for detector in self.detectors:
            detector.initialize_node(analysis_node)

        old = self.last_seen.get(node.hashcode)
        # Views present from the first frame cannot have faded in
        if frame_n != 0 and not node.will_not_draw:
            for detector in self.detectors:
                detector.detect_anomalies(old, analysis_node, frame_n)
        self.last_seen[node.hashcode] = analysis_node

        # Children from the topmost one. Nothing under a scrim is analyzed
        # since we don't know whether it's transparent.
        child_left_shift = left - node.scroll_x
        child_top_shift = top - node.scroll_y
        for child in reversed(node.children):
            if self.scrim_class_index >= 0 and child.class_index == self.scrim_class_index:
                break
            self.analyze_view(child, analysis_node, frame_n, child_left_shift, child_top_shift)

    def _class_name(self, node: ViewNode) -> str:
        # Negative indices must not wrap around to the end of the table
        if not 0 <= node.class_index < len(self.capture.class_names):
            raise MalformedCaptureError(
                f"Class index {node.class_index} of view {node.hashcode} is out of "
                f"range [0, {len(self.capture.class_names)})"
            )
        return self.capture.class_names[node.class_index]
