"""Alpha jump detector.

Finds views that appear or disappear without an alpha fade: a view whose
effective alpha is clearly visible in the first frame that contains it, or
in the last frame before it vanishes.
"""

from collections.abc import Iterable
from dataclasses import dataclass

from ..config import AnalyzerSettings
from ..diagnostics.node_path import describe_node, path_from_root, simple_class_name
from ..exceptions import AnomalyError, TransitionKind
from ..logging import get_logger
from ..model.analysis_node import AnalysisNode
from .anomaly_detector import AnomalyDetector

logger = get_logger(__name__)

# Per-view alpha can get very close to zero during a legitimate fade
DEFAULT_APPEARANCE_TOLERANCE = 0.05


@dataclass
class AlphaJumpNodeState:
    """Alpha jump detector record stamped on every analysis node."""

    ignored_by: str | None = None


class AlphaJumpDetector(AnomalyDetector):
    """Detects views appearing or disappearing without alpha fading."""

    name = "alpha_jump"

    def __init__(
        self,
        appearance_tolerance: float = DEFAULT_APPEARANCE_TOLERANCE,
        ignored_class_names: Iterable[str] = (),
        ignored_resource_ids: Iterable[str] = (),
        flag_reappearance: bool = True,
        max_alpha_step: float | None = None,
    ) -> None:
        """Initialize the detector.

        Args:
            appearance_tolerance: Highest alpha allowed on appearance or disappearance
            ignored_class_names: Full or simple class names to ignore, with their subtrees
            ignored_resource_ids: Resource ids to ignore, with their subtrees
            flag_reappearance: Treat a view missing from the previous frame as appearing
            max_alpha_step: Largest alpha change between consecutive frames, None disables
        """
        self.appearance_tolerance = appearance_tolerance
        self.ignored_class_names = frozenset(ignored_class_names)
        self.ignored_resource_ids = frozenset(ignored_resource_ids)
        self.flag_reappearance = flag_reappearance
        self.max_alpha_step = max_alpha_step

    @classmethod
    def from_settings(cls, settings: AnalyzerSettings) -> "AlphaJumpDetector":
        """Build a detector from analyzer settings."""
        return cls(
            appearance_tolerance=settings.appearance_tolerance,
            ignored_class_names=settings.ignored_class_names,
            ignored_resource_ids=settings.ignored_resource_ids,
            flag_reappearance=settings.flag_reappearance,
            max_alpha_step=settings.max_alpha_step,
        )

    def initialize_node(self, node: AnalysisNode) -> None:
        state = AlphaJumpNodeState(ignored_by=self._ignore_reason(node))
        node.detector_state[self.name] = state
        if state.ignored_by is not None:
            node.ignore_alpha_jumps = True

    def _ignore_reason(self, node: AnalysisNode) -> str | None:
        if node.class_name in self.ignored_class_names or (
            simple_class_name(node.class_name) in self.ignored_class_names
        ):
            return f"class {node.class_name}"
        if node.resource_id in self.ignored_resource_ids:
            return f"id {node.resource_id}"
        if node.parent is not None and node.parent.ignore_alpha_jumps:
            return "ancestor"
        return None

    def detect_anomalies(
        self, old: AnalysisNode | None, new: AnalysisNode | None, frame_n: int
    ) -> None:
        if new is None:
            if old is None:
                raise ValueError("old and new analysis nodes cannot both be None")
            if not old.ignore_alpha_jumps and old.alpha > self.appearance_tolerance:
                self._raise(TransitionKind.DISAPPEAR, old, frame_n)
            return

        if new.ignore_alpha_jumps:
            return

        appeared = old is None or (self.flag_reappearance and old.frame_n < frame_n - 1)
        if appeared:
            if new.alpha > self.appearance_tolerance:
                self._raise(TransitionKind.APPEAR, new, frame_n)
            return

        if (
            self.max_alpha_step is not None
            and old is not None
            and old.frame_n == frame_n - 1
            and abs(new.alpha - old.alpha) > self.max_alpha_step
        ):
            self._raise(TransitionKind.JUMP, new, frame_n, previous_alpha=old.alpha)

    def _raise(
        self,
        kind: TransitionKind,
        node: AnalysisNode,
        frame_n: int,
        previous_alpha: float | None = None,
    ) -> None:
        if kind == TransitionKind.APPEAR:
            what = f"appeared with alpha {node.alpha} without fading in"
        elif kind == TransitionKind.DISAPPEAR:
            what = f"disappeared from alpha {node.alpha} without fading out"
        else:
            what = f"jumped from alpha {previous_alpha} to {node.alpha}"

        message = (
            f"Alpha jump detected in frame {frame_n} ({kind.value}): view {what}; "
            f"{describe_node(node)}"
        )
        logger.warning(
            "alpha_jump_detected",
            frame_n=frame_n,
            kind=kind.value,
            hashcode=node.hashcode,
            alpha=node.alpha,
        )
        raise AnomalyError(
            message,
            frame_n=frame_n,
            kind=kind,
            path=path_from_root(node),
            left=node.left,
            top=node.top,
            alpha=node.alpha,
            detector=self.name,
            error_code="ALPHA_JUMP",
        )
