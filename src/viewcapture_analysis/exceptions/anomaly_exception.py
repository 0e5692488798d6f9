"""Anomaly exception.

Exception thrown when a detector finds a forbidden transition of a view.
"""

from enum import Enum

from ..base_exceptions import ViewCaptureAnalysisException


class TransitionKind(str, Enum):
    """How a view changed between its previous and current snapshot."""

    APPEAR = "appear"
    DISAPPEAR = "disappear"
    JUMP = "jump"


class AnomalyError(ViewCaptureAnalysisException):
    """Exception thrown when a rendering anomaly is detected.

    The message always carries the frame number, the transition kind, the
    class path from the root and the window coordinates of the view.
    """

    def __init__(
        self,
        message: str,
        frame_n: int,
        kind: TransitionKind,
        path: str,
        left: float,
        top: float,
        alpha: float | None = None,
        detector: str | None = None,
        error_code: str = "ANOMALY",
    ):
        """Initialize anomaly exception.

        Args:
            message: Error message
            frame_n: Frame in which the anomaly was observed
            kind: Transition kind
            path: Class path from the root of the offending view
            left: Window-space left coordinate of the view
            top: Window-space top coordinate of the view
            alpha: Effective alpha of the offending snapshot
            detector: Name of the detector that raised
            error_code: Error code
        """
        super().__init__(
            message,
            error_code=error_code,
            context={
                "frame_n": frame_n,
                "kind": kind.value,
                "path": path,
                "left": left,
                "top": top,
                "alpha": alpha,
                "detector": detector,
            },
        )
        self.frame_n = frame_n
        self.kind = kind
        self.path = path
        self.left = left
        self.top = top
        self.alpha = alpha
        self.detector = detector
