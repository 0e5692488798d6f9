"""Anomaly detector interface definition."""

from abc import ABC, abstractmethod

from ..model.analysis_node import AnalysisNode


class AnomalyDetector(ABC):
    """Detector of one kind of anomaly.

    Detectors are invoked in registration order. A detector reports an
    anomaly by raising; the first raised error ends the analysis.
    """

    name: str = "anomaly"

    @abstractmethod
    def initialize_node(self, node: AnalysisNode) -> None:
        """Initialize fields of the node that are specific to this detector.

        Called once for every analysis node, before any detector compares it.

        Args:
            node: Freshly built analysis node
        """
        pass

    @abstractmethod
    def detect_anomalies(
        self, old: AnalysisNode | None, new: AnalysisNode | None, frame_n: int
    ) -> None:
        """Detect anomalies by comparing the last and current occurrence of a view.

        ``old`` and ``new`` cannot both be None.

        Args:
            old: The view as seen in the last frame that contained it before
                ``frame_n``. None means the view is first seen in ``frame_n``.
            new: The view in ``frame_n``. None means the view is not present in
                ``frame_n`` but was present in the previous frame.
            frame_n: Number of the current frame

        Raises:
            AnomalyError: If an anomaly is detected
        """
        pass
