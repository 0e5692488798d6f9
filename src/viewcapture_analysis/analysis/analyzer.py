"""Public entry point of the view capture analyzer."""

from collections.abc import Sequence

from ..config import AnalyzerSettings, get_settings
from ..detectors import AlphaJumpDetector, AnomalyDetector
from ..logging import get_logger
from ..model.capture import Capture
from ..model.capture_validator import validate_capture
from .frame_walker import WindowAnalyzer

logger = get_logger(__name__)


def default_detectors(settings: AnalyzerSettings | None = None) -> list[AnomalyDetector]:
    """All detectors, in the order they are invoked.

    Args:
        settings: Settings to configure the detectors from, defaults to global settings

    Returns:
        New detector instances
    """
    settings = settings or get_settings()
    return [AlphaJumpDetector.from_settings(settings)]


class ViewCaptureAnalyzer:
    """Scans view captures and raises on the first anomaly found."""

    def __init__(
        self,
        detectors: Sequence[AnomalyDetector] | None = None,
        settings: AnalyzerSettings | None = None,
    ) -> None:
        """Initialize the analyzer.

        Args:
            detectors: Detectors to run, defaults to default_detectors(settings)
            settings: Analyzer settings, defaults to the global settings
        """
        self.settings = settings or get_settings()
        self.detectors = (
            list(detectors) if detectors is not None else default_detectors(self.settings)
        )

    def analyze(self, capture: Capture) -> None:
        """Scan a capture and raise if an anomaly is found.

        Args:
            capture: Capture to analyze; never modified

        Raises:
            MalformedCaptureError: If the capture is structurally invalid
            AnomalyError: On the first anomaly found
        """
        validate_capture(capture)
        scrim_class_index = capture.class_index_of(self.settings.scrim_class_name)

        for window_index, window in enumerate(capture.windows):
            window_analyzer = WindowAnalyzer(capture, self.detectors, scrim_class_index)
            window_analyzer.analyze_window(window)
            logger.debug(
                "window_analyzed",
                window_index=window_index,
                frame_count=len(window.frames),
                views_seen=len(window_analyzer.last_seen),
            )

        logger.info("capture_analyzed", window_count=len(capture.windows))


def analyze(
    capture: Capture,
    detectors: Sequence[AnomalyDetector] | None = None,
    settings: AnalyzerSettings | None = None,
) -> None:
    """Scan a capture and raise if an anomaly is found.

    Args:
        capture: Capture to analyze
        detectors: Detectors to run instead of the default ones
        settings: Settings to use instead of the global settings

    Raises:
        MalformedCaptureError: If the capture is structurally invalid
        AnomalyError: On the first anomaly found
    """
    ViewCaptureAnalyzer(detectors=detectors, settings=settings).analyze(capture)


assert_no_anomalies = analyze
