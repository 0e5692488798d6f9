"""Tests for the frame walker and the analyzer entry point.

Tests cover:
- End-to-end alpha jump scenarios
- Effective alpha, scale and geometry composition
- Traversal order and the scrim stop
- The disappearance sweep
- Per-window isolation of view tracking
"""

import pytest

from tests.fixtures.capture_fixtures import (
    ROOT_HASH,
    SCRIM,
    TEXT_VIEW,
    WORKSPACE,
    RecordingDetector,
    make_capture,
    make_root,
    make_view,
)
from viewcapture_analysis import (
    AlphaJumpDetector,
    AnalyzerSettings,
    AnomalyError,
    MalformedCaptureError,
    TransitionKind,
    Visibility,
    analyze,
)
from viewcapture_analysis.analysis import ViewCaptureAnalyzer, WindowAnalyzer, visible_alpha


def text_view(hashcode: int = 42, **attrs):
    return make_view(hashcode, TEXT_VIEW, **attrs)


def record(capture, settings=None) -> RecordingDetector:
    detector = RecordingDetector()
    analyze(capture, detectors=[detector], settings=settings)
    return detector


class TestAlphaJumpScenarios:
    """End-to-end scenarios with the default detectors."""

    def test_silent_appear_raises(self):
        capture = make_capture([make_root(), make_root(text_view(alpha=1.0))])

        with pytest.raises(AnomalyError) as exc_info:
            analyze(capture)

        error = exc_info.value
        assert error.frame_n == 1
        assert error.kind == TransitionKind.APPEAR
        assert error.path.endswith("TextView")
        assert error.path == "FrameLayout|TextView"
        assert "frame 1" in str(error)
        assert "appear" in str(error)
        assert "window coordinates: (0.0, 0.0)" in str(error)

    def test_fade_in_does_not_raise(self):
        capture = make_capture(
            [
                make_root(),
                make_root(text_view(alpha=0.02)),
                make_root(text_view(alpha=0.5)),
                make_root(text_view(alpha=1.0)),
            ]
        )

        analyze(capture)

    def test_silent_disappear_raises(self):
        capture = make_capture(
            [make_root(text_view()), make_root(text_view()), make_root()]
        )

        with pytest.raises(AnomalyError) as exc_info:
            analyze(capture)

        error = exc_info.value
        assert error.frame_n == 2
        assert error.kind == TransitionKind.DISAPPEAR
        assert error.path == "FrameLayout|TextView"
        assert "disappear" in str(error)

    def test_fade_out_does_not_raise(self):
        capture = make_capture(
            [
                make_root(text_view(alpha=1.0)),
                make_root(text_view(alpha=0.4)),
                make_root(text_view(alpha=0.01)),
                make_root(),
            ]
        )

        analyze(capture)

    def test_scrim_hides_anomaly(self):
        a = text_view(7)
        scrim = make_view(8, SCRIM)
        capture = make_capture([make_root(a, scrim), make_root(scrim)])

        analyze(capture)

    def test_same_disappearance_without_scrim_raises(self):
        a = text_view(7)
        capture = make_capture([make_root(a), make_root()])

        with pytest.raises(AnomalyError):
            analyze(capture)

    def test_invisible_parent_suppresses_child(self):
        def parent(*children):
            return make_view(5, WORKSPACE, children, visibility=Visibility.INVISIBLE)

        capture = make_capture(
            [
                make_root(parent()),
                make_root(parent(text_view())),
                make_root(parent()),
                make_root(parent(text_view())),
            ]
        )

        analyze(capture)

    def test_first_frame_views_are_not_appearances(self):
        capture = make_capture(
            [make_root(text_view(10), text_view(11, alpha=0.9), make_view(12, WORKSPACE))]
        )

        analyze(capture)

    def test_moved_view_with_same_hashcode_is_same_view(self):
        capture = make_capture(
            [
                make_root(text_view(42, left=0, top=0)),
                make_root(make_view(42, WORKSPACE, left=300, top=200, resource_id="moved")),
            ]
        )

        analyze(capture)

    def test_distinct_hashcodes_are_distinct_views(self):
        capture = make_capture(
            [make_root(text_view(42, resource_id="title")), make_root(text_view(43, resource_id="title"))]
        )

        with pytest.raises(AnomalyError) as exc_info:
            analyze(capture)

        assert exc_info.value.kind == TransitionKind.APPEAR
        assert exc_info.value.path == "FrameLayout|TextView:title"

    def test_will_not_draw_view_is_not_checked(self):
        capture = make_capture(
            [
                make_root(),
                make_root(make_view(42, will_not_draw=True)),
                make_root(),
            ]
        )

        analyze(capture)

    def test_children_of_will_not_draw_view_are_checked(self):
        container = make_view(40, will_not_draw=True, children=[text_view(41)])
        capture = make_capture([make_root(), make_root(container)])

        with pytest.raises(AnomalyError) as exc_info:
            analyze(capture)

        assert exc_info.value.path == "FrameLayout|FrameLayout|TextView"

    def test_ignored_class_is_not_reported(self):
        capture = make_capture([make_root(), make_root(text_view())])
        settings = AnalyzerSettings(ignored_class_names=["TextView"])

        analyze(capture, settings=settings)

    def test_reappearance_after_missing_frames_is_flagged(self):
        capture = make_capture(
            [
                make_root(text_view(alpha=1.0)),
                make_root(text_view(alpha=0.01)),
                make_root(),
                make_root(text_view(alpha=1.0)),
            ]
        )

        with pytest.raises(AnomalyError) as exc_info:
            analyze(capture)

        assert exc_info.value.frame_n == 3
        assert exc_info.value.kind == TransitionKind.APPEAR

    def test_reappearance_can_be_allowed(self):
        capture = make_capture(
            [
                make_root(text_view(alpha=1.0)),
                make_root(text_view(alpha=0.01)),
                make_root(),
                make_root(text_view(alpha=1.0)),
            ]
        )

        analyze(capture, settings=AnalyzerSettings(flag_reappearance=False))

    def test_alpha_step_check_is_opt_in(self):
        capture = make_capture(
            [make_root(text_view(alpha=1.0)), make_root(text_view(alpha=0.3))]
        )

        analyze(capture)
        with pytest.raises(AnomalyError) as exc_info:
            analyze(capture, settings=AnalyzerSettings(max_alpha_step=0.5))

        assert exc_info.value.kind == TransitionKind.JUMP
        assert exc_info.value.frame_n == 1

    def test_analysis_is_deterministic(self):
        capture = make_capture(
            [
                make_root(text_view(10), text_view(11)),
                make_root(text_view(12, left=5), text_view(13, top=9)),
            ]
        )

        messages = []
        for _ in range(3):
            with pytest.raises(AnomalyError) as exc_info:
                analyze(capture)
            messages.append(str(exc_info.value))

        assert len(set(messages)) == 1


class TestEffectiveAlpha:
    """Test alpha composition and invisibility filtering."""

    def test_visible_alpha_multiplies_and_clamps(self):
        assert visible_alpha(make_view(1, alpha=0.5), 0.5) == 0.25
        assert visible_alpha(make_view(1, alpha=1.5), 0.5) == 0.5
        assert visible_alpha(make_view(1, alpha=-0.3), 1.0) == 0.0

    @pytest.mark.parametrize("visibility", [Visibility.INVISIBLE, Visibility.GONE, 3])
    def test_non_visible_view_has_zero_alpha(self, visibility):
        assert visible_alpha(make_view(1, visibility=visibility), 1.0) == 0.0

    def test_composed_alpha_on_analysis_nodes(self):
        child = text_view(3, alpha=0.5)
        parent = make_view(2, alpha=0.5, children=[child])
        detector = record(make_capture([make_root(parent)]))

        assert detector.node(2, 0).alpha == 0.5
        assert detector.node(3, 0).alpha == 0.25

    def test_zero_alpha_subtree_is_skipped(self):
        hidden = make_view(2, alpha=0.0, children=[text_view(3)])
        detector = record(make_capture([make_root(hidden, text_view(4))]))

        assert [node.hashcode for node in detector.initialized] == [ROOT_HASH, 4]

    def test_invisible_subtree_never_changes_result(self):
        base = make_capture([make_root(text_view(4)), make_root(text_view(4))])
        hidden = make_view(2, visibility=Visibility.GONE, children=[text_view(3)])
        extended = make_capture([make_root(text_view(4)), make_root(hidden, text_view(4))])

        analyze(base)
        analyze(extended)

        assert len(record(base).initialized) == len(record(extended).initialized)


class TestGeometry:
    """Test window coordinates and scale composition."""

    def test_scaled_and_translated_child(self):
        child = make_view(
            2,
            left=10,
            top=20,
            width=100,
            height=40,
            translation_x=5,
            translation_y=-5,
            scale_x=0.5,
            scale_y=0.5,
        )
        detector = record(make_capture([make_root(child)]))

        node = detector.node(2, 0)
        assert node.left == 40.0
        assert node.top == 25.0
        assert node.scale_x == 0.5
        assert node.scale_y == 0.5

    def test_unscaled_coordinates_sum_ancestor_offsets(self):
        grandchild = make_view(3, left=7, top=11)
        child = make_view(2, left=100, top=50, children=[grandchild])
        detector = record(make_capture([make_root(child, left=1, top=2)]))

        assert (detector.node(ROOT_HASH, 0).left, detector.node(ROOT_HASH, 0).top) == (1, 2)
        assert (detector.node(2, 0).left, detector.node(2, 0).top) == (101, 52)
        assert (detector.node(3, 0).left, detector.node(3, 0).top) == (108, 63)

    def test_scroll_shifts_children_only(self):
        grandchild = make_view(3, left=50, top=50)
        child = make_view(2, scroll_x=30, scroll_y=10, children=[grandchild])
        detector = record(make_capture([make_root(child)]))

        assert (detector.node(2, 0).left, detector.node(2, 0).top) == (0, 0)
        assert (detector.node(3, 0).left, detector.node(3, 0).top) == (20, 40)

    def test_scale_composes_with_ancestors(self):
        grandchild = make_view(3, left=20, top=10, width=40, height=20)
        child = make_view(
            2, width=200, height=100, scale_x=0.5, scale_y=0.5, children=[grandchild]
        )
        detector = record(make_capture([make_root(child)]))

        assert (detector.node(2, 0).left, detector.node(2, 0).top) == (50.0, 25.0)
        node = detector.node(3, 0)
        assert (node.scale_x, node.scale_y) == (0.5, 0.5)
        assert (node.left, node.top) == (60.0, 30.0)

    def test_parent_links_and_class_names(self):
        child = text_view(2, resource_id="title")
        detector = record(make_capture([make_root(child)]))

        node = detector.node(2, 0)
        assert node.class_name == "android.widget.TextView"
        assert node.resource_id == "title"
        assert node.parent is detector.node(ROOT_HASH, 0)
        assert node.view_node == child


class TestTraversal:
    """Test traversal order, scrim handling and detector invocation."""

    def test_children_visited_topmost_first(self):
        capture = make_capture([make_root(make_view(2), make_view(3), make_view(4))])
        detector = record(capture)

        assert [node.hashcode for node in detector.initialized] == [ROOT_HASH, 4, 3, 2]

    def test_scrim_stops_child_loop(self):
        capture = make_capture(
            [make_root(make_view(2), make_view(3), make_view(9, SCRIM), make_view(4))]
        )
        detector = record(capture)

        assert [node.hashcode for node in detector.initialized] == [ROOT_HASH, 4]

    def test_scrim_only_stops_its_own_siblings(self):
        inner = make_view(5, children=[make_view(6), make_view(9, SCRIM)])
        capture = make_capture([make_root(make_view(2), inner)])
        detector = record(capture)

        assert [node.hashcode for node in detector.initialized] == [ROOT_HASH, 5, 2]

    def test_scrim_class_absent_from_table(self):
        capture = make_capture(
            [make_root(make_view(2), make_view(3))],
            class_names=("android.widget.FrameLayout",),
        )
        detector = record(capture)

        assert len(detector.initialized) == 3

    def test_custom_scrim_class(self):
        capture = make_capture([make_root(make_view(2), make_view(3, WORKSPACE))])
        settings = AnalyzerSettings(scrim_class_name="com.android.launcher3.Workspace")
        detector = record(capture, settings=settings)

        assert [node.hashcode for node in detector.initialized] == [ROOT_HASH]

    def test_no_detection_in_first_frame(self):
        detector = record(make_capture([make_root(make_view(2))]))

        assert detector.calls == []

    def test_detection_receives_previous_snapshot(self):
        detector = record(make_capture([make_root(make_view(2)), make_root(make_view(2))]))

        frame_1_calls = [(old, new) for old, new, frame_n in detector.calls if frame_n == 1]
        old, new = frame_1_calls[-1]
        assert old is detector.node(2, 0)
        assert new is detector.node(2, 1)

    def test_detectors_called_in_registration_order(self):
        order = []

        class Named(RecordingDetector):
            def __init__(self, label):
                super().__init__()
                self.label = label

            def initialize_node(self, node):
                order.append(("init", self.label))

            def detect_anomalies(self, old, new, frame_n):
                order.append(("detect", self.label))

        capture = make_capture([make_root(), make_root()])
        analyze(capture, detectors=[Named("a"), Named("b")])

        assert order == [
            ("init", "a"),
            ("init", "b"),
            ("init", "a"),
            ("init", "b"),
            ("detect", "a"),
            ("detect", "b"),
        ]

    def test_first_raised_error_stops_analysis(self):
        later = RecordingDetector()
        capture = make_capture([make_root(), make_root(text_view())])

        with pytest.raises(AnomalyError):
            analyze(capture, detectors=[AlphaJumpDetector(), later])

        assert [new.hashcode for _, new, _ in later.calls] == [ROOT_HASH]


class TestDisappearanceSweep:
    """Test the end-of-frame sweep."""

    def test_sweep_only_for_views_seen_in_previous_frame(self):
        capture = make_capture(
            [
                make_root(),
                make_root(make_view(2, alpha=0.02)),
                make_root(make_view(2, alpha=0.03)),
                make_root(),
                make_root(),
            ]
        )
        detector = record(capture)

        disappearances = [(old, frame_n) for old, new, frame_n in detector.calls if new is None]
        assert len(disappearances) == 1
        old, frame_n = disappearances[0]
        assert frame_n == 3
        assert old is detector.node(2, 2)

    def test_sweep_skips_will_not_draw_views(self):
        capture = make_capture(
            [make_root(make_view(2, will_not_draw=True)), make_root()]
        )
        detector = record(capture)

        assert [call for call in detector.calls if call[1] is None] == []

    def test_windows_do_not_share_view_tracking(self):
        capture = make_capture(
            [make_root(text_view()), make_root(text_view())],
            [make_root(), make_root(), make_root()],
        )

        analyze(capture)

    def test_every_window_is_analyzed(self):
        capture = make_capture(
            [make_root(), make_root()],
            [make_root(), make_root(text_view())],
        )

        with pytest.raises(AnomalyError):
            analyze(capture)


class TestViewCaptureAnalyzer:
    """Test analyzer construction."""

    def test_default_detectors_follow_settings(self):
        analyzer = ViewCaptureAnalyzer(settings=AnalyzerSettings(appearance_tolerance=0.2))

        assert len(analyzer.detectors) == 1
        assert isinstance(analyzer.detectors[0], AlphaJumpDetector)
        assert analyzer.detectors[0].appearance_tolerance == 0.2

    def test_empty_capture(self):
        analyze(make_capture())


class TestWindowAnalyzer:
    """Test WindowAnalyzer used directly, without capture validation."""

    def test_negative_class_index_is_rejected(self):
        capture = make_capture([make_root(make_view(2, -1))])
        window_analyzer = WindowAnalyzer(capture, [RecordingDetector()])

        with pytest.raises(MalformedCaptureError):
            window_analyzer.analyze_window(capture.windows[0])

    def test_missing_scrim_class_does_not_stop_children(self):
        capture = make_capture(
            [make_root(make_view(2), make_view(3))],
            class_names=("android.widget.FrameLayout",),
        )
        detector = RecordingDetector()

        WindowAnalyzer(capture, [detector], scrim_class_index=-1).analyze_window(
            capture.windows[0]
        )

        assert [node.hashcode for node in detector.initialized] == [ROOT_HASH, 3, 2]
