"""Structural validation of captures.

Runs before analysis so that a broken capture fails as a whole instead of
part way through a window.
"""

from ..exceptions import MalformedCaptureError
from .capture import Capture, ViewNode


def validate_capture(capture: Capture) -> None:
    """Check every node of every frame for structural problems.

    Args:
        capture: Capture to check

    Raises:
        MalformedCaptureError: If a node's class index does not resolve
    """
    class_count = len(capture.class_names)
    for window_index, window in enumerate(capture.windows):
        for frame_n, frame in enumerate(window.frames):
            # (node, child index path) pairs
            stack: list[tuple[ViewNode, tuple[int, ...]]] = [(frame.root, ())]
            while stack:
                node, path = stack.pop()
                if not 0 <= node.class_index < class_count:
                    location = (
                        f"window {window_index} frame {frame_n} "
                        f"path {'/'.join(str(i) for i in path) or 'root'}"
                    )
                    raise MalformedCaptureError(
                        f"Class index {node.class_index} of view {node.hashcode} is out of "
                        f"range [0, {class_count}) at {location}",
                        location=location,
                    )
                for i, child in enumerate(node.children):
                    stack.append((child, path + (i,)))
