"""Capture model.

Immutable pydantic models describing a loaded view capture: a class-name
table, a sequence of windows, the frames of each window, and the view tree
of each frame. Field aliases follow the camelCase names of the ViewCapture
JSON export so that exported files validate directly.
"""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, ConfigDict, Field

NO_ID = "NO_ID"
"""Resource id sentinel meaning the view has no id."""


class Visibility(IntEnum):
    """Android view visibility values."""

    VISIBLE = 0
    INVISIBLE = 4
    GONE = 8


class ViewNode(BaseModel):
    """A single view in a captured frame."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    hashcode: int = Field(description="Identity of the view, stable across frames")
    class_index: int = Field(alias="classnameIndex", description="Index into Capture.class_names")
    resource_id: str = Field(NO_ID, alias="id")
    visibility: int = Field(
        Visibility.VISIBLE, description="Only Visibility.VISIBLE makes the view render"
    )
    alpha: float = 1.0
    scale_x: float = Field(1.0, alias="scaleX")
    scale_y: float = Field(1.0, alias="scaleY")
    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0
    translation_x: float = Field(0.0, alias="translationX")
    translation_y: float = Field(0.0, alias="translationY")
    scroll_x: float = Field(0.0, alias="scrollX")
    scroll_y: float = Field(0.0, alias="scrollY")
    will_not_draw: bool = Field(False, alias="willNotDraw")
    children: tuple[ViewNode, ...] = ()

    @property
    def is_visible(self) -> bool:
        """Whether the view's own visibility flag lets it render."""
        return self.visibility == Visibility.VISIBLE


class FrameData(BaseModel):
    """One captured frame of a window."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    root: ViewNode = Field(alias="node")


class WindowData(BaseModel):
    """Frames captured for one window, in capture order."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    frames: tuple[FrameData, ...] = Field((), alias="frameData")


class Capture(BaseModel):
    """A complete view capture."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    class_names: tuple[str, ...] = Field((), alias="classname")
    windows: tuple[WindowData, ...] = Field((), alias="windowData")

    def class_index_of(self, class_name: str) -> int:
        """Return the index of a class name, or -1 when it is absent."""
        try:
            return self.class_names.index(class_name)
        except ValueError:
            return -1
