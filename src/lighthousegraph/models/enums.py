"""Shared enumerations for lighthousegraph domain objects."""

from enum import StrEnum


class DragState(StrEnum):
    """Per-node pointer gesture state."""

    FREE = "free"
    DRAGGING = "dragging"
