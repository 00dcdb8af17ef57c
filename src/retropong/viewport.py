"""Canvas sizing: fit a 3:2 play field into whatever window we are given."""

from __future__ import annotations

ASPECT_RATIO = 3 / 2
MAX_CANVAS_WIDTH = 900
MAX_CANVAS_HEIGHT = 600
NARROW_WIDTH = 768
NARROW_MARGIN = 20
WIDE_MARGIN = 40


def fit_canvas(available_width: float, available_height: float) -> tuple[int, int]:
    """Return the largest 3:2 canvas that fits the available area.

    Small screens keep a 20 px margin, larger ones 40 px, and the canvas
    never grows past 900x600.
    """
    margin = NARROW_MARGIN if available_width < NARROW_WIDTH else WIDE_MARGIN
    width = max(1.0, available_width - margin)
    height = max(1.0, available_height - margin)

    if width / height > ASPECT_RATIO:
        height = min(height, MAX_CANVAS_HEIGHT)
        width = height * ASPECT_RATIO
    else:
        width = min(width, MAX_CANVAS_WIDTH)
        height = width / ASPECT_RATIO

    return max(1, int(width)), max(1, int(height))


def centred_origin(window_size: tuple[int, int], canvas_size: tuple[int, int]) -> tuple[int, int]:
    """Top-left corner that centres the canvas inside the window."""
    return (
        max(0, (window_size[0] - canvas_size[0]) // 2),
        max(0, (window_size[1] - canvas_size[1]) // 2),
    )
