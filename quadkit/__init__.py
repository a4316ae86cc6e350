"""Backend-free 2D shape geometry, RGBA images, sprite atlases, frame profiling and immediate-mode UI state."""

__version__ = "0.4.5"

__all__ = [
    "atlas",
    "clock",
    "image",
    "primitives",
    "shapes",
    "tab_selector",
    "telemetry",
    "ui_input",
    "ui_storage",
    "ui_window",
    "windows",
]