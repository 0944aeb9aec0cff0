"""Bird's-eye-view viewer for per-frame radar detections and tracks."""

__version__ = "0.1.0"