"""Terminal rendering of detections, cases and statistics."""

from .stdout import StdoutReporter, severity_label

__all__ = ["StdoutReporter", "severity_label"]
