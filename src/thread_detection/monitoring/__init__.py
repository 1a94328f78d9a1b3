"""Monitoring and metrics instrumentation for the thread detection service.

Exports custom Prometheus metrics for operational monitoring and alerting.
"""

from thread_detection.monitoring.metrics import (
    thread_detection_duration_seconds,
    thread_detection_rejections_total,
    thread_detections_total,
)

__all__ = [
    "thread_detections_total",
    "thread_detection_rejections_total",
    "thread_detection_duration_seconds",
]
