"""Custom Prometheus metrics for the thread detection service.

These metrics are exposed at /metrics endpoint and should be scraped by Prometheus.
Alert rules should be configured for:
- thread_detection_rejections_total (callers sending oversized text)
- thread_detections_total (sudden shift in the high-confidence share)
"""

from prometheus_client import Counter, Histogram

# === Detection Metrics ===

thread_detections_total = Counter(
    "thread_detections_total",
    "Total thread detections by confidence and decision",
    ["confidence", "looks_like_thread"],
)
"""
Detection outcomes.

Labels:
- confidence: low, medium, high
- looks_like_thread: true, false

A jump in the high share means the split toggle is being pre-enabled
more often; check for a new paste source before touching thresholds.
"""

thread_detection_rejections_total = Counter(
    "thread_detection_rejections_total",
    "Total detection requests rejected before classification",
    ["reason"],
)
"""
Rejected requests.

Labels:
- reason: input_too_large
"""

thread_detection_duration_seconds = Histogram(
    "thread_detection_duration_seconds",
    "Time spent classifying a single text",
    buckets=[0.0005, 0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
)
