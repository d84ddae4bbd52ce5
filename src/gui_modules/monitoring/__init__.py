"""
Monitoring
Prometheus-based metrics for the GUI layer
"""

from .metrics import MetricsCollector, metrics_collector

__all__ = [
    "MetricsCollector",
    "metrics_collector",
]
