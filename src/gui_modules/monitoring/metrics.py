"""
Metrics Collection
Prometheus counters for window setup and event routing
"""

from prometheus_client import Counter, generate_latest


class MetricsCollector:
    """
    Collects and exposes Prometheus metrics for the GUI layer.
    """

    def __init__(self) -> None:
        # Event routing
        self.events_total = Counter(
            "gui_events_total",
            "Total number of GUI events routed to namespaces",
            ["namespace", "outcome"],
        )

        # Window lifecycle
        self.windows_built_total = Counter(
            "gui_windows_built_total",
            "Total number of windows built",
            ["namespace"],
        )

        # Setup
        self.handler_collisions_total = Counter(
            "gui_handler_collisions_total",
            "Total number of handler name collisions during merge",
            ["scope"],
        )
        self.setup_errors_total = Counter(
            "gui_setup_errors_total",
            "Total number of fatal setup errors",
            ["error_type"],
        )

    def record_event(self, namespace: str, outcome: str) -> None:
        """Record a routed event (dispatched, no_state, stale)."""
        self.events_total.labels(namespace=namespace, outcome=outcome).inc()

    def record_build(self, namespace: str) -> None:
        """Record a window build."""
        self.windows_built_total.labels(namespace=namespace).inc()

    def record_handler_collision(self, scope: str) -> None:
        """Record a handler collision (module or namespace scope)."""
        self.handler_collisions_total.labels(scope=scope).inc()

    def record_setup_error(self, error_type: str) -> None:
        """Record a fatal setup error."""
        self.setup_errors_total.labels(error_type=error_type).inc()

    def get_metrics(self) -> bytes:
        """Get metrics in Prometheus format."""
        return generate_latest()


# Global metrics collector instance
metrics_collector = MetricsCollector()
