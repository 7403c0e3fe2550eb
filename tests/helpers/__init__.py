from .metric_delta import histogram_observes, metric_delta

__all__ = ["histogram_observes", "metric_delta"]
