from .result_aggregator import ResultAggregator

__all__ = ["ResultAggregator"]
