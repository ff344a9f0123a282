from .data_loader import DataLoader
from .batch_format import BatchInput, parse_batch_input, format_batch_output
from .timing import format_hours, round_half_up
from .reporting import format_delivery_report

__all__ = [
    "DataLoader",
    "BatchInput",
    "parse_batch_input",
    "format_batch_output",
    "format_hours",
    "round_half_up",
    "format_delivery_report",
]
