"""
Input collection and batch processing.
"""

from .inputs import collect_inputs, iter_lines, read_url_file
from .processor import ProcessResult, URLProcessor

__all__ = [
    "ProcessResult",
    "URLProcessor",
    "collect_inputs",
    "iter_lines",
    "read_url_file",
]
