"""
Equal split component.

Public API for evenly redistributing ownership across writers.
"""

from .component import compute_allocation, split_equally
from .models import SplitAllocation

__all__ = [
    "compute_allocation",
    "split_equally",
    "SplitAllocation",
]
