# Application Package
from .buckets import find_bucket, from_bucket_sets, to_bucket_sets
from .progress import compute_progress
from .scheduler import get_hint, select_due
from .service import PracticeService
from .transitions import apply_answer

__all__ = [
    "PracticeService",
    "apply_answer",
    "compute_progress",
    "find_bucket",
    "from_bucket_sets",
    "get_hint",
    "select_due",
    "to_bucket_sets",
]
