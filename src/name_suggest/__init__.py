"""Did-you-mean suggestions based on Levenshtein distance."""

from .adapters import (
    candidates_of,
    keys_of,
    suggest,
    suggest_by,
    suggest_key,
    suggest_key_by,
    suggest_key_with_dist,
    suggest_with_dist,
)
from .distance import KERNEL_NAMES, get_kernel, levenshtein, rapidfuzz_levenshtein
from .matching import Matcher, find_best_match
from .threshold import DEFAULT_POLICY, ThresholdPolicy

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_POLICY",
    "KERNEL_NAMES",
    "Matcher",
    "ThresholdPolicy",
    "candidates_of",
    "find_best_match",
    "get_kernel",
    "keys_of",
    "levenshtein",
    "rapidfuzz_levenshtein",
    "suggest",
    "suggest_by",
    "suggest_key",
    "suggest_key_by",
    "suggest_key_with_dist",
    "suggest_with_dist",
]
