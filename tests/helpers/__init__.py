from helpers.naive_diff import (
    NaiveLCS,
    NaivePatcher,
    DiffVerifier,
    is_subsequence,
    lcs_length,
    edit_distance,
    verify_script,
)


__all__ = [
    "NaiveLCS",
    "NaivePatcher",
    "DiffVerifier",
    "is_subsequence",
    "lcs_length",
    "edit_distance",
    "verify_script",
]
