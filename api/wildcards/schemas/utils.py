"""
Utility functions for schema validation.
"""
from typing import List, Optional


def normalize_id_set(v: Optional[List[int]]) -> List[int]:
    """
    Normalize an association id list to set semantics.
    A missing (None) list means no associations; repeated ids collapse
    into one, keeping the order of first appearance.

    Args:
        v: List of foreign-key ids (can be None)

    Returns:
        List of distinct ids
    """
    if v is None:
        return []
    return list(dict.fromkeys(v))
