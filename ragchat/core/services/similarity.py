"""Vector similarity helpers."""

from collections.abc import Sequence

import numpy as np


def cosine_similarity(a: Sequence[float] | None, b: Sequence[float] | None) -> float:
    """Cosine similarity of two vectors.

    Returns 0.0 instead of raising when either vector is missing or empty,
    when the dimensions differ, or when either magnitude is zero.

    Args:
        a: First vector.
        b: Second vector.

    Returns:
        ``dot(a, b) / (|a| * |b|)`` in [-1, 1], or 0.0 when undefined.
    """
    if a is None or b is None or len(a) == 0 or len(a) != len(b):
        return 0.0

    va = np.asarray(a, dtype=np.float64)
    vb = np.asarray(b, dtype=np.float64)

    norm_a = float(np.linalg.norm(va))
    norm_b = float(np.linalg.norm(vb))
    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0

    score = float(np.dot(va, vb) / (norm_a * norm_b))
    # Clamp rounding drift so identical vectors compare as exactly 1.0
    return max(-1.0, min(1.0, score))
