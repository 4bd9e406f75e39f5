"""Unit tests for cosine similarity."""

import pytest

from ragchat.core.services.similarity import cosine_similarity

pytestmark = pytest.mark.unit


class TestCosineSimilarity:
    """Tests for cosine_similarity edge cases and basic properties."""

    def test_identical_vectors_score_one(self):
        assert cosine_similarity([0.3, 0.4, 0.5], [0.3, 0.4, 0.5]) == pytest.approx(1.0)

    def test_orthogonal_vectors_score_zero(self):
        assert cosine_similarity([1.0, 0.0], [0.0, 1.0]) == pytest.approx(0.0)

    def test_opposite_vectors_score_minus_one(self):
        assert cosine_similarity([1.0, 2.0], [-1.0, -2.0]) == pytest.approx(-1.0)

    def test_is_symmetric(self):
        a, b = [0.1, 0.9, 0.3], [0.5, 0.2, 0.8]
        assert cosine_similarity(a, b) == pytest.approx(cosine_similarity(b, a))

    def test_ignores_magnitude(self):
        assert cosine_similarity([1.0, 1.0], [10.0, 10.0]) == pytest.approx(1.0)

    def test_zero_vector_scores_zero(self):
        """Zero magnitude is undefined and must not divide by zero."""
        assert cosine_similarity([0.0, 0.0, 0.0], [1.0, 2.0, 3.0]) == 0.0
        assert cosine_similarity([1.0, 2.0, 3.0], [0.0, 0.0, 0.0]) == 0.0

    def test_dimension_mismatch_scores_zero(self):
        assert cosine_similarity([1.0, 0.0], [1.0, 0.0, 0.0]) == 0.0

    @pytest.mark.parametrize("a,b", [([], []), (None, [1.0]), ([1.0], None)])
    def test_missing_or_empty_vectors_score_zero(self, a, b):
        assert cosine_similarity(a, b) == 0.0

    def test_result_stays_in_range(self):
        score = cosine_similarity([1e-8, 3.0, 1e8], [1e-8, 3.0, 1e8])
        assert -1.0 <= score <= 1.0
