"""Relevance thresholding of search hits."""

from dataclasses import dataclass, field

from ..domain import AnswerMode, SearchResult

DEFAULT_RELEVANCE_THRESHOLD = 0.5


@dataclass
class RetrievalDecision:
    """Search hits split into usable context and discarded hits.

    Attributes:
        context: Hits scoring at or above the threshold, in search order.
        discarded: Hits below the threshold.
        threshold: The threshold that was applied.
    """

    context: list[SearchResult] = field(default_factory=list)
    discarded: list[SearchResult] = field(default_factory=list)
    threshold: float = DEFAULT_RELEVANCE_THRESHOLD

    @property
    def mode(self) -> AnswerMode:
        """Augmented when any hit qualified, conversational otherwise."""
        return AnswerMode.AUGMENTED if self.context else AnswerMode.CONVERSATIONAL


class RelevancePolicy:
    """Applies one configured similarity threshold to every query's hits.

    Retrieval is advisory: an empty context selects conversational mode
    rather than failing the request.
    """

    def __init__(self, threshold: float = DEFAULT_RELEVANCE_THRESHOLD) -> None:
        self.threshold = threshold

    def partition(self, hits: list[SearchResult]) -> RetrievalDecision:
        """Split hits into context (score >= threshold) and discarded.

        Args:
            hits: Search results, typically already sorted by score.

        Returns:
            RetrievalDecision preserving the input order within each side.
        """
        decision = RetrievalDecision(threshold=self.threshold)
        for hit in hits:
            if hit.score >= self.threshold:
                decision.context.append(hit)
            else:
                decision.discarded.append(hit)
        return decision
