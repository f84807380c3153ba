from typing import Iterator, Tuple

from .models import LineData


class SimilarityCalculator:
    """
    Static utility class for comparing the derived data of two lines.
    """

    # Strictly below any valid overlap score
    NO_SCORE = -1.0
    INSIGNIFICANT_SCORE = 0.1

    @staticmethod
    def exact_match(removed: LineData, added: LineData) -> bool:
        """True if both lines are equal apart from surrounding whitespace."""
        return removed.trimmed == added.trimmed

    @staticmethod
    def word_overlap_score(removed: LineData, added: LineData) -> float:
        """
        Summed length of the common words relative to the longer line.
        Returns 1.0 (same words) to 0.0 (no common word), or NO_SCORE
        if either line has no words at all.
        """
        if not removed.words or not added.words:
            return SimilarityCalculator.NO_SCORE

        common_length = sum(len(w) for w in removed.words & added.words)
        return common_length / max(removed.words_total_length, added.words_total_length)


def iter_combinations(first_len: int, second_len: int) -> Iterator[Tuple[int, int]]:
    """
    Iterates all index pairs diagonal by diagonal:
    (0,0), (1,0), (0,1), (2,0), (1,1), (0,2), ...

    The order is the tie-break order of the word overlap search, so
    pairs close to the principal diagonal are preferred.
    """
    # upper left half including the principal diagonal
    for diagonal in range(first_len):
        for second in range(min(diagonal + 1, second_len)):
            yield diagonal - second, second

    # lower right half
    for diagonal in range(1, second_len):
        for second in range(diagonal, min(first_len + diagonal, second_len)):
            yield first_len - 1 + diagonal - second, second
