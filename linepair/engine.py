from typing import Any, Callable, Dict, Iterator, List, Optional, Sequence, Tuple

from .models import LineData
from .utils import SimilarityCalculator, iter_combinations

# Default Configuration
DEFAULT_CONFIG = {
    # Do not score more lines than usually visible at the same time, it costs O(n*m)
    "MAX_COMBINATIONS": 100 * 100,
    "INSIGNIFICANT_SCORE": SimilarityCalculator.INSIGNIFICANT_SCORE
}

LinePair = Tuple[Any, Any]


class LinesMatcher:
    """
    Pairs the removed and added lines of one hunk for intraline highlighting.

    The best matching pair is chosen as pivot, then the lines before and
    after it are paired recursively. Pairs therefore never cross.
    """

    def __init__(self, config: Optional[Dict] = None):
        """
        Args:
            config (dict, optional): Overrides for DEFAULT_CONFIG.
        """
        self.config = dict(DEFAULT_CONFIG)
        if config:
            self.config.update(config)

    def find_line_pairs(self, removed_lines: Sequence, added_lines: Sequence,
                        text_of: Callable[[Any], str] = str) -> Iterator[LinePair]:
        """
        Finds the pairs of removed and added lines to be highlighted together.

        Args:
            removed_lines (Sequence): Handles of the removed lines, in order.
            added_lines (Sequence): Handles of the added lines, in order.
            text_of (Callable): Returns the text of a line handle.

        Yields:
            Tuple: (removed_line, added_line) with increasing indices on both sides.
        """
        number_of_combinations = len(removed_lines) * len(added_lines)
        if number_of_combinations < 1:
            return

        if number_of_combinations == 1 or number_of_combinations > self.config["MAX_COMBINATIONS"]:
            yield from zip(removed_lines, added_lines)
            return

        removed = [LineData.from_text(line, text_of(line)) for line in removed_lines]
        added = [LineData.from_text(line, text_of(line)) for line in added_lines]
        yield from self._find_line_pairs(removed, added)

    def _find_line_pairs(self, removed: List[LineData], added: List[LineData]) -> Iterator[LinePair]:
        removed_index, added_index = self.find_best_match(removed, added)

        if removed_index > 0 and added_index > 0:
            yield from self._find_line_pairs(removed[:removed_index], added[:added_index])

        yield removed[removed_index].line, added[added_index].line

        removed_index += 1
        added_index += 1
        if removed_index < len(removed) and added_index < len(added):
            yield from self._find_line_pairs(removed[removed_index:], added[added_index:])

    def find_best_match(self, removed: List[LineData], added: List[LineData]) -> Tuple[int, int]:
        """
        Selects the pivot pair of a sub-problem.

        1. The longest removed line whose trimmed text reappears as added line
           (i.e. a reindented line), paired with its first occurrence.
        2. Otherwise the pair with the highest word overlap score, the first
           one in diagonal order on ties.
        3. (0, 0) if no score exceeds the insignificance threshold.
        """
        # --- TIER 1: EXACT TRIM MATCH ---
        first_added = {}
        for j, line in enumerate(added):
            first_added.setdefault(line.trimmed, j)

        best_exact = None
        longest = -1
        for i, line in enumerate(removed):
            j = first_added.get(line.trimmed)
            if j is not None and len(line.trimmed) > longest:
                longest = len(line.trimmed)
                best_exact = (i, j)

        if best_exact is not None:
            return best_exact

        # --- TIER 2: WORD OVERLAP ---
        best = (0, 0)
        max_score = SimilarityCalculator.NO_SCORE
        for i, j in iter_combinations(len(removed), len(added)):
            score = SimilarityCalculator.word_overlap_score(removed[i], added[j])
            if score > max_score:
                max_score = score
                best = (i, j)
                if max_score == 1.0:
                    return best

        if max_score <= self.config["INSIGNIFICANT_SCORE"]:
            return 0, 0
        return best


def find_line_pairs(removed_lines: Sequence, added_lines: Sequence,
                    text_of: Callable[[Any], str] = str,
                    config: Optional[Dict] = None) -> List[LinePair]:
    """Convenience wrapper returning the pairs of LinesMatcher as a list."""
    return list(LinesMatcher(config).find_line_pairs(removed_lines, added_lines, text_of))
