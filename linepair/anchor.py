from typing import List, Optional

from .models import NO_ANCHOR, Anchor
from .tokenizer import Token, all_subwords, words


def find_anchor(text_removed: str, text_added: str) -> Anchor:
    """
    Finds the longest word common to two paired lines.

    Whole words are tried first, then their camelCase / snake_case parts.

    Args:
        text_removed (str): Text of the removed line.
        text_added (str): Text of the added line.

    Returns:
        Anchor: (word, start in text_removed, start in text_added),
        or (None, 0, 0) if the lines share no token.
    """
    words_removed = list(words(text_removed))
    words_added = list(words(text_added))
    anchor = _longest_common(words_removed, words_added)
    if anchor is not None:
        return anchor

    anchor = _longest_common(list(all_subwords(words_removed)), list(all_subwords(words_added)))
    if anchor is not None:
        return anchor

    return NO_ANCHOR


def _longest_common(removed: List[Token], added: List[Token]) -> Optional[Anchor]:
    first_start = {}
    for word, start in removed:
        first_start.setdefault(word, start)

    best = None
    for word, start in added:
        if word in first_start and (best is None or len(word) > len(best.word)):
            best = Anchor(word, first_start[word], start)
    return best
