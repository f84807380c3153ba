from typing import Callable, Iterable, Iterator, Tuple

Token = Tuple[str, int]


def is_letter_or_digit(c: str) -> bool:
    """Letters and decimal digits, but not other numerics such as superscripts or fractions."""
    return c.isalpha() or c.isdecimal()


def is_word_char(c: str) -> bool:
    """Letters, digits and the underscore make up words."""
    return is_letter_or_digit(c) or c == "_"


def words(text: str, is_word_char: Callable[[str], bool] = is_word_char) -> Iterator[Token]:
    """
    Splits text into maximal runs of word characters.

    Args:
        text (str): The text to tokenize.
        is_word_char (Callable): Predicate selecting the word characters.

    Yields:
        Tuple[str, int]: Each word and its start offset in text.
    """
    length = len(text)
    start = 0
    while start < length:
        if not is_word_char(text[start]):
            start += 1
            continue

        end = start + 1
        while end < length and is_word_char(text[end]):
            end += 1
        yield text[start:end], start
        # text[end] is a separator (or the end)
        start = end + 1


def subwords(word: str, offset: int = 0) -> Iterator[Token]:
    """
    Splits an identifier into its camelCase / snake_case parts.

    A part ends where the character case changes to upper or at a
    non-alphanumeric character, which is dropped. A non-alphanumeric
    prefix stays attached to the first part, except a single one that is
    directly followed by an upper case part.

    Args:
        word (str): A word as produced by words().
        offset (int): Start offset of word in its source text.

    Yields:
        Tuple[str, int]: Each subword and its absolute start offset.

    Example:
        >>> list(subwords("fooBarBAZ"))
        [('foo', 0), ('Bar', 3), ('BAZ', 6)]
    """
    end = len(word)
    if end == 0:
        return

    start = 0
    previous_upper = word[0].isupper()
    for index in range(end):
        current_upper = word[index].isupper()
        if previous_upper != current_upper:
            previous_upper = current_upper
            if current_upper:
                # no part consisting of a single leading separator
                if not (index == 1 and not is_letter_or_digit(word[0])):
                    yield word[start:index], offset + start
                start = index

        if index > 0 and not is_letter_or_digit(word[index]):
            if start < index and is_letter_or_digit(word[index - 1]):
                yield word[start:index], offset + start
            start = index + 1
            previous_upper = True

    if start < end and not (end == 1 and not is_letter_or_digit(word[0])):
        yield word[start:end], offset + start


def all_subwords(tokens: Iterable[Token]) -> Iterator[Token]:
    """Flattens (word, start) tokens into subwords with absolute offsets."""
    for word, start in tokens:
        yield from subwords(word, start)
