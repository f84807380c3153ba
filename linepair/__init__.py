"""
Line Pair Package
=================

This package pairs the removed and added lines of a diff hunk so that an
intraline highlighter can show word-level changes instead of whole-line
replacements. Pivot pairs are chosen by exact trimmed-text match, then by
word overlap, and the remaining lines are paired recursively around them.

Modules:
    - engine: Core pairing logic (LinesMatcher).
    - anchor: Common word search inside one line pair.
    - tokenizer: Word and subword (camelCase, snake_case) splitting.
    - utils: Line similarity scores and the diagonal index enumeration.
    - models: Data structures (DiffLine, Hunk, LineData, Anchor).
    - input_controller: Handles various input formats (Files, Unified Diff, Combined).
    - visualizer: Side-by-side HTML report.
"""
from .anchor import find_anchor
from .engine import DEFAULT_CONFIG, LinesMatcher, find_line_pairs
from .models import NO_ANCHOR, Anchor, DiffLine, Hunk
from .tokenizer import all_subwords, subwords, words
from .utils import iter_combinations
