"""
Line Pair Entry Point
=====================

This module serves as the command-line interface for the line pairing tool.
It orchestrates the input parsing, the pairing of every hunk, the anchor
search per pair and the output of the results.

Usage:
    python -m linepair <source_a> [source_b] [--html report.html]
"""
import argparse
import sys
from operator import attrgetter
from typing import List, Optional, Tuple
from .anchor import find_anchor
from .engine import DEFAULT_CONFIG, LinesMatcher
from .input_controller import InputController
from .models import Anchor, DiffLine, Hunk
from .visualizer import HTMLVisualizer

Entry = Tuple[Optional[DiffLine], Optional[DiffLine], Optional[Anchor]]

def match_hunk(hunk: Hunk, matcher: LinesMatcher) -> List[Entry]:
    """
    Pairs the lines of a hunk and lists all lines in diff order.

    Args:
        hunk (Hunk): The removed and added lines.
        matcher (LinesMatcher): The configured matcher.

    Returns:
        list: (removed, added, anchor) entries. Unpaired lines have None
        on the other side and no anchor.
    """
    entries = []
    next_removed = 0
    next_added = 0
    for removed, added in matcher.find_line_pairs(hunk.removed, hunk.added, attrgetter("text")):
        # identity, because equal lines compare equal
        removed_index = next(i for i in range(next_removed, len(hunk.removed)) if hunk.removed[i] is removed)
        added_index = next(j for j in range(next_added, len(hunk.added)) if hunk.added[j] is added)
        entries.extend((line, None, None) for line in hunk.removed[next_removed:removed_index])
        entries.extend((None, line, None) for line in hunk.added[next_added:added_index])
        entries.append((removed, added, find_anchor(removed.text, added.text)))
        next_removed = removed_index + 1
        next_added = added_index + 1

    entries.extend((line, None, None) for line in hunk.removed[next_removed:])
    entries.extend((None, line, None) for line in hunk.added[next_added:])
    return entries

def format_entry(entry: Entry) -> str:
    removed, added, anchor = entry
    old = removed.number if removed else -1
    new = added.number if added else -1
    text = f"{old} -> {new}"
    if anchor and anchor.word:
        text += f"  [{anchor.word}]"
    return text

def main():
    """
    Main execution function.

    1. Parses command line arguments.
    2. Reads and parses input files into hunks.
    3. Pairs the lines of every hunk.
    4. Prints the results to stdout, optionally writes an HTML report.
    """
    parser = argparse.ArgumentParser(description="Line Pair: match removed and added lines of diff hunks")
    parser.add_argument("source_a", help="Removed lines file, unified diff (.diff/.patch) or combined file")
    parser.add_argument("source_b", nargs="?", help="Added lines file (optional)")
    parser.add_argument("--html", metavar="PATH", help="Write a side-by-side HTML report")
    parser.add_argument("--max-combinations", type=int, default=DEFAULT_CONFIG["MAX_COMBINATIONS"],
                        help="Pair positionally if removed * added lines exceed this")
    parser.add_argument("--insignificant-score", type=float, default=DEFAULT_CONFIG["INSIGNIFICANT_SCORE"],
                        help="Word overlap scores at or below this are ignored")
    args = parser.parse_args()

    # 1. Parse Input
    controller = InputController()
    hunks = controller.parse(args.source_a, args.source_b)

    if not any(hunk.removed or hunk.added for hunk in hunks):
        print("Error: No input data found.")
        sys.exit(1)

    # 2. Match
    matcher = LinesMatcher({
        "MAX_COMBINATIONS": args.max_combinations,
        "INSIGNIFICANT_SCORE": args.insignificant_score
    })
    results = [(hunk, match_hunk(hunk, matcher)) for hunk in hunks]

    # 3. Output Results
    # change blocks of one @@ hunk share its header
    previous_header = None
    for hunk, entries in results:
        if hunk.header and hunk.header != previous_header:
            print(hunk.header)
        previous_header = hunk.header
        for entry in entries:
            print(format_entry(entry))

    if args.html:
        HTMLVisualizer().generate(results, args.html)
        print(f"Report written to {args.html}", file=sys.stderr)

if __name__ == "__main__":
    main()
