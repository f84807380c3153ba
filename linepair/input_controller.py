import re
from abc import ABC, abstractmethod
from typing import List, Optional
from .models import DiffLine, Hunk

class InputParser(ABC):
    """Abstract base class for input parsers."""

    @abstractmethod
    def parse(self, source_a: str, source_b: str = None) -> List[Hunk]:
        """
        Parses the input source(s) into hunks of removed and added lines.

        Args:
            source_a (str): The first source path.
            source_b (str, optional): The second source path.

        Returns:
            List[Hunk]: The hunks in file order.
        """
        pass

    def preprocess_line(self, line: str) -> str:
        """
        Drops the line terminator. Text is otherwise kept verbatim,
        because pairing and highlighting work on the raw text.

        Args:
            line (str): The raw line.

        Returns:
            str: The line text.
        """
        # Binary Check: If line contains null bytes, it's likely binary
        if '\0' in line:
            return ""
        return line.rstrip("\r\n")

class RawFileParser(InputParser):
    """Parses two separate files: all lines of the first are removed, all of the second added."""
    def parse(self, source_a: str, source_b: str = None) -> List[Hunk]:
        if not source_b:
            raise ValueError("RawFileParser requires two files.")
        removed = self._read_file(source_a)
        added = self._read_file(source_b)
        if removed is None or added is None:
            return []
        return [Hunk(removed=removed, added=added)]

    def _read_file(self, filepath: str) -> Optional[List[DiffLine]]:
        lines = []
        try:
            with open(filepath, 'r', encoding='utf-8', errors='ignore') as f:
                for number, line in enumerate(f, start=1):
                    lines.append(DiffLine(number, self.preprocess_line(line)))
        except FileNotFoundError:
            print(f"Warning: File not found: {filepath}")
            return None
        return lines

class CombinedFileParser(InputParser):
    """Parses a single file containing both versions separated by delimiters."""
    DELIMITER_OLD = "--- OLD FILE ---"
    DELIMITER_NEW = "--- NEW FILE ---"

    def parse(self, source_a: str, source_b: str = None) -> List[Hunk]:
        hunk = Hunk()
        current_section = None
        found_old = False
        found_new = False

        try:
            with open(source_a, 'r', encoding='utf-8', errors='ignore') as f:
                for line in f:
                    stripped = line.strip()
                    if stripped == self.DELIMITER_OLD:
                        current_section = "OLD"
                        found_old = True
                        continue
                    elif stripped == self.DELIMITER_NEW:
                        current_section = "NEW"
                        found_new = True
                        continue

                    text = self.preprocess_line(line)
                    if current_section == "OLD":
                        hunk.removed.append(DiffLine(len(hunk.removed) + 1, text))
                    elif current_section == "NEW":
                        hunk.added.append(DiffLine(len(hunk.added) + 1, text))

            if not found_old or not found_new:
                print(f"Warning: Missing delimiters in {source_a}. Found OLD: {found_old}, NEW: {found_new}")

        except FileNotFoundError:
            print(f"Warning: File not found: {source_a}")
            return []
        return [hunk]

class UnifiedDiffParser(InputParser):
    """
    Parses a unified diff. Every run of '-' lines followed by '+' lines
    inside an @@ hunk becomes one Hunk; context lines separate the runs.
    """
    HUNK_HEADER = re.compile(r'^@@ -(\d+)(?:,(\d+))? \+(\d+)(?:,(\d+))? @@')

    def parse(self, source_a: str, source_b: str = None) -> List[Hunk]:
        try:
            with open(source_a, 'r', encoding='utf-8', errors='ignore') as f:
                return self.parse_lines(f)
        except FileNotFoundError:
            print(f"Warning: File not found: {source_a}")
            return []

    def parse_lines(self, lines) -> List[Hunk]:
        hunks = []
        header = ""
        old_number = new_number = 0
        old_left = new_left = 0
        current = Hunk()

        def flush():
            nonlocal current
            if current.removed or current.added:
                hunks.append(current)
            current = Hunk(header=header)

        for line in lines:
            text = line.rstrip("\r\n")

            # Outside of a hunk only headers matter
            if old_left <= 0 and new_left <= 0:
                match = self.HUNK_HEADER.match(text)
                if match:
                    flush()
                    header = text
                    current.header = header
                    old_number = int(match.group(1))
                    old_left = int(match.group(2)) if match.group(2) is not None else 1
                    new_number = int(match.group(3))
                    new_left = int(match.group(4)) if match.group(4) is not None else 1
                continue

            if text.startswith('\\'):
                # "\ No newline at end of file"
                continue

            # binary check on the content only, the marker decides the side
            marker, content = text[:1], self.preprocess_line(text[1:])
            if marker == '-':
                if current.added:
                    flush()
                current.removed.append(DiffLine(old_number, content))
                old_number += 1
                old_left -= 1
            elif marker == '+':
                current.added.append(DiffLine(new_number, content))
                new_number += 1
                new_left -= 1
            else:
                flush()
                old_number += 1
                new_number += 1
                old_left -= 1
                new_left -= 1

        flush()
        return hunks

class InputController:
    """
    Orchestrates parsing of the supported input formats into hunks.
    """

    DIFF_EXTENSIONS = ('.diff', '.patch')

    def parse(self, source_a: str, source_b: str = None) -> List[Hunk]:
        """
        Parses inputs into hunks of removed and added lines.

        Args:
            source_a (str): First source path.
            source_b (str, optional): Second source path.

        Returns:
            List[Hunk]: The hunks in file order.
        """
        parser = self._get_parser(source_a, source_b)
        return parser.parse(source_a, source_b)

    def _get_parser(self, source_a: str, source_b: str = None) -> InputParser:
        if source_b: return RawFileParser()
        if source_a.endswith(self.DIFF_EXTENSIONS): return UnifiedDiffParser()
        return CombinedFileParser()
