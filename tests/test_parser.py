import unittest
import os
from linepair.input_controller import InputController, RawFileParser, CombinedFileParser, UnifiedDiffParser
from linepair.models import DiffLine

SAMPLE_DIFF = """diff --git a/calc.py b/calc.py
--- a/calc.py
+++ b/calc.py
@@ -1,5 +1,6 @@ def total(items):
 def total(items):
-    result = 0
-    for item in items:
+    result = 0.0
+    for entry in items:
+        check(entry)
         pass
-    return result
+    return round(result)
\\ No newline at end of file
@@ -20,2 +21,2 @@
--- old comment
+--- new comment
 tail
"""

class TestInputController(unittest.TestCase):
    def setUp(self):
        self.controller = InputController()
        # Create dummy files
        with open("test_a.txt", "w") as f: f.write("line 1\n  line 2\n")
        with open("test_b.txt", "w") as f: f.write("line 1\nline 3")
        with open("test_combined.txt", "w") as f:
            f.write("--- OLD FILE ---\nold 1\n--- NEW FILE ---\nnew 1\nnew 2")
        with open("test_sample.diff", "w") as f: f.write(SAMPLE_DIFF)

    def tearDown(self):
        for name in ("test_a.txt", "test_b.txt", "test_combined.txt", "test_sample.diff"):
            if os.path.exists(name): os.remove(name)

    def test_raw_parsing(self):
        hunks = self.controller.parse("test_a.txt", "test_b.txt")
        self.assertEqual(len(hunks), 1)
        self.assertEqual(hunks[0].removed, [DiffLine(1, "line 1"), DiffLine(2, "  line 2")])
        self.assertEqual(hunks[0].added, [DiffLine(1, "line 1"), DiffLine(2, "line 3")])

    def test_raw_parser_requires_two_files(self):
        with self.assertRaises(ValueError):
            RawFileParser().parse("test_a.txt")

    def test_missing_file(self):
        self.assertEqual(self.controller.parse("test_a.txt", "non_existent_file.txt"), [])
        self.assertEqual(self.controller.parse("non_existent_file.diff"), [])

    def test_combined_parsing(self):
        hunks = self.controller.parse("test_combined.txt")
        self.assertEqual(len(hunks), 1)
        self.assertEqual([line.text for line in hunks[0].removed], ["old 1"])
        self.assertEqual([line.text for line in hunks[0].added], ["new 1", "new 2"])

    def test_parser_selection(self):
        self.assertIsInstance(self.controller._get_parser("a.txt", "b.txt"), RawFileParser)
        self.assertIsInstance(self.controller._get_parser("a.patch"), UnifiedDiffParser)
        self.assertIsInstance(self.controller._get_parser("a.txt"), CombinedFileParser)

    def test_unified_diff_parsing(self):
        hunks = self.controller.parse("test_sample.diff")
        self.assertEqual(len(hunks), 3)

        first, second, third = hunks
        self.assertEqual(first.header, "@@ -1,5 +1,6 @@ def total(items):")
        self.assertEqual(first.removed, [DiffLine(2, "    result = 0"), DiffLine(3, "    for item in items:")])
        self.assertEqual(first.added, [DiffLine(2, "    result = 0.0"), DiffLine(3, "    for entry in items:"),
                                       DiffLine(4, "        check(entry)")])

        self.assertEqual(second.removed, [DiffLine(5, "    return result")])
        self.assertEqual(second.added, [DiffLine(6, "    return round(result)")])

        # "---" inside a hunk is a removed line, not a file header
        self.assertEqual(third.header, "@@ -20,2 +21,2 @@")
        self.assertEqual(third.removed, [DiffLine(20, "-- old comment")])
        self.assertEqual(third.added, [DiffLine(21, "--- new comment")])

    def test_binary_content_keeps_its_side(self):
        hunks = UnifiedDiffParser().parse_lines(["@@ -1,2 +1,2 @@", "-a\0b", "-c", "+d", "+e"])
        self.assertEqual(len(hunks), 1)
        self.assertEqual(hunks[0].removed, [DiffLine(1, ""), DiffLine(2, "c")])
        self.assertEqual(hunks[0].added, [DiffLine(1, "d"), DiffLine(2, "e")])

    def test_removed_after_added_starts_new_hunk(self):
        hunks = UnifiedDiffParser().parse_lines(["@@ -1,2 +1,2 @@", "-a", "+b", "-c", "+d"])
        self.assertEqual(len(hunks), 2)
        self.assertEqual(hunks[1].removed, [DiffLine(2, "c")])
        self.assertEqual(hunks[1].added, [DiffLine(2, "d")])

if __name__ == '__main__':
    unittest.main()
