import random
import unittest
from linepair.engine import LinesMatcher

VOCABULARY = ["int", "x", "y", "count", "value", "return", "getValue", "set_value", "if", "else", "{", "}", "=", "+", "(", ")"]

def random_line(rng):
    indent = " " * rng.choice([0, 4, 8])
    return indent + " ".join(rng.choice(VOCABULARY) for _ in range(rng.randint(0, 6)))

class TestPairingInvariants(unittest.TestCase):
    """
    Runs the matcher on seeded random hunks and checks the properties
    every result must have, whatever the content.
    """

    def setUp(self):
        self.rng = random.Random(3310)
        self.matcher = LinesMatcher()

    def indexed_pairs(self, removed, added):
        # tuples keep equal texts apart
        removed_lines = list(enumerate(removed))
        added_lines = list(enumerate(added))
        pairs = list(self.matcher.find_line_pairs(removed_lines, added_lines, lambda line: line[1]))
        return [(r[0], a[0]) for r, a in pairs]

    def test_random_hunks(self):
        for _ in range(300):
            removed = [random_line(self.rng) for _ in range(self.rng.randint(0, 12))]
            added = [random_line(self.rng) for _ in range(self.rng.randint(0, 12))]
            pairs = self.indexed_pairs(removed, added)

            self.assertLessEqual(len(pairs), min(len(removed), len(added)))
            if removed and added:
                self.assertGreater(len(pairs), 0)
            for (r1, a1), (r2, a2) in zip(pairs, pairs[1:]):
                self.assertLess(r1, r2)
                self.assertLess(a1, a2)

    def test_random_identical_hunks(self):
        for _ in range(100):
            lines = [random_line(self.rng) for _ in range(self.rng.randint(1, 12))]
            pairs = self.indexed_pairs(lines, list(lines))
            self.assertEqual(pairs, [(i, i) for i in range(len(lines))])

    def test_positional_fallback_keeps_count(self):
        removed = [random_line(self.rng) for _ in range(150)]
        added = [random_line(self.rng) for _ in range(80)]
        self.assertEqual(self.indexed_pairs(removed, added), [(i, i) for i in range(80)])

if __name__ == '__main__':
    unittest.main()
