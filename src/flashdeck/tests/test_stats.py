import unittest

from flashdeck.hardest import HardestCards, find_hardest
from flashdeck.stats import StatsTracker


class TestStatsTracker(unittest.TestCase):
    def setUp(self):
        self.stats = StatsTracker()

    def test_mistake_on_untracked_term_starts_at_one(self):
        self.assertEqual(self.stats.record_mistake("cat"), 1)
        self.assertEqual(self.stats.get("cat"), 1)

    def test_track_keeps_existing_count(self):
        self.stats.record_mistake("cat")
        self.stats.track("cat")
        self.assertEqual(self.stats.get("cat"), 1)

    def test_reset_zeroes_but_keeps_entries(self):
        self.stats.set_count("a", 3)
        self.stats.set_count("b", 0)
        self.stats.reset()
        self.assertEqual(sorted(self.stats.all_entries()), [("a", 0), ("b", 0)])

    def test_drop_term(self):
        self.stats.track("a")
        self.stats.drop_term("a")
        self.stats.drop_term("missing")
        self.assertEqual(len(self.stats), 0)
        self.assertEqual(self.stats.get("a"), 0)

    def test_negative_count_rejected(self):
        with self.assertRaises(ValueError):
            self.stats.set_count("a", -1)


class TestFindHardest(unittest.TestCase):
    def test_ties_sorted_lexicographically(self):
        stats = StatsTracker()
        for term, count in {"c": 5, "a": 3, "b": 5, "d": 1}.items():
            stats.set_count(term, count)
        self.assertEqual(find_hardest(stats), HardestCards(["b", "c"], 5))

    def test_single_hardest(self):
        stats = StatsTracker()
        stats.track("a")
        stats.record_mistake("b")
        self.assertEqual(find_hardest(stats), (["b"], 1))

    def test_all_zero(self):
        stats = StatsTracker()
        stats.track("a")
        stats.track("b")
        self.assertEqual(find_hardest(stats), ([], 0))

    def test_nothing_tracked(self):
        self.assertEqual(find_hardest(StatsTracker()), ([], 0))


if __name__ == '__main__':
    unittest.main()
