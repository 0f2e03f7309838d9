import unittest

from typeguard import TypeCheckError

from flashdeck.deck import Deck
from flashdeck.errors import CardNotFoundError, DuplicateCardError, EmptyFieldError
from flashdeck.manager import Flashcards
from flashdeck.tests.helpers import quiet_transcript


class TestDeck(unittest.TestCase):
    def setUp(self):
        self.deck = Deck()

    def test_add_links_both_directions(self):
        self.deck.add_card("cat", "animal")
        self.assertEqual(self.deck.lookup("cat"), "animal")
        self.assertEqual(self.deck.reverse_lookup("animal"), "cat")
        self.assertEqual(self.deck.size(), 1)

    def test_remove_unlinks_both_directions(self):
        self.deck.add_card("cat", "animal")
        self.assertEqual(self.deck.remove_card("cat"), "animal")
        self.assertIsNone(self.deck.lookup("cat"))
        self.assertIsNone(self.deck.reverse_lookup("animal"))
        self.assertEqual(len(self.deck), 0)

    def test_duplicate_term_leaves_deck_unchanged(self):
        self.deck.add_card("cat", "animal")
        with self.assertRaises(DuplicateCardError) as ctx:
            self.deck.add_card("cat", "pet")
        self.assertEqual(ctx.exception.kind, "term")
        self.assertIsNone(self.deck.reverse_lookup("pet"))
        self.assertEqual(self.deck.terms(), ["cat"])

    def test_duplicate_definition_leaves_deck_unchanged(self):
        self.deck.add_card("cat", "animal")
        with self.assertRaises(DuplicateCardError) as ctx:
            self.deck.add_card("dog", "animal")
        self.assertEqual(ctx.exception.kind, "definition")
        self.assertNotIn("dog", self.deck)
        self.assertEqual(self.deck.reverse_lookup("animal"), "cat")

    def test_empty_fields_rejected(self):
        with self.assertRaises(EmptyFieldError) as ctx:
            self.deck.add_card("", "animal")
        self.assertEqual(ctx.exception.kind, "term")
        with self.assertRaises(EmptyFieldError) as ctx:
            self.deck.add_card("cat", "")
        self.assertEqual(ctx.exception.kind, "definition")
        self.assertEqual(len(self.deck), 0)

    def test_non_string_rejected(self):
        with self.assertRaises(TypeCheckError):
            self.deck.add_card(1, "one")

    def test_add_remove_scenario(self):
        self.deck.add_card("cat", "animal")
        with self.assertRaises(DuplicateCardError):
            self.deck.add_card("cat", "x")
        self.deck.remove_card("cat")
        with self.assertRaises(CardNotFoundError):
            self.deck.remove_card("cat")

    def test_terms_keep_insertion_order(self):
        for term in ("b", "a", "c"):
            self.deck.add_card(term, term.upper())
        self.assertEqual(self.deck.terms(), ["b", "a", "c"])

    def test_upsert_replaces_definition(self):
        self.deck.add_card("cat", "animal")
        displaced = self.deck.upsert_card("cat", "pet")
        self.assertEqual(displaced, [])
        self.assertEqual(self.deck.lookup("cat"), "pet")
        self.assertIsNone(self.deck.reverse_lookup("animal"))

    def test_upsert_displaces_owner_of_definition(self):
        removed = []
        deck = Deck(on_remove=removed.append)
        deck.add_card("cat", "animal")
        displaced = deck.upsert_card("dog", "animal")
        self.assertEqual(displaced, ["cat"])
        self.assertEqual(removed, ["cat"])
        self.assertEqual(deck.reverse_lookup("animal"), "dog")
        self.assertNotIn("cat", deck)


class TestSessionCards(unittest.TestCase):
    def setUp(self):
        transcript, _ = quiet_transcript()
        self.session = Flashcards(transcript=transcript)

    def test_add_starts_counter_at_zero(self):
        self.session.add_card("cat", "animal")
        self.assertIn("cat", self.session.stats)
        self.assertEqual(self.session.stats.get("cat"), 0)

    def test_remove_drops_counter(self):
        self.session.add_card("cat", "animal")
        self.session.stats.record_mistake("cat")
        self.session.remove_card("cat")
        self.assertNotIn("cat", self.session.stats)


if __name__ == '__main__':
    unittest.main()
