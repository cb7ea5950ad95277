import random
import tempfile
import unittest
from pathlib import Path

from helpers import ScriptedRandom
from markov import Chain, WordChain

SENTENCES = {"I like cats", "I hate cats"}


class TestWordChain(unittest.TestCase):

    def setUp(self):
        self.chain = WordChain()
        self.chain.feed_str("I like cats").feed_str("I hate cats")

    def test_is_a_chain(self):
        self.assertIsInstance(self.chain, Chain)
        self.assertEqual(self.chain, Chain().feed(['I', 'like', 'cats']).feed(['I', 'hate', 'cats']))

    def test_generate_str(self):
        rng = random.Random(1)
        for _ in range(20):
            self.assertIn(self.chain.generate_str(rng), SENTENCES)

    def test_generate_str_scripted(self):
        self.assertEqual(self.chain.generate_str(ScriptedRandom([0, 1, 0, 0])), "I hate cats")

    def test_empty_chain_generates_empty_string(self):
        self.assertEqual(WordChain().generate_str(), "")

    def test_generate_str_from_token(self):
        self.assertEqual(self.chain.generate_str_from_token("hate"), "hate cats")
        self.assertEqual(self.chain.generate_str_from_token("missing"), "")

    def test_generate_str_from_tokens(self):
        self.assertEqual(self.chain.generate_str_from_tokens(["I", "like"]), "I like cats")
        self.assertEqual(self.chain.generate_str_from_tokens(["cats", "lick"]), "cats")

    def test_feed_str_splits_on_single_spaces(self):
        chain = WordChain().feed_str("a  b")
        self.assertEqual(chain.generate(), ['a', '', 'b'])

    def test_feed_lines_feeds_each_line(self):
        chain = WordChain().feed_lines(["I like cats", "", "   ", "I\thate  cats\n"])
        self.assertEqual(chain, self.chain)

    def test_feed_file(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / 'corpus.txt'
            path.write_text("I like cats\n\nI hate cats\n", encoding='utf-8')
            chain = WordChain().feed_file(path)
        self.assertEqual(chain, self.chain)

    def test_feed_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            WordChain().feed_file('/nonexistent/corpus.txt')

    def test_str_iter_for(self):
        results = list(self.chain.str_iter_for(4))
        self.assertEqual(len(results), 4)
        self.assertTrue(set(results) <= SENTENCES)

    def test_str_iter(self):
        it = self.chain.str_iter(random.Random(2))
        for _ in range(10):
            self.assertIn(next(it), SENTENCES)


if __name__ == '__main__':
    unittest.main()
