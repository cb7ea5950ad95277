from functools import partial

from .iterators import InfiniteChainIterator, SizedChainIterator
from .markov_chain import Chain
from ..corpus import read_lines, tokenize


class WordChain(Chain):
    """
    A Chain whose tokens are words. Sentences go in as strings and come out
    as strings joined by single spaces.
    """

    def feed_str(self, line):
        """Feeds a line of text, split on single spaces."""
        return self.feed(line.split(' '))

    def feed_lines(self, lines):
        """Feeds each line as its own sentence, split on any whitespace."""
        for line in lines:
            self.feed(tokenize(line))
        return self

    def feed_file(self, path):
        """Feeds a text file with one sentence per line."""
        return self.feed_lines(read_lines(path))

    def generate_str(self, rng=None):
        return ' '.join(self.generate(rng))

    def generate_str_from_token(self, word, rng=None):
        """Returns an empty string if `word` never started a context."""
        return ' '.join(self.generate_from_token(word, rng))

    def generate_str_from_tokens(self, words, rng=None):
        return ' '.join(self.generate_from_tokens(words, rng))

    def str_iter(self, rng=None):
        return InfiniteChainIterator(partial(self.generate_str, rng=rng))

    def str_iter_for(self, size, rng=None):
        return SizedChainIterator(partial(self.generate_str, rng=rng), size)
