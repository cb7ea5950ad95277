class InfiniteChainIterator:
    """
    An infinite iterator over a Markov chain.
    Each pull calls the generator again; nothing is cached.
    """

    def __init__(self, generate):
        self._generate = generate

    def __iter__(self):
        return self

    def __next__(self):
        return self._generate()

    def __length_hint__(self):
        # Unbounded
        return NotImplemented


class SizedChainIterator:
    """A sized iterator over a Markov chain."""

    def __init__(self, generate, size):
        if size < 0:
            raise ValueError("size must be >= 0")
        self._generate = generate
        self.remaining = size

    def __iter__(self):
        return self

    def __next__(self):
        if self.remaining <= 0:
            raise StopIteration
        self.remaining -= 1
        return self._generate()

    def __len__(self):
        return self.remaining

    def __length_hint__(self):
        return self.remaining
