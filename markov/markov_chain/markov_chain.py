import logging
import random
from collections import Counter
from functools import partial

from .iterators import InfiniteChainIterator, SizedChainIterator

logger = logging.getLogger(__name__)


class _Sentinel:
    def __repr__(self):
        return 'SENTINEL'

    def __reduce__(self):
        # Unpickles to the module-level singleton
        return 'SENTINEL'


SENTINEL = _Sentinel()


class Distribution(Counter):
    def add(self, slot, count=1):
        if count < 1:
            raise ValueError(f"count must be >= 1, got {count}")
        self[slot] += count

    def total(self):
        return sum(self.values())

    def next(self, rng=None):
        """Draws a slot with probability proportional to its count."""
        if rng is None:
            rng = random
        total = self.total()
        if total <= 0:
            raise ValueError("Cannot sample from an empty distribution")
        cap = rng.randrange(total)
        running = 0
        for slot, count in self.items():
            running += count
            if running > cap:
                return slot
        raise RuntimeError(f"Random source returned {cap}, outside [0, {total})")


class Chain:
    def __init__(self, order=1):
        if isinstance(order, bool) or not isinstance(order, int):
            raise TypeError(f"order must be an int, got {type(order).__name__}")
        if order < 1:
            raise ValueError("order must be >= 1")
        self.order = order
        self.map = {self.start_key: Distribution()}

    @property
    def start_key(self):
        return (SENTINEL,) * self.order

    def is_empty(self):
        return not self.map[self.start_key]

    def feed(self, tokens):
        """Feeds one finished sequence of tokens into the chain."""
        tokens = list(tokens)
        if not tokens:
            return self

        padded = [SENTINEL] * self.order + tokens + [SENTINEL]
        for i in range(len(padded) - self.order):
            key = tuple(padded[i:i + self.order])
            dist = self.map.get(key)
            if dist is None:
                dist = self.map[key] = Distribution()
            dist.add(padded[i + self.order])

        logger.debug(f"Fed {len(tokens)} tokens; chain now has {len(self.map)} contexts")
        return self

    def _walk(self, key, out, rng):
        # Extends `out` from context `key` until the terminal sentinel is drawn
        while True:
            slot = self.map[key].next(rng)
            key = key[1:] + (slot,)
            if slot is SENTINEL:
                return out
            out.append(slot)

    def generate(self, rng=None):
        if self.is_empty():
            return []
        return self._walk(self.start_key, [], rng)

    def generate_from_token(self, token, rng=None):
        """Returns an empty list if `token` never started a sequence."""
        key = (SENTINEL,) * (self.order - 1) + (token,)
        if key not in self.map:
            return []
        return self._walk(key, [token], rng)

    def generate_from_tokens(self, tokens, rng=None):
        """Returns the matched seed prefix if a seed token breaks off."""
        tokens = list(tokens)
        if not tokens:
            return self.generate(rng)

        first, rest = tokens[0], tokens[1:]
        key = (SENTINEL,) * (self.order - 1) + (first,)
        if key not in self.map:
            return []

        out = [first]
        for token in rest:
            if token not in self.map[key]:
                return out
            key = key[1:] + (token,)
            out.append(token)

        return self._walk(key, out, rng)

    def merge(self, other):
        if self.order != other.order:
            raise ValueError(f"Cannot merge a chain of order {other.order} into one of order {self.order}")
        if other is self:
            return self

        for key, other_dist in other.map.items():
            dist = self.map.get(key)
            if dist is None:
                dist = self.map[key] = Distribution()
            for slot, count in other_dist.items():
                dist.add(slot, count)

        other.map = {other.start_key: Distribution()}
        logger.debug(f"Merged chain; now {len(self.map)} contexts")
        return self

    def iter(self, rng=None):
        """Produces an infinite iterator of generated sequences."""
        return InfiniteChainIterator(partial(self.generate, rng=rng))

    def iter_for(self, size, rng=None):
        """Produces an iterator over exactly `size` generated sequences."""
        return SizedChainIterator(partial(self.generate, rng=rng), size)

    def __eq__(self, other):
        if not isinstance(other, Chain):
            return NotImplemented
        return self.order == other.order and self.map == other.map

    def __repr__(self):
        return f"{type(self).__name__}(order={self.order}, contexts={len(self.map)})"
