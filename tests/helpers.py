class ScriptedRandom:
    """A random source that returns a fixed, repeating script of draws."""

    def __init__(self, draws):
        self.draws = list(draws)
        self.calls = []
        self._i = 0

    def randrange(self, n):
        value = self.draws[self._i % len(self.draws)]
        self._i += 1
        self.calls.append(n)
        if not 0 <= value < n:
            raise AssertionError(f"scripted draw {value} outside [0, {n})")
        return value
