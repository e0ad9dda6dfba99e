
"""Random sources for piece, color and spawn-rotation picks"""
import random
from typing import Iterable, Optional, Sequence, TypeVar

T = TypeVar("T")

class UniformRandom:
    """Uniform picks from a seeded generator.

    With seed=None a 32-bit seed is drawn once and kept on ``seed`` so the
    session can be replayed by putting it in CONFIG["SEED"].
    """
    def __init__(self, seed: Optional[int] = None):
        if seed is None:
            seed = random.randrange(1 << 32)
        self.seed = seed
        self._rng = random.Random(seed)

    def pick(self, options: Sequence[T]) -> T:
        return options[self._rng.randrange(len(options))]

class ScriptedRandom:
    """Deterministic source for tests and replays.

    Each pick returns the next scripted value when it is one of the offered
    options, otherwise the first option without consuming the script.
    Scripting only piece kinds therefore leaves colors at COLORS[0] and
    spawn rotations at zero.
    """
    def __init__(self, script: Iterable = ()):
        self.script = list(script)

    def pick(self, options: Sequence[T]) -> T:
        if self.script and self.script[0] in options:
            return self.script.pop(0)
        return options[0]
