from abc import ABC, abstractmethod
from typing import Any, Callable

from treemaze.core.prng import Xoshiro256PlusPlus


class SelectionContractError(IndexError):
    """A selection strategy returned an index outside the frontier."""


class CellSelectionStrategy(ABC):
    @abstractmethod
    def select(self, count: int, prng: Xoshiro256PlusPlus) -> int:
        """
        Picks which frontier entry to expand next.
        Must return an index in [0, count). Only called when count > 1.
        """
        pass


class ThresholdSelection(CellSelectionStrategy):
    """
    Mixes random picks with newest-first picks.

    threshold_percent = 0   -> always the newest entry (long corridors)
    threshold_percent = 100 -> (almost) always a uniformly random entry
    """

    def __init__(self, threshold_percent: int):
        self.threshold_percent = threshold_percent

    def select(self, count: int, prng: Xoshiro256PlusPlus) -> int:
        # A zero threshold must not consume randomness
        if self.threshold_percent > 0 and prng.next_in_range(101) < self.threshold_percent:
            return prng.next_in_range(count)
        return count - 1


class CallbackSelection(CellSelectionStrategy):
    """Adapts a plain function callback(count, prng, context) -> index."""

    def __init__(self, callback: Callable[[int, Xoshiro256PlusPlus, Any], int], context: Any = None):
        self.callback = callback
        self.context = context

    def select(self, count: int, prng: Xoshiro256PlusPlus) -> int:
        return self.callback(count, prng, self.context)
