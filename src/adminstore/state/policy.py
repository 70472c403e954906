"""Request generation policy.

Each resource key carries a monotonically increasing generation. A load
stamps the generation it started with; when its response resolves, it may
only be applied while that generation is still the current one.
"""

from __future__ import annotations


def should_apply_response(*, current_generation: int, response_generation: int) -> bool:
    """Only the most recently started request of a resource may write state."""
    return response_generation == current_generation


class GenerationTracker:
    """Per-resource generation counters."""

    def __init__(self) -> None:
        self._generations: dict[str, int] = {}

    def current(self, key: str) -> int:
        return self._generations.get(key, 0)

    def advance(self, key: str) -> int:
        """Start a new generation for *key* and return it."""
        generation = self.current(key) + 1
        self._generations[key] = generation
        return generation

    def is_current(self, key: str, generation: int) -> bool:
        return should_apply_response(current_generation=self.current(key), response_generation=generation)
