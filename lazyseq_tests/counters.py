from typing import Any, Iterable, Iterator, List, Optional


class CountingSource:
    """
    re-iterable source that records how often it was traversed and how many
    elements were pulled. with fail_after set, pulling more than that many
    elements in total raises, which exposes any over-traversal.
    """

    def __init__(self, items: Iterable[Any], fail_after: Optional[int] = None):
        self.items: List[Any] = list(items)
        self.fail_after = fail_after
        self.opened = 0
        self.pulled = 0

    def __iter__(self) -> Iterator[Any]:
        self.opened += 1
        for item in self.items:
            if self.fail_after is not None and self.pulled >= self.fail_after:
                raise AssertionError(f"source pulled past {self.fail_after} elements")
            self.pulled += 1
            yield item


class CallCounter:
    """wraps a function and counts calls"""

    def __init__(self, func):
        self.func = func
        self.calls = 0

    def __call__(self, *args):
        self.calls += 1
        return self.func(*args)
