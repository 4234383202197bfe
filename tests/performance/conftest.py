"""Pytest fixtures and utilities for parser timing tests."""

import statistics
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

import pytest

from mdtree import MarkdownDocument, MarkdownParser


@dataclass
class ParseTiming:
    """Results from timing one input.

    Attributes
    ----------
    label : str
        Short name of the input being tested
    input_size : int
        Length of the input in characters
    iterations : int
        Number of timed iterations
    timings : list of float
        Individual timing results for each iteration
    mean_time : float
        Mean parse time in seconds
    max_time : float
        Slowest parse time in seconds
    document : MarkdownDocument
        Tree produced by the last iteration

    """

    label: str
    input_size: int
    iterations: int
    timings: List[float]
    mean_time: float
    max_time: float
    document: MarkdownDocument

    @property
    def chars_per_second(self) -> float:
        """Throughput based on the mean time."""
        return self.input_size / self.mean_time if self.mean_time > 0 else 0.0


class ParseTimer:
    """Helper class for timing the parser on generated inputs.

    Parameters
    ----------
    warmup_iterations : int, default 1
        Number of untimed runs before timing
    default_iterations : int, default 3
        Default number of timed iterations

    """

    def __init__(self, warmup_iterations: int = 1, default_iterations: int = 3) -> None:
        """Initialize the timer."""
        self.warmup_iterations = warmup_iterations
        self.default_iterations = default_iterations
        self.results: List[ParseTiming] = []

    def run(
        self,
        label: str,
        source: str,
        iterations: Optional[int] = None,
        parse_func: Optional[Callable[[str], MarkdownDocument]] = None,
    ) -> ParseTiming:
        """Time ``parse_func`` on ``source``.

        Parameters
        ----------
        label : str
            Name used in the summary
        source : str
            Markdown input
        iterations : int, optional
            Number of iterations (uses default if not specified)
        parse_func : callable, optional
            Parse function to use (default: a fresh ``MarkdownParser().parse``)

        Returns
        -------
        ParseTiming
            Results from the timing run

        """
        if iterations is None:
            iterations = self.default_iterations
        if parse_func is None:
            parse_func = MarkdownParser().parse

        for _ in range(self.warmup_iterations):
            parse_func(source)

        timings: List[float] = []
        document = None
        for _ in range(iterations):
            start = time.perf_counter()
            document = parse_func(source)
            timings.append(time.perf_counter() - start)

        result = ParseTiming(
            label=label,
            input_size=len(source),
            iterations=iterations,
            timings=timings,
            mean_time=statistics.mean(timings),
            max_time=max(timings),
            document=document,
        )
        self.results.append(result)
        return result

    def print_summary(self) -> None:
        """Print a formatted summary of all timing results."""
        print("\n" + "=" * 72)
        print("PARSER TIMING SUMMARY")
        print("=" * 72)
        print(f"{'Input':<32} {'Chars':>10} {'Mean (ms)':>12} {'Max (ms)':>12}")
        print("-" * 72)
        for result in self.results:
            print(
                f"{result.label[:32]:<32} "
                f"{result.input_size:>10} "
                f"{result.mean_time * 1000:>12.2f} "
                f"{result.max_time * 1000:>12.2f}"
            )
        print("=" * 72 + "\n")


@pytest.fixture(scope="session")
def parse_timer():
    """Provide a session-wide ParseTimer and print its summary at the end.

    Yields
    ------
    ParseTimer
        Session-wide timer instance

    """
    timer = ParseTimer()
    yield timer
    if timer.results:
        timer.print_summary()
