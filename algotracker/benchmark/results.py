"""Append-only in-memory store of performance results with simple queries."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

from algotracker.models import AlgorithmCategory, PerformanceResult


class ResultStore:
    """Ordered, unbounded collection of ``PerformanceResult``.

    Results are kept in the order they were added. There is no deduplication,
    no removal of single entries and no locking: concurrent writers must
    serialize ``add`` themselves.
    """

    def __init__(self, results: Iterable[PerformanceResult] | None = None) -> None:
        self._results: List[PerformanceResult] = list(results) if results else []

    def add(self, result: PerformanceResult) -> None:
        self._results.append(result)

    @property
    def results(self) -> tuple[PerformanceResult, ...]:
        return tuple(self._results)

    def __len__(self) -> int:
        return len(self._results)

    def __iter__(self) -> Iterator[PerformanceResult]:
        return iter(tuple(self._results))

    def clear(self) -> None:
        self._results.clear()

    def by_algorithm(self, algorithm_name: str) -> List[PerformanceResult]:
        return [r for r in self._results if r.algorithm.name == algorithm_name]

    def by_category(self, category: AlgorithmCategory | str) -> List[PerformanceResult]:
        cat = AlgorithmCategory.parse(category)
        return [r for r in self._results if r.algorithm.category is cat]

    def input_sizes(self) -> List[int]:
        return sorted({r.input_size for r in self._results})

    def algorithm_names(self) -> List[str]:
        """Distinct algorithm names in first-seen order."""
        return list(dict.fromkeys(r.algorithm.name for r in self._results))

    def average_execution_time(self, algorithm_name: str) -> Optional[float]:
        """Mean ``execution_time_ms`` over all results of one algorithm.

        Returns:
            The average in milliseconds, or ``None`` when the store holds no
            result for ``algorithm_name``.
        """
        times = [r.execution_time_ms for r in self.by_algorithm(algorithm_name)]
        if not times:
            return None
        return sum(times) / len(times)

    def fastest_algorithm(self, input_size: int) -> Optional[str]:
        """Name of the quickest result recorded for exactly ``input_size``.

        Ties keep the first result encountered in insertion order.
        """
        fastest: Optional[PerformanceResult] = None
        for r in self._results:
            if r.input_size != input_size:
                continue
            if fastest is None or r.execution_time_ms < fastest.execution_time_ms:
                fastest = r
        return fastest.algorithm.name if fastest is not None else None
