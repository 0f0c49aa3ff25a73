"""
Human-readable output for encode and decode results.
"""

from typing import Iterable, Iterator

from .core import CodingResult

WARNING_TEMPLATE = '\t[WARNING]: "{source}" could not be processed'


def format_result(result: CodingResult, show_reason: bool = False) -> str:
    """The result value, or a warning line naming the input that failed."""
    if result.ok:
        return result.value
    line = WARNING_TEMPLATE.format(source=result.source)
    if show_reason:
        line += f" ({result.failure.value})"
    return line


def format_results(results: Iterable[CodingResult], show_reason: bool = False) -> Iterator[str]:
    for result in results:
        yield format_result(result, show_reason)
