"""Digest engine.

Orchestrates selection, input resolution and hashing for one
request and hands each result to the reporter.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

from shall.hashing.directory import DirectoryProcessor
from shall.hashing.primitives import digest
from shall.hashing.resolver import InputResolver
from shall.hashing.selector import select_algorithms
from shall.models.algorithm import Algorithm
from shall.models.request import HashRequest
from shall.models.result import DigestResult

if TYPE_CHECKING:
    from shall.report import Reporter

log = structlog.get_logger(__name__)


class DigestEngine:
    """Runs a HashRequest end to end."""

    def __init__(
        self,
        reporter: Reporter,
        resolver: InputResolver | None = None,
        directory_processor: DirectoryProcessor | None = None,
    ) -> None:
        self.reporter = reporter
        self.resolver = resolver or InputResolver()
        self.directory_processor = directory_processor or DirectoryProcessor()

    def run(self, request: HashRequest) -> int:
        """Execute the request.

        Selection is validated before any I/O happens.

        Args:
            request: Immutable invocation configuration

        Returns:
            Number of results emitted

        Raises:
            SelectionError: If directory mode lacks exactly one algorithm
            InputReadError: If any input cannot be read
        """
        algorithms = select_algorithms(request.algorithms, directory_mode=request.is_directory)

        if request.is_directory:
            return self._run_directory(request, algorithms[0])

        data = self.resolver.resolve(request.source, verbose=request.verbose)
        if request.verbose:
            log.info("Input size", bytes=len(data))

        count = 0
        for algorithm in algorithms:
            if request.verbose:
                log.info(f"Calculating {algorithm.label}...")
            result = DigestResult(algorithm=algorithm, digest=digest(algorithm, data))
            self.reporter.emit(result)
            count += 1
        return count

    def _run_directory(self, request: HashRequest, algorithm: Algorithm) -> int:
        path = request.source.path
        if request.verbose:
            log.info("Reading directory", path=str(path), algorithm=algorithm.label)

        count = 0
        for result in self.directory_processor.process(path, algorithm):
            self.reporter.emit(result)
            count += 1

        if request.verbose:
            log.info("Directory complete", files=count)
        return count
