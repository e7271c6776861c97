"""
Batch URL processor.

Parses many inputs into records, spreading the work over a thread pool and
returning results in input order.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional, Sequence

from rexturl.config import get_config
from rexturl.errors import URLParseError
from rexturl.parsing import URLParser, URLRecord


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    """Outcome for one input: a record or the parse error."""

    raw: str
    record: Optional[URLRecord] = None
    error: Optional[URLParseError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class URLProcessor:
    """
    Parse batches of raw URLs into records.

    Small batches are handled inline; larger ones are mapped over a
    ThreadPoolExecutor. Parsing is pure, so workers share the parser.
    """

    def __init__(
        self,
        parser: Optional[URLParser] = None,
        max_workers: Optional[int] = None,
        parallel_threshold: Optional[int] = None,
    ):
        """
        Initialize processor.

        Args:
            parser: URL parser (built from config if None)
            max_workers: Thread count (config.processing.max_workers if None)
            parallel_threshold: Minimum batch size for threading
                (config.processing.parallel_threshold if None)
        """
        config = get_config()
        self.parser = parser or URLParser(
            default_scheme=config.parser.default_scheme,
            require_scheme=config.parser.require_scheme,
        )
        self.max_workers = max_workers or config.processing.max_workers
        self.parallel_threshold = (
            parallel_threshold
            if parallel_threshold is not None
            else config.processing.parallel_threshold
        )

    def process_one(self, raw: str) -> ProcessResult:
        """Parse a single input, capturing parse errors in the result."""
        try:
            parsed = self.parser.parse(raw)
        except URLParseError as e:
            return ProcessResult(raw=raw, error=e)
        return ProcessResult(raw=raw, record=URLRecord.from_parsed(raw, parsed))

    def process(self, inputs: Sequence[str]) -> List[ProcessResult]:
        """
        Parse all inputs.

        Args:
            inputs: Raw URL strings

        Returns:
            One ProcessResult per input, in input order
        """
        if self.max_workers <= 1 or len(inputs) < self.parallel_threshold:
            results = [self.process_one(raw) for raw in inputs]
        else:
            logger.debug(
                "Processing %d inputs with %d workers", len(inputs), self.max_workers
            )
            with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
                results = list(executor.map(self.process_one, inputs))

        failures = 0
        for result in results:
            if not result.ok:
                failures += 1
                logger.debug("Failed to parse URL %r: %s", result.raw, result.error)

        if failures:
            logger.warning("%d of %d inputs could not be parsed", failures, len(results))
        logger.info("Processed %d inputs (%d failed)", len(results), failures)
        return results
