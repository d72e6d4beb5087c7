"""Selection pipeline: list a location, transform keys, emit records."""

from dataclasses import dataclass
from typing import Iterator, Tuple

from .core import get_logger, get_tracer
from .objectstorage.listing import PageFetcher, enumerate_objects
from .objectstorage.location import StoreLocation
from .output import RecordEmitter
from .transform import TransformRule, transform_key

logger = get_logger(__name__)
tracer = get_tracer(__name__)


@dataclass(frozen=True)
class SelectionSummary:
    """Counts for one selection run.

    Attributes:
        emitted: Objects that survived the rule and were emitted
        bytes_emitted: Total size of the emitted objects
    """

    emitted: int
    bytes_emitted: int


def select_objects(
    fetcher: PageFetcher, location: StoreLocation, rule: TransformRule
) -> Iterator[Tuple[str, int]]:
    """Yield (output_key, size) for every object under ``location`` kept by ``rule``."""
    for entry in enumerate_objects(fetcher, location.bucket, location.prefix):
        result = transform_key(entry.key, entry.size, location.prefix, rule)
        if result is not None:
            yield result


def run_selection(
    fetcher: PageFetcher,
    location: StoreLocation,
    rule: TransformRule,
    emitter: RecordEmitter,
) -> SelectionSummary:
    """Emit every selected object and report what was done.

    Records are emitted as soon as they are produced, so a listing failure
    part way through leaves the earlier records written before the error
    propagates.
    """
    emitted = total = 0
    with tracer.start_as_current_span("select_objects") as span:
        span.set_attribute("s3.bucket", location.bucket)
        span.set_attribute("s3.prefix", location.effective_prefix)
        logger.info(
            "Selecting objects",
            source=location.url,
            pattern=rule.pattern.pattern if rule.pattern else None,
            template=rule.template,
        )

        for key, size in select_objects(fetcher, location, rule):
            emitter.emit(key, size)
            emitted += 1
            total += size

        span.set_attribute("s3_bulk_move.emitted", emitted)

    summary = SelectionSummary(emitted=emitted, bytes_emitted=total)
    logger.info(
        "Selection completed",
        source=location.url,
        emitted=summary.emitted,
        bytes_emitted=summary.bytes_emitted,
    )
    return summary
