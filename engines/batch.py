"""Parallel BlurHash encoding of many image files."""

import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable, List, Optional, Sequence, Union

from engines.pipeline import encode
from models.encode_params import EncodeParams, resolve_worker_count
from models.errors import ImageDecodeError
from models.hash_outcome import HashOutcome
from utils.image_io import load_image
from utils.metrics import Timer

logger = logging.getLogger(__name__)

Job = Callable[[int, Path, EncodeParams], HashOutcome]


def hash_image_file(index: int, path: Path, params: EncodeParams) -> HashOutcome:
    """Load and encode one file. Decode failures become the outcome."""
    timer = Timer()
    outcome = HashOutcome(index=index, path=path)
    try:
        image = timer.measure_load(load_image, path)
    except ImageDecodeError as e:
        outcome.error = e
        outcome.load_time_ms = timer.load_time_ms
        logger.debug("Failed to decode %s: %s", path, e.reason)
        return outcome
    
    outcome.blurhash = timer.measure_encode(
        encode, image, params.components_x, params.components_y
    )
    outcome.load_time_ms = timer.load_time_ms
    outcome.encode_time_ms = timer.encode_time_ms
    logger.debug(
        "Hashed %s in %.1f ms (load %.1f ms)",
        path, timer.encode_time_ms, timer.load_time_ms,
    )
    return outcome


def run_batch(
    paths: Sequence[Union[str, Path]],
    params: EncodeParams,
    job: Job = hash_image_file,
    on_result: Optional[Callable[[HashOutcome], None]] = None,
) -> List[HashOutcome]:
    """Hash every path on a worker pool; results come back in input order.
    
    Each job owns exactly one slot of the result list. If the run is
    interrupted, or a job raises anything other than a decode failure, jobs
    that have not started are cancelled, running ones are awaited and the
    error propagates with no partial results.
    """
    paths = [Path(p) for p in paths]
    if not paths:
        return []
    
    workers = resolve_worker_count(params, len(paths))
    logger.info("Hashing %d image(s) with %d worker(s)", len(paths), workers)
    
    outcomes: List[Optional[HashOutcome]] = [None] * len(paths)
    executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix='blurhash')
    try:
        futures = {
            executor.submit(job, index, path, params): index
            for index, path in enumerate(paths)
        }
        for future in as_completed(futures):
            index = futures[future]
            outcome = future.result()
            outcomes[index] = outcome
            if on_result is not None:
                on_result(outcome)
    except BaseException:
        logger.debug("Batch stopped early, cancelling pending jobs")
        executor.shutdown(wait=True, cancel_futures=True)
        raise
    executor.shutdown(wait=True)
    
    return outcomes
