"""
Chunked, multi-threaded execution of position-independent cipher stages.

A Caesar shift maps every character on its own, so a long text can be cut
into contiguous chunks that are transformed on separate worker threads and
glued back together in chunk order. Ciphers whose output depends on a
character's absolute position (Vigenère) or on its neighbours (Playfair)
must not go through here.
"""

import logging
import threading
from concurrent.futures import Future, wait
from typing import Callable

from mpags_cipher.core.exceptions import TimeoutExceededError
from mpags_cipher.models.schemas import CipherMode
from mpags_cipher.services.engines.base import CipherEngine

logger = logging.getLogger(__name__)


def chunk_bounds(length: int, num_chunks: int) -> list[tuple[int, int]]:
    """
    Split [0, length) into contiguous, non-overlapping ranges.

    Every chunk gets length // num_chunks characters and the last one also
    takes the remainder, so the ranges always cover the text exactly. Texts
    shorter than num_chunks give empty leading chunks.

    Args:
        length: Length of the text to split
        num_chunks: Number of chunks (at least 1)

    Returns:
        List of (start, end) pairs in text order
    """
    if num_chunks < 1:
        raise ValueError(f"num_chunks must be at least 1, got {num_chunks}")

    chunk_size = length // num_chunks
    bounds = []
    for i in range(num_chunks):
        start = i * chunk_size
        end = length if i == num_chunks - 1 else (i + 1) * chunk_size
        bounds.append((start, end))

    return bounds


def _run_chunk(future: Future, fn: Callable[..., str], *args) -> None:
    """Run one chunk task and publish its outcome on the future."""
    if not future.set_running_or_notify_cancel():
        return
    try:
        future.set_result(fn(*args))
    except BaseException as exc:
        future.set_exception(exc)


class ParallelCaesarStrategy:
    """
    Applies a chunk-local cipher to a text with one worker thread per chunk.

    All chunk tasks are joined with a single deadline. If any of them is
    still running when the deadline passes, TimeoutExceededError is raised
    and nothing of the stage output is returned. Workers are daemon threads,
    so a chunk that never finishes cannot keep the process alive after the
    error has been reported.
    """

    def __init__(self, num_workers: int = 4, timeout: float = 30.0):
        if num_workers < 1:
            raise ValueError(f"num_workers must be at least 1, got {num_workers}")
        self.num_workers = num_workers
        self.timeout = timeout

    def apply(self, cipher: CipherEngine, text: str, mode: CipherMode) -> str:
        """
        Transform text chunk by chunk on the worker pool.

        Args:
            cipher: A cipher whose transform is chunk-local
            text: Normalized stage input
            mode: Whether to encrypt or decrypt

        Returns:
            The stage output, identical to cipher.transform(text, mode)
        """
        if not cipher.chunk_local:
            raise ValueError(f"{cipher.name} cannot be applied in independent chunks")

        bounds = chunk_bounds(len(text), self.num_workers)
        logger.debug(
            "%s: %d chars in %d chunks %s",
            cipher.name, len(text), len(bounds), bounds,
        )

        futures: list[Future] = []
        for index, (start, end) in enumerate(bounds):
            future: Future = Future()
            worker = threading.Thread(
                target=_run_chunk,
                args=(future, cipher.transform, text[start:end], mode),
                name=f"cipher-chunk-{index}",
                daemon=True,
            )
            worker.start()
            futures.append(future)

        _, not_done = wait(futures, timeout=self.timeout)
        if not_done:
            logger.error(
                "%s: %d of %d chunks unfinished after %ss",
                cipher.name, len(not_done), len(futures), self.timeout,
            )
            raise TimeoutExceededError(cipher.cipher_type.value, self.timeout)

        # Join in submission order, not completion order
        return "".join(future.result() for future in futures)
