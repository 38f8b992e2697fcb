"""
Pipeline services for multi-cipher encryption and decryption.

This module implements the cipher pipeline that:
1. Constructs every cipher stage from its kind and raw key
2. Applies the stages in order (encrypt) or reverse order (decrypt)
3. Runs Caesar stages in parallel chunks on a bounded worker pool
"""

from mpags_cipher.services.pipeline.executor import (
    PipelineExecutor,
    PipelineResult,
    build_pipeline,
    process_text,
)
from mpags_cipher.services.pipeline.parallel import ParallelCaesarStrategy, chunk_bounds

__all__ = [
    "PipelineExecutor",
    "PipelineResult",
    "ParallelCaesarStrategy",
    "build_pipeline",
    "chunk_bounds",
    "process_text",
]
