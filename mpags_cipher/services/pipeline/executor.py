"""
Pipeline executor - runs a chain of ciphers over one text.

This module implements the multi-cipher logic:
1. Build every stage up front, so a bad key aborts before any text is touched
2. Apply the stages in order on encrypt, in reverse order on decrypt
3. Run chunk-local stages (Caesar) on the worker pool, the rest inline
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable

from mpags_cipher.core.config import Settings, get_settings
from mpags_cipher.core.exceptions import PipelineConfigError, TextTooLongError
from mpags_cipher.models.schemas import CipherMode, CipherSpec
from mpags_cipher.services.engines.base import CipherEngine
from mpags_cipher.services.engines.registry import EngineRegistry
from mpags_cipher.services.pipeline.parallel import ParallelCaesarStrategy
from mpags_cipher.services.preprocessing.normalizer import TextNormalizer

logger = logging.getLogger(__name__)


@dataclass
class StageResult:
    """Record of one stage of a pipeline run."""

    cipher_type: str
    strategy: str
    length: int


@dataclass
class PipelineResult:
    """Result of running a pipeline."""

    text: str
    mode: CipherMode

    # Length of the normalized text fed to the first stage
    input_length: int = 0

    # Stages in the order they were applied
    stages: list[StageResult] = field(default_factory=list)


def build_pipeline(
    specs: Iterable[CipherSpec],
    registry: EngineRegistry | None = None,
) -> list[CipherEngine]:
    """
    Construct every cipher of a pipeline.

    Any construction error propagates unchanged, so either all stages
    exist or none does.

    Raises:
        UnknownCipherError: If a cipher is not registered
        InvalidKeyError: If a key is not valid for its cipher
    """
    registry = registry or EngineRegistry()
    return [registry.make_cipher(spec.cipher_type, spec.key) for spec in specs]


class PipelineExecutor:
    """
    Applies an ordered list of ciphers to a text.

    The executor does no cipher math. It owns the stage order (decrypt is
    the exact reverse of encrypt) and chooses, per stage, between a plain
    call and the parallel chunk strategy.
    """

    def __init__(
        self,
        ciphers: list[CipherEngine],
        num_workers: int = 4,
        timeout: float = 30.0,
        parallel: bool = True,
    ):
        if not ciphers:
            raise PipelineConfigError("A pipeline needs at least one cipher")

        self.ciphers = list(ciphers)
        self.parallel = parallel
        self.strategy = ParallelCaesarStrategy(num_workers=num_workers, timeout=timeout)

    @classmethod
    def from_specs(
        cls,
        specs: list[CipherSpec],
        settings: Settings | None = None,
        registry: EngineRegistry | None = None,
    ) -> "PipelineExecutor":
        """
        Build an executor from cipher specs and settings.

        Args:
            specs: Cipher kinds and raw keys, in encryption order
            settings: Application settings (worker count, timeout, limits)
            registry: Engine registry to construct ciphers from

        Returns:
            Executor with every stage constructed
        """
        settings = settings or get_settings()

        if len(specs) > settings.max_pipeline_length:
            raise PipelineConfigError(
                f"Pipeline has {len(specs)} ciphers, maximum is {settings.max_pipeline_length}",
                {"length": len(specs), "max_length": settings.max_pipeline_length},
            )

        return cls(
            build_pipeline(specs, registry),
            num_workers=settings.num_workers,
            timeout=settings.chunk_timeout_seconds,
        )

    def stage_order(self, mode: CipherMode) -> list[CipherEngine]:
        """Ciphers in the order they are applied for the given mode."""
        if mode == CipherMode.DECRYPT:
            return self.ciphers[::-1]
        return list(self.ciphers)

    def run(self, text: str, mode: CipherMode) -> PipelineResult:
        """
        Run every stage over a normalized text.

        Each stage starts only once the previous stage's output is complete.

        Args:
            text: Normalized input text
            mode: Whether to encrypt or decrypt

        Returns:
            PipelineResult with the final text and per-stage records
        """
        stages = []
        input_length = len(text)

        for cipher in self.stage_order(mode):
            if self.parallel and cipher.chunk_local:
                strategy = "parallel"
                text = self.strategy.apply(cipher, text, mode)
            else:
                strategy = "sequential"
                text = cipher.transform(text, mode)

            logger.debug("%s %s (%s): %d chars", mode.value, cipher.name, strategy, len(text))
            stages.append(StageResult(
                cipher_type=cipher.cipher_type.value,
                strategy=strategy,
                length=len(text),
            ))

        return PipelineResult(text=text, mode=mode, input_length=input_length, stages=stages)

    def execute(self, text: str, mode: CipherMode) -> str:
        """Run the pipeline and return only the output text."""
        return self.run(text, mode).text


def process_text(
    raw_text: str,
    specs: list[CipherSpec],
    mode: CipherMode,
    settings: Settings | None = None,
) -> PipelineResult:
    """
    Normalize raw text and run it through a freshly built pipeline.

    The pipeline is constructed before the text is processed, so an
    invalid key aborts the run without executing any stage.

    Raises:
        TextTooLongError: If the normalized text exceeds the configured maximum
        InvalidKeyError, UnknownCipherError, PipelineConfigError: On bad specs
        TimeoutExceededError: If a parallel stage misses its deadline
    """
    settings = settings or get_settings()
    executor = PipelineExecutor.from_specs(specs, settings)

    normalized = TextNormalizer().normalize(raw_text)
    if len(normalized) > settings.max_text_length:
        raise TextTooLongError(len(normalized), settings.max_text_length)

    return executor.run(normalized, mode)
