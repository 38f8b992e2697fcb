"""Tests for the multi-cipher pipeline executor."""

import pytest

from mpags_cipher.core.config import Settings
from mpags_cipher.core.exceptions import (
    InvalidKeyError,
    PipelineConfigError,
    TextTooLongError,
    UnknownCipherError,
)
from mpags_cipher.models.schemas import CipherMode, CipherSpec, CipherType
from mpags_cipher.services.engines.monoalphabetic.caesar import CaesarEngine
from mpags_cipher.services.engines.polyalphabetic.vigenere import VigenereEngine
from mpags_cipher.services.engines.polygraphic.playfair import PlayfairEngine
from mpags_cipher.services.pipeline.executor import (
    PipelineExecutor,
    build_pipeline,
    process_text,
)


class TestPipelineExecutor:
    """Test suite for stage ordering and execution."""

    @pytest.fixture
    def plaintext(self):
        # Already in Playfair digraph form (even length, no doubled pairs, no J)
        return "HIDETHEGOLDINTHETREXESTUMP"

    @pytest.fixture
    def ciphers(self):
        return [PlayfairEngine("PLAYFAIR EXAMPLE"), VigenereEngine("LEMON"), CaesarEngine("5")]

    def test_stage_order(self, ciphers):
        executor = PipelineExecutor(ciphers)

        assert executor.stage_order(CipherMode.ENCRYPT) == ciphers
        assert executor.stage_order(CipherMode.DECRYPT) == ciphers[::-1]

    def test_encrypt_applies_in_list_order(self, ciphers, plaintext):
        executor = PipelineExecutor(ciphers)

        expected = plaintext
        for cipher in ciphers:
            expected = cipher.encrypt(expected)

        assert executor.execute(plaintext, CipherMode.ENCRYPT) == expected

    def test_pipeline_reversal_roundtrip(self, ciphers, plaintext):
        """Decrypting with the same list undoes the stages last-first."""
        executor = PipelineExecutor(ciphers)

        ciphertext = executor.execute(plaintext, CipherMode.ENCRYPT)
        assert ciphertext != plaintext
        assert executor.execute(ciphertext, CipherMode.DECRYPT) == plaintext

    def test_forward_order_does_not_decrypt(self, plaintext):
        """Undoing stages in encryption order gives the wrong text."""
        ciphers = [VigenereEngine("KEY"), PlayfairEngine("MONARCHY")]
        ciphertext = PipelineExecutor(ciphers).execute(plaintext, CipherMode.ENCRYPT)

        wrong = ciphertext
        for cipher in ciphers:
            wrong = cipher.decrypt(wrong)

        assert wrong != plaintext

    def test_stage_records(self, ciphers, plaintext):
        result = PipelineExecutor(ciphers).run(plaintext, CipherMode.DECRYPT)

        assert result.mode == CipherMode.DECRYPT
        assert result.input_length == len(plaintext)
        assert [s.cipher_type for s in result.stages] == ["caesar", "vigenere", "playfair"]
        assert [s.strategy for s in result.stages] == ["parallel", "sequential", "sequential"]

    def test_sequential_mode_matches_parallel(self, ciphers, plaintext):
        parallel = PipelineExecutor(ciphers, parallel=True)
        sequential = PipelineExecutor(ciphers, parallel=False)

        assert parallel.execute(plaintext, CipherMode.ENCRYPT) == sequential.execute(
            plaintext, CipherMode.ENCRYPT
        )

    def test_caesar_parallel_alongside_other_stages(self):
        """Every Caesar stage is chunked, whatever its neighbours are."""
        executor = PipelineExecutor([CaesarEngine("3"), VigenereEngine("KEY"), CaesarEngine("4")])
        result = executor.run("HELLOWORLD", CipherMode.ENCRYPT)

        assert [s.strategy for s in result.stages] == ["parallel", "sequential", "parallel"]

    def test_repeated_cipher_kinds(self):
        """The same kind may appear several times with different keys."""
        executor = PipelineExecutor([VigenereEngine("KEY"), VigenereEngine("LEMON")])
        text = "ATTACKATDAWN"

        assert executor.execute(executor.execute(text, CipherMode.ENCRYPT), CipherMode.DECRYPT) == text

    def test_empty_pipeline_rejected(self):
        with pytest.raises(PipelineConfigError):
            PipelineExecutor([])


class TestBuildPipeline:
    """Test construction of pipelines from specs."""

    def test_builds_in_order(self):
        ciphers = build_pipeline([
            CipherSpec(cipher_type=CipherType.VIGENERE, key="KEY"),
            CipherSpec(cipher_type=CipherType.CAESAR, key="3"),
        ])

        assert [type(c) for c in ciphers] == [VigenereEngine, CaesarEngine]

    def test_invalid_key_aborts_before_any_stage_runs(self, monkeypatch):
        calls = []
        original = CaesarEngine.transform

        def spy(self, text, mode):
            calls.append(text)
            return original(self, text, mode)

        monkeypatch.setattr(CaesarEngine, "transform", spy)

        specs = [
            CipherSpec(cipher_type=CipherType.CAESAR, key="3"),
            CipherSpec(cipher_type=CipherType.VIGENERE, key=""),
        ]
        with pytest.raises(InvalidKeyError):
            process_text("hello world", specs, CipherMode.ENCRYPT, Settings())

        assert calls == []

    def test_too_many_stages(self):
        settings = Settings(max_pipeline_length=1)
        specs = [CipherSpec(cipher_type=CipherType.CAESAR, key="1")] * 2

        with pytest.raises(PipelineConfigError):
            PipelineExecutor.from_specs(specs, settings)

    def test_from_specs_uses_settings(self):
        settings = Settings(num_workers=2, chunk_timeout_seconds=5.0)
        executor = PipelineExecutor.from_specs(
            [CipherSpec(cipher_type=CipherType.CAESAR, key="1")], settings
        )

        assert executor.strategy.num_workers == 2
        assert executor.strategy.timeout == 5.0

    def test_unknown_cipher(self):
        with pytest.raises(UnknownCipherError):
            build_pipeline([CipherSpec.model_construct(cipher_type="enigma", key="")])


class TestProcessText:
    """Test the normalize-then-run entry point."""

    def test_normalizes_before_running(self):
        result = process_text(
            "Hello, World!",
            [CipherSpec(cipher_type=CipherType.CAESAR, key="3")],
            CipherMode.ENCRYPT,
            Settings(),
        )

        assert result.text == "KHOORZRUOG"
        assert result.input_length == 10

    def test_digits_are_spelled_out(self):
        result = process_text(
            "Agent 007",
            [CipherSpec(cipher_type=CipherType.CAESAR, key="")],
            CipherMode.ENCRYPT,
            Settings(),
        )

        assert result.text == "AGENTZEROZEROSEVEN"

    def test_text_too_long(self):
        with pytest.raises(TextTooLongError):
            process_text(
                "HELLOWORLD",
                [CipherSpec(cipher_type=CipherType.CAESAR, key="1")],
                CipherMode.ENCRYPT,
                Settings(max_text_length=5),
            )
