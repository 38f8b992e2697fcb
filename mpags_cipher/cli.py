"""
mpags-cipher command line
=========================

Click-based command-line interface that reads text from a file or stdin,
runs it through one or more classical ciphers and writes the result to a
file or stdout.

Usage::

    mpags-cipher -c caesar -k 3 -i plain.txt -o cipher.txt
    mpags-cipher --multi-cipher 2 -c vigenere -k KEY -c caesar -k 5 --encrypt
    echo "RIJVSUYVJN" | mpags-cipher -c vigenere -k key --decrypt
"""

import click

from mpags_cipher import __version__
from mpags_cipher.core.config import get_settings
from mpags_cipher.core.exceptions import (
    InvalidKeyError,
    PipelineConfigError,
    TimeoutExceededError,
    UnknownCipherError,
)
from mpags_cipher.core.log import configure_logging
from mpags_cipher.models.schemas import CipherMode, CipherSpec, CipherType
from mpags_cipher.services.pipeline.executor import process_text

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _pair_ciphers_and_keys(
    ciphers: tuple[str, ...],
    keys: tuple[str, ...],
    multi_cipher: int | None,
) -> list[CipherSpec]:
    """Line up -c and -k options into pipeline stages."""
    names = list(ciphers) or [CipherType.CAESAR.value]
    key_list = list(keys)

    if multi_cipher is not None:
        if len(names) != multi_cipher or len(key_list) != multi_cipher:
            raise click.UsageError(
                f"--multi-cipher {multi_cipher} needs {multi_cipher} ciphers and "
                f"{multi_cipher} keys, got {len(names)} and {len(key_list)}"
            )
    elif not key_list and len(names) == 1:
        # A single cipher without a key uses the null key
        key_list = [""]
    elif len(key_list) != len(names):
        raise click.UsageError(
            f"Each cipher needs a key: got {len(names)} ciphers and {len(key_list)} keys"
        )

    return [
        CipherSpec(cipher_type=CipherType(name.lower()), key=key)
        for name, key in zip(names, key_list)
    ]


def _read_input(path: str) -> str:
    """Read the whole input from a file, or stdin for '-'."""
    try:
        with click.open_file(path, "r") as stream:
            return stream.read()
    except OSError as e:
        raise click.ClickException(f"failed to read input file '{path}': {e.strerror}")


def _write_output(path: str, text: str) -> None:
    """Write the processed text as one line to a file, or stdout for '-'."""
    try:
        with click.open_file(path, "w") as stream:
            click.echo(text, file=stream)
    except OSError as e:
        raise click.ClickException(f"failed to write output file '{path}': {e.strerror}")


@click.command(context_settings=CONTEXT_SETTINGS)
@click.option(
    "-i", "--input", "input_path",
    type=click.Path(dir_okay=False, allow_dash=True),
    default="-",
    help="Read text to be processed from FILE. Stdin is used if not supplied.",
)
@click.option(
    "-o", "--output", "output_path",
    type=click.Path(dir_okay=False, allow_dash=True),
    default="-",
    help="Write processed text to FILE. Stdout is used if not supplied.",
)
@click.option(
    "-c", "--cipher", "ciphers",
    multiple=True,
    type=click.Choice([t.value for t in CipherType], case_sensitive=False),
    help="Cipher to apply; repeat to chain ciphers. Defaults to caesar.",
)
@click.option(
    "-k", "--key", "keys",
    multiple=True,
    help="Key for the matching -c option. A null key is used if not supplied.",
)
@click.option(
    "--multi-cipher",
    type=click.IntRange(min=1),
    default=None,
    help="Number of ciphers to be used in sequence.",
)
@click.option(
    "--encrypt/--decrypt",
    default=True,
    help="Encrypt (default) or decrypt the input text.",
)
@click.option(
    "--workers",
    type=click.IntRange(min=1),
    default=None,
    help="Worker threads for Caesar stages.",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Seconds to wait for a parallel stage before giving up.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Logging verbosity (stderr).",
)
@click.version_option(__version__, "--version", message="%(version)s")
def main(
    input_path: str,
    output_path: str,
    ciphers: tuple[str, ...],
    keys: tuple[str, ...],
    multi_cipher: int | None,
    encrypt: bool,
    workers: int | None,
    timeout: float | None,
    log_level: str | None,
) -> None:
    """Encrypts/Decrypts input alphanumeric text using classical ciphers."""
    settings = get_settings()
    overrides = {}
    if workers is not None:
        overrides["num_workers"] = workers
    if timeout is not None:
        overrides["chunk_timeout_seconds"] = timeout
    if overrides:
        settings = settings.model_copy(update=overrides)

    configure_logging(log_level or settings.log_level)

    specs = _pair_ciphers_and_keys(ciphers, keys, multi_cipher)
    mode = CipherMode.ENCRYPT if encrypt else CipherMode.DECRYPT

    try:
        result = process_text(_read_input(input_path), specs, mode, settings)
    except InvalidKeyError as e:
        raise click.ClickException(f"Invalid key: {e.message}")
    except UnknownCipherError as e:
        raise click.ClickException(f"Unknown cipher: {e.message}")
    except (PipelineConfigError, TimeoutExceededError) as e:
        raise click.ClickException(e.message)

    _write_output(output_path, result.text)


if __name__ == "__main__":
    main()
