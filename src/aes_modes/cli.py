"""Command-line interface for the modes of operation."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from . import __version__
from .blocking import format_blocks, repeated_blocks
from .errors import ModeError
from .interfaces import MODE_NAMES, BaseMode, ModeConfig
from .modes import MODES, create_mode, list_modes
from .padding import pad
from .primitive import AES128
from .randomness import FixedRandomSource
from .vectors import (
    FIPS_197_TEST_VECTORS,
    SP800_38A_CBC_CIPHERTEXT,
    SP800_38A_CBC_IV,
    SP800_38A_ECB_CIPHERTEXT,
    SP800_38A_KEY,
    SP800_38A_PLAINTEXT,
    golden_cbc_body,
    golden_ctr_body,
    validate_against_golden,
)

DEFAULT_INSPECT_TEXT = "YELLOW SUBMARINE" * 4

ROUND_TRIP_MESSAGES = [
    b"",
    b"Short",
    b"Hello, AES Encryption!",
    b"YELLOW SUBMARINE",
    b"Longer text that spans multiple blocks!",
]


def _parse_hex(value: str, what: str, size: int | None = None) -> bytes:
    """Parse a hex option, exiting with an error message on bad input."""
    try:
        data = bytes.fromhex(value)
    except ValueError as e:
        click.echo(f"Error: Invalid {what} hex: {e}", err=True)
        sys.exit(1)
    if size is not None and len(data) != size:
        click.echo(
            f"Error: {what} must be {size * 2} hex chars ({size} bytes), got {len(value)} chars",
            err=True,
        )
        sys.exit(1)
    return data


def _encode_text(text: str) -> bytes:
    """Encode a --text option, exiting with an error message on bad input."""
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as e:
        click.echo(f"Error: --text is not valid UTF-8: {e}", err=True)
        sys.exit(1)


def _read_input(text: str | None, hex_data: str | None, input_path: str | None) -> bytes:
    """Pick the message from --text, --hex or --in."""
    given = [v for v in (text, hex_data, input_path) if v is not None]
    if len(given) != 1:
        click.echo("Error: Give exactly one of --text, --hex or --in", err=True)
        sys.exit(1)
    if text is not None:
        return _encode_text(text)
    if hex_data is not None:
        return _parse_hex(hex_data, "input")
    return Path(input_path).read_bytes()


def _write_output(data: bytes, output_path: str | None) -> None:
    if output_path:
        Path(output_path).write_bytes(data)
        click.echo(f"Wrote {len(data)} bytes to {output_path}")
    else:
        click.echo(data.hex())


def _split_header(mode: str, cipher_mode: BaseMode, ciphertext: bytes) -> tuple[bytes, bytes]:
    """Split ciphertext into its IV / nonce header and the body."""
    if mode == "cbc":
        size = cipher_mode.block_size
    elif mode == "ctr":
        size = cipher_mode.nonce_size
    else:
        size = 0
    return ciphertext[:size], ciphertext[size:]


def _warn_if_insecure(mode: str) -> None:
    if not MODES[mode].secure:
        click.echo(
            f"Warning: {mode.upper()} mode is NOT secure; identical blocks leak.",
            err=True,
        )


@click.group(context_settings={"auto_envvar_prefix": "AES_MODES"})
@click.version_option(version=__version__, prog_name="aes-modes")
def main() -> None:
    """Block cipher modes of operation over AES-128.

    Encrypt and decrypt with ECB, CBC or CTR, check the implementation
    against known-answer vectors, and see why ECB leaks structure.
    """
    pass


@main.command(name="list")
def list_cmd() -> None:
    """List available modes."""
    click.echo("Available modes:")
    click.echo("")
    for mode in list_modes():
        status = "" if mode["secure"] else "  [INSECURE]"
        click.echo(f"  {mode['name']}{status}")
        click.echo(f"    {mode['description']}")
        click.echo("")
    click.echo("CBC and CTR need a unique IV / nonce per message under a key;")
    click.echo("fresh random values are drawn per call but reuse is not tracked.")


@main.command()
@click.option(
    "--mode",
    type=click.Choice(MODE_NAMES, case_sensitive=False),
    default="cbc",
    help="Mode of operation (default: cbc)",
)
@click.option("--key", type=str, required=True, help="16-byte key as 32 hex chars")
@click.option("--text", type=str, default=None, help="Plaintext given as UTF-8 text")
@click.option("--hex", "hex_data", type=str, default=None, help="Plaintext given as hex")
@click.option(
    "--in", "input_path", type=click.Path(exists=True, dir_okay=False), default=None,
    help="Read plaintext from file",
)
@click.option(
    "--out", "output_path", type=click.Path(dir_okay=False), default=None,
    help="Write raw ciphertext to file instead of printing hex",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed for reproducible IV / nonce (testing only, never for real data)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show detailed output")
def encrypt(
    mode: str,
    key: str,
    text: str | None,
    hex_data: str | None,
    input_path: str | None,
    output_path: str | None,
    seed: int | None,
    verbose: bool,
) -> None:
    """Encrypt a message."""
    config = ModeConfig(mode=mode, seed=seed)
    key_bytes = _parse_hex(key, "key", size=16)
    plaintext = _read_input(text, hex_data, input_path)

    _warn_if_insecure(config.mode)
    if seed is not None:
        click.echo("Warning: seeded IV / nonce is predictable.", err=True)

    cipher_mode = create_mode(config)
    try:
        ciphertext = cipher_mode.encrypt(plaintext, key_bytes)
    except ValueError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if verbose:
        click.echo(f"Mode: {config.mode}", err=True)
        click.echo(f"Plaintext: {len(plaintext)} bytes", err=True)
        click.echo(f"Ciphertext: {len(ciphertext)} bytes", err=True)
        header, body = _split_header(config.mode, cipher_mode, ciphertext)
        if config.mode == "cbc":
            click.echo(f"IV: {header.hex()}", err=True)
        elif config.mode == "ctr":
            click.echo(f"Nonce: {header.hex()}", err=True)
        click.echo(format_blocks(body), err=True)
        click.echo(f"Randomness: {cipher_mode.rng.get_summary()}", err=True)

    _write_output(ciphertext, output_path)


@main.command()
@click.option(
    "--mode",
    type=click.Choice(MODE_NAMES, case_sensitive=False),
    default="cbc",
    help="Mode of operation (default: cbc)",
)
@click.option("--key", type=str, required=True, help="16-byte key as 32 hex chars")
@click.option("--hex", "hex_data", type=str, default=None, help="Ciphertext given as hex")
@click.option(
    "--in", "input_path", type=click.Path(exists=True, dir_okay=False), default=None,
    help="Read raw ciphertext from file",
)
@click.option(
    "--out", "output_path", type=click.Path(dir_okay=False), default=None,
    help="Write raw plaintext to file instead of printing",
)
@click.option(
    "--strict-padding",
    is_flag=True,
    help="Fail on inconsistent padding instead of returning the data unchanged",
)
@click.option("--text-output", is_flag=True, help="Print plaintext as UTF-8 text")
def decrypt(
    mode: str,
    key: str,
    hex_data: str | None,
    input_path: str | None,
    output_path: str | None,
    strict_padding: bool,
    text_output: bool,
) -> None:
    """Decrypt a message."""
    config = ModeConfig(mode=mode, strict_padding=strict_padding)
    key_bytes = _parse_hex(key, "key", size=16)
    ciphertext = _read_input(None, hex_data, input_path)

    try:
        plaintext = create_mode(config).decrypt(ciphertext, key_bytes)
    except ModeError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if text_output and not output_path:
        click.echo(plaintext.decode("utf-8", errors="replace"))
    else:
        _write_output(plaintext, output_path)


@main.command()
@click.option("--verbose", "-v", is_flag=True, help="Show detailed output")
def validate(verbose: bool) -> None:
    """Check the primitive and all modes against known answers."""
    checks: list[tuple[str, bytes, bytes]] = []

    cipher = AES128()
    for i, vec in enumerate(FIPS_197_TEST_VECTORS):
        computed = cipher.encrypt_block(vec["key"], vec["plaintext"])
        checks.append((f"FIPS-197 vector {i+1}", vec["ciphertext"], computed))
        recovered = cipher.decrypt_block(vec["key"], vec["ciphertext"])
        checks.append((f"FIPS-197 vector {i+1} inverse", vec["plaintext"], recovered))

    ecb = create_mode(ModeConfig(mode="ecb"))
    ecb_out = ecb.encrypt(SP800_38A_PLAINTEXT, SP800_38A_KEY)
    checks.append(("SP 800-38A ECB", SP800_38A_ECB_CIPHERTEXT, ecb_out[:64]))

    cbc = create_mode(ModeConfig(mode="cbc"), rng=FixedRandomSource(iv=SP800_38A_CBC_IV))
    cbc_out = cbc.encrypt(SP800_38A_PLAINTEXT, SP800_38A_KEY)
    checks.append(("SP 800-38A CBC", SP800_38A_CBC_IV + SP800_38A_CBC_CIPHERTEXT, cbc_out[:80]))

    for message in ROUND_TRIP_MESSAGES:
        padded = pad(message)
        golden = golden_cbc_body(SP800_38A_KEY, SP800_38A_CBC_IV, padded)
        checks.append((f"CBC golden {len(message)} bytes", SP800_38A_CBC_IV + golden,
                       cbc.encrypt(message, SP800_38A_KEY)))

    nonce = bytes(range(8))
    ctr = create_mode(ModeConfig(mode="ctr"), rng=FixedRandomSource(nonce=nonce))
    for message in ROUND_TRIP_MESSAGES:
        golden = nonce + golden_ctr_body(SP800_38A_KEY, nonce, message)
        checks.append((f"CTR golden {len(message)} bytes", golden,
                       ctr.encrypt(message, SP800_38A_KEY)))

    for name in MODES:
        mode = create_mode(ModeConfig(mode=name))
        for message in ROUND_TRIP_MESSAGES:
            recovered = mode.decrypt(mode.encrypt(message, bytes(16)), bytes(16))
            checks.append((f"{name.upper()} round trip {len(message)} bytes", message, recovered))

    passed = 0
    for label, expected, computed in checks:
        ok, detail = validate_against_golden(expected, computed)
        if ok:
            passed += 1
            if verbose:
                click.echo(f"  {label}: PASS")
        else:
            click.echo(f"  {label}: FAIL - {detail}")

    click.echo("")
    if passed == len(checks):
        click.echo(f"VALIDATION PASSED: All {len(checks)} checks passed")
        sys.exit(0)
    else:
        click.echo(f"VALIDATION FAILED: {len(checks) - passed} failures")
        sys.exit(1)


@main.command()
@click.option("--key", type=str, default="00" * 16, help="16-byte key as 32 hex chars")
@click.option(
    "--text",
    type=str,
    default=DEFAULT_INSPECT_TEXT,
    help="Plaintext to encrypt in every mode (default: a repeated 16-byte phrase)",
)
def inspect(key: str, text: str) -> None:
    """Show which modes leak repeated plaintext blocks."""
    key_bytes = _parse_hex(key, "key", size=16)
    plaintext = _encode_text(text)

    click.echo(f"Plaintext: {len(plaintext)} bytes")
    click.echo(f"  repeated blocks: {sum(repeated_blocks(plaintext).values())}")
    click.echo("")

    for name in MODES:
        mode = create_mode(ModeConfig(mode=name))
        ciphertext = mode.encrypt(plaintext, key_bytes)
        _, body = _split_header(name, mode, ciphertext)
        repeats = repeated_blocks(body)
        status = "LEAKS STRUCTURE" if repeats else "no repeated blocks"
        click.echo(f"  {name}: {len(ciphertext)} bytes, {status}")
        for block, count in repeats.items():
            click.echo(f"    {block.hex()} x{count}")


if __name__ == "__main__":
    main()
