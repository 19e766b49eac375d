from __future__ import annotations

import pytest
from typer.testing import CliRunner

from unisig_cli import main as cli_main

ED25519_SK = "4ccd089b28ff96da9db6c346ec114e0f5b8a319f35aba624da8cf6ed4fb8a6fb"
ED25519_PK = "3d4017c3e843895a92b70aa74d1b7ebc9c982ccf2ec4968cc0cd55f12af4660c"
ED25519_SIG = (
    "92a009a9f0d4cab8720e820b5f642540a2b27b5416503f8fb3762223ebdb69da"
    "085ac1e43e15996e458f3613d0f11d8c387b2eaeb4302aeeb00d291612bb0c00"
)
P256_GENERATOR = "036b17d1f2e12c4247f8bce6e563a440f277037d812deb33a0f4a13945d898c296"


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


def _fields(output: str) -> dict:
    pairs = (line.split(": ", 1) for line in output.splitlines() if ": " in line)
    return {key: value for key, value in pairs}


def test_list_algos(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli_main.app, ["list-algos"])
    assert result.exit_code == 0
    assert "[classic]" in result.output
    assert "- ed25519" in result.output
    assert "- ecdsa -> secp256k1" in result.output
    assert "- sphincs192 (variants: fast, small; default: fast)" in result.output
    assert "- recommended -> sphincs256.fast" in result.output
    assert "- ecdh (variants: x25519, p256, p384, p521; default: x25519)" in result.output


def test_keygen_from_seed(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli_main.app, ["keygen", "classic", "ed25519", "--seed", ED25519_SK])
    assert result.exit_code == 0
    fields = _fields(result.output)
    assert fields["private_key"] == ED25519_SK
    assert fields["public_key"] == ED25519_PK


def test_sign_and_verify(cli_runner: CliRunner) -> None:
    signed = cli_runner.invoke(cli_main.app, ["sign", "ed25519", "72", "--private-key", ED25519_SK])
    assert signed.exit_code == 0
    assert signed.output.strip() == ED25519_SIG

    ok = cli_runner.invoke(cli_main.app, ["verify", "eddsa", ED25519_SIG, "72", "--public-key", ED25519_PK])
    assert ok.exit_code == 0
    assert "valid" in ok.output

    bad = cli_runner.invoke(cli_main.app, ["verify", "ed25519", ED25519_SIG, "73", "--public-key", ED25519_PK])
    assert bad.exit_code == 1
    assert "invalid" in bad.output


def test_sign_with_pq_variant(cli_runner: CliRunner) -> None:
    keys = _fields(cli_runner.invoke(cli_main.app, ["keygen", "pq", "sphincs192.fast"]).output)
    signed = cli_runner.invoke(
        cli_main.app,
        ["sign", "sphincs192.fast", "hello", "--private-key", keys["private_key"], "--group", "pq"],
    )
    assert signed.exit_code == 0
    verified = cli_runner.invoke(
        cli_main.app,
        ["verify", "sphincs192", signed.output.strip(), "hello", "--public-key", keys["public_key"]],
    )
    assert verified.exit_code == 0


def test_validation_errors_exit_with_two(cli_runner: CliRunner) -> None:
    bad_hex = cli_runner.invoke(cli_main.app, ["sign", "ed25519", "hi", "--private-key", "zz"])
    assert bad_hex.exit_code == 2
    assert "hex" in bad_hex.output

    short_key = cli_runner.invoke(cli_main.app, ["sign", "ed25519", "hi", "--private-key", "00" * 31])
    assert short_key.exit_code == 2
    assert "private_key must be 32 bytes, got 31" in short_key.output


def test_invalid_scalars_exit_with_two(cli_runner: CliRunner) -> None:
    keygen = cli_runner.invoke(cli_main.app, ["keygen", "classic", "p256", "--seed", "00" * 32])
    assert keygen.exit_code == 2
    assert "scalar" in keygen.output

    derive = cli_runner.invoke(
        cli_main.app,
        ["derive", "ecdh.p256", "--private-key", "00" * 32, "--peer", P256_GENERATOR],
    )
    assert derive.exit_code == 2
    assert "scalar" in derive.output


def test_unknown_algorithm(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli_main.app, ["demo", "rsa"])
    assert result.exit_code == 2
    assert "Unknown algorithm" in result.output


def test_broken_alias_override(cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UNISIG_KEX_FAST", "kyber512")
    result = cli_runner.invoke(cli_main.app, ["demo", "fast", "--group", "kex"])
    assert result.exit_code == 2
    assert "kyber512" in result.output


def test_kem_commands(cli_runner: CliRunner) -> None:
    keys = _fields(cli_runner.invoke(cli_main.app, ["keygen", "kex", "kyber768", "--seed", "01" * 64]).output)
    enc = cli_runner.invoke(cli_main.app, ["encapsulate", "kyber768", "--public-key", keys["public_key"]])
    assert enc.exit_code == 0
    fields = _fields(enc.output)
    dec = cli_runner.invoke(
        cli_main.app,
        ["decapsulate", "kyber768", fields["ciphertext"], "--private-key", keys["private_key"]],
    )
    assert dec.exit_code == 0
    assert dec.output.strip() == fields["shared_secret"]


def test_derive_command(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(
        cli_main.app,
        [
            "derive",
            "ecdh",
            "--private-key",
            "77076d0a7318a57d3c16c17251b26645df4c2f87ebc0992ab177fba51db92c2a",
            "--peer",
            "de9edb7d7b7dc1b4d35b61c2ece435373f8343c85b78674dadfc7e146f882b4f",
        ],
    )
    assert result.exit_code == 0
    assert result.output.strip() == "4a5d9d5ba4ce2de1728e3bf480350f25e07e21c947d19e3376f09b3c1e161742"


def test_kem_commands_reject_signers(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(cli_main.app, ["encapsulate", "ecdh", "--public-key", "00" * 32])
    assert result.exit_code == 2


@pytest.mark.parametrize(
    "args, expected",
    [
        (["demo", "ed25519"], "[SIG] ed25519: verify=True"),
        (["demo", "p384"], "[SIG] p384: verify=True"),
        (["demo", "dilithium65"], "[SIG] dilithium65: verify=True"),
        (["demo", "ecdh"], "[KEX] ecdh: shared secret match=True"),
        (["demo", "ecdh.p256"], "[KEX] ecdh.p256: shared secret match=True"),
        (["demo", "kyber1024"], "[KEM] kyber1024: shared secret match=True"),
        (["demo", "recommended", "--group", "kex"], "[KEM] kyber1024: shared secret match=True"),
    ],
)
def test_demo(cli_runner: CliRunner, args, expected: str) -> None:
    result = cli_runner.invoke(cli_main.app, args)
    assert result.exit_code == 0
    assert expected in result.output


def test_invalid_log_level(cli_runner: CliRunner, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UNISIG_LOG_LEVEL", "chatty")
    result = cli_runner.invoke(cli_main.app, ["list-algos"])
    assert result.exit_code == 2
    assert "UNISIG_LOG_LEVEL" in result.output
