from __future__ import annotations

import hashlib
import logging
from contextlib import contextmanager
from typing import Any, Iterator, Optional, Sequence

import typer

from unisig import load_adapters, registry
from unisig.config import load_settings
from unisig.errors import UnisigError
from unisig.utils import equal_bytes, format_message, from_hex, secret_bytes, to_hex

app = typer.Typer(add_completion=False, help="Uniform signing, verification and key agreement CLI")

SIGNING_GROUPS = ("classic", "pq")
KEX_GROUPS = ("kex",)


@app.callback()
def configure() -> None:
    """Apply UNISIG_LOG_LEVEL before any command runs."""
    try:
        settings = load_settings()
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(2) from exc
    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger("unisig").setLevel(settings.log_level_value)


@contextmanager
def _guarded() -> Iterator[None]:
    try:
        yield
    except UnisigError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(2) from exc


def _resolve(name: str, groups: Sequence[str]) -> Any:
    load_adapters()
    reason = f"Unknown algorithm {name!r} in {', '.join(groups)}"
    for group in groups:
        try:
            return registry.get(group, name)
        except KeyError as exc:
            if name in registry.names(group, include_aliases=True):
                reason = exc.args[0]
    raise typer.BadParameter(reason, param_hint="NAME")


def _groups(group: Optional[str], default: Sequence[str]) -> Sequence[str]:
    return (group,) if group else default


@app.command()
def list_algos():
    """List every registered algorithm, variant and alias."""
    load_adapters()
    for group in registry.groups():
        typer.echo(f"[{group}]")
        for name in registry.names(group):
            variants = registry.variants(group, name)
            if variants:
                default = registry.get(group, name).default_variant
                typer.echo(f"- {name} (variants: {', '.join(variants)}; default: {default})")
            else:
                typer.echo(f"- {name}")
        for alias, target in registry.aliases(group).items():
            typer.echo(f"- {alias} -> {target}")


@app.command()
def keygen(
    group: str,
    name: str,
    seed: Optional[str] = typer.Option(None, "--seed", help="Hex seed; random when omitted."),
):
    """Generate a key pair and print both halves as hex."""
    algo = _resolve(name, (group,))
    with _guarded():
        pair = algo.generate_key_pair(from_hex(seed) if seed is not None else None)
    typer.echo(f"private_key: {to_hex(pair.private_key)}")
    typer.echo(f"public_key: {to_hex(pair.public_key)}")


@app.command()
def sign(
    name: str,
    message: str,
    private_key: str = typer.Option(..., "--private-key", help="Hex private key."),
    group: Optional[str] = typer.Option(None, "--group", help="classic or pq; searched in that order by default."),
):
    """Sign MESSAGE (hex is decoded, anything else is UTF-8) and print the signature."""
    algo = _resolve(name, _groups(group, SIGNING_GROUPS))
    with _guarded():
        data = format_message(message)
        with secret_bytes(from_hex(private_key)) as sk:
            signature = algo.sign(data, sk)
    typer.echo(to_hex(signature))


@app.command()
def verify(
    name: str,
    signature: str,
    message: str,
    public_key: str = typer.Option(..., "--public-key", help="Hex public key."),
    group: Optional[str] = typer.Option(None, "--group", help="classic or pq; searched in that order by default."),
):
    """Exit 0 when SIGNATURE is valid for MESSAGE, 1 otherwise."""
    algo = _resolve(name, _groups(group, SIGNING_GROUPS))
    with _guarded():
        ok = algo.verify(from_hex(signature), format_message(message), from_hex(public_key))
    typer.echo("valid" if ok else "invalid")
    if not ok:
        raise typer.Exit(1)


@app.command()
def encapsulate(
    name: str,
    public_key: str = typer.Option(..., "--public-key", help="Hex public key."),
):
    """Encapsulate a fresh shared secret to PUBLIC_KEY."""
    algo = _resolve(name, KEX_GROUPS)
    if not hasattr(algo, "encapsulate"):
        raise typer.BadParameter(f"{name} is not a KEM", param_hint="NAME")
    with _guarded():
        result = algo.encapsulate(from_hex(public_key))
    typer.echo(f"ciphertext: {to_hex(result.ciphertext)}")
    typer.echo(f"shared_secret: {to_hex(result.shared_secret)}")


@app.command()
def decapsulate(
    name: str,
    ciphertext: str,
    private_key: str = typer.Option(..., "--private-key", help="Hex private key."),
):
    """Recover the shared secret from CIPHERTEXT."""
    algo = _resolve(name, KEX_GROUPS)
    if not hasattr(algo, "decapsulate"):
        raise typer.BadParameter(f"{name} is not a KEM", param_hint="NAME")
    with _guarded():
        with secret_bytes(from_hex(private_key)) as sk:
            shared_secret = algo.decapsulate(from_hex(ciphertext), sk)
    typer.echo(to_hex(shared_secret))


@app.command()
def derive(
    name: str,
    private_key: str = typer.Option(..., "--private-key", help="Hex private key."),
    peer: str = typer.Option(..., "--peer", help="Hex public key of the other party."),
):
    """Diffie-Hellman shared secret between PRIVATE_KEY and PEER."""
    algo = _resolve(name, KEX_GROUPS)
    if not hasattr(algo, "derive_shared_secret"):
        raise typer.BadParameter(f"{name} does not support key exchange", param_hint="NAME")
    with _guarded():
        with secret_bytes(from_hex(private_key)) as sk:
            shared_secret = algo.derive_shared_secret(sk, from_hex(peer))
    typer.echo(to_hex(shared_secret))


@app.command()
def demo(
    name: str,
    group: Optional[str] = typer.Option(None, "--group", help="Restrict the lookup to one group."),
):
    """Run a tiny demo with the selected algorithm (keygen + one op)."""
    algo = _resolve(name, _groups(group, SIGNING_GROUPS + KEX_GROUPS))
    with _guarded():
        pair = algo.generate_key_pair()
        if hasattr(algo, "encapsulate"):
            enc = algo.encapsulate(pair.public_key)
            ok = equal_bytes(algo.decapsulate(enc.ciphertext, pair.private_key), enc.shared_secret)
            typer.echo(f"[KEM] {algo.name}: shared secret match={ok}")
        elif hasattr(algo, "derive_shared_secret"):
            peer = algo.generate_key_pair()
            ours = algo.derive_shared_secret(pair.private_key, peer.public_key)
            theirs = algo.derive_shared_secret(peer.private_key, pair.public_key)
            typer.echo(f"[KEX] {algo.name}: shared secret match={equal_bytes(ours, theirs)}")
        else:
            digest_size = getattr(algo, "digest_size", None)
            message = hashlib.shake_256(b"hello").digest(digest_size) if digest_size else b"hello"
            signature = algo.sign(message, pair.private_key)
            ok = algo.verify(signature, message, pair.public_key)
            typer.echo(f"[SIG] {algo.name}: verify={ok}")


def app_main():
    app()


if __name__ == "__main__":
    app_main()
