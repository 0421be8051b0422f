"""Anchor commands: hash, root, prove, verify."""
import json
import sys
import time

import click

from ..anchor import Proof, algorithms, construct, hash_data, verify_proof
from ..core.constants import DEFAULT_HASH_ALGORITHM, HEX_PREVIEW_CHARS
from ..core.errors import MerkleError
from .output import error_box, print_json, success_box

algorithm_option = click.option(
    '--algorithm', type=click.Choice(algorithms()), default=DEFAULT_HASH_ALGORITHM,
    show_default=True, help='Hash algorithm')
items_option = click.option(
    '--items', type=click.Path(exists=True, dir_okay=False),
    help='File with one leaf per line')
data_option = click.option('--data', multiple=True, help='Inline leaf (repeatable)')


def _collect_leaves(items: str | None, data: tuple) -> list[bytes]:
    """Leaves from --items (one per line) followed by --data values."""
    leaves = []
    if items:
        with open(items, "rb") as f:
            for line in f:
                line = line.rstrip(b"\r\n")
                if line:
                    leaves.append(line)
    leaves.extend(d.encode("utf-8") for d in data)
    return leaves


def _elapsed_ms(t0: float) -> str:
    return f"{int((time.perf_counter() - t0) * 1000)}ms"


@click.group()
def anchor():
    """Merkle root, proof and verification operations."""
    pass


@anchor.command()
@click.argument('data')
@algorithm_option
def hash(data: str, algorithm: str):
    """Compute the leaf digest of DATA."""
    digest = hash_data(data, algorithm)
    click.echo(digest.hex())


@anchor.command()
@items_option
@data_option
@algorithm_option
@click.option('--quiet', '-q', is_flag=True, help='Print only the root hex')
def root(items: str | None, data: tuple, algorithm: str, quiet: bool):
    """Compute the Merkle root of the given leaves."""
    t0 = time.perf_counter()
    try:
        tree = construct(_collect_leaves(items, data), algorithm)
    except MerkleError as e:
        error_box("Merkle Root: NO DATA", str(e), "merkleproof anchor root --data <leaf>")
        sys.exit(2)

    if quiet:
        click.echo(tree.root().hex())
        sys.exit(0)

    success_box("Merkle Root", [
        ("Leaves", str(tree.leaf_count)),
        ("Depth", str(tree.depth)),
        ("Algorithm", algorithm),
        ("Root", tree.root().hex()),
        ("Duration", _elapsed_ms(t0))
    ], "merkleproof anchor prove <leaf> --out proof.json")
    sys.exit(0)


@anchor.command()
@click.argument('leaf')
@items_option
@data_option
@algorithm_option
@click.option('--out', type=click.Path(dir_okay=False, writable=True),
              help='Write proof JSON to file instead of stdout')
def prove(leaf: str, items: str | None, data: tuple, algorithm: str, out: str | None):
    """Generate an inclusion proof for LEAF."""
    try:
        tree = construct(_collect_leaves(items, data), algorithm)
        proof = tree.prove(leaf)
    except MerkleError as e:
        error_box("Prove: FAILED", str(e))
        sys.exit(2)

    rendered = {**proof.to_dict(), "root": tree.root().hex()}
    if out:
        try:
            with open(out, "w") as f:
                json.dump(rendered, f, indent=2, sort_keys=True)
        except OSError as e:
            error_box("Prove: FAILED", str(e))
            sys.exit(2)
        success_box("Prove: SUCCESS", [
            ("Leaf", leaf),
            ("Proof depth", str(len(proof))),
            ("Root", tree.root().hex()),
            ("File", out)
        ], f"merkleproof anchor verify {leaf} --root <root> --proof {out}")
    else:
        print_json(rendered)
    sys.exit(0)


@anchor.command()
@click.argument('leaf')
@click.option('--root', 'root_hex', required=True, help='Expected Merkle root (hex)')
@click.option('--proof', 'proof_file', required=True,
              type=click.Path(exists=True, dir_okay=False), help='Proof JSON file')
def verify(leaf: str, root_hex: str, proof_file: str):
    """Verify LEAF against a Merkle root with a proof file."""
    t0 = time.perf_counter()
    try:
        expected_root = bytes.fromhex(root_hex)
        with open(proof_file) as f:
            proof = Proof.from_dict(json.load(f))
    except (ValueError, OSError) as e:
        error_box("Anchor Verify: ERROR", str(e))
        sys.exit(2)

    if verify_proof(leaf, proof, expected_root):
        success_box("Anchor Verify: VALID", [
            ("Leaf", leaf),
            ("Root", root_hex[:HEX_PREVIEW_CHARS]),
            ("Proof depth", str(len(proof))),
            ("Duration", _elapsed_ms(t0))
        ])
        sys.exit(0)

    error_box("Anchor Verify: INVALID", "Proof path does not reproduce the root")
    sys.exit(1)
