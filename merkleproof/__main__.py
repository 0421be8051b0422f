"""
Entry point for running merkleproof as a module.

Usage:
    python -m merkleproof [command] [options]

Example:
    python -m merkleproof anchor root --data a --data b --data c
    python -m merkleproof anchor prove b --data a --data b --data c --out proof.json
    python -m merkleproof anchor verify b --root <hex> --proof proof.json
"""

from merkleproof.cli.main import cli

if __name__ == "__main__":
    cli()
