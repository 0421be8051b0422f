"""merkleproof CLI entry point - assembles all command groups."""
import click

from .. import __version__
from ..config import features
from .anchor_cmd import anchor


@click.group()
@click.version_option(version=__version__)
@click.option('--receipts/--no-receipts', default=False,
              help='Print operation receipts as JSON lines')
@click.pass_context
def cli(ctx: click.Context, receipts: bool):
    """merkleproof: Merkle roots and inclusion proofs."""
    previous = features.FEATURE_RECEIPTS_ENABLED
    features.FEATURE_RECEIPTS_ENABLED = receipts

    def restore_receipts():
        features.FEATURE_RECEIPTS_ENABLED = previous

    ctx.call_on_close(restore_receipts)


cli.add_command(anchor)


if __name__ == "__main__":
    cli()
