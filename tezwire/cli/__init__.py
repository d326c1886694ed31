"""
TezWire CLI Tool

Decodes a Tezos node RPC payload saved to a file (or piped on stdin) and
prints a JSON summary. Useful for checking what the decoder makes of a
response captured from a node before wiring it into an indexer.

    curl -s $NODE/chains/main/mempool/pending_operations | tzw decode mempool
    tzw decode constants constants.json
"""

import json
import logging
from typing import Any, Callable

import click

from tezwire import __version__
from tezwire.config.settings import settings
from tezwire.core.exceptions import DecodeError
from tezwire.node.constants import decode_constants
from tezwire.node.content import decode_content
from tezwire.node.header import decode_head_metadata, decode_header
from tezwire.node.kinds import OperationKind, is_manager
from tezwire.node.mempool import MempoolResponse, decode_mempool
from tezwire.node.operations import OPERATION_MODELS

logger = logging.getLogger(__name__)


def summarize_mempool(response: MempoolResponse) -> dict[str, Any]:
    """Summary of a mempool snapshot: counts plus hash and kinds per operation"""
    operations = [
        {
            "classification": "applied",
            "hash": op.hash,
            "kinds": [c.kind for c in op.contents],
        }
        for op in response.applied
    ]
    for classification, op in response.iter_failed():
        operations.append({
            "classification": classification.value,
            "hash": op.hash,
            "kinds": [c.kind for c in op.contents],
            "errors": op.errors(),
        })
    return {"counts": response.counts(), "operations": operations}


def _summarize_content(raw: bytes) -> dict[str, Any]:
    content = decode_content(raw)
    summary = {
        "kind": content.kind,
        "known": content.is_known,
        "manager": content.is_manager,
        "operation": None,
    }
    if content.kind in OPERATION_MODELS:
        summary["operation"] = content.decode().to_wire()
    return summary


DECODERS: dict[str, Callable[[bytes], dict[str, Any]]] = {
    "mempool": lambda raw: summarize_mempool(decode_mempool(raw)),
    "constants": lambda raw: decode_constants(raw).to_wire(),
    "header": lambda raw: decode_header(raw).to_wire(),
    "metadata": lambda raw: decode_head_metadata(raw).to_wire(),
    "content": _summarize_content,
}


LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


@click.group()
@click.option(
    '--log-level',
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default=None,
    help='Override the configured log level',
)
@click.version_option(__version__, prog_name='tzw')
@click.pass_context
def tzw(ctx, log_level):
    """TezWire CLI - decode Tezos node RPC payloads"""
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=(log_level or settings.LOG_LEVEL).upper(),
        format=settings.LOG_FORMAT,
    )


@tzw.command()
@click.argument('payload_type', type=click.Choice(sorted(DECODERS)))
@click.argument('source', type=click.File('rb'), default='-')
@click.pass_context
def decode(ctx, payload_type, source):
    """Decode a payload from SOURCE (a file, or - for stdin)"""
    raw = source.read()
    logger.debug(f"Read {len(raw)} bytes of {payload_type} payload")

    try:
        summary = DECODERS[payload_type](raw)
    except DecodeError as e:
        logger.error(f"Failed to decode {payload_type}: {e}")
        click.echo(json.dumps(e.to_dict(), indent=settings.CLI_JSON_INDENT), err=True)
        ctx.exit(1)

    click.echo(json.dumps(summary, indent=settings.CLI_JSON_INDENT))


@tzw.command()
def kinds():
    """List recognized operation kinds"""
    for kind in OperationKind:
        marker = " (manager)" if is_manager(kind.value) else ""
        click.echo(f"{kind.value}{marker}")


if __name__ == '__main__':
    tzw()
