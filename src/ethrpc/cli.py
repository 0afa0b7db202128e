"""ethrpc CLI.

Issue a single JSON-RPC call against a node.

Usage:
    ethrpc call eth_blockNumber                    # asyncio HTTP transport
    ethrpc call eth_getBalance '"0xabc..."' latest # params parsed as JSON
    ethrpc --blocking call net_version             # blocking transport + resolve
    ethrpc --url http://node:8545 client-version
    ethrpc net-version

The node URL defaults to $ETHRPC_URL (or http://localhost:8545).
"""

from __future__ import annotations

import asyncio
import json
import logging
import sys
from typing import Any

import click

from .call import dispatch
from .codec import render_param
from .config import TransportConfig
from .errors import DecodeError, RpcError, TransportError
from .transports import BlockingHttpTransport, HttpTransport

# Exit codes
EXIT_FAILURE = 1
EXIT_RPC_ERROR = 2


def parse_param(text: str) -> Any:
    """Parse a command-line parameter as JSON, falling back to a plain string."""
    try:
        return json.loads(text)
    except json.JSONDecodeError:
        return text


def run_call(
    config: TransportConfig,
    method: str,
    params: list[Any],
    result_type: Any = Any,
    blocking: bool = False,
) -> Any:
    """Execute one call with a fresh transport and return the decoded result."""
    if blocking:
        with BlockingHttpTransport(config) as transport:
            return dispatch(transport, method, params, result_type).resolve()

    async def run() -> Any:
        async with HttpTransport(config) as transport:
            return await dispatch(transport, method, params, result_type)

    return asyncio.run(run())


def _invoke(ctx: click.Context, method: str, params: list[Any], result_type: Any = Any) -> None:
    config: TransportConfig = ctx.obj["config"]
    try:
        result = run_call(config, method, params, result_type, blocking=ctx.obj["blocking"])
    except RpcError as e:
        click.echo(f"RPC error {e.code}: {e.message}", err=True)
        sys.exit(EXIT_RPC_ERROR)
    except (TransportError, DecodeError) as e:
        click.echo(f"Call failed: {e}", err=True)
        sys.exit(EXIT_FAILURE)

    click.echo(json.dumps(render_param(result), indent=2))


@click.group()
@click.option("--url", envvar="ETHRPC_URL", default=None, help="Node URL (default: $ETHRPC_URL)")
@click.option("--timeout", type=float, default=None, help="Request timeout in seconds")
@click.option(
    "--no-jsonrpc-tag",
    "no_tag",
    is_flag=True,
    help='Omit the "jsonrpc": "2.0" field from requests',
)
@click.option(
    "--blocking",
    is_flag=True,
    help="Use the blocking transport and resolve without an event loop",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    help="Logging level (logs go to stderr)",
)
@click.pass_context
def main(
    ctx: click.Context,
    url: str | None,
    timeout: float | None,
    no_tag: bool,
    blocking: bool,
    log_level: str,
) -> None:
    """ethrpc - call an Ethereum JSON-RPC node."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    config = TransportConfig.from_env()
    if url:
        config.url = url
    if timeout is not None:
        config.timeout = timeout
    if no_tag:
        config.jsonrpc_version = None

    ctx.obj = {"config": config, "blocking": blocking}


@main.command("call")
@click.argument("method")
@click.argument("params", nargs=-1)
@click.pass_context
def call_command(ctx: click.Context, method: str, params: tuple[str, ...]) -> None:
    """Call METHOD with positional PARAMS (each parsed as JSON).

    Examples:

        ethrpc call eth_blockNumber

        ethrpc call web3_sha3 '"0x01020304"'
    """
    _invoke(ctx, method, [parse_param(p) for p in params])


@main.command("client-version")
@click.pass_context
def client_version(ctx: click.Context) -> None:
    """Show the node's client version (web3_clientVersion)."""
    _invoke(ctx, "web3_clientVersion", [], str)


@main.command("net-version")
@click.pass_context
def net_version(ctx: click.Context) -> None:
    """Show the network id (net_version)."""
    _invoke(ctx, "net_version", [], str)


if __name__ == "__main__":
    main()
