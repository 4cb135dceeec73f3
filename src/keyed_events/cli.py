import json
import logging
import sys
from pathlib import Path
from typing import Any, TextIO

import click
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from keyed_events.abi_events import load_abi
from keyed_events.core.config import ParseConfig
from keyed_events.core.models import RawLog
from keyed_events.decoding.errors import ParsingError
from keyed_events.decoding.parser import EventParser

console = Console(stderr=True)
logger = logging.getLogger("keyed_events")


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def load_logs(path: Path) -> list[RawLog]:
    """Read logs from a JSON list or an RPC/Etherscan response (`{"result": [...]}`)."""
    try:
        payload: Any = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        raise ValueError(f"logs file is not valid JSON: {path}") from e
    if isinstance(payload, dict):
        if "result" not in payload:
            raise ValueError("logs must be a JSON list or an object with a 'result' key")
        payload = payload["result"]
    if not isinstance(payload, list):
        raise ValueError("logs 'result' must be a list")
    return [RawLog.from_rpc(obj) for obj in payload]


def run_parse(config: ParseConfig, out: TextIO) -> tuple[int, int]:
    """Parse every log of `config.logs_path`, writing NDJSON to `out`.

    Returns (parsed, failed). Raises the first `ParsingError` unless
    `config.skip_errors` is set.
    """
    abi = load_abi(config.abi_path)
    logs = load_logs(config.logs_path)
    parser = EventParser(abi)
    logger.info("parsing %d logs against %d events", len(logs), len(abi.events))

    parsed = failed = 0
    for i, result in enumerate(parser.parse_many(logs)):
        if isinstance(result, ParsingError):
            if not config.skip_errors:
                raise result
            failed += 1
            logger.warning("log %d skipped: %s", i, result)
            continue
        out.write(result.to_json() + "\n")
        parsed += 1
    return parsed, failed


@click.group()
def cli() -> None:
    """keyed-events: decode EVM logs into name-keyed JSON records."""


@cli.command("parse")
@click.option("--abi", "abi_path", type=click.Path(exists=True, dir_okay=False, path_type=Path), required=True, help="Contract ABI (JSON)")
@click.option("--logs", "logs_path", type=click.Path(exists=True, dir_okay=False, path_type=Path), required=True, help="Logs (JSON list or RPC response)")
@click.option("--out", "out_path", type=click.Path(dir_okay=False, path_type=Path), default=None, help="NDJSON output path (default: stdout)")
@click.option(
    "--skip-errors/--no-skip-errors",
    default=False,
    show_default=True,
    help="Skip logs that fail to parse instead of aborting",
)
@click.option("--log-level", default="WARNING", show_default=True, help="Logging level")
def parse_cmd(abi_path: Path, logs_path: Path, out_path: Path | None, skip_errors: bool, log_level: str) -> None:
    """Decode every log in LOGS with ABI and print one JSON record per line."""
    config = ParseConfig(
        abi_path=abi_path,
        logs_path=logs_path,
        out_path=out_path,
        skip_errors=skip_errors,
        log_level=log_level,
    )
    _setup_logging(config.log_level)

    try:
        if config.out_path is None:
            parsed, failed = run_parse(config, sys.stdout)
        else:
            with config.out_path.open("w") as fh:
                parsed, failed = run_parse(config, fh)
    except ParsingError as e:
        raise click.ClickException(f"{type(e).__name__}: {e}") from e
    except (ValueError, ValidationError) as e:
        raise click.UsageError(str(e)) from e

    console.print(f"[bold]summary[/]: [green]parsed[/]={parsed}  [red]failed[/]={failed}")


if __name__ == "__main__":
    cli()
