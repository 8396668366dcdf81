"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys

from todogist.cli.parser import build_parser
from todogist.cli.progress import RichSyncProgress
from todogist.config import load_config
from todogist.contracts.config import TodoGistConfig
from todogist.contracts.exceptions import AuthenticationError, ConfigError, ProviderError, PublishError
from todogist.sdk import SyncResult, TodoGist


def format_sync_summary(result: SyncResult, config: TodoGistConfig) -> str:
    mode = "dry-run" if result.dry_run else "apply"
    lines = [
        "",
        f"todogist - sync complete ({mode})",
        "",
        f"  Gist:      {config.gist_id}",
        "",
    ]
    for report in result.reports:
        items = report.result.items
        lines.append(
            f"  {report.result.name:<20}  {len(items.done):>4} done  "
            f"{len(items.pending):>4} pending  {len(report.archived):>4} archived"
        )

    lines.append("")
    if result.dry_run:
        lines.append("  [dry-run] Gist was not updated")
    else:
        lines.append(f"  Status:    HTTP {result.status_code}")
    lines.append("")
    return "\n".join(lines)


async def run_sync(args: argparse.Namespace) -> SyncResult:
    config = load_config(args.config)

    if not args.verbose:
        with RichSyncProgress() as progress:
            result = await TodoGist(config, progress=progress).sync(dry_run=args.dry_run)
    else:
        result = await TodoGist(config).sync(dry_run=args.dry_run)

    if result.dry_run:
        for gist_file in result.files:
            print(gist_file.content, end="")
    print(format_sync_summary(result, config), file=sys.stderr)
    return result


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        asyncio.run(run_sync(args))
        return 0
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 3
    except (AuthenticationError, ProviderError, PublishError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 4
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["format_sync_summary", "main", "run_sync"]
