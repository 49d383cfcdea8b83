"""CLI entry point — Inspect a Solr index the way the engine queries it."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

from solrscout.config.settings import Settings
from solrscout.solr.exceptions import SolrError

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point for solrscout."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    settings = _load_settings(args)

    from solrscout.observability.logging import setup_logging

    setup_logging(settings.observability)

    try:
        result = asyncio.run(args.handler(args, settings))
    except (SolrError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(json.dumps(result, indent=2, ensure_ascii=False, default=str))


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solrscout",
        description="solrscout — Apache Solr search engine driver",
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to YAML configuration file",
    )
    parser.add_argument(
        "--base-url",
        type=str,
        default=None,
        help="Solr base URL (overrides config)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["debug", "info", "warning", "error"],
        default=None,
        help="Log level (overrides config)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"solrscout {_get_version()}",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    ping = sub.add_parser("ping", help="Ping a Solr endpoint")
    ping.add_argument("--endpoint", "-e", default=None, help="Core/collection (default from config)")
    ping.set_defaults(handler=_cmd_ping)

    search = sub.add_parser("search", help="Run a search and print matching documents")
    search.add_argument("query", nargs="?", default="", help="Query text (empty matches everything)")
    search.add_argument("--endpoint", "-e", default=None, help="Core/collection (default from config)")
    search.add_argument(
        "--where",
        "-w",
        action="append",
        type=_where_pair,
        default=[],
        metavar="FIELD=VALUE",
        help="Exact-match filter; may be repeated",
    )
    search.add_argument("--sort", action="append", default=[], metavar="FIELD[:asc|desc]", help="Sort clause")
    search.add_argument("--page", type=int, default=None, help="1-based page number")
    search.add_argument("--per-page", type=int, default=15, help="Page size when --page is given")
    search.add_argument("--limit", type=int, default=None, help="Maximum number of documents")
    search.set_defaults(handler=_cmd_search)

    delete = sub.add_parser("delete", help="Delete documents by id")
    delete.add_argument("ids", nargs="+", help="Document ids")
    delete.add_argument("--endpoint", "-e", default=None, help="Core/collection (default from config)")
    delete.set_defaults(handler=_cmd_delete)

    flush = sub.add_parser("flush-query", help="Delete every document matching a query")
    flush.add_argument("endpoint", help="Core/collection")
    flush.add_argument("query", help="Solr query selecting the documents to delete")
    flush.set_defaults(handler=_cmd_flush_query)

    return parser


def _load_settings(args: argparse.Namespace) -> Settings:
    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file not found: {config_path}", file=sys.stderr)
            sys.exit(1)
        settings = Settings.from_yaml(config_path)
    else:
        settings = Settings()

    if args.base_url:
        settings.search.solr.base_url = args.base_url.rstrip("/")
    if args.log_level:
        settings.observability.log_level = args.log_level
    return settings


def _where_pair(pair: str) -> tuple[str, str]:
    field, sep, value = pair.partition("=")
    if not sep or not field:
        raise argparse.ArgumentTypeError(f"invalid filter '{pair}', expected FIELD=VALUE")
    return field, value


# ── Commands ─────────────────────────────────────────────────────────────────


async def _cmd_ping(args: argparse.Namespace, settings: Settings) -> dict[str, Any]:
    from solrscout.solr.client import SolrClient

    async with SolrClient.from_settings(settings.search.solr) as client:
        endpoint = args.endpoint or client.default_endpoint
        ok = await client.ping(endpoint)
    return {"endpoint": endpoint, "status": "OK" if ok else "degraded"}


async def _cmd_search(args: argparse.Namespace, settings: Settings) -> dict[str, Any]:
    from solrscout.engines.solr import SolrEngine
    from solrscout.scout.builder import Builder
    from solrscout.solr.client import SolrClient

    engine = SolrEngine(SolrClient.from_settings(settings.search.solr))
    try:
        builder = Builder(None, args.query, engine=engine)
        builder.within(args.endpoint or engine.client.default_endpoint)
        for field, value in args.where:
            builder.where(field, value)
        for clause in args.sort:
            field, _, direction = clause.partition(":")
            builder.order_by(field, direction or "asc")
        if args.limit is not None:
            builder.take(args.limit)

        if args.page is not None:
            results = await engine.paginate(builder, args.per_page, args.page)
        else:
            results = await engine.search(builder)
    finally:
        await engine.shutdown()

    return {
        "total": engine.get_total_count(results),
        "ids": engine.map_ids(results),
        "documents": results.documents,
    }


async def _cmd_delete(args: argparse.Namespace, settings: Settings) -> dict[str, Any]:
    from solrscout.solr.client import SolrClient

    async with SolrClient.from_settings(settings.search.solr) as client:
        query = client.create_update().add_delete_by_ids(args.ids).add_commit()
        endpoint = args.endpoint or client.default_endpoint
        await client.update(query, endpoint)
    logger.info("Deleted %d document(s) from '%s'", len(args.ids), endpoint)
    return {"endpoint": endpoint, "deleted": args.ids}


async def _cmd_flush_query(args: argparse.Namespace, settings: Settings) -> dict[str, Any]:
    from solrscout.solr.client import SolrClient

    async with SolrClient.from_settings(settings.search.solr) as client:
        query = client.create_update().add_delete_query(args.query).add_commit()
        await client.update(query, args.endpoint)
    logger.info("Deleted documents matching %r from '%s'", args.query, args.endpoint)
    return {"endpoint": args.endpoint, "query": args.query}


def _get_version() -> str:
    """Get the package version."""
    try:
        from solrscout import __version__

        return __version__
    except ImportError:
        return "unknown"


if __name__ == "__main__":
    main()
