"""
Command-line entry point.

    gtfs-store import --config config.json
    gtfs-store import --path feeds/stcp.zip --agency-key stcp --exclude shapes --sqlite-path db/gtfs.db
    gtfs-store import --path feeds/semicolon --delimiter ";"
    gtfs-store export --agency-key stcp --out gtfs-export/stcp --sqlite-path db/gtfs.db
    gtfs-store tables
"""

import argparse
import sys
from typing import List, Optional

from gtfs_store.common.config import AgencyConfig, StoreConfig, load_config
from gtfs_store.common.errors import GTFSStoreError
from gtfs_store.common.logging_utils import logger, set_verbose
from gtfs_store.store.database import GTFSStore


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gtfs-store",
        description="Load GTFS feeds into a SQLite store and export them back.",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Only log warnings and errors.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    import_parser = subparsers.add_parser("import", help="Import one feed or every feed in a config file.")
    source = import_parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--config", dest="config_path", help="JSON configuration file listing agencies.")
    source.add_argument("--path", dest="feed_path", help="Feed directory or .zip archive.")
    import_parser.add_argument("--agency-key", dest="agency_key", default=None, help="Dataset key (default: feed basename).")
    import_parser.add_argument("--exclude", nargs="*", default=[], help="Tables to skip.")
    import_parser.add_argument("--sqlite-path", dest="sqlite_path", default=None, help="SQLite database file.")
    import_parser.add_argument("--delimiter", default=None, help="CSV field delimiter (default: comma).")

    export_parser = subparsers.add_parser("export", help="Export agency datasets to GTFS files.")
    target = export_parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--config", dest="config_path", help="JSON configuration file listing agencies.")
    target.add_argument("--agency-key", dest="agency_key", help="Dataset key to export.")
    export_parser.add_argument("--out", dest="out_dir", default=None, help="Destination directory.")
    export_parser.add_argument("--sqlite-path", dest="sqlite_path", default=None, help="SQLite database file.")

    subparsers.add_parser("tables", help="List the tables the store knows about.")
    return parser


def _resolve_config(args: argparse.Namespace) -> StoreConfig:
    overrides = {}
    if args.sqlite_path:
        overrides["sqlite_path"] = args.sqlite_path
    if args.quiet:
        overrides["verbose"] = False
    return load_config(args.config_path, overrides=overrides)


def _handle_import(args: argparse.Namespace) -> int:
    from gtfs_store.ingest.feed_loader import import_feed, import_gtfs

    config = _resolve_config(args)
    if args.delimiter:
        config.csv_options = {**config.csv_options, "sep": args.delimiter}
    if args.feed_path:
        config.agencies = [AgencyConfig(path=args.feed_path, agency_key=args.agency_key or "", exclude=args.exclude)]
    if config.sqlite_path is None:
        logger.warning("No sqlite path configured; imported data will not outlive this process")

    with GTFSStore(config.sqlite_path) as store:
        if args.feed_path:
            agency = config.agencies[0]
            summaries = [
                import_feed(
                    agency.path,
                    exclude=agency.exclude,
                    agency_key=agency.agency_key,
                    store=store,
                    csv_options=config.csv_options,
                )
            ]
        else:
            summaries = import_gtfs(config, store=store)

    for summary in summaries:
        print(f"{summary.agency_key}: {summary.total_rows} rows, {len(summary.warnings)} warnings")
    return 0


def _handle_export(args: argparse.Namespace) -> int:
    from gtfs_store.export.export_writer import export_agency, export_gtfs

    config = _resolve_config(args)
    with GTFSStore(config.sqlite_path) as store:
        if args.agency_key:
            out_dir = args.out_dir or f"{config.export_path}/{args.agency_key}"
            summaries = [export_agency(args.agency_key, out_dir, store=store)]
        else:
            if args.out_dir:
                config.export_path = args.out_dir
            summaries = export_gtfs(config, store=store)

    for summary in summaries:
        print(f"{summary.agency_key}: {len(summary.files)} files written to {summary.destination}")
    return 0


def _handle_tables(args: argparse.Namespace) -> int:
    from gtfs_store.schemas.schema_registry import all_tables, get_table_info

    for name in all_tables():
        info = get_table_info(name)
        flag = "required" if info.required else info.group
        print(f"{name}\t{info.filename}\t{flag}\t{info.description}")
    return 0


_HANDLERS = {
    "import": _handle_import,
    "export": _handle_export,
    "tables": _handle_tables,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, dispatch to the subcommand and translate store errors to exit code 1."""
    args = build_parser().parse_args(argv)
    set_verbose(not args.quiet)

    try:
        return _HANDLERS[args.command](args)
    except GTFSStoreError as exc:
        logger.error("%s failed: %s", args.command, exc)
        return 1


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
