"""CLI entrypoint for the serial catalog transform."""

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from pathlib import Path
from typing import Any

from serial_catalog.core.errors import CatalogError, ConfigError
from serial_catalog.core.pipeline import CatalogPipeline
from serial_catalog.core.report import ReportStyle
from serial_catalog.core.settings import Settings, load_settings
from serial_catalog.core.stats import build_stats

log = logging.getLogger("serial_catalog.cli")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments for the catalog transform.

    Args:
        argv (Sequence[str] | None): Arguments, `sys.argv[1:]` when omitted.

    Returns:
        argparse.Namespace: Parsed CLI arguments.
    """
    parser = argparse.ArgumentParser(
        description="Turn a TV series catalog XML export into a text report "
        "and a JSON lines store of episode files."
    )
    parser.add_argument(
        "--config",
        help="YAML file overriding the default settings",
    )
    parser.add_argument(
        "--input",
        dest="input_path",
        help="Catalog XML file (default: amedia_tv_series.xml)",
    )
    parser.add_argument(
        "--output",
        dest="output_path",
        help="Text report, replaced on every run (default: output.txt)",
    )
    parser.add_argument(
        "--crosswalk",
        dest="crosswalk_path",
        help="Optional IMDb to Kinopoisk JSON mapping (default: imdbToKP.json)",
    )
    parser.add_argument(
        "--records",
        dest="record_store_path",
        help="JSON lines record store, appended to (default: files.json)",
    )
    parser.add_argument(
        "--encoding",
        dest="input_encoding",
        help="Force the catalog encoding instead of the XML declaration",
    )
    parser.add_argument(
        "--no-crosswalk",
        dest="use_crosswalk",
        action="store_const",
        const=False,
        help="Skip loading the crosswalk file.",
    )
    parser.add_argument(
        "--no-records",
        dest="emit_records",
        action="store_const",
        const=False,
        help="Do not append episode records to the record store.",
    )
    parser.add_argument(
        "--style",
        dest="report_style",
        choices=[style.value for style in ReportStyle],
        help="Report layout (default: full)",
    )
    parser.add_argument(
        "--quiet",
        dest="console",
        action="store_const",
        const=False,
        help="Do not mirror the report to stdout.",
    )
    parser.add_argument(
        "--check",
        action="store_true",
        help="Report every malformed field and exit without writing output.",
    )
    parser.add_argument(
        "--stats",
        help="Write a JSON file with run summary metrics to this path.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR). (default: INFO)",
    )
    return parser.parse_args(argv)


def configure_logging(level: str) -> None:
    """Configure basic logging output using the desired severity level.

    Args:
        level (str): Logging level name.
    """
    value = getattr(logging, level.upper(), None)
    if not isinstance(value, int):
        raise ValueError(f"Invalid log level: {level}")
    logging.basicConfig(
        level=value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def build_settings(args: argparse.Namespace) -> Settings:
    """Combine the config file and CLI flags into run settings.

    Args:
        args (argparse.Namespace): Parsed CLI arguments.

    Returns:
        Settings: Effective settings.
    """
    settings = load_settings(args.config)
    return settings.with_overrides(
        input_path=args.input_path,
        output_path=args.output_path,
        crosswalk_path=args.crosswalk_path,
        record_store_path=args.record_store_path,
        input_encoding=args.input_encoding,
        use_crosswalk=args.use_crosswalk,
        emit_records=args.emit_records,
        report_style=args.report_style,
        console=args.console,
    )


def write_payload(path: Path, payload: dict[str, Any]) -> None:
    """Persist a JSON payload to `path`.

    Args:
        path (Path): Destination path for the JSON payload.
        payload (dict[str, Any]): Serialized payload.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    rendered = json.dumps(payload, ensure_ascii=False, indent=2) + "\n"
    path.write_text(rendered, encoding="utf-8")


def main(argv: Sequence[str] | None = None) -> None:
    """Entry point for the CLI application."""
    args = parse_args(argv)
    try:
        configure_logging(args.log_level)
        settings = build_settings(args)
    except (ValueError, ConfigError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(2)

    pipeline = CatalogPipeline(settings)
    try:
        if args.check:
            issues = pipeline.check()
            for issue in issues:
                print(f"{issue.path}: {issue.message}", file=sys.stderr)
            if issues:
                sys.exit(1)
            return
        artifacts = pipeline.run()
    except CatalogError as exc:
        log.error("Catalog run failed: %s", exc)
        sys.exit(1)
    except KeyboardInterrupt:
        log.warning("Catalog run interrupted")
        sys.exit(130)

    if args.stats:
        stats_path = Path(args.stats)
        write_payload(stats_path, build_stats(artifacts))
        log.info("Wrote %s", stats_path)


if __name__ == "__main__":
    main()
