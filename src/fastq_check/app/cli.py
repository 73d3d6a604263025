from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from fastq_check.adapters.error_sink import FileErrorSink
from fastq_check.adapters.line_source import FileLineSource
from fastq_check.adapters.log_sinks import log_sink_from_config
from fastq_check.config.loader import ConfigError, config_from_mapping, load_config, load_default_config
from fastq_check.domain.tally import ScanStatus
from fastq_check.ports.log_sink import LogSink
from fastq_check.usecases.config_models import AppConfig
from fastq_check.usecases.driver import Driver, ScanResult
from fastq_check.usecases.error_report import ErrorReporter
from fastq_check.usecases.parallel import ParallelDriver
from fastq_check.usecases.validator import QualityRange, RecordValidator

ERRORS_SUFFIX = ".errors.txt"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fastq-check",
        description="Check that a FASTQ file is made of well-formed four-line records",
    )
    parser.add_argument("-i", "--input", required=True, help="Path to the FASTQ file to check")
    parser.add_argument(
        "-o", "--output", help=f"Path for the diagnostic report (default: <input>{ERRORS_SUFFIX})"
    )
    parser.add_argument("--config", help="Path to YAML config")
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Also check that quality characters fall inside the quality range",
    )
    parser.add_argument("--quality-min", type=int, help="Lowest accepted quality character code")
    parser.add_argument("--quality-max", type=int, help="Highest accepted quality character code")
    parser.add_argument("--workers", type=int, help="Validate with a pool of N worker processes")
    return parser


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    return build_parser().parse_args(argv)


def default_output_path(input_path: Path) -> Path:
    return input_path.with_name(input_path.name + ERRORS_SUFFIX)


def apply_cli_overrides(config: AppConfig, args: argparse.Namespace) -> AppConfig:
    # CLI flags win over config values; the merged result is re-validated.
    raw = config.model_dump()
    if args.output is not None:
        raw["output"]["file_path"] = args.output
    if args.strict is not None:
        raw["quality"]["strict"] = args.strict
    if args.quality_min is not None:
        raw["quality"]["min_code"] = args.quality_min
    if args.quality_max is not None:
        raw["quality"]["max_code"] = args.quality_max
    if args.workers is not None:
        raw["parallel"]["workers"] = args.workers
    return config_from_mapping(raw)


def build_validator(config: AppConfig) -> RecordValidator:
    quality = config.quality
    if not quality.strict:
        return RecordValidator()
    return RecordValidator(quality_range=QualityRange(min_code=quality.min_code, max_code=quality.max_code))


def build_driver(config: AppConfig, reporter: ErrorReporter, log: LogSink) -> Driver | ParallelDriver:
    validator = build_validator(config)
    parallel = config.parallel
    if parallel.workers == 1:
        return Driver(validator=validator, reporter=reporter, log=log)
    return ParallelDriver(
        validator=validator,
        reporter=reporter,
        workers=parallel.workers,
        partition_records=parallel.partition_records,
        queue_depth=parallel.queue_depth,
        log=log,
    )


def print_summary(result: ScanResult, output_path: Path) -> None:
    tally = result.tally
    print(
        f"Checked {tally.records_seen} records: "
        f"{tally.records_valid} valid, {tally.records_invalid} invalid"
    )
    if result.status is ScanStatus.FATAL:
        print("Scan incomplete; counts cover the records read before the failure.")
    elif result.status is ScanStatus.FORMAT_ERRORS_FOUND:
        print(f"Diagnostics written to {output_path}")
    else:
        print("No errors found.")


def run(argv: Sequence[str] | None = None) -> int:
    # Thin orchestration wrapper; scanning logic lives in usecases.
    args = parse_args(argv)
    try:
        config = load_config(Path(args.config)) if args.config else load_default_config()
        config = apply_cli_overrides(config, args)
    except ConfigError as exc:
        print(f"fastq-check: invalid configuration: {exc}", file=sys.stderr)
        return ScanStatus.FATAL.exit_code

    input_path = Path(args.input)
    output_path = (
        Path(config.output.file_path) if config.output.file_path else default_output_path(input_path)
    )
    source = FileLineSource(
        path=input_path,
        encoding=config.input.encoding,
        decode_errors=config.input.decode_errors,
    )
    reporter = ErrorReporter(sink=FileErrorSink(path=output_path, encoding=config.output.encoding))
    try:
        log = log_sink_from_config(config.logging)
    except OSError as exc:
        print(f"fastq-check: cannot open log {config.logging.path}: {exc}", file=sys.stderr)
        return ScanStatus.FATAL.exit_code
    try:
        result = build_driver(config, reporter, log).run(source.read())
    finally:
        log.close()

    if result.error is not None:
        print(f"fastq-check: {result.error}", file=sys.stderr)
    print_summary(result, output_path)
    return result.exit_code
