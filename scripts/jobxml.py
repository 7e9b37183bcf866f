#!/usr/bin/env python3
"""
Job XML helper

Usage:
  python scripts/jobxml.py generate --config-file <path> [--output-dir <dir>] [--stdout]
  python scripts/jobxml.py generate --job-name <name> [--output-dir <dir>] [--stdout]
  python scripts/jobxml.py validate --xml-file <path> [--api-base-url <url>]
  python scripts/jobxml.py report --xml-file <path>

Examples:
  python scripts/jobxml.py configs/EDDLY_CUSTOMER_LOAD.yaml
  python scripts/jobxml.py generate --config-file configs/EDDLY_CUSTOMER_LOAD.yaml --output-dir out
  python scripts/jobxml.py validate --xml-file out/EDDLY_CUSTOMER_LOAD.xml
  python scripts/jobxml.py validate --xml-file out/EDDLY_CUSTOMER_LOAD.xml --api-base-url http://localhost:8000
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import requests
from dotenv import load_dotenv

load_dotenv()

from infrastructure.settings.env_settings import AppSettings
from infrastructure.logging.log_setup import setup_console_logging

SETTINGS = AppSettings.from_env()
setup_console_logging(level=SETTINGS.log_level)

from application.reporting.report_formatter import format_report
from application.services.job_document_service import JobDocumentService
from infrastructure.config.errors import ConfigLoadError
from infrastructure.config.file_finder import JobConfigFileFinder
from infrastructure.config.loader_registry import JobConfigLoaderRegistry
from infrastructure.export.xml_file_writer import JobXmlFileWriter
from infrastructure.logging.console_logger import ConsoleLogger


DEFAULT_API_TIMEOUT_SEC = 30
COMMANDS = {"generate", "validate", "report"}


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Job XML generation and validation helper")
    subparsers = parser.add_subparsers(dest="command")

    generate_parser = subparsers.add_parser("generate", help="Generate job XML from a configuration file")
    generate_parser.add_argument("--config-file", type=str)
    generate_parser.add_argument("--job-name", type=str)
    generate_parser.add_argument("--output-dir", type=str)
    generate_parser.add_argument("--stdout", action="store_true", help="Print the document instead of saving it")

    validate_parser = subparsers.add_parser("validate", help="Validate a job XML file")
    validate_parser.add_argument("--xml-file", type=str, required=True)
    validate_parser.add_argument("--api-base-url", type=str)

    report_parser = subparsers.add_parser("report", help="Print the validation report of a job XML file")
    report_parser.add_argument("--xml-file", type=str, required=True)

    return parser


def _resolve_config_path(args: argparse.Namespace) -> Path:
    if args.config_file:
        return Path(args.config_file)
    if args.job_name:
        finder = JobConfigFileFinder(SETTINGS.config_dir)
        config_file = finder.find_by_name(args.job_name)
        if config_file is None:
            raise ValueError(f"Job configuration not found: {args.job_name}")
        return config_file
    raise ValueError("config-file or job-name is required")


def _read_xml(path: str) -> str:
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ValueError(f"Unable to read XML file: {exc}") from exc


def _generate(args: argparse.Namespace, service: JobDocumentService) -> int:
    config_path = _resolve_config_path(args)
    loader = JobConfigLoaderRegistry().get_loader(config_path)
    try:
        config = loader.load_from_file(config_path)
    except ConfigLoadError as e:
        raise ValueError(f"Failed to load job configuration: {e}") from e

    print(f"Job: {config.name}")
    print(f"Steps: {len(config.steps)}")

    document = service.build(config)

    if args.stdout:
        print(document.xml, end="")
    elif document.is_valid:
        output_dir = Path(args.output_dir) if args.output_dir else SETTINGS.output_dir
        path = JobXmlFileWriter(output_dir).write(document.job_name, document.xml)
        print(f"Saved: {path}")

    print()
    print(document.report, end="")
    return 0 if document.is_valid else 1


def _validate_local(args: argparse.Namespace, service: JobDocumentService) -> int:
    result = service.validate(_read_xml(args.xml_file))
    print(format_report(result), end="")
    return 0 if result.is_valid else 1


def _validate_api(args: argparse.Namespace) -> int:
    url = f"{args.api_base_url.rstrip('/')}/validations"
    response = requests.post(
        url,
        json={"xml": _read_xml(args.xml_file)},
        timeout=DEFAULT_API_TIMEOUT_SEC,
    )
    print(f"Status: {response.status_code}")
    data = response.json()
    print(json.dumps(data, indent=2, ensure_ascii=False))
    if response.status_code >= 400:
        return 1
    return 0 if data.get("valid") else 1


def _report(args: argparse.Namespace, service: JobDocumentService) -> int:
    print(service.report(_read_xml(args.xml_file)), end="")
    return 0


def main() -> None:
    parser = _build_parser()
    argv = sys.argv[1:]
    if argv and argv[0] not in COMMANDS and not argv[0].startswith("-"):
        argv = ["generate", "--config-file", argv[0]] + argv[1:]
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    service = JobDocumentService(logger=ConsoleLogger().bind(component="cli"))

    try:
        if args.command == "generate":
            exit_code = _generate(args, service)
        elif args.command == "validate":
            if args.api_base_url:
                exit_code = _validate_api(args)
            else:
                exit_code = _validate_local(args, service)
        elif args.command == "report":
            exit_code = _report(args, service)
        else:
            raise ValueError(f"Unknown command: {args.command}")
    except (ValueError, ConfigLoadError) as exc:
        print(f"ERROR: {exc}")
        sys.exit(1)
    except requests.RequestException as exc:
        print(f"ERROR: API request failed: {exc}")
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == "__main__":
    main()
