# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from seedpack.adapters.github import RemoteListingError
from seedpack.adapters.registry import demo_registry
from seedpack.app import list_remote_files, load_entity_file, load_entity_files
from seedpack.config import ConfigurationError, configure_logging
from seedpack.domain.errors import UndeclaredFileError, UnknownEntityError

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from seedpack.domain.types import ResolutionResult

log = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_USAGE = 2


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resolve demo data files for registered agents")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("entities", help="List registered entities and their files")

    resolve = subparsers.add_parser("resolve", help="Resolve one data file")
    resolve.add_argument("entity_id", help="Registered entity id, e.g. meeting-actions")
    resolve.add_argument("filename", help="One of the entity's declared files")
    resolve.add_argument(
        "--format",
        choices=("json", "raw"),
        default="json",
        help="Print the full result envelope or only the data (default: %(default)s)",
    )
    resolve.add_argument(
        "--no-fallback",
        action="store_true",
        help="Fail instead of returning synthetic data when no live source answers",
    )
    resolve.add_argument("--seed", type=int, help="Seed for synthetic data")

    batch = subparsers.add_parser("batch", help="Resolve every file of an entity")
    batch.add_argument("entity_id", help="Registered entity id")
    batch.add_argument("--no-fallback", action="store_true", help="Disable synthetic data")
    batch.add_argument("--seed", type=int, help="Seed for synthetic data")

    remote = subparsers.add_parser("remote-files", help="List files in the remote folder")
    remote.add_argument("entity_id", help="Registered entity id")

    return parser.parse_args(list(argv))


def _print_entities() -> None:
    for entity in demo_registry().entities():
        print(f"{entity.id}\t{entity.name}\t{', '.join(entity.files)}")


def _print_result(result: ResolutionResult, output_format: str) -> None:
    if output_format == "raw" and result.success:
        data = result.data
        print(data if isinstance(data, str) else json.dumps(data, indent=2))
        return
    print(json.dumps(result.to_dict(), indent=2))


def run(parsed_args: argparse.Namespace) -> int:
    if parsed_args.command == "entities":
        _print_entities()
        return EXIT_OK

    if parsed_args.command == "resolve":
        result = load_entity_file(
            parsed_args.entity_id,
            parsed_args.filename,
            with_fallback=not parsed_args.no_fallback,
            seed=parsed_args.seed,
        )
        _print_result(result, parsed_args.format)
        return EXIT_OK if result.success else EXIT_FAILED

    if parsed_args.command == "batch":
        batch = load_entity_files(
            parsed_args.entity_id,
            with_fallbacks=not parsed_args.no_fallback,
            seed=parsed_args.seed,
        )
        for filename, result in batch.results.items():
            status = "ok" if result.success else f"failed ({result.error})"
            print(f"{filename}\t{result.source}\t{status}")
        print(f"{batch.succeeded}/{batch.attempted} files resolved")
        return EXIT_OK if batch.succeeded == batch.attempted else EXIT_FAILED

    if parsed_args.command == "remote-files":
        for name in list_remote_files(parsed_args.entity_id):
            print(name)
        return EXIT_OK

    raise ValueError(f"Unsupported command: {parsed_args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)
    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        exit_code = run(parsed_args)
    except (UnknownEntityError, UndeclaredFileError) as exc:
        log.error("%s", exc)  # noqa: TRY400
        sys.exit(EXIT_USAGE)
    except (ConfigurationError, RemoteListingError) as exc:
        log.error("%s", exc)  # noqa: TRY400
        sys.exit(EXIT_FAILED)
    except Exception:
        log.exception("Fatal error while resolving data")
        sys.exit(EXIT_FAILED)
    sys.exit(exit_code)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def entrypoint() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    entrypoint()
