# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING, cast

from dotenv import load_dotenv

from bindmap.app import build_request_mapper, list_watched_kinds, map_changed_object
from bindmap.common.logging import TRACE
from bindmap.config import configure_logging, get_kubernetes_config
from bindmap.domain.model import ChangedObject

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence
    from types import FrameType

    from bindmap.domain.correlation import BindingRequestMapper

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Find the ServiceBindings affected by a changed cluster object"
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log verbosity (-v for DEBUG, -vv for TRACE)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    map_cmd = subparsers.add_parser("map", help="Map one changed object to reconcile requests")
    map_cmd.add_argument(
        "manifest",
        type=str,
        help="Path to a JSON manifest of the changed object ('-' reads stdin)",
    )
    map_cmd.add_argument(
        "--namespace",
        type=str,
        default=None,
        help="Only consider ServiceBindings in this namespace",
    )

    subparsers.add_parser(
        "watched-kinds",
        help="List the types whose changes can affect the stored ServiceBindings",
    )

    return parser.parse_args(list(argv))


def _log_level(verbosity: int) -> int:
    if verbosity >= 2:  # noqa: PLR2004
        return TRACE
    if verbosity == 1:
        return logging.DEBUG
    return logging.INFO


def _build_mapper(namespace: str | None) -> BindingRequestMapper:
    if namespace is None:
        return build_request_mapper()
    config = replace(get_kubernetes_config(), namespace=namespace)
    return build_request_mapper(config=config)


def _load_manifest(source: str) -> ChangedObject:
    try:
        text = sys.stdin.read() if source == "-" else Path(source).read_text()
    except OSError as exc:
        raise ValueError(f"Cannot read manifest {source}: {exc}") from exc
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ValueError(f"Manifest {source} is not valid JSON: {exc}") from exc
    if not isinstance(payload, dict):
        raise ValueError(f"Manifest {source} must be a JSON object")
    return ChangedObject.from_manifest(cast("Mapping[str, object]", payload))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        parsed_args = _parse_args(args_list)
        configure_logging(level=_log_level(parsed_args.verbose))
        changed = _load_manifest(parsed_args.manifest) if parsed_args.command == "map" else None
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)

    try:
        mapper = _build_mapper(getattr(parsed_args, "namespace", None))
        if changed is not None:
            for request in map_changed_object(changed, mapper=mapper):
                print(request.target)
        else:
            for gvk in sorted(list_watched_kinds(mapper=mapper), key=str):
                print(gvk)
    except Exception:
        log.exception("Fatal error during mapping")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
