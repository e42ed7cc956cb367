"""``omlox`` command-line tool: batch trackable mutations against a hub."""

from __future__ import annotations

import asyncio
import contextlib
import logging
import signal
import sys
from argparse import ArgumentParser, Namespace
from collections.abc import Sequence
from typing import IO
from uuid import UUID

from pydantic import TypeAdapter

from omlox._logging import setup_logging
from omlox.client import OmloxClient
from omlox.config import OmloxSettings, parse_header
from omlox.exceptions import OmloxError
from omlox.loader import ResourceLoader
from omlox.models.trackable import Trackable

_logger = logging.getLogger(__name__)

_TRACKABLES = TypeAdapter(list[Trackable])


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="omlox", description="Manage resources of an omlox hub.")
    parser.add_argument("--addr", help="hub API base URL (env OMLOX_ADDR)")
    parser.add_argument("--timeout", type=float, help="request deadline in seconds (env OMLOX_TIMEOUT)")
    parser.add_argument(
        "--header",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="extra request header, repeatable",
    )
    parser.add_argument("--debug", action="store_true", default=None, help="log every request")

    verbs = parser.add_subparsers(dest="verb", required=True)

    for verb in ("create", "update"):
        sub = verbs.add_parser(verb, help=f"{verb} resources from JSON files or stdin")
        resources = sub.add_subparsers(dest="resource", required=True)
        trackables = resources.add_parser("trackables", help=f"{verb} trackables in the hub")
        trackables.add_argument(
            "-f",
            "--file",
            dest="files",
            action="append",
            default=[],
            help=f"file with a JSON array of trackables to {verb}, repeatable (default: stdin)",
        )

    delete = verbs.add_parser("delete", help="delete resources")
    resources = delete.add_subparsers(dest="resource", required=True)
    trackables = resources.add_parser("trackables", help="delete trackables from the hub")
    trackables.add_argument("ids", nargs="*", type=UUID, help="trackable ids")
    trackables.add_argument("--all", action="store_true", help="delete every trackable")

    get = verbs.add_parser("get", help="print resources as JSON")
    resources = get.add_subparsers(dest="resource", required=True)
    trackables = resources.add_parser("trackables", help="print trackables (all when no id is given)")
    trackables.add_argument("ids", nargs="*", type=UUID, help="trackable ids")
    location = resources.add_parser("location", help="print the last location of a trackable")
    location.add_argument("id", type=UUID, help="trackable id")

    return parser


def _load_trackables(files: Sequence[str], stdin: IO[bytes]) -> list[Trackable]:
    loader = ResourceLoader(Trackable)
    if not files:
        loader.load_json(stdin)
        return loader.resources
    with contextlib.ExitStack() as stack:
        for name in files:
            loader.load_json(stack.enter_context(open(name, "rb")))
    return loader.resources


def _label(trackable: Trackable) -> str:
    return f"{trackable.id} {trackable.name}"


class _BatchError(OmloxError):
    """A batch step failed; the message names the offending resource."""


class _Batch:
    """Runs one command; the first failure aborts and is reported."""

    def __init__(self, client: OmloxClient, out: IO[str], cancel: asyncio.Event) -> None:
        self._client = client
        self._out = out
        self._cancel = cancel

    async def create_trackables(self, trackables: list[Trackable]) -> None:
        for trackable in trackables:
            try:
                created = await self._client.trackables.create(trackable, cancel=self._cancel)
            except OmloxError as exc:
                raise _BatchError(f"failed to create {_label(trackable)}: {exc}") from exc
            print(f"created: {_label(created)}", file=self._out)

    async def update_trackables(self, trackables: list[Trackable]) -> None:
        for trackable in trackables:
            if trackable.id is None:
                raise _BatchError(f"cannot update trackable {trackable.name!r} without an id")
            try:
                await self._client.trackables.update(trackable, trackable.id, cancel=self._cancel)
            except OmloxError as exc:
                raise _BatchError(f"failed to update {_label(trackable)}: {exc}") from exc
            print(f"updated: {_label(trackable)}", file=self._out)

    async def delete_trackables(self, ids: Sequence[UUID], delete_all: bool) -> None:
        if delete_all:
            try:
                await self._client.trackables.delete_all(cancel=self._cancel)
            except OmloxError as exc:
                raise _BatchError(f"failed to delete all trackables: {exc}") from exc
            print("deleted: all trackables", file=self._out)
            return
        for trackable_id in ids:
            try:
                await self._client.trackables.delete(trackable_id, cancel=self._cancel)
            except OmloxError as exc:
                raise _BatchError(f"failed to delete {trackable_id}: {exc}") from exc
            print(f"deleted: {trackable_id}", file=self._out)

    async def get_trackables(self, ids: Sequence[UUID]) -> None:
        if ids:
            trackables = [
                await self._client.trackables.get(trackable_id, cancel=self._cancel)
                for trackable_id in ids
            ]
        else:
            trackables = await self._client.trackables.list(cancel=self._cancel)
        print(_TRACKABLES.dump_json(trackables, indent=2, exclude_none=True).decode(), file=self._out)

    async def get_location(self, trackable_id: UUID) -> None:
        location = await self._client.trackables.get_location(trackable_id, cancel=self._cancel)
        print(location.model_dump_json(indent=2, exclude_none=True), file=self._out)


async def _run(args: Namespace, settings: OmloxSettings, stdin: IO[bytes], out: IO[str]) -> None:
    trackables: list[Trackable] = []
    if args.verb in ("create", "update"):
        trackables = _load_trackables(args.files, stdin)
        _logger.debug("loaded %d trackables", len(trackables))

    cancel = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        with contextlib.suppress(NotImplementedError, RuntimeError, ValueError):
            loop.add_signal_handler(sig, cancel.set)

    try:
        async with OmloxClient.from_settings(settings) as client:
            batch = _Batch(client, out, cancel)
            if args.verb == "create":
                await batch.create_trackables(trackables)
            elif args.verb == "update":
                await batch.update_trackables(trackables)
            elif args.verb == "delete":
                await batch.delete_trackables(args.ids, args.all)
            elif args.resource == "location":
                await batch.get_location(args.id)
            else:
                await batch.get_trackables(args.ids)
    finally:
        for sig in (signal.SIGINT, signal.SIGTERM):
            with contextlib.suppress(NotImplementedError, RuntimeError, ValueError):
                loop.remove_signal_handler(sig)


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: IO[bytes] | None = None,
    stdout: IO[str] | None = None,
    stderr: IO[str] | None = None,
) -> int:
    """Entry point of the ``omlox`` console script; returns the exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.verb == "delete" and not args.all and not args.ids:
        parser.error("delete trackables needs ids or --all")
    err = stderr or sys.stderr

    try:
        headers = dict(parse_header(raw) for raw in args.header)
        settings = OmloxSettings.from_env(
            addr=args.addr, timeout=args.timeout, headers=headers, debug=args.debug
        )
        setup_logging(settings.debug)
        asyncio.run(_run(args, settings, stdin or sys.stdin.buffer, stdout or sys.stdout))
    except (OmloxError, OSError) as exc:
        print(f"error: {exc}", file=err)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
