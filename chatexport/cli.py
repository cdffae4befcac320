"""Command line entry point: load exported chat pages and run a query."""

import argparse
import sys
import time
from pathlib import Path
from typing import Iterable, List, Optional

from .database import MessageDatabase
from .extractor import MessageExtractor
from .message import Message
from .pipeline import Pipeline
from .query import MessageQuery


def read_file(path) -> str:
    """Return the whole file as UTF-8 text."""
    return Path(path).read_text(encoding="utf-8")


def format_message(message: Message) -> str:
    """One printable line describing a message."""
    return (
        f'{message.sender}: "{message.content}" '
        f"At:{message.timestamp.isoformat()} Id: {message.id}"
    )


def load_messages(paths: Iterable, workers: int = 6) -> MessageDatabase:
    """Parse every page on worker threads and store the messages in page order."""
    extractor = MessageExtractor()
    database = MessageDatabase()

    def job(path):
        return lambda: extractor.extract(read_file(path))

    with Pipeline(workers) as pipeline:
        futures = [pipeline.submit_task(job(path)) for path in paths]
        for future in futures:
            for message in future.result():
                database.insert(message)
    return database


def _default_files(data_dir: Path) -> List[Path]:
    return [data_dir / "messages.html"] + [
        data_dir / f"messages{number}.html" for number in range(2, 101)
    ]


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chatexport", description="Search messages in exported chat pages."
    )
    parser.add_argument("files", nargs="*", type=Path, help="HTML pages to load")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=Path("data"),
        help="directory with messages.html, messages2.html ... when no files are given",
    )
    parser.add_argument("--sender", help="only messages from this sender")
    parser.add_argument(
        "--contains", action="append", help="word the content must hold (repeatable)"
    )
    attachment = parser.add_mutually_exclusive_group()
    attachment.add_argument("--attachment", dest="attachment", action="store_true", default=None)
    attachment.add_argument("--no-attachment", dest="attachment", action="store_false")
    parser.add_argument("--workers", type=int, default=6, help="worker threads")
    parser.add_argument("--print", dest="show", action="store_true", help="print each match")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Load pages, select matching messages and print the count and time taken."""
    args = _parser().parse_args(argv)
    start = time.perf_counter()
    files = args.files or _default_files(args.data_dir)
    query = MessageQuery(
        sender=args.sender, contains=args.contains, has_attachment=args.attachment
    )
    try:
        database = load_messages(files, args.workers)
    except (OSError, ValueError) as error:
        print(f"error: {error}", file=sys.stderr)
        return 1
    matches = database.select(query)
    if args.show:
        for message in matches:
            print(format_message(message))
    print(len(matches))
    print(int((time.perf_counter() - start) * 1_000_000))
    return 0