from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Iterator

from config_loader import DescriptionReaderConfig, load_config
from description import Description
from description_parser import parse_description
from errors import DescriptionError
from helper import describe_tree, print_event_gray

STDIN_MARKER = "-"


def safe_input_path(raw: str, *, root: Path | None = None) -> Path:
    """
    Parse and validate a user-supplied path (file or directory).

    - reject obvious malicious / malformed inputs (NUL, empty, '..')
    - when a root is given, the path must resolve inside it
    """
    if not raw or raw.strip() == "":
        raise ValueError("Empty input path.")

    if "\x00" in raw:
        raise ValueError("NUL byte in path is not allowed.")

    p = Path(raw).expanduser()

    if any(part == ".." for part in p.parts):
        raise ValueError("Path traversal ('..') is not allowed.")

    resolved = p.resolve(strict=False)

    if root is not None:
        root_resolved = root.resolve(strict=True)
        try:
            resolved.relative_to(root_resolved)
        except ValueError as e:
            raise ValueError(f"Input path must be within root: {root_resolved}") from e

    if not resolved.exists():
        raise FileNotFoundError(f"File not found: {resolved}")

    return resolved


def iter_description_files(path: Path, cfg: DescriptionReaderConfig) -> Iterator[Path]:
    """
    Yield `path` itself for a file, or every matching file below a directory.

    Directories named in cfg.exclude_dirs are skipped. Files are yielded in
    sorted order so output is stable.
    """
    if path.is_file():
        yield path
        return

    found: set[Path] = set()
    for pattern in cfg.file_patterns:
        for candidate in path.rglob(pattern):
            relative_parts = candidate.relative_to(path).parts[:-1]
            if any(part in cfg.exclude_dirs for part in relative_parts):
                continue
            if candidate.is_file():
                found.add(candidate)

    yield from sorted(found)


def read_description(path: Path, cfg: DescriptionReaderConfig) -> tuple[str, Description]:
    """
    Read and parse one description file.

    Parse errors are wrapped in a DescriptionError naming the file, with the
    original error as its cause.
    """
    text = path.read_text(encoding=cfg.encoding)
    try:
        return text, parse_description(text)
    except DescriptionError as e:
        raise DescriptionError(f"{path}: {e.message}", cause=e) from e


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="description_reader.py",
        description="Parse description markup and print, check or rewrite its canonical form.",
    )
    parser.add_argument(
        "inputs",
        nargs="*",
        default=[STDIN_MARKER],
        help="Files or directories to read; '-' reads stdin (default: -)",
    )
    parser.add_argument(
        "--config",
        default="config.yml",
        help="Path to config.yml (default: config.yml)",
    )
    parser.add_argument(
        "--root",
        default=None,
        help="Optional root directory: inputs must be within this directory.",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--check",
        action="store_true",
        help="Exit with status 1 if an input is not in canonical form.",
    )
    mode.add_argument(
        "--write",
        action="store_true",
        help="Rewrite inputs in canonical form.",
    )
    mode.add_argument(
        "--tree",
        action="store_true",
        help="Print the parsed element tree instead of the canonical text.",
    )
    return parser


def as_file_text(canonical: str) -> str:
    """Canonical text as stored on disk: non-empty content ends with one newline."""
    return canonical + "\n" if canonical else ""


def _print_tree(description: Description, cfg: DescriptionReaderConfig) -> None:
    for line in describe_tree(description):
        if cfg.color_events:
            print_event_gray(line)
        else:
            print(line)


def _process(
    label: str,
    text: str,
    description: Description,
    args: argparse.Namespace,
    cfg: DescriptionReaderConfig,
    path: Path | None = None,
) -> bool:
    canonical = str(description)

    if args.check:
        if as_file_text(canonical) != text:
            print(f"[description_reader] Not canonical: {label}", file=sys.stderr)
            return False
        return True

    if args.write:
        if path is not None and as_file_text(canonical) != text:
            path.write_text(as_file_text(canonical), encoding=cfg.encoding)
        elif path is None:
            print(canonical)
        return True

    if args.tree:
        _print_tree(description, cfg)
        return True

    print(canonical)
    return True


def main(argv: list[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        cfg = load_config(Path(args.config))
    except Exception as e:
        print(f"[description_reader] Failed to load config: {e}", file=sys.stderr)
        return 2

    root_dir: Path | None = None
    if args.root:
        try:
            root_dir = Path(args.root).expanduser().resolve(strict=True)
        except OSError as e:
            print(f"[description_reader] Invalid --root: {e}", file=sys.stderr)
            return 2

    ok = True
    for raw in args.inputs:
        if raw == STDIN_MARKER:
            try:
                text = sys.stdin.read()
            except (OSError, UnicodeDecodeError) as e:
                print(f"[description_reader] Error while reading <stdin>: {e}", file=sys.stderr)
                ok = False
                continue
            try:
                description = parse_description(text)
            except DescriptionError as e:
                print(f"[description_reader] <stdin>: {e.message}", file=sys.stderr)
                ok = False
                continue
            ok = _process("<stdin>", text, description, args, cfg) and ok
            continue

        try:
            input_path = safe_input_path(raw, root=root_dir)
        except (ValueError, OSError) as e:
            print(f"[description_reader] Invalid input path: {e}", file=sys.stderr)
            return 2

        for path in iter_description_files(input_path, cfg):
            try:
                text, description = read_description(path, cfg)
            except DescriptionError as e:
                print(f"[description_reader] {e.message}", file=sys.stderr)
                ok = False
                continue
            except (OSError, UnicodeDecodeError) as e:
                print(f"[description_reader] Error while reading {path}: {e}", file=sys.stderr)
                ok = False
                continue
            ok = _process(str(path), text, description, args, cfg, path) and ok

    return 0 if ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
