"""CLI entrypoints for generate-example, generate-category and generate-docs."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Iterable, NoReturn, Tuple

from .catalog import Catalog, default_catalog
from .config import ExampleGenConfig, load_config
from .docs import DocsGenerator
from .errors import ExampleGenError
from .logging import configure_logging
from .scaffold import ProjectGenerator


def _add_common_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=False,
        help="Increase log verbosity for troubleshooting.",
    )
    parser.add_argument(
        "--root",
        default=".",
        help="Project root containing contracts/, test/ and package.json (defaults to current directory).",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write a DEBUG-level log of the run to this file.",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List available keys and exit.",
    )


def _build_example_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="generate-example",
        description="Generate a standalone FHEVM example repository.",
    )
    _add_common_options(parser)
    parser.add_argument("key", nargs="?", help="Example key from the catalog.")
    parser.add_argument(
        "output_dir",
        nargs="?",
        help="Destination directory (defaults to output/fhevm-example-<key>).",
    )
    return parser


def _build_category_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="generate-category",
        description="Generate an FHEVM project bundling every example of a category.",
    )
    _add_common_options(parser)
    parser.add_argument("key", nargs="?", help="Category key from the catalog.")
    parser.add_argument(
        "output_dir",
        nargs="?",
        help="Destination directory (defaults to output/fhevm-examples-<key>).",
    )
    return parser


def _build_docs_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="generate-docs",
        description="Generate GitBook documentation pages for catalog examples.",
    )
    _add_common_options(parser)
    parser.add_argument("key", nargs="?", help="Example key to regenerate.")
    parser.add_argument(
        "--all",
        action="store_true",
        help="Regenerate every page and rebuild the navigation index.",
    )
    return parser


def _load_context(root: str) -> Tuple[ExampleGenConfig, Catalog]:
    config = load_config(Path(root))
    catalog = Catalog.load(config.catalog) if config.catalog else default_catalog()
    return config, catalog


def _run(parser: argparse.ArgumentParser, action: Callable[[], None]) -> None:
    try:
        action()
    except (ExampleGenError, OSError, ValueError, LookupError) as exc:
        _fail(parser, exc)
    except Exception as exc:  # pragma: no cover
        _fail(parser, exc, hint=True)


def _fail(parser: argparse.ArgumentParser, exc: BaseException, *, hint: bool = False) -> NoReturn:
    message = f"error: {type(exc).__name__}: {exc}\n"
    if hint:
        message += "Run with --verbose for more details.\n"
    parser.exit(1, message)


def _print_listing(title: str, items: Iterable[Tuple[str, str]]) -> None:
    print(title)
    for key, description in items:
        print(f"  {key}")
        print(f"    {description}")


def _print_next_steps(root: Path) -> None:
    print("\nNext steps:")
    print(f"  cd {_relativize(root)}")
    print("  npm install")
    print("  npm run compile")
    print("  npm run test")


def example_main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for generate-example."""
    parser = _build_example_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    def action() -> None:
        config, catalog = _load_context(args.root)
        if args.list:
            _print_listing(
                "Available examples:",
                ((entry.key, entry.description) for entry in catalog.entries),
            )
            return
        if not args.key:
            parser.error("the following arguments are required: key")
        project = ProjectGenerator(catalog, config).create_example(args.key, args.output_dir)
        print(f'FHEVM example "{project.key}" created at {_relativize(project.root)}')
        _print_next_steps(project.root)

    _run(parser, action)


def category_main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for generate-category."""
    parser = _build_category_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    def action() -> None:
        config, catalog = _load_context(args.root)
        if args.list:
            _print_listing(
                "Available categories:",
                (
                    (category.key, f"{category.name} ({len(category.members)} contracts)")
                    for category in catalog.categories
                ),
            )
            return
        if not args.key:
            parser.error("the following arguments are required: key")
        project = ProjectGenerator(catalog, config).create_category(args.key, args.output_dir)
        print(f"FHEVM category project created at {_relativize(project.root)}")
        print(f"  Contracts: {', '.join(project.contract_names)}")
        _print_next_steps(project.root)

    _run(parser, action)


def docs_main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for generate-docs."""
    parser = _build_docs_parser()
    args = parser.parse_args(argv)
    if args.key and args.all:
        parser.error("pass either a key or --all, not both")
    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    def action() -> None:
        config, catalog = _load_context(args.root)
        if args.list:
            _print_listing(
                "Available examples:",
                ((entry.key, entry.description) for entry in catalog.entries),
            )
            return
        if not args.key and not args.all:
            parser.error("a key or --all is required")
        generator = DocsGenerator(catalog, config)
        result = generator.generate_all() if args.all else generator.generate(args.key)
        for path in result.written:
            print(f"Documentation written to {_relativize(path)}")
        for path in result.removed:
            print(f"Removed stale page {_relativize(path)}")
        if result.index_path is not None:
            print(f"Navigation index rebuilt at {_relativize(result.index_path)}")

    _run(parser, action)


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    example_main(sys.argv[1:])
