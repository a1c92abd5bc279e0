"""CLI tool for sizemap."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from sizemap.catalog import MergePolicy, SizeCatalog, merge_catalogs
from sizemap.config import config
from sizemap.errors import SizeMapError
from sizemap.logging_config import configure_logging
from sizemap.scaling import parse_scaling
from sizemap.sources import dump_catalog, load_catalog, scan_directory


def _emit(catalog: SizeCatalog, output: Path | None) -> None:
    if output is None:
        print(json.dumps(catalog.to_dict(), indent=2, sort_keys=True))
        return
    dump_catalog(catalog, output)
    print(f"Wrote {len(catalog)} images to {output}")


def _resolve_catalog_path(path: Path | None) -> Path:
    resolved = path or config.CATALOG_PATH
    if resolved is None:
        print(
            "No catalog given. Pass --catalog or set SIZEMAP_CATALOG_PATH.",
            file=sys.stderr,
        )
        sys.exit(2)
    return resolved


def validate(path: Path, strict: bool = False) -> None:
    """Load a size map and report its size."""
    catalog = load_catalog(path, strict=strict)
    print(f"{path}: {len(catalog)} images OK")
    for image_id, variant in catalog.original_violations():
        print(f"warning: {image_id}/{variant} is larger than its original")


def show(path: Path, image_id: str | None = None, variant: str | None = None) -> None:
    """Print images, the variants of one image, or a single variant."""
    catalog = load_catalog(path)

    if image_id is None:
        for name in sorted(catalog.list_images()):
            print(name)
        return

    if variant is not None:
        print(json.dumps(catalog.get_variant(image_id, variant).to_dict()))
        return

    variants = catalog.list_variants(image_id)
    if not variants:
        print(f"Image {image_id} not found.", file=sys.stderr)
        sys.exit(1)
    for name in sorted(variants):
        print(f"{name}: {catalog.get_variant(image_id, name)}")


def merge(paths: list[Path], policy: str, output: Path | None = None) -> None:
    """Merge several size map files into one."""
    try:
        merge_policy = MergePolicy(policy)
    except ValueError:
        choices = ", ".join(choice.value for choice in MergePolicy)
        print(
            f"Unknown merge policy {policy!r}, expected one of: {choices}",
            file=sys.stderr,
        )
        sys.exit(2)

    catalogs = [load_catalog(path) for path in paths]
    _emit(merge_catalogs(*catalogs, policy=merge_policy), output)


def scan(directory: Path, scale: str, output: Path | None = None) -> None:
    """Measure the images in a directory and print the derived size map."""
    try:
        scaling = parse_scaling(scale)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        sys.exit(2)
    _emit(scan_directory(directory, scaling), output)


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="sizemap CLI tool.")
    parser.add_argument("--debug", action="store_true", help="Verbose logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # validate
    validate_parser = subparsers.add_parser("validate", help="Validate a size map")
    validate_parser.add_argument("-c", "--catalog", type=Path, help="Size map JSON")
    validate_parser.add_argument(
        "--strict",
        action="store_true",
        default=config.STRICT,
        help="Reject variants larger than their original",
    )

    # show
    show_parser = subparsers.add_parser("show", help="Look up images and variants")
    show_parser.add_argument("-c", "--catalog", type=Path, help="Size map JSON")
    show_parser.add_argument("image", nargs="?", help="Image identifier")
    show_parser.add_argument("variant", nargs="?", help="Variant name")

    # merge
    merge_parser = subparsers.add_parser("merge", help="Merge size maps")
    merge_parser.add_argument("paths", nargs="+", type=Path, help="Size map JSON")
    merge_parser.add_argument(
        "--policy",
        choices=[policy.value for policy in MergePolicy],
        default=config.MERGE_POLICY,
        help="How to handle an image defined in several files",
    )
    merge_parser.add_argument("-o", "--output", type=Path, help="Output file")

    # scan
    scan_parser = subparsers.add_parser("scan", help="Build a size map from images")
    scan_parser.add_argument("directory", type=Path, help="Directory of originals")
    scan_parser.add_argument(
        "-s",
        "--scale",
        default=config.SCALING,
        help="Percentages for small, medium and large, e.g. '15 30 60'",
    )
    scan_parser.add_argument("-o", "--output", type=Path, help="Output file")

    args = parser.parse_args(argv)
    configure_logging(debug=args.debug or config.DEBUG)

    try:
        if args.command == "validate":
            validate(_resolve_catalog_path(args.catalog), strict=args.strict)
        elif args.command == "show":
            show(_resolve_catalog_path(args.catalog), args.image, args.variant)
        elif args.command == "merge":
            merge(args.paths, args.policy, args.output)
        elif args.command == "scan":
            scan(args.directory, args.scale, args.output)
    except SizeMapError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
