#!/usr/bin/env python
"""Command-line entry point.

Usage: asset-refs <project_path> [--generate-path <path>] [--file-name <name>]
                  [--exclude <substring>]... [--save-config] [-v]
"""

import logging
import sys

USAGE = (
    "Usage: asset-refs <project_path> [--generate-path <path>] [--file-name <name>] "
    "[--exclude <substring>]... [--save-config] [-v]"
)


def main(argv: list[str] | None = None) -> int:
    """Run the generator for one project and print the outcome."""
    args = sys.argv[1:] if argv is None else argv
    if not args or args[0].startswith("-"):
        print(USAGE)
        return 1

    project_path = args[0]
    generate_path: str | None = None
    file_name: str | None = None
    excludes: list[str] = []
    save_config = False
    verbose = False

    i = 1
    while i < len(args):
        if args[i] == "--generate-path" and i + 1 < len(args):
            generate_path = args[i + 1]
            i += 2
        elif args[i] == "--file-name" and i + 1 < len(args):
            file_name = args[i + 1]
            i += 2
        elif args[i] == "--exclude" and i + 1 < len(args):
            excludes.append(args[i + 1])
            i += 2
        elif args[i] == "--save-config":
            save_config = True
            i += 1
        elif args[i] in ("-v", "--verbose"):
            verbose = True
            i += 1
        else:
            print(f"Unknown argument: {args[i]}")
            print(USAGE)
            return 1

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    from .config import AssetConfig
    from .core import AssetRefGenerator

    try:
        config = AssetConfig.load(project_path).with_overrides(
            generate_path=generate_path,
            generate_file_name=file_name,
            exclude_path=excludes or None,
        )
    except ValueError as e:
        print(str(e))
        return 1

    result = AssetRefGenerator().run(project_path, config)
    if result.ok and save_config:
        config.save(project_path)

    print(result.message())
    return 0 if result.ok else 1


if __name__ == "__main__":
    sys.exit(main())
