# src/stylepack/cli.py
import sys
import argparse
from pathlib import Path

# Module imports
from stylepack.config import DEFAULT_DESTINATION_NAME, DEFAULT_EXTENSION, DEFAULT_IGNORE_FILE
from stylepack.core.builder import build_bundle
from stylepack.core.ignore import load_ignore_spec
from stylepack.errors import StylepackError

def non_empty(value: str) -> str:
    if not value:
        raise argparse.ArgumentTypeError("must not be empty")
    return value

def positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number

def create_arg_parser():
    parser = argparse.ArgumentParser(
        prog="stylepack",
        description="Combine and minify every stylesheet under a folder into a single file."
    )
    parser.add_argument("root_dir", type=non_empty, help="Folder to scan (the bundle is written here too)")
    parser.add_argument(
        "destination",
        type=str,
        nargs="?",
        default="",
        help=f"Destination file name inside root_dir (default: {DEFAULT_DESTINATION_NAME})"
    )
    parser.add_argument("-e", "--extension", type=non_empty, default=DEFAULT_EXTENSION, help="File suffix to bundle")
    parser.add_argument(
        "--ignore-file",
        type=str,
        default=DEFAULT_IGNORE_FILE,
        help=f"Gitignore-style file in root_dir listing paths to leave out (default: {DEFAULT_IGNORE_FILE})"
    )
    parser.add_argument("-j", "--jobs", type=positive_int, default=1, help="Files to read and minify in parallel")
    return parser

def main(argv=None):
    try:
        # 1. Setup
        parser = create_arg_parser()
        args = parser.parse_args(argv)

        # An empty destination falls back to the default name
        destination_name = args.destination or DEFAULT_DESTINATION_NAME

        print(f"--- stylepack ---")
        print(f"Scanning: {args.root_dir}")
        print(f"Output:   {destination_name}")

        # 2. Ignore Rules (optional)
        ignore_spec = load_ignore_spec(Path(args.root_dir) / args.ignore_file)

        # 3. Build
        report = build_bundle(
            args.root_dir,
            destination_name,
            args.extension,
            ignore_spec=ignore_spec,
            jobs=args.jobs,
        )

        # 4. Stats
        print("-" * 60)
        for path in report.files:
            print(f"  + {path}")
        print("-" * 60)
        print(f"Total files:  {len(report.files)}")
        print(f"Source bytes: {report.source_bytes}")
        print(f"Bundle bytes: {report.bundle_bytes} (saved {report.saved_bytes})")
        print(f"\nSuccess! Bundle written to: {report.destination}")

    except KeyboardInterrupt:
        print("\nCancelled.")
        sys.exit(1)

    except StylepackError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

if __name__ == "__main__":
    main()
