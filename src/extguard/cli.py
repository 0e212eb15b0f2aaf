"""extguard CLI: package validation commands."""

import argparse
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path


def main():
    """Main CLI entry point for extguard commands."""
    # Get version for --version argument (handle PackageNotFoundError)
    try:
        extguard_version = get_version("extguard")
    except PackageNotFoundError:
        extguard_version = "dev"

    parser = argparse.ArgumentParser(
        prog="extguard",
        description="extguard: Static validation of generated Manifest V3 browser extensions"
    )
    parser.add_argument("--version", action="version", version=f"extguard {extguard_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # analyze command
    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Validate a package directory or a generated text blob",
        parents=[parent_parser]
    )
    analyze_parser.add_argument(
        "package_path",
        type=Path,
        help="Path to package directory or text blob with fenced file blocks"
    )
    analyze_parser.add_argument(
        "--output-dir",
        type=Path,
        default=None,
        help="Output directory for report.md / report.json (prints to stdout if omitted)"
    )
    analyze_parser.add_argument(
        "--report-mode",
        choices=["full", "json", "off"],
        default="full",
        help="Report mode: full (markdown; plus report.json with --output-dir), json (canonical json only), off (status only)"
    )

    # extract command
    extract_parser = subparsers.add_parser(
        "extract",
        help="Write the fenced file blocks of a text blob to a directory",
        parents=[parent_parser]
    )
    extract_parser.add_argument(
        "blob_path",
        type=Path,
        help="Path to generated text blob"
    )
    extract_parser.add_argument(
        "--out",
        type=Path,
        required=True,
        help="Output directory for extracted files"
    )

    # fix-request command
    fix_parser = subparsers.add_parser(
        "fix-request",
        help="Print the fix request for a package's validation errors"
    )
    fix_parser.add_argument(
        "package_path",
        type=Path,
        help="Path to package directory or text blob"
    )

    # permissions command
    subparsers.add_parser(
        "permissions",
        help="List the recognized permission catalog"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == "analyze":
        try:
            from .api import analyze_path
            from ._internal.canonical_json import canonical_dumps
            from ._internal.reporting.markdown import generate_markdown_report

            package_path = Path(args.package_path).resolve()
            report = analyze_path(package_path)

            report_md = generate_markdown_report(report, package_name=package_path.name)
            report_json = canonical_dumps(report)

            if args.output_dir and args.report_mode != "off":
                output_dir = Path(args.output_dir).resolve()
                output_dir.mkdir(parents=True, exist_ok=True)
                json_path = output_dir / "report.json"
                json_path.write_text(report_json + "\n", encoding="utf-8")
                md_path = None
                if args.report_mode == "full":
                    md_path = output_dir / "report.md"
                    md_path.write_text(report_md, encoding="utf-8")
                if not args.quiet:
                    print("[OK] Analysis complete")
                    if md_path is not None:
                        print(f"  Markdown: {md_path}")
                    print(f"  JSON: {json_path}")
            elif not args.quiet:
                if args.report_mode == "full":
                    print(report_md)
                elif args.report_mode == "json":
                    print(report_json)

            if not args.quiet:
                print(f"  Status: {'READY' if report.ok else 'FAILED'}")
                print(f"  Type: {report.type}")
                print(f"  Errors: {len(report.errors)}")
                print(f"  Warnings: {len(report.warnings)}")
                print(f"  Info: {len(report.infos)}")

            sys.exit(0 if report.ok else 1)
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except Exception as e:
            print(f"Unexpected error: {e}", file=sys.stderr)
            import traceback
            traceback.print_exc()
            sys.exit(1)
    elif args.command == "extract":
        try:
            from ._internal.io.package import load_text_blob, write_artifacts

            artifacts = load_text_blob(Path(args.blob_path).resolve())
            written = write_artifacts(artifacts, Path(args.out).resolve())

            if not args.quiet:
                print("[OK] Extraction complete")
                print(f"  Files: {len(written)}")
                for path in written:
                    print(f"  - {path}")
            sys.exit(0)
        except FileNotFoundError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        except Exception as e:
            print(f"Unexpected error: {e}", file=sys.stderr)
            import traceback
            traceback.print_exc()
            sys.exit(1)
    elif args.command == "fix-request":
        try:
            from .api import analyze_path
            from .feedback import build_fix_request

            report = analyze_path(Path(args.package_path).resolve())
            request = build_fix_request(report)
            if request is not None:
                print(request)
            sys.exit(0)
        except (FileNotFoundError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
    elif args.command == "permissions":
        from .kernel.permissions import PERMISSION_CATALOG

        for permission, description in PERMISSION_CATALOG.items():
            print(f"{permission}: {description}")
        sys.exit(0)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
