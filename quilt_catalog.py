import argparse
import os
import sys
from pathlib import Path
from typing import List, Optional

from rich.markup import escape

from quiltcatalog import QuiltCatalogError, QuiltMetaClient, format_gradle_catalog, resolve_versions
from quiltcatalog.meta_api import MAVEN_URL, META_URL
from quiltcatalog.utils import console


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Print a Gradle version catalog with matching Quilt toolchain versions.",
        epilog="""
Examples:
  # Use the latest stable Minecraft version
  python quilt_catalog.py > gradle/libs.versions.toml

  # Pin a Minecraft version
  python quilt_catalog.py 1.20.1
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("minecraft_version", nargs="?",
                        help="Minecraft version to target (default: latest stable)")
    parser.add_argument("--meta-url", default=os.environ.get("QUILT_META_URL", META_URL),
                        help="Base URL of the Quilt meta versions API")
    parser.add_argument("--maven-url", default=os.environ.get("QUILT_MAVEN_URL", MAVEN_URL),
                        help="Base URL of the Quilt maven repository")
    parser.add_argument("--timeout", type=float, default=None,
                        help="Seconds to wait for each HTTP response")
    parser.add_argument("-o", "--output",
                        help="Also write the catalog to this file")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Print each lookup to stderr")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    client = QuiltMetaClient(meta_url=args.meta_url, maven_url=args.maven_url, timeout=args.timeout)

    try:
        versions = resolve_versions(client, args.minecraft_version, verbose=args.verbose)
    except QuiltCatalogError as e:
        console.print(f"[red]Error: {escape(e.message)}[/]")
        return 1
    except KeyboardInterrupt:
        console.print("[red]Interrupted[/]")
        return 130

    catalog = format_gradle_catalog(versions)
    print(catalog)

    if args.output:
        output_path = Path(args.output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(catalog + "\n", encoding="utf-8")
        console.print(f"[dim]Catalog saved to {escape(str(output_path))}[/]")

    return 0


if __name__ == "__main__":
    sys.exit(main())
