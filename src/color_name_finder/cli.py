# src/color_name_finder/cli.py
import argparse
import logging
import sys

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_BAD_QUERY = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="color-name-finder",
        description="Find the named color closest to a #RRGGBB value (YCbCr distance).",
    )
    parser.add_argument(
        "query",
        nargs="?",
        help="Hex color to look up (e.g. #123456); prompted for when omitted",
    )
    parser.add_argument(
        "--catalog",
        help="CSV catalog path or builtin:css3 / builtin:xkcd (default from finder.json)",
    )
    parser.add_argument("--name-column", dest="name_column", help="CSV column holding color names")
    parser.add_argument("--hex-column", dest="hex_column", help="CSV column holding hex values")
    parser.add_argument(
        "--top",
        type=int,
        default=1,
        help="Also list runners-up, up to this many entries in total",
    )
    parser.add_argument("--no-hex", action="store_true", help="Do not echo the matched hex code")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    return parser


def main(argv=None) -> int:
    """CLI: load the catalog, read one hex color, print its nearest named color."""
    from .matching.color import (
        CatalogLoadError,
        EmptyCatalogError,
        HexColorError,
        load_catalog,
    )
    from .matching.finder import find_color_name, format_report
    from .matching.general.utils import ConfigParseError, ConfigTypeError
    from .matching.settings import load_finder_settings

    args = _build_parser().parse_args(argv)
    if args.top < 1:
        print("❌ Error: --top must be at least 1", file=sys.stderr)
        return EXIT_BAD_QUERY

    # Load env only at runtime (no import side effects)
    from dotenv import load_dotenv

    load_dotenv()
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        settings = load_finder_settings()
    except (ConfigParseError, ConfigTypeError) as e:
        print(f"❌ Invalid settings: {e}", file=sys.stderr)
        return EXIT_FATAL

    catalog_source = args.catalog or settings.catalog
    print(f"Loading colors from: {catalog_source}")
    try:
        catalog = load_catalog(
            catalog_source,
            name_column=args.name_column or settings.name_column,
            hex_column=args.hex_column or settings.hex_column,
        )
    except CatalogLoadError as e:
        print(f"❌ Fatal error loading color data: {e}", file=sys.stderr)
        return EXIT_FATAL
    print(f"Successfully loaded {len(catalog)} named colors.")

    if not catalog:
        print("No valid color data loaded. Exiting.", file=sys.stderr)
        return EXIT_OK

    query = args.query
    if query is None:
        try:
            query = input("Enter a Hex Color (e.g., #123456): ")
        except EOFError:
            print("❌ Error: no input received", file=sys.stderr)
            return EXIT_FATAL
    # Only the terminal line is trimmed; the hex parser itself stays strict
    query = query.strip()

    try:
        report = find_color_name(query, catalog, top=args.top)
    except HexColorError as e:
        print(f"\nError processing input: {e}")
        return EXIT_BAD_QUERY
    except EmptyCatalogError as e:
        print(f"No valid color data loaded: {e}", file=sys.stderr)
        return EXIT_OK

    show_hex = settings.show_hex and not args.no_hex
    print(format_report(report, show_hex=show_hex, precision=settings.precision))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
