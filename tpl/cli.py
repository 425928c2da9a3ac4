import argparse
import json
import logging
import os
import sys

from tpl import pipeline
from tpl.catalog import UnknownLicense
from tpl.classify import classify_license
from tpl.config import load_config
from tpl.errors import EXIT_OK, EXIT_UNKNOWN, TPLError
from tpl.inventory import DeclaredLicense, parse_coordinate


def configure_logging(verbose=False, quiet=False):
    level = logging.INFO
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger("tpl")
    root.handlers[:] = [handler]
    root.setLevel(level)
    root.propagate = False


def _report_config(args):
    config = load_config(args.config)
    return config.with_overrides(product_name=args.product, legal_contact=args.legal_contact)


def generate_cmd(args):
    paths = pipeline.generate(args.inventory, args.out, _report_config(args))
    for path in paths:
        print(f"wrote: {path}")
    return paths


def check_cmd(args):
    entries = pipeline.check(args.inventory, args.out, _report_config(args))
    print(f"up to date: {len(entries)} modules")
    return entries


def classify_cmd(args):
    config = load_config(args.config)
    coordinate = parse_coordinate(args.module)
    result = classify_license(DeclaredLicense(args.name, args.url or None), coordinate, config.rules)
    if isinstance(result, UnknownLicense):
        print("UNKNOWN")
    else:
        print(f"{result.catalog_id}\t{result.reference_url}")
    return result


def catalog_cmd(args):
    config = load_config(args.config)
    ranked = list(config.priority)
    if args.format == "json":
        payload = [
            {
                "rank": index + 1,
                "id": member.catalog_id,
                "name": member.full_name,
                "url": member.reference_url,
            }
            for index, member in enumerate(ranked)
        ]
        print(json.dumps(payload, indent=2))
    else:
        for index, member in enumerate(ranked, start=1):
            print(f"{index:>2}. {member.catalog_id:<15} {member.reference_url}")
    return ranked


def _add_report_args(parser):
    parser.add_argument("--inventory", required=True, help="dependency-license.xml written by the scanner")
    parser.add_argument("--out", required=True, help="directory holding licenses and licenses.html")
    parser.add_argument("--product", default=None, help="product display name (overrides config)")
    parser.add_argument("--legal-contact", default=None, help="email for source code requests (overrides config)")


def build_parser():
    parser = argparse.ArgumentParser(description="Third party license report generator")
    parser.add_argument("--config", default=os.environ.get("TPL_CONFIG"), help="YAML report configuration")
    parser.add_argument("--verbose", action="store_true", help="verbose logging")
    parser.add_argument("--quiet", action="store_true", help="suppress non-error output")

    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser("generate", help="write licenses and licenses.html")
    _add_report_args(generate_parser)

    check_parser = subparsers.add_parser("check", help="fail if the written report is out of date")
    _add_report_args(check_parser)

    classify_parser = subparsers.add_parser("classify", help="show how one declared license is classified")
    classify_parser.add_argument("name", help="declared license name")
    classify_parser.add_argument("--url", default=None)
    classify_parser.add_argument("--module", default="unknown:unknown:0", help="group:artifact:version")

    catalog_parser = subparsers.add_parser("catalog", help="list catalog licenses in priority order")
    catalog_parser.add_argument("--format", choices=["text", "json"], default="text")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet)

    handlers = {
        "generate": generate_cmd,
        "check": check_cmd,
        "classify": classify_cmd,
        "catalog": catalog_cmd,
    }
    try:
        handlers[args.command](args)
    except TPLError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(exc.code)
    except Exception as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(EXIT_UNKNOWN)
    sys.exit(EXIT_OK)


if __name__ == "__main__":
    main()
