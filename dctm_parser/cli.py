"""CLI for dctm-parser."""

import argparse
import json
import logging
import sys

from dctm_parser.domain.categories import get_layout
from dctm_parser.domain.enums import EntityKind
from dctm_parser.domain.models import ParseOptions
from dctm_parser.output.group_composer import compose_groups, render_sections
from dctm_parser.output.summary_builder import SummaryBuilder
from dctm_parser.output.value_formatter import format_value
from dctm_parser.parsers.dump_parser import parse_dump


class DumpReadError(Exception):
    """Error reading dump text."""
    pass


def read_dump(path: str) -> str:
    """Read dump text from a file, or from stdin when path is '-'."""
    try:
        if path == '-':
            return sys.stdin.read()
        with open(path, encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise DumpReadError(f"Failed to read dump: {e}")


def build_report(text: str, kind: EntityKind, options: ParseOptions, flat: bool = False) -> dict:
    """Parse dump text and build the JSON-ready report."""
    records = parse_dump(text, kind, options)
    builder = SummaryBuilder()
    report = {
        'kind': kind.value,
        'summary': builder.to_dict(builder.build(records, kind)),
    }
    if flat:
        report['attributes'] = [record.to_dict() for record in records]
    else:
        report['groups'] = [section.to_dict() for section in compose_groups(records, kind)]
    return report


def _print_text(text: str, kind: EntityKind, options: ParseOptions, flat: bool) -> None:
    records = parse_dump(text, kind, options)
    summary = SummaryBuilder().build(records, kind)
    print(f"{summary.title or '(untitled)'} [{summary.type_name}] - {summary.attribute_count} attributes")

    if not records:
        print("No attributes found")
        return

    print()
    if flat:
        for record in records:
            print(f"  {record.name} [{record.declared_type}] : {format_value(record.value, record.is_repeating)}")
    else:
        print(render_sections(compose_groups(records, kind)))


def main():
    parser = argparse.ArgumentParser(prog='dctm-parser', description='Repository object dump parser')
    subparsers = parser.add_subparsers(dest='command')

    # parse command
    parse_parser = subparsers.add_parser('parse', help='Parse dump text and print its attributes')
    parse_parser.add_argument('dump', help="Path to a dump text file, or '-' for stdin")
    parse_parser.add_argument('--kind', choices=[k.value for k in EntityKind], default='object',
                              help='Entity kind of the dump (default: object)')
    parse_parser.add_argument('--json', action='store_true', help='Print JSON instead of text')
    parse_parser.add_argument('--flat', action='store_true', help='List attributes in dump order, ungrouped')
    parse_parser.add_argument('--max-index', type=int, default=ParseOptions.max_repeating_index,
                              help='Highest repeating index accepted')
    parse_parser.add_argument('--start-pos', type=int, help='Position where custom attributes start')
    parse_parser.add_argument('--no-custom', action='store_true', help='Skip custom attribute detection')
    parse_parser.add_argument('-v', '--verbose', action='store_true', help='Log dropped lines')

    # groups command
    groups_parser = subparsers.add_parser('groups', help='List display groups in order')
    groups_parser.add_argument('--kind', choices=[k.value for k in EntityKind], default='object')

    args = parser.parse_args()

    if args.command == 'parse':
        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format='%(levelname)s %(name)s: %(message)s',
        )
        try:
            text = read_dump(args.dump)
        except DumpReadError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

        kind = EntityKind(args.kind)
        options = ParseOptions(
            max_repeating_index=args.max_index,
            custom_start_pos=args.start_pos,
            detect_custom=not args.no_custom,
        )
        if args.json:
            report = build_report(text, kind, options, flat=args.flat)
            print(json.dumps(report, indent=2, ensure_ascii=False))
        else:
            _print_text(text, kind, options, args.flat)

    elif args.command == 'groups':
        layout = get_layout(EntityKind(args.kind))
        for group in layout.order:
            print(f"  {group.value:<12} {layout.label_for(group)}")

    else:
        parser.print_help()


if __name__ == '__main__':
    main()
