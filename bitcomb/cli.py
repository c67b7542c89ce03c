"""command line front end: list combinations or look up a position."""
import json
import logging
import sys
from typing import List, Optional

from .config import DEFAULT_MAX_WIDTH, ITEM_TYPES, OUTPUT_FORMATS, EnumeratorConfig
from .enumerator import combinations_of_length, all_combinations, position_of, position_of_length
from .factories import from_iterable

logger = logging.getLogger(__name__)


def create_cli_interface():
    import argparse
    parser = argparse.ArgumentParser(
        prog='bitcomb',
        description='Enumerate combinations by binary counting',
        epilog='Examples:\n  python -m bitcomb a b c\n  python -m bitcomb a b c d -k 2 --format table\n'
               '  python -m bitcomb 1 2 3 -k 2 --position 2 3 --type int',
        formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument('items', nargs='*', help='Items to combine, in order')
    parser.add_argument('-k', '--length', type=int, help='Only combinations with exactly this many items')
    lookup = parser.add_mutually_exclusive_group()
    lookup.add_argument('--position', nargs='+', metavar='ITEM', help='Print the position of this combination')
    lookup.add_argument('--mask', type=int, help='Print the position of the combination with this mask')
    parser.add_argument('--type', choices=list(ITEM_TYPES), default='str', help='Item type (default: str)')
    parser.add_argument('--format', choices=OUTPUT_FORMATS, default='list', help='Output format (default: list)')
    parser.add_argument('--max-width', type=int, default=DEFAULT_MAX_WIDTH,
                        help=f'Largest number of items accepted (default: {DEFAULT_MAX_WIDTH})')
    parser.add_argument('--verbose', action='store_true', help='Verbose logging')
    return parser


def render_combinations(items: List, length: Optional[int], config: EnumeratorConfig) -> str:
    if config.output_format == 'table':
        frame = from_iterable(items).comb.table(length, max_width=config.max_width)
        return '' if frame.empty else frame.to_string(index=False)

    if length is None:
        combos = all_combinations(items, max_width=config.max_width)
    else:
        combos = combinations_of_length(items, length, max_width=config.max_width)
    if config.output_format == 'json':
        return json.dumps(combos)
    return '\n'.join(' '.join(str(item) for item in combo) for combo in combos)


def lookup_position(items: List, target, length: Optional[int], config: EnumeratorConfig) -> int:
    if length is None:
        return position_of(items, target, max_width=config.max_width)
    return position_of_length(items, length, target, max_width=config.max_width)


def main(argv: Optional[List[str]] = None) -> int:
    args = create_cli_interface().parse_args(argv)
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(message)s')
    if args.verbose: logging.getLogger().setLevel(logging.DEBUG)

    try:
        config = EnumeratorConfig(max_width=args.max_width, output_format=args.format, item_type=args.type)
        items = [config.convert(raw) for raw in args.items]
        logger.debug("combining %d items of type %s", len(items), config.item_type)

        if args.position is not None or args.mask is not None:
            target = args.mask if args.mask is not None else [config.convert(raw) for raw in args.position]
            print(lookup_position(items, target, args.length, config))
        else:
            output = render_combinations(items, args.length, config)
            if output: print(output)
    except ValueError as e:
        # covers TargetNotFoundError, SizeOverflowError and bad item conversions
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0
