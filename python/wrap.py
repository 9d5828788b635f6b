#!/usr/bin/env python3
"""
Command line front end that rewraps the paragraphs of text files (or stdin)
    using the Knuth-Plass line breaker.

Paragraphs are separated by blank lines, which are kept as they are. Every
    character counts as 1 unit of width and words are joined by a single
    space.
"""
import argparse
import fileinput
import logging
import sys
from typing import Iterable, Iterator, List, Optional

from knuth_plass import knuth_plass_lines, make_words, paragraph_penalty
from rigid_greedy import rigid_greedy_break, rigid_left_justify
import tools

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 79
ENCODING = 'utf-8'

KNUTH_PLASS = 'knuth-plass'
GREEDY = 'greedy'
ALGORITHMS = (KNUTH_PLASS, GREEDY)

def get_paragraphs(stream:Iterable[str]) -> Iterator[str]:
    """
    A generator that reads from a stream and yields paragraphs.
    A paragraph is a block of text separated by blank lines. Every blank line
        is also yielded as "\\n" so the spacing between paragraphs is kept.
    """
    paragraph_lines = []

    for line in stream:
        if not line.strip():
            if paragraph_lines:
                yield "".join(paragraph_lines)
                paragraph_lines = []
            yield "\n"
            continue

        paragraph_lines.append(line)

    if paragraph_lines:
        yield "".join(paragraph_lines)

def wrap_paragraph(text:str, width:int, algorithm:str=KNUTH_PLASS) -> List[List[str]]:
    """
    Breaks the given paragraph into lines (lists of words) with the given
        algorithm.
    """
    words = make_words(text)
    if algorithm == KNUTH_PLASS:
        return knuth_plass_lines(words, width)
    elif algorithm == GREEDY:
        return rigid_greedy_break(words, width)
    else:
        raise ValueError(f'Unknown line breaking algorithm "{algorithm}"')

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Rewrap paragraphs so that their lines are as even as possible.",
    )
    parser.add_argument(
        '-w', '--width',
        type=int,
        default=DEFAULT_WIDTH,
        help=f'Maximum line width (default: {DEFAULT_WIDTH}).'
    )
    parser.add_argument(
        '-a', '--algorithm',
        choices=ALGORITHMS,
        default=KNUTH_PLASS,
        help=f'Line breaking algorithm to use (default: {KNUTH_PLASS}).'
    )
    parser.add_argument(
        '-e', '--end-mark',
        default='',
        help='Pad every line out to the width and end it with this mark.'
    )
    parser.add_argument(
        '-c', '--cost',
        action='store_true',
        help='Report the penalty of every paragraph on stderr.'
    )
    parser.add_argument(
        '--profile',
        action='store_true',
        help='Profile the line breaker and log the results.'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='count',
        default=0,
        help='Log more (give twice for debug output).'
    )
    parser.add_argument(
        'files',
        nargs='*',
        help='Files to process. Reads from stdin if none are given.'
    )
    return parser

def wrap_stream(stream:Iterable[str], width:int, algorithm:str=KNUTH_PLASS, end_mark:str='', cost:bool=False):
    """
    Rewraps every paragraph read from `stream` and writes the result to stdout.
    """
    num = 0
    for paragraph in get_paragraphs(stream):
        if paragraph == "\n":
            print()
            continue

        lines = wrap_paragraph(paragraph, width, algorithm)
        logger.info('paragraph %d: %d lines', num, len(lines))
        num += 1

        if end_mark:
            sys.stdout.write(rigid_left_justify(lines, width, end_mark=end_mark))
        else:
            for line in lines:
                print(' '.join(line))

        if cost:
            print(f"cost: {paragraph_penalty(lines, width)}", file=sys.stderr)

def main(argv:Optional[List[str]]=None) -> int:
    """Parses arguments and rewraps text from files or stdin."""
    args = build_parser().parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format='%(name)s: %(levelname)s: %(message)s')

    if args.profile:
        tools.enable_profiling()

    # An empty result from knuth_plass() can not tell a bad width apart from an
    #   empty paragraph, so the width has to be checked here.
    if args.width <= 0:
        print(f"wrap: width must be positive, not {args.width}", file=sys.stderr)
        return 1

    try:
        with fileinput.input(files=args.files or ('-',), openhook=fileinput.hook_encoded(ENCODING)) as stream:
            try:
                wrap_stream(stream, args.width, args.algorithm, args.end_mark, args.cost)
            except UnicodeDecodeError:
                print(f"wrap: {stream.filename()}: invalid text", file=sys.stderr)
                return 1

    except BrokenPipeError:
        # Whoever was reading stdout has gone away (e.g. piped into head)
        logger.debug('stdout closed before all the text was written')
        return 1

    except OSError as e:
        if e.filename is None:
            raise
        print(f"wrap: failed to open '{e.filename}': {e.strerror}", file=sys.stderr)
        return 1

    return 0

if __name__ == "__main__":
    sys.exit(main())
