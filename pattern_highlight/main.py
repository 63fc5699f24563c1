import argparse
import json
import logging
import sys
from typing import List
from typing import Optional
from typing import Sequence

from pattern_highlight.color import Color
from pattern_highlight.errors import HighlightError
from pattern_highlight.highlight import highlight_file
from pattern_highlight.highlight import Token
from pattern_highlight.languages import default_search_path


def print_styled(s: str, color: str) -> None:
    fg = Color.from_css(color)
    print(
        '\x1b[38;2;{r};{g};{b}m{s}\x1b[39m'.format(s=s, **fg._asdict()),
        end='',
        flush=True,
    )


def _highlight_output(tokens: List[Token]) -> int:
    for token in tokens:
        print_styled(token.text, token.color)
    print('\x1b[m')
    return 0


def _json_output(tokens: List[Token]) -> int:
    print(json.dumps([token.to_dct() for token in tokens], indent=2))
    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser()
    parser.add_argument(
        '--language',
        help='language identifier (default: derived from the file extension)',
    )
    parser.add_argument(
        '--syntax-dir', action='append', default=[],
        help='directory searched for syntax files before the defaults',
    )
    parser.add_argument('--json', action='store_true')
    parser.add_argument('--strict', action='store_true')
    parser.add_argument('--verbose', '-v', action='store_true')
    parser.add_argument('filename')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    search_path = (*args.syntax_dir, *default_search_path())
    try:
        tokens = highlight_file(
            args.filename,
            args.language,
            search_path=search_path,
            strict=args.strict,
        )
    except (HighlightError, OSError, UnicodeDecodeError) as e:
        print(e, file=sys.stderr)
        return 1

    if args.json:
        return _json_output(tokens)
    else:
        return _highlight_output(tokens)


if __name__ == '__main__':
    exit(main())
