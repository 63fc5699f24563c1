import itertools
import os.path
from typing import Any
from typing import Dict
from typing import Generator
from typing import List
from typing import NamedTuple
from typing import Optional
from typing import Sequence
from typing import Tuple

import onigurumacffi

from pattern_highlight.color import DEFAULT_COLOR
from pattern_highlight.languages import find_syntax_file
from pattern_highlight.languages import language_for_filename
from pattern_highlight.languages import rule_file_for
from pattern_highlight.rules import CompiledGroup
from pattern_highlight.rules import RuleSet

Tokens = Tuple['Token', ...]


class Token(NamedTuple):
    text: str
    color: str
    start: int
    end: int

    def to_dct(self) -> Dict[str, Any]:
        return self._asdict()


def _spans(
        reg: onigurumacffi._Pattern,
        line: str,
) -> Generator[Tuple[int, int], None, None]:
    pos = 0
    while pos <= len(line):
        match = reg.search(line, pos)
        if match is None:
            return

        start, end = match.span()
        yield start, end
        # an empty match would otherwise be found again forever
        pos = end if end > start else end + 1


class Highlighter(NamedTuple):
    groups: Tuple[CompiledGroup, ...]

    @classmethod
    def from_rule_set(
            cls,
            rule_set: RuleSet,
            *,
            strict: bool = False,
            filename: str = '<rules>',
    ) -> 'Highlighter':
        return cls(rule_set.compile(strict=strict, filename=filename))

    def highlight(self, line: str, line_offset: int = 0) -> Tokens:
        """color one line (without its terminator)

        Each position of the line is owned by the first group (in priority
        order) with a pattern matching it, except for strings which always
        take the position.  Offsets of the returned tokens are absolute:
        `line_offset` is added to every position.
        """
        if not line:
            return ()

        colors: List[Optional[str]] = [None] * len(line)
        for group in self.groups:
            overwrite = group.category.overwrites
            for reg in group.regs:
                for start, end in _spans(reg, line):
                    for i in range(start, end):
                        if overwrite or colors[i] is None:
                            colors[i] = group.color

        ret = []
        pos = 0
        for color, run in itertools.groupby(
                colors, key=lambda c: DEFAULT_COLOR if c is None else c,
        ):
            size = sum(1 for _ in run)
            ret.append(
                Token(
                    line[pos:pos + size],
                    color,
                    line_offset + pos,
                    line_offset + pos + size,
                ),
            )
            pos += size

        if not ret:
            end = line_offset + len(line)
            ret.append(Token(line, DEFAULT_COLOR, line_offset, end))

        return tuple(ret)


def load_highlighter(
        language: str,
        *,
        search_path: Optional[Sequence[str]] = None,
        strict: bool = False,
) -> Highlighter:
    rule_file = rule_file_for(language)
    filename = find_syntax_file(rule_file, search_path)
    rule_set = RuleSet.parse(filename)
    return Highlighter.from_rule_set(rule_set, strict=strict, filename=filename)


def highlight_code(
        code: str,
        language: str,
        *,
        search_path: Optional[Sequence[str]] = None,
        strict: bool = False,
) -> List[Token]:
    highlighter = load_highlighter(
        language, search_path=search_path, strict=strict,
    )

    ret: List[Token] = []
    offset = 0
    for line_idx, line in enumerate(code.split('\n')):
        if line_idx > 0:
            ret.append(Token('\n', DEFAULT_COLOR, offset, offset + 1))
            offset += 1

        ret.extend(highlighter.highlight(line, offset))
        offset += len(line)

    return ret


def highlight_lines(tokens: Sequence[Token]) -> List[List[Token]]:
    """regroup a document's tokens by line, dropping the newline tokens"""
    if not tokens:
        return []

    ret: List[List[Token]] = [[]]
    for token in tokens:
        if token.text == '\n':
            ret.append([])
        else:
            ret[-1].append(token)
    return ret


def highlight_file(
        filename: str,
        language: Optional[str] = None,
        *,
        search_path: Optional[Sequence[str]] = None,
        strict: bool = False,
) -> List[Token]:
    if language is None:
        _, ext = os.path.splitext(filename)
        language = language_for_filename(filename) or ext.lstrip('.')

    with open(filename, encoding='UTF-8') as f:
        code = f.read()

    return highlight_code(
        code, language, search_path=search_path, strict=strict,
    )
