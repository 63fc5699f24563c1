import enum
import logging
import re
import tomllib
from typing import Any
from typing import Dict
from typing import NamedTuple
from typing import Optional
from typing import Tuple

import onigurumacffi

from pattern_highlight.color import parse_color
from pattern_highlight.errors import PatternFileParseError

logger = logging.getLogger(__name__)


class Category(enum.Enum):
    """the pattern groups, declared from highest to lowest priority"""
    STRINGS = 'strings'
    COMMENTS = 'comments'
    NUMBERS = 'numbers'
    KEYWORDS = 'keywords'
    TYPES = 'types'
    METHODS = 'methods'
    OPERATORS = 'operators'

    @property
    def overwrites(self) -> bool:
        return self is Category.STRINGS

    def regex_source(self, pattern: str) -> str:
        if self in (Category.KEYWORDS, Category.TYPES):
            return rf'\b{re.escape(pattern)}\b'
        elif self is Category.OPERATORS:
            return re.escape(pattern)
        else:
            return pattern


class PatternGroup(NamedTuple):
    patterns: Tuple[str, ...]
    color: str

    @classmethod
    def from_dct(cls, dct: Dict[str, Any]) -> 'PatternGroup':
        patterns = dct['patterns']
        if (
                not isinstance(patterns, list) or
                not all(isinstance(p, str) for p in patterns)
        ):
            raise TypeError('`patterns` must be an array of strings')
        color = dct['color']
        if not isinstance(color, str):
            raise TypeError('`color` must be a string')
        return cls(patterns=tuple(patterns), color=color)


class CompiledGroup(NamedTuple):
    category: Category
    color: str
    regs: Tuple[onigurumacffi._Pattern, ...]


class RuleSet(NamedTuple):
    # field order is priority order, matching `Category`
    strings: PatternGroup
    comments: PatternGroup
    numbers: PatternGroup
    keywords: PatternGroup
    types: PatternGroup
    methods: PatternGroup
    operators: PatternGroup

    def groups(self) -> Tuple[Tuple[Category, PatternGroup], ...]:
        return tuple(zip(Category, self))

    def compile(
            self,
            *,
            strict: bool = False,
            filename: str = '<rules>',
    ) -> Tuple[CompiledGroup, ...]:
        ret = []
        for category, group in self.groups():
            regs = []
            for pattern in group.patterns:
                reg = _compile(category, pattern)
                if reg is not None:
                    regs.append(reg)
                elif strict:
                    raise PatternFileParseError(
                        filename,
                        f'invalid pattern in [{category.value}]: {pattern!r}',
                    )
                else:
                    logger.warning(
                        '%s: skipping invalid pattern in [%s]: %r',
                        filename, category.value, pattern,
                    )
            color = parse_color(group.color)
            ret.append(CompiledGroup(category, color, tuple(regs)))
        return tuple(ret)

    @classmethod
    def from_dct(cls, dct: Dict[str, Any]) -> 'RuleSet':
        kwargs = {}
        for category in Category:
            group = dct[category.value]
            if not isinstance(group, dict):
                raise TypeError(f'[{category.value}] must be a table')
            kwargs[category.value] = PatternGroup.from_dct(group)
        return cls(**kwargs)

    @classmethod
    def parse(cls, filename: str) -> 'RuleSet':
        try:
            with open(filename, 'rb') as f:
                data = tomllib.load(f)
        except OSError as e:
            raise PatternFileParseError(filename, str(e)) from e
        except tomllib.TOMLDecodeError as e:
            raise PatternFileParseError(filename, str(e)) from e

        try:
            return cls.from_dct(data)
        except KeyError as e:
            raise PatternFileParseError(filename, f'missing {e}') from e
        except TypeError as e:
            raise PatternFileParseError(filename, str(e)) from e


def _compile(
        category: Category,
        pattern: str,
) -> Optional[onigurumacffi._Pattern]:
    try:
        return onigurumacffi.compile(category.regex_source(pattern))
    except onigurumacffi.OnigError:
        return None
