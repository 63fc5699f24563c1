import re
from typing import NamedTuple

DEFAULT_COLOR = '#ffffff'

RGB_RE = re.compile(r'^rgb\((.*)\)$')
DECIMAL_RE = re.compile(r'^\+?[0-9]+$')
HEX_RE = re.compile(r'^#([0-9a-fA-F]{6})$')


class Color(NamedTuple):
    r: int
    g: int
    b: int

    def __str__(self) -> str:
        return f'rgb({self.r}, {self.g}, {self.b})'

    @classmethod
    def parse(cls, s: str) -> 'Color':
        """parse the `r, g, b` form used by the syntax files"""
        parts = [part.strip() for part in s.split(',')]
        if len(parts) != 3:
            raise ValueError(f'expected 3 components: {s!r}')

        components = []
        for part in parts:
            if not DECIMAL_RE.match(part):
                raise ValueError(f'not a decimal component: {part!r}')
            value = int(part)
            if value > 255:
                raise ValueError(f'component out of range: {part!r}')
            components.append(value)

        r, g, b = components
        return cls(r=r, g=g, b=b)

    @classmethod
    def from_css(cls, s: str) -> 'Color':
        rgb_match = RGB_RE.match(s)
        if rgb_match:
            return cls.parse(rgb_match[1])

        hex_match = HEX_RE.match(s)
        if hex_match:
            h = hex_match[1]
            return cls(r=int(h[0:2], 16), g=int(h[2:4], 16), b=int(h[4:6], 16))

        raise ValueError(f'unrecognized color: {s!r}')


def parse_color(s: str) -> str:
    try:
        return str(Color.parse(s))
    except ValueError:
        return DEFAULT_COLOR
