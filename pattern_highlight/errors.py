from typing import Sequence


class HighlightError(Exception):
    """base class for the terminal errors of `highlight_code`"""


class UnsupportedLanguage(HighlightError):
    def __init__(self, language: str) -> None:
        super().__init__(f'Unsupported language: {language}')
        self.language = language


class PatternFileNotFound(HighlightError):
    def __init__(self, filename: str, search_path: Sequence[str]) -> None:
        dirs = ', '.join(search_path) or '(empty search path)'
        super().__init__(
            f'Syntax file not found: {filename}. '
            f'Please ensure syntax files are in one of: {dirs}',
        )
        self.filename = filename
        self.search_path = tuple(search_path)


class PatternFileParseError(HighlightError):
    def __init__(self, filename: str, reason: str) -> None:
        super().__init__(f'Failed to parse syntax file {filename}: {reason}')
        self.filename = filename
        self.reason = reason
