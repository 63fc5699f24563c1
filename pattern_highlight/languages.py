import logging
import os.path
from typing import Dict
from typing import Optional
from typing import Sequence
from typing import Tuple

from pattern_highlight.errors import PatternFileNotFound
from pattern_highlight.errors import UnsupportedLanguage

logger = logging.getLogger(__name__)

HERE = os.path.abspath(os.path.dirname(__file__))
BUNDLED_SYNTAX_DIR = os.path.join(HERE, 'resources/syntax')
SYNTAX_PATH_ENV = 'PATTERN_HIGHLIGHT_SYNTAX_PATH'

LANGUAGE_FILES: Dict[str, str] = {
    'js': 'javascript.toml',
    'jsx': 'javascript.toml',
    'mjs': 'javascript.toml',
    'cjs': 'javascript.toml',
    'ts': 'typescript.toml',
    'tsx': 'typescript.toml',
    'rs': 'rust.toml',
    'py': 'python.toml',
    'json': 'json.toml',
    'css': 'css.toml',
    'scss': 'css.toml',
    'sass': 'css.toml',
    'html': 'html.toml',
    'htm': 'html.toml',
    'md': 'markdown.toml',
    'mdx': 'markdown.toml',
    'yml': 'yaml.toml',
    'yaml': 'yaml.toml',
    'xml': 'xml.toml',
}


def rule_file_for(language: str) -> str:
    try:
        return LANGUAGE_FILES[language.lower()]
    except KeyError:
        raise UnsupportedLanguage(language) from None


def language_for_filename(filename: str) -> Optional[str]:
    _, ext = os.path.splitext(filename)
    language = ext.lstrip('.').lower()
    if language in LANGUAGE_FILES:
        return language
    else:
        return None


def default_search_path() -> Tuple[str, ...]:
    env_dirs = [
        d for d in os.environ.get(SYNTAX_PATH_ENV, '').split(os.pathsep) if d
    ]
    return (*env_dirs, os.path.join('resources', 'syntax'), BUNDLED_SYNTAX_DIR)


def find_syntax_file(
        filename: str,
        search_path: Optional[Sequence[str]] = None,
) -> str:
    if search_path is None:
        search_path = default_search_path()

    for syntax_dir in search_path:
        path = os.path.join(syntax_dir, filename)
        if os.path.exists(path):
            logger.debug('using syntax file %s', path)
            return path

    raise PatternFileNotFound(filename, search_path)
