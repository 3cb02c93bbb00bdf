"""Print the colored ranges of a source file, the way an editor would apply them."""

import sys
from pathlib import Path

from pygkit import DictTheme, find_lexer, parse_with_theme

path = Path(sys.argv[1] if len(sys.argv) > 1 else __file__)
code = path.read_text(encoding="utf-8")
lexer = find_lexer(path.name) or "text"
theme = DictTheme.from_pygments_style("monokai")


def show(rng, token, attributes):
    print(f"{rng.start:>6} {rng.length:>4}  {token.kind.name:<24} {attributes}")
    return True


parse_with_theme(code, lexer, theme, show)
