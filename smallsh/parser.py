import os

from smallsh.config import (
    PID_MARKER, COMMENT_PREFIX, BACKGROUND_TOKEN, REDIRECT_IN, REDIRECT_OUT
)


class ParseError(Exception):
    """Raised when a command line cannot be turned into a Command."""


class Command:
    """
    One parsed command line.
    argv keeps the program name at index 0; directives are already removed.
    redirects holds (operator, path) pairs in the order they were written;
    the executor applies them in that order. input_path and output_path are
    summary fields giving the target that ends up on fd 0 / fd 1.
    """

    def __init__(self, argv, redirects=None, background=False):
        self.argv = argv
        self.redirects = redirects or []
        self.background = background

    @property
    def program(self):
        return self.argv[0]

    @property
    def args(self):
        return self.argv[1:]

    @property
    def input_path(self):
        return self._last_target(REDIRECT_IN)

    @property
    def output_path(self):
        return self._last_target(REDIRECT_OUT)

    def _last_target(self, op):
        paths = [path for kind, path in self.redirects if kind == op]
        return paths[-1] if paths else None

    def __repr__(self):
        return (f"Command(argv={self.argv!r}, redirects={self.redirects!r}, "
                f"background={self.background!r})")


def tokenize(line):
    """
    Split a command line on runs of whitespace.
    Returns: list of words (empty for a blank line)
    """
    return line.split()


def is_comment(words):
    return bool(words) and words[0].startswith(COMMENT_PREFIX)


def expand_pid(word, pid=None):
    """Thay $$ bằng pid của shell, từ trái sang phải"""
    if pid is None:
        pid = os.getpid()
    pid_text = str(pid)
    while PID_MARKER in word:
        word = word.replace(PID_MARKER, pid_text, 1)
    return word


def expand_words(words, pid=None):
    return [expand_pid(word, pid) for word in words]


def parse_command(words):
    """
    Build a Command from expanded words.
    '&' counts only as the last word; '<' and '>' each take the next word.
    Returns: Command, or None when there are no words
    """
    if not words:
        return None

    background = False
    if words[-1] == BACKGROUND_TOKEN:
        background = True
        words = words[:-1]

    argv, redirects = [], []
    i = 0
    while i < len(words):
        tok = words[i]
        if tok in (REDIRECT_IN, REDIRECT_OUT):
            if i + 1 >= len(words):
                raise ParseError(f"syntax error: missing path after '{tok}'")
            redirects.append((tok, words[i + 1]))
            i += 2
        else:
            argv.append(tok)
            i += 1

    if not argv:
        raise ParseError("syntax error: missing command")

    return Command(argv, redirects, background)
