import sys

from smallsh.config import PROMPT

_readline = None


def init_readline():
    """Cấu hình readline để hoạt động giống terminal Linux (history chỉ trong phiên)"""
    global _readline

    if not sys.stdin.isatty():
        return False

    # input() picks readline up once it is imported
    import readline
    _readline = readline

    # Phím mũi tên lên/xuống
    readline.parse_and_bind("\\e[A: previous-history")
    readline.parse_and_bind("\\e[B: next-history")

    # Ctrl+Left/Right để nhảy giữa các từ
    readline.parse_and_bind("\\e[1;5D: backward-word")
    readline.parse_and_bind("\\e[1;5C: forward-word")

    readline.parse_and_bind("set editing-mode emacs")
    return True


def read_line():
    """
    Print the prompt and read one line.
    Raises EOFError at end of input.
    """
    if sys.stdin.isatty():
        return input(PROMPT)

    sys.stdout.write(PROMPT)
    sys.stdout.flush()
    line = sys.stdin.readline()
    if line == "":
        raise EOFError
    return line.rstrip("\n")


def pending_input():
    """Text typed at the prompt so far (only tracked with readline)"""
    if _readline is None:
        return ""
    return _readline.get_line_buffer()
