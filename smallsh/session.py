import os
import signal

from smallsh.config import INITIAL_STATUS, FG_ONLY_ON_MSG, FG_ONLY_OFF_MSG, PROMPT
from smallsh.prompt import pending_input


def describe_wait_status(status):
    """
    Turn a raw wait status into (kind, number).
    kind is "exit" or "signal".
    """
    if os.WIFSIGNALED(status):
        return "signal", os.WTERMSIG(status)
    return "exit", os.WEXITSTATUS(status)


class Session:
    """
    State shared by the built-ins, the executor and the SIGTSTP handler.
    last_status only ever describes the last foreground command.
    """

    def __init__(self, out_fd=1):
        self.last_status = INITIAL_STATUS
        self.foreground_only = False
        self.out_fd = out_fd
        # true while the shell is blocked reading a command line
        self.at_prompt = False

    def record_wait_status(self, status):
        kind, number = describe_wait_status(status)
        if kind == "signal":
            self.last_status = f"terminated by signal {number}"
        else:
            self.last_status = f"exit status {number}"
        return kind, number

    def allows_background(self, command):
        return command.background and not self.foreground_only

    def toggle_foreground_only(self, signum=None, frame=None):
        """SIGTSTP handler: bật/tắt foreground-only mode"""
        self.foreground_only = not self.foreground_only
        message = FG_ONLY_ON_MSG if self.foreground_only else FG_ONLY_OFF_MSG
        if self.at_prompt:
            message += PROMPT + pending_input()
        os.write(self.out_fd, message.encode())


def init_signal_handlers(session):
    """Khởi tạo signal handlers cho shell (không áp dụng cho tiến trình con)"""
    signal.signal(signal.SIGINT, signal.SIG_IGN)
    signal.signal(signal.SIGTSTP, session.toggle_foreground_only)


def reset_child_signals(foreground):
    """
    Signal dispositions for a freshly forked child, before exec.
    Ignored dispositions survive exec; SIG_DFL is what the program starts with.
    """
    signal.signal(signal.SIGTSTP, signal.SIG_IGN)
    if foreground:
        signal.signal(signal.SIGINT, signal.SIG_DFL)
    else:
        signal.signal(signal.SIGINT, signal.SIG_IGN)
