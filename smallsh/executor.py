import os
import signal
import sys

from smallsh.config import DEV_NULL, OUTPUT_MODE, REDIRECT_IN
from smallsh.session import reset_child_signals


class SpawnError(Exception):
    """fork() failed; the shell cannot go on."""


def print_error(msg):
    print(msg, file=sys.stderr, flush=True)


def _redirect(path, flags, target_fd, mode=OUTPUT_MODE):
    fd = os.open(path, flags, mode)
    os.dup2(fd, target_fd)
    os.close(fd)


def apply_redirections(command, background):
    """
    Point fd 0/1 at their targets inside the child.
    Returns: 0 on success, 1 after printing a diagnostic
    """
    if background:
        _redirect(DEV_NULL, os.O_RDONLY, 0)
        _redirect(DEV_NULL, os.O_WRONLY, 1)

    for op, path in command.redirects:
        try:
            if op == REDIRECT_IN:
                _redirect(path, os.O_RDONLY, 0)
            else:
                _redirect(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 1)
        except OSError:
            direction = "input" if op == REDIRECT_IN else "output"
            print_error(f"cannot open {path} for {direction}")
            return 1
    return 0


def run_child(command, background, old_mask=()):
    """
    Body of the forked child. Only returns when exec did not happen.
    Returns: exit code for the child
    """
    reset_child_signals(foreground=not background)
    signal.pthread_sigmask(signal.SIG_SETMASK, old_mask)

    if apply_redirections(command, background) != 0:
        return 1

    try:
        os.execvp(command.program, command.argv)
    except OSError as e:
        print_error(f"{command.program}: {e.strerror}")
    return 1


def spawn(command, background):
    """
    Fork and exec command.
    Returns: pid of the child (parent side only)
    """
    sys.stdout.flush()
    sys.stderr.flush()

    # SIGTSTP stays blocked until the child has replaced the shell's handler
    old_mask = signal.pthread_sigmask(signal.SIG_BLOCK, {signal.SIGTSTP})
    try:
        pid = os.fork()
    except OSError as e:
        signal.pthread_sigmask(signal.SIG_SETMASK, old_mask)
        raise SpawnError(f"fork failed: {e}") from e

    if pid == 0:
        code = 1
        try:
            code = run_child(command, background, old_mask)
        finally:
            os._exit(code)

    signal.pthread_sigmask(signal.SIG_SETMASK, old_mask)
    return pid


def execute_command(command, session, jobs):
    """
    Run an external command in the foreground or background.
    Returns: pid of the spawned child
    """
    background = session.allows_background(command)
    pid = spawn(command, background)

    # Background execution
    if background:
        jobs.add_background_job(pid)
        print(f"background pid is {pid}", flush=True)
        return pid

    # Foreground execution
    _, status = os.waitpid(pid, 0)
    kind, _ = session.record_wait_status(status)
    if kind == "signal":
        print(session.last_status, flush=True)
    return pid
