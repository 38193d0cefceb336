import os
import sys


def builtin_cd(args):
    """Change directory; extra arguments are ignored"""
    path = args[0] if args else os.environ.get("HOME", "/")
    try:
        os.chdir(path)
        return 0
    except OSError as e:
        print(f"cd: {e}", flush=True)
        return 1


def builtin_status(session):
    """In trạng thái của lệnh foreground gần nhất"""
    print(session.last_status, flush=True)
    return 0


def builtin_exit(jobs):
    """Kill background jobs and leave the shell with status 0"""
    jobs.kill_all()
    sys.stdout.flush()
    sys.exit(0)


def execute_builtin(command, session, jobs):
    """
    Execute built-in command if it matches.
    Redirections and a trailing '&' are ignored for built-ins.
    Returns (executed: bool, exit_code: int)
    """
    cmd = command.program

    if cmd == "cd":
        return True, builtin_cd(command.args)
    elif cmd == "status":
        return True, builtin_status(session)
    elif cmd == "exit":
        builtin_exit(jobs)

    return False, 0
