import sys

from smallsh.builtin import execute_builtin, builtin_exit
from smallsh.executor import execute_command, SpawnError
from smallsh.job_control import JobTracker
from smallsh.parser import tokenize, is_comment, expand_words, parse_command, ParseError
from smallsh.prompt import init_readline, read_line
from smallsh.session import Session, init_signal_handlers


def run_line(line, session, jobs):
    """
    Parse, expand and dispatch one input line.
    Returns: False when the line was blank or a comment, True otherwise
    """
    words = tokenize(line)
    if not words or is_comment(words):
        return False

    words = expand_words(words)
    try:
        command = parse_command(words)
    except ParseError as e:
        print(f"smallsh: {e}", flush=True)
        return True

    # Built-ins
    executed, _ = execute_builtin(command, session, jobs)
    if executed:
        return True

    # External command
    execute_command(command, session, jobs)
    return True


def main_loop():
    """Main shell loop"""
    session = Session()
    jobs = JobTracker()

    # Setup
    init_signal_handlers(session)
    init_readline()

    while True:
        jobs.report_finished()

        session.at_prompt = True
        try:
            line = read_line()
        except EOFError:
            print()
            builtin_exit(jobs)
        finally:
            session.at_prompt = False

        try:
            run_line(line, session, jobs)
        except SpawnError as e:
            print(f"smallsh: {e}", file=sys.stderr, flush=True)
            sys.exit(1)
