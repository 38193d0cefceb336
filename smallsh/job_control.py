import os

import psutil

from smallsh.session import describe_wait_status


class JobTracker:
    """Background jobs, in the order they were started."""

    def __init__(self):
        self.pids = []

    def __len__(self):
        return len(self.pids)

    def __contains__(self, pid):
        return pid in self.pids

    def add_background_job(self, pid):
        """Thêm job vào danh sách background"""
        self.pids.append(pid)

    def poll(self):
        """
        Non-blocking check of every tracked job.
        Completed jobs are dropped so each one is reported once.
        Returns: list of (pid, kind, number) for jobs that finished
        """
        finished = []
        still_running = []
        for pid in self.pids:
            try:
                done_pid, status = os.waitpid(pid, os.WNOHANG)
            except ChildProcessError:
                # reaped elsewhere, nothing left to report
                continue
            if done_pid == 0:
                still_running.append(pid)
                continue
            kind, number = describe_wait_status(status)
            finished.append((pid, kind, number))
        self.pids = still_running
        return finished

    def report_finished(self):
        """In thông báo cho các job nền đã kết thúc"""
        for pid, kind, number in self.poll():
            if kind == "signal":
                print(f"background pid {pid} is done: terminated by signal {number}",
                      flush=True)
            else:
                print(f"background pid {pid} is done: exit value {number}", flush=True)

    def kill_all(self):
        """SIGKILL every tracked job without waiting for it"""
        for pid in self.pids:
            try:
                psutil.Process(pid).kill()
            except psutil.NoSuchProcess:
                pass
