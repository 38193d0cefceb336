"""smallsh - a small interactive shell with background jobs and I/O redirection."""
