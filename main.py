#!/usr/bin/env python3
from smallsh.shell import main_loop


def main():
    main_loop()


if __name__ == "__main__":
    main()
