#!/usr/bin/env python3

from rich.console import Console
from rich.panel import Panel

class Log():
    """
    Create an output stream that logs both to the CLI and optionally to a file.
    """
    def __init__(self, open_log_file=False, console=None):
        """
        Create an output stream that logs both to the CLI and optionally to a
        file.

        Args:
            open_log_file - A file that has already been opened with 'w' or 'a'.
                Set this to False to prevent logging to a file.
            console - (optional) A rich Console to print to. Defaults to
                standard output.
        """
        self.open_log_file = open_log_file
        if console is None:
            console = Console(highlight=False)
        self.console = console

    def log(self, line, print_log=True, style=None):
        """
        Output a string to the screen and log file.

        Args:
            line - The string to print to the screen and log file
            print_log - (optional) You can set this to False to have the output
                log to the file but not to the screen
            style - (optional) A rich style name used when printing to the screen
        """
        if print_log:
            self.console.print(line, style=style, markup=False)
        if self.open_log_file:
            self.open_log_file.write(line + '\n')

    def close(self):
        """
        Close the log file, if one is open.
        """
        if self.open_log_file:
            self.open_log_file.close()
            self.open_log_file = False

    def info(self, line):
        self.log(line, style='blue')

    def heading(self, line):
        self.log(line, style='cyan')

    def warn(self, line):
        self.log(line, style='yellow')

    def success(self, line):
        self.log('✓ ' + line, style='green')

    def error(self, line):
        self.log('✗ ' + line, style='red')

    def banner(self, title, subtitle):
        """
        Clear the screen and print a boxed title.
        """
        self.console.clear()
        self.console.print(Panel(title + '\n' + subtitle, style='cyan', expand=False), markup=False)

    def output(self, text):
        """
        Pass the output of an external tool through to the screen and log file.

        Args:
            text - Captured stdout or stderr, possibly spanning several lines
        """
        text = text.rstrip()
        if len(text) > 0:
            for line in text.splitlines():
                self.log(line)
