from typing import Optional

from rich.console import Console

# Plain output: no markup, highlighting or wrapping, so stdout keeps the
# exact "<port> is open" format and a long run of dots stays on one line.
default_console = Console(highlight=False, soft_wrap=True)


class ScannerUI:
    """
    Output sink shared by the workers and the command line front end.
    Pass a Console writing to a StringIO to capture output in tests.
    """
    PROGRESS_MARKER = "."

    def __init__(self, console: Optional[Console] = None):
        self.console = console if console is not None else default_console
        self.markers = 0

    def mark_open(self):
        # Rich flushes the file after every write outside a buffer context
        self.console.out(self.PROGRESS_MARKER, end="", highlight=False)
        self.markers += 1

    def _write_lines(self, text: str):
        for line in text.splitlines():
            self.console.out(line, highlight=False)

    def display_report(self, text: str):
        self._write_lines(text)

    def display_usage(self, text: str):
        self._write_lines(text)

    def show_message(self, msg: str):
        self._write_lines(msg)
