import shutil
import sys
import termios
import tty

from loguru import logger


ENTER_ALT_SCREEN = "\033[?1049h"
LEAVE_ALT_SCREEN = "\033[?1049l"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"
HOME = "\033[H"
CLEAR_TO_END = "\033[J"


class TerminalInitFailed(Exception):
    pass


class Terminal:
    """Full-screen terminal session: alternate buffer, hidden cursor, unbuffered keys.

    Use as a context manager; the previous terminal mode is restored on exit,
    including when an exception escapes the body.
    """

    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.fd = None
        self._saved_mode = None

    def __enter__(self):
        if not (self.stdin.isatty() and self.stdout.isatty()):
            raise TerminalInitFailed("stdin and stdout must be attached to a terminal")
        self.fd = self.stdin.fileno()
        self._saved_mode = termios.tcgetattr(self.fd)
        tty.setcbreak(self.fd)
        try:
            self._write(ENTER_ALT_SCREEN + HIDE_CURSOR)
        except Exception:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved_mode)
            raise
        logger.info("Entered full-screen mode")
        return self

    def __exit__(self, exc_type, exc, tb):
        try:
            self._write(SHOW_CURSOR + LEAVE_ALT_SCREEN)
        finally:
            termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved_mode)
            logger.info("Restored terminal")
        return False

    def size(self):
        cols, lines = shutil.get_terminal_size()
        return cols, lines

    def draw(self, frame: str):
        self._write(HOME + frame + CLEAR_TO_END)

    def _write(self, text):
        self.stdout.write(text)
        self.stdout.flush()
