"""
handlers/console.py
-------------------
Line-oriented console I/O shared by all handlers.
"""

import sys
from typing import Optional, TextIO


class Console:
    """
    Thin wrapper over stdin/stdout/stderr.

    Streams are injectable so the shell can be driven from tests
    with io.StringIO.
    """

    def __init__(
        self,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
    ):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr

    def ask(self, prompt: str) -> str:
        """
        Print a prompt and read one line.

        Raises:
            EOFError: When the input stream is exhausted.
        """
        self.stdout.write(prompt)
        self.stdout.flush()
        line = self.stdin.readline()
        if not line:
            raise EOFError
        return line.rstrip("\r\n")

    def say(self, text: str = "") -> None:
        print(text, file=self.stdout)

    def error(self, text: str) -> None:
        print(text, file=self.stderr)

    def report(self, message: str) -> None:
        """Route a service message: [ERROR] lines to stderr, the rest to stdout."""
        if message.startswith("[ERROR]"):
            self.error(message)
        else:
            self.say(message)
