import sys

GREEN = "\033[32m"
RED = "\033[31m"
RESET = "\033[0m"


class Console:
    """Line-based input/output port handed to every menu handler."""

    def __init__(self, stdin=None, stdout=None, stderr=None, color=False):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.stderr = stderr if stderr is not None else sys.stderr
        self.color = color  # ANSI colors for section banners

    def show(self, text="", end="\n"):
        """Write a line to the output stream"""
        print(text, end=end, file=self.stdout)

    def error(self, text):
        print(text, file=self.stderr)

    def prompt(self, text):
        """Print a prompt and return the next line without its newline.

        Raises EOFError once the input stream is exhausted.
        """
        self.show(text, end="")
        self.stdout.flush()
        line = self.stdin.readline()
        if line == "":
            raise EOFError("end of input")
        return line.rstrip("\r\n")

    def read_choice(self):
        """Ask for a menu choice until an integer is entered"""
        while True:
            try:
                return int(self.prompt("Please make your choice: ").strip())
            except ValueError:
                self.show("Your input is invalid!")

    def read_number(self, text):
        # raises ValueError; callers report it
        return int(self.prompt(text).strip())

    def banner(self, text):
        self.show(self.paint(text, GREEN))

    def warn(self, text):
        self.show(self.paint(text, RED))

    def paint(self, text, code):
        if not self.color:
            return text
        return f"{code}{text}{RESET}"
