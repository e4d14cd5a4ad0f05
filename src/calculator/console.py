"""Console — вывод в поток с необязательной ANSI-подсветкой."""

from typing import Final, TextIO

# ANSI escape-последовательности
COLOR_GREEN: Final[str] = "\033[32m"
COLOR_RED: Final[str] = "\033[31m"
COLOR_RESET: Final[str] = "\033[0m"


class Console:
    """Обёртка над текстовым потоком вывода.

    Цвет применяется только при use_color=True; поток не закрывается.
    """

    def __init__(self, stream: TextIO, use_color: bool = True):
        self.stream = stream
        self.use_color = use_color

    def write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def line(self, text: str = "") -> None:
        self.write(text + "\n")

    def _colored(self, text: str, color: str) -> str:
        if not self.use_color:
            return text
        return f"{color}{text}{COLOR_RESET}"

    def ok(self, text: str) -> None:
        """Строка успеха (зелёная)."""
        self.line(self._colored(text, COLOR_GREEN))

    def fail(self, text: str) -> None:
        """Строка ошибки (красная)."""
        self.line(self._colored(text, COLOR_RED))
