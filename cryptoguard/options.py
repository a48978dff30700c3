"""Command-line option parsing for the encrypt, decrypt and checksum commands."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class CommandType(enum.Enum):
    """The operation requested on the command line."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"
    CHECKSUM = "checksum"


class OptionsError(RuntimeError):
    """Raised when the command-line arguments are invalid."""


@dataclass(frozen=True)
class _Option:
    name: str
    short: str | None
    takes_value: bool
    description: str

    @property
    def label(self) -> str:
        text = f"-{self.short} [ --{self.name} ]" if self.short else f"--{self.name}"
        return f"{text} arg" if self.takes_value else text


_OPTIONS = (
    _Option("help", "h", False, "produce help message"),
    _Option("input", "i", True, "input file"),
    _Option("command", None, True, "encrypt, decrypt, checksum"),
    _Option("output", "o", True, "output file"),
    _Option("password", "p", True, "password for encrypt"),
)
_BY_LONG = {opt.name: opt for opt in _OPTIONS}
_BY_SHORT = {opt.short: opt for opt in _OPTIONS if opt.short}


class ProgramOptions:
    """Parsed command-line options."""

    def __init__(self) -> None:
        self.command: CommandType | None = None
        self.input_file = ""
        self.output_file = ""
        self.password = ""

    @property
    def help_text(self) -> str:
        """The description of the allowed options."""
        width = max(len(opt.label) for opt in _OPTIONS) + 1
        lines = ["Allowed options:"]
        lines += [f"  {opt.label:<{width}}{opt.description}" for opt in _OPTIONS]
        return "\n".join(lines)

    def parse(self, argv) -> bool:
        """Parse the arguments (without the program name).

        Returns False when only the help text was requested and printed,
        True when a command is ready to run. Raises OptionsError otherwise.
        """
        argv = list(argv)
        if not argv:
            raise OptionsError("Args error: an empty set of arguments was passed.")

        values = self._collect(argv)

        if "help" in values:
            print(self.help_text)
            return False

        if "command" not in values:
            raise OptionsError("Args error:'command' not specified")
        try:
            self.command = CommandType(values["command"])
        except ValueError:
            raise OptionsError(
                "Args error:command not supported " + values["command"]
            ) from None

        self.input_file = values.get("input", "")
        self.output_file = values.get("output", "")
        if self.input_file == self.output_file:
            raise OptionsError("Args error:the input file and output file are the same")

        self.password = values.get("password", "")

        if not self.input_file:
            raise OptionsError("Args error:input file not specified")

        if self.command is not CommandType.CHECKSUM:
            if not self.output_file:
                raise OptionsError("Args error:output file not specified")
            if not self.password:
                raise OptionsError("Args error:password not specified")
        elif self.output_file or self.password:
            raise OptionsError(
                "Args error:command checksum cannot be used with args password and output"
            )
        return True

    @staticmethod
    def _collect(argv: list[str]) -> dict[str, str | bool]:
        values: dict[str, str | bool] = {}
        tokens = iter(argv)
        for token in tokens:
            inline: str | None
            if token.startswith("--") and len(token) > 2:
                name, sep, rest = token[2:].partition("=")
                opt = _BY_LONG.get(name)
                inline = rest if sep else None
            elif token.startswith("-") and len(token) > 1:
                opt = _BY_SHORT.get(token[1])
                inline = token[2:] or None
            else:
                raise OptionsError(
                    "too many positional options have been specified on the command line"
                )
            if opt is None:
                raise OptionsError(f"unrecognised option '{token}'")

            if opt.takes_value:
                value = inline if inline is not None else next(tokens, None)
                if value is None:
                    raise OptionsError(
                        f"the required argument for option '--{opt.name}' is missing"
                    )
            elif inline is not None:
                raise OptionsError(
                    f"option '--{opt.name}' does not take any arguments"
                )
            else:
                value = True

            if opt.name in values:
                raise OptionsError(
                    f"option '--{opt.name}' cannot be specified more than once"
                )
            values[opt.name] = value
        return values