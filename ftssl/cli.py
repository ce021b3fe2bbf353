"""Command-line front end: digest commands with -p, -q, -r and -s options,
plus an interactive prompt when started without arguments."""

from __future__ import annotations

import sys
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import BinaryIO, TextIO

from .args import PROGRAM_NAME, split_arg_line
from .md5 import md5
from .sha256 import sha224, sha256
from .sha512 import sha384, sha512

DIGESTS: dict[str, Callable[..., str]] = {
    "md5": md5,
    "sha256": sha256,
    "sha224": sha224,
    "sha512": sha512,
    "sha384": sha384,
}

COMMANDS = ("exit", "help")

PROMPT = f"{PROGRAM_NAME}> "
WRONG_OPTION = "Wrong option used"
NO_SUCH_FILE = "No such file"
INVALID_COMMAND = "Invalid command"


@dataclass
class Options:
    """Output options of a digest command."""

    quiet: bool = False
    reverse: bool = False
    read_stdin: bool = True


class CommandError(Exception):
    """A user error reported as ``ft_ssl: <reason> '<argument>'``."""

    def __init__(self, reason: str, argument: str) -> None:
        self.reason = reason
        self.argument = argument
        super().__init__(f"{PROGRAM_NAME}: {reason} '{argument}'")


def format_output(digest_hex: str, options: Options, digest_name: str, label: str) -> str:
    """Build the result line for one input, without the trailing newline."""
    if options.quiet:
        return digest_hex
    if options.reverse:
        return f"{digest_hex} {label}"
    return f"{digest_name.upper()} ({label}) = {digest_hex}"


def _digest_function(digest_name: str) -> Callable[..., str]:
    try:
        return DIGESTS[digest_name]
    except KeyError:
        raise CommandError(INVALID_COMMAND, digest_name) from None


def run_digest(
    argv: Sequence[str], digest_name: str, stdin: BinaryIO, stdout: TextIO
) -> None:
    """Run a digest command on its options and file arguments.

    Raises CommandError on an unknown or incomplete option; results written
    before the bad option stay written.
    """
    digest = _digest_function(digest_name)
    args = list(argv)
    options = Options()
    index = 0
    while index < len(args) and args[index].startswith("-"):
        arg = args[index]
        if len(arg) != 2:
            raise CommandError(WRONG_OPTION, arg)
        flag = arg[1]
        if flag == "p":
            data = stdin.read().split(b"\0", 1)[0]
            stdout.write(data.decode("utf-8", "replace"))
            stdout.write(f"{digest(data)}\n")
            options.read_stdin = False
        elif flag == "q":
            options.quiet = True
        elif flag == "r":
            options.reverse = True
        elif flag == "s" and index + 1 < len(args):
            index += 1
            text = args[index]
            line = format_output(digest(text), options, digest_name, f'"{text}"')
            stdout.write(f"{line}\n")
            options.read_stdin = False
        else:
            raise CommandError(WRONG_OPTION, arg)
        index += 1

    files = args[index:]
    if not files and options.read_stdin:
        stdout.write(f"{digest(stdin)}\n")
    for path in files:
        try:
            handle = open(path, "rb")
        except OSError:
            stdout.write(f"{CommandError(NO_SUCH_FILE, path)}\n")
            continue
        with handle:
            digest_hex = digest(handle)
        stdout.write(f"{format_output(digest_hex, options, digest_name, path)}\n")


def print_help(stdout: TextIO) -> None:
    """Write the usage text listing digest and shell commands."""
    lines = [
        "",
        f"Usage:  {PROGRAM_NAME} command [command opts] [command args]",
        "opts:  -p -q -r -s",
        "",
        "Message Digest commands:",
        *DIGESTS,
        "",
        f"{PROGRAM_NAME} commands:",
        *COMMANDS,
    ]
    stdout.write("".join(f"{line}\n" for line in lines))


def dispatch(argv: Sequence[str], stdin: BinaryIO, stdout: TextIO) -> bool:
    """Run one command line (without the program name).

    Returns False when the command asks to leave, True otherwise.
    """
    command = argv[0] if argv else ""
    if command in DIGESTS:
        try:
            run_digest(argv[1:], command, stdin, stdout)
        except CommandError as error:
            stdout.write(f"{error}\n")
        return True
    if command == "exit":
        return False
    if command == "help":
        print_help(stdout)
        return True
    stdout.write(f"{CommandError(INVALID_COMMAND, command)}\n")
    print_help(stdout)
    return True


def _repl(stdin: BinaryIO, stdout: TextIO) -> None:
    while True:
        stdout.write(PROMPT)
        stdout.flush()
        raw = stdin.readline()
        if not raw:
            return
        line = raw.rstrip(b"\n").decode("utf-8", "replace")
        if not dispatch(split_arg_line(line)[1:], stdin, stdout):
            return


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: run the given command, or prompt for commands."""
    args = sys.argv[1:] if argv is None else list(argv)
    stdin = getattr(sys.stdin, "buffer", sys.stdin)
    if args:
        dispatch(args, stdin, sys.stdout)
    else:
        _repl(stdin, sys.stdout)
    return 0