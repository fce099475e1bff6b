"""Text of the usage, return-code and error messages shown by the tools."""

from __future__ import annotations


def program_name(argv0: str) -> str:
    """Return the program name: what follows the last '/' of argv[0]."""
    return argv0.rsplit("/", 1)[-1]


def usage_text(program: str, syntax: str) -> str:
    """Build the SYNTAXE block, one indented line per non-empty syntax line."""
    lines = [f"\t{program} {line}\n" for line in syntax.split("\n") if line]
    return "SYNTAXE\n" + "".join(lines)


def code_line(status: int, description: str) -> str:
    """Describe one return code."""
    return f"\t{status} : {description}\n"


def error_line(program: str, message: str) -> str:
    """Format an error message tagged with the program name."""
    return f"[{program}] {message}\n"