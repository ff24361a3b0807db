"""Interactive menu for filling, deleting from and showing a small array."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterator
from typing import TextIO

_MENU = (
    "\n"
    "1. Insert Element\n"
    "2. Delete Element\n"
    "3. Display Element\n"
    "4. Exit\n"
    "Enter Choice: "
)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int | None:
    """Return the next integer token, None at end of input; raise on junk."""
    token = next(tokens, None)
    if token is None:
        return None
    return int(token)


def run_menu(stdin: TextIO, stdout: TextIO, size: int = 5) -> list[int]:
    """Run the menu until the user exits or input ends; return the array."""
    values = [0] * size
    tokens = _tokens(stdin)
    while True:
        stdout.write(_MENU)
        token = next(tokens, None)
        if token is None:
            return values
        try:
            choice = int(token)
        except ValueError:
            choice = 0

        if choice == 1:
            stdout.write(f"Enter {len(values)} element: ")
            entered = []
            try:
                for _ in range(len(values)):
                    number = _read_int(tokens)
                    if number is None:
                        return values
                    entered.append(number)
            except ValueError:
                stdout.write("Invalid number\n")
                continue
            values = entered
        elif choice == 2:
            stdout.write(
                f"Enter index of element to be deleted between 0 to {len(values) - 1} : "
            )
            try:
                index = _read_int(tokens)
            except ValueError:
                stdout.write("Invalid number\n")
                continue
            if index is None:
                return values
            if not 0 <= index < len(values):
                stdout.write("Invalid index\n")
                continue
            element = values.pop(index)
            stdout.write(f"{element} element is Deleted\n")
        elif choice == 3:
            stdout.write("--Displaying Elements--\n")
            stdout.write("".join(f"{value} " for value in values))
            stdout.write("\n")
        elif choice == 4:
            return values
        else:
            stdout.write("Invalid Choice")


def main(argv: list[str] | None = None) -> int:
    """Start the array menu on standard input and output."""
    parser = argparse.ArgumentParser(description="Array insert/delete/display menu.")
    parser.add_argument("--size", type=int, default=5, help="number of elements")
    args = parser.parse_args(argv)
    if args.size < 0:
        parser.error("size must not be negative")
    run_menu(sys.stdin, sys.stdout, args.size)
    return 0


if __name__ == "__main__":
    sys.exit(main())