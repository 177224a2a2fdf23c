"""Command-line demos: clock rollover, AVL tree of students, text reversal and palindromes."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from edkit.avl import AVLTree, Order, Student
from edkit.clock import Time
from edkit.stacks import StackFullError
from edkit.textchecks import is_palindrome, reverse_text

_STUDENTS = (
    (41, "Enelton"),
    (27, "Cristhof"),
    (74, "Danielle"),
    (4, "Meira"),
    (29, "Guilherme"),
    (65, "Juliana"),
    (90, "Pedro"),
    (2, "Raul"),
    (6, "Paulo"),
    (28, "Carlos"),
    (30, "Lucas"),
    (60, "Maria"),
    (73, "Samanta"),
    (80, "Ulisses"),
    (92, "Carlos"),
)

_REMOVED_POSITIONS = (0, 11, 5, 12)


def _time_demo() -> list[str]:
    lines = []
    t1 = Time(23, 59, 59)
    lines.append(str(t1))
    t1.hour, t1.minute, t1.second = 12, 30, 15
    lines.append(str(t1))
    lines.append(f"Hour:    {t1.hour}")
    lines.append(f"Minute:  {t1.minute}")
    lines.append(f"Second:  {t1.second}")

    lines.append(str(Time(12)))

    t3 = Time(23, 59, 58)
    lines.append(str(t3))
    t3.next_second()
    lines.append(str(t3))
    t3.next_second()
    lines.append(str(t3))
    return lines


def _traversals(tree: AVLTree) -> list[str]:
    return [
        "Pre:  " + tree.format_order(Order.PRE),
        "In:   " + tree.format_order(Order.IN),
        "Post: " + tree.format_order(Order.POST),
    ]


def _avl_demo() -> list[str]:
    tree = AVLTree()
    students = [Student(ra, name) for ra, name in _STUDENTS]
    for student in students:
        tree.insert(student)
    lines = _traversals(tree)
    for position in _REMOVED_POSITIONS:
        tree.delete(students[position].ra)
    lines.append("********")
    lines.extend(_traversals(tree))
    return lines


def _read_line(text: str | None, prompt: str) -> str:
    if text is not None:
        return text
    print(prompt)
    return sys.stdin.readline()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="edkit", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)
    commands.add_parser("time", help="show a clock being set and rolled over")
    commands.add_parser("avl", help="build an AVL tree of students and delete some")
    reverse = commands.add_parser("reverse", help="reverse a line through a stack")
    reverse.add_argument("text", nargs="?", help="line to reverse (default: read stdin)")
    palindrome = commands.add_parser("palindrome", help="check a line for being a palindrome")
    palindrome.add_argument("text", nargs="?", help="line to check (default: read stdin)")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the demos and return the exit status."""
    args = _build_parser().parse_args(argv)

    if args.command == "time":
        print("\n".join(_time_demo()))
    elif args.command == "avl":
        print("\n".join(_avl_demo()))
    elif args.command == "reverse":
        line = _read_line(args.text, "Adicione uma String.")
        try:
            print(reverse_text(line))
        except StackFullError as error:
            print(error, file=sys.stderr)
            return 1
    else:
        line = _read_line(args.text, "Adicione uma string.")
        if is_palindrome(line):
            print("String é Palindrome")
        else:
            print("String não é palindrome")
    return 0


if __name__ == "__main__":
    sys.exit(main())