"""Interactive command-line front end for the data structures."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import Callable

from dsakit.bounded import (
    BoundedArray,
    BoundedQueue,
    BoundedStack,
    CapacityError,
    EmptyError,
)
from dsakit.linked_list import LinkedList
from dsakit.searching import find_min_max

__all__ = ["main"]

_ARRAY_MENU = (
    "\nMenu:\n"
    "1. Insert element\n"
    "2. Delete element\n"
    "3. Print array\n"
    "4. Exit\n"
)
_STACK_MENU = (
    "\nMenu:\n"
    "1. Push element\n"
    "2. Pop element\n"
    "3. Print stack\n"
    "4. Exit\n"
)
_QUEUE_MENU = "\n1. Enqueue\n2. Dequeue\n3. Exit\n"


class _EndOfInput(Exception):
    """Input ran out while a value was still expected."""


class _BadInput(ValueError):
    """A token could not be read as an integer."""


def _split(lines: Iterable[str]) -> Iterator[str]:
    for line in lines:
        yield from line.split()


class _Console:
    """Reads whitespace-separated integers, printing a prompt for each."""

    def __init__(self, lines: Iterable[str]) -> None:
        self._tokens = _split(lines)

    def ask(self, prompt: str) -> int:
        print(prompt, end="", flush=True)
        token = next(self._tokens, None)
        if token is None:
            raise _EndOfInput
        try:
            return int(token)
        except ValueError:
            raise _BadInput(f"expected an integer, got {token!r}") from None

    def choose(self, prompt: str) -> int | None:
        """Like ``ask``, but return ``None`` when input has run out."""
        try:
            return self.ask(prompt)
        except _EndOfInput:
            return None


def _read_values(console: _Console, count: int) -> list[int]:
    return [console.ask("") for _ in range(count)]


def _run_array(console: _Console, args: argparse.Namespace) -> int:
    count = console.ask("Enter the number of elements in the array: ")
    print("Enter the elements of the array:")
    array = BoundedArray(_read_values(console, count), args.capacity)
    while True:
        print(_ARRAY_MENU, end="")
        match console.choose("Enter your choice: "):
            case None | 4:
                return 0
            case 1:
                element = console.ask("Enter the element to insert: ")
                index = console.ask("Enter the index to insert the element at: ")
                try:
                    array.insert(index, element)
                except CapacityError:
                    print("Array is full, cannot insert element.")
                except IndexError:
                    print("Invalid index.")
            case 2:
                index = console.ask("Enter the index of the element to delete: ")
                try:
                    array.delete(index)
                except IndexError:
                    print("Invalid index.")
            case 3:
                print("Array elements:")
                print(array)
            case _:
                print("Invalid choice!")


def _run_stack(console: _Console, args: argparse.Namespace) -> int:
    stack: BoundedStack[int] = BoundedStack(args.capacity)
    while True:
        print(_STACK_MENU, end="")
        match console.choose("Enter your choice: "):
            case None | 4:
                return 0
            case 1:
                element = console.ask("Enter the element to push: ")
                try:
                    stack.push(element)
                except CapacityError:
                    print("Stack overflow, cannot push element.")
            case 2:
                try:
                    print(f"Popped element: {stack.pop()}")
                except EmptyError:
                    print("Stack underflow, cannot pop element.")
            case 3:
                if len(stack) == 0:
                    print("Stack is empty.")
                else:
                    print("Stack elements:")
                    print(" ".join(str(value) for value in stack))
            case _:
                print("Invalid choice!")


def _run_queue(console: _Console, args: argparse.Namespace) -> int:
    queue: BoundedQueue[int] = BoundedQueue(args.capacity)
    while True:
        print(_QUEUE_MENU, end="")
        match console.choose("Enter choice: "):
            case None | 3:
                return 0
            case 1:
                value = console.ask("Enter value to enqueue: ")
                try:
                    queue.enqueue(value)
                except CapacityError:
                    print("Queue Overflow")
            case 2:
                try:
                    print(f"Dequeued: {queue.dequeue()}")
                except EmptyError:
                    print("Queue Underflow")
            case _:
                print("Invalid choice")


def _run_minmax(console: _Console, args: argparse.Namespace) -> int:
    count = console.ask("Enter the number of elements: ")
    print("Enter the elements: ")
    smallest, largest = find_min_max(_read_values(console, count))
    print(f"Minimum element: {smallest}")
    print(f"Maximum element: {largest}")
    return 0


def _run_linked_list(console: _Console, args: argparse.Namespace) -> int:
    count = console.ask("Enter the number of nodes: ")
    nodes: LinkedList[int] = LinkedList()
    for number in range(1, count + 1):
        nodes.append(console.ask(f"Enter data for node {number}: "))
    print(f"Linked List: {nodes}")
    return 0


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dsakit",
        description="Work with small data structures interactively on stdin.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    def add(
        name: str,
        help_text: str,
        handler: Callable[[_Console, argparse.Namespace], int],
        capacity: int | None = None,
    ) -> None:
        command = commands.add_parser(name, help=help_text)
        if capacity is not None:
            command.add_argument(
                "--capacity",
                type=int,
                default=capacity,
                help=f"maximum number of items (default {capacity})",
            )
        command.set_defaults(handler=handler)

    add("array", "edit a bounded array through a menu", _run_array, 100)
    add("stack", "push and pop on a bounded stack", _run_stack, 5)
    add("queue", "enqueue and dequeue on a bounded queue", _run_queue, 5)
    add("minmax", "find the smallest and largest of some numbers", _run_minmax)
    add("linked-list", "build and show a linked list", _run_linked_list)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the command named in ``argv``; return the exit status."""
    args = _build_parser().parse_args(argv)
    console = _Console(sys.stdin)
    try:
        return args.handler(console, args)
    except _EndOfInput:
        print("\ndsakit: unexpected end of input", file=sys.stderr)
    except (ValueError, CapacityError) as error:
        print(f"\ndsakit: {error}", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())