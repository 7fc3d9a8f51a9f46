"""Small demonstrations of FIFO queue and LIFO stack behaviour."""

from __future__ import annotations

import argparse
from collections import deque


def queue_demo() -> list[str]:
    """Push 1, 2, 3 onto a queue, pop once, and report front and back."""
    queue: deque[int] = deque()
    queue.extend((1, 2, 3))
    lines = [
        f"Frente de la cola: {queue[0]}",
        f"Atras de la cola: {queue[-1]}",
    ]
    queue.popleft()
    lines.append(f"Frente de la cola: {queue[0]}")
    return lines


def stack_demo() -> list[str]:
    """Push 10, 20, 30 onto a stack, pop once, and report the top."""
    stack: list[int] = [10, 20, 30]
    lines = [f"Elemento en la cima: {stack[-1]}"]
    stack.pop()
    lines.append(f"Elemento en la cima: {stack[-1]}")
    return lines


def main(argv: list[str] | None = None) -> int:
    """Print the queue demo, the stack demo, or both."""
    parser = argparse.ArgumentParser(description="Queue and stack demonstrations.")
    parser.add_argument(
        "demo",
        nargs="?",
        choices=("cola", "pila"),
        help="run only the queue (cola) or only the stack (pila) demo",
    )
    args = parser.parse_args(argv)
    if args.demo in (None, "cola"):
        print("\n".join(queue_demo()))
    if args.demo in (None, "pila"):
        print("\n".join(stack_demo()))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())