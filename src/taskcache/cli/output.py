"""Colorful CLI output helpers."""

import sys

from ..models import Task

# ANSI color codes
GREEN = "\033[32m"
YELLOW = "\033[33m"
RED = "\033[31m"
DIM = "\033[2m"
RESET = "\033[0m"
CHECK = "\u2713"  # ✓
BULLET = "\u2022"  # •
CROSS = "\u2717"  # ✗


def _supports_color() -> bool:
    """Check if stdout is a terminal."""
    return hasattr(sys.stdout, "isatty") and sys.stdout.isatty()


def _colorize(text: str, color: str) -> str:
    """Apply color to text if terminal supports it."""
    if _supports_color():
        return f"{color}{text}{RESET}"
    return text


def success(message: str) -> None:
    """Print success message with green checkmark."""
    print(f"{_colorize(CHECK, GREEN)} {message}")


def info(message: str) -> None:
    """Print info message with yellow bullet."""
    print(f"{_colorize(BULLET, YELLOW)} {message}")


def error(message: str) -> None:
    """Print error message with red cross."""
    print(f"{_colorize(CROSS, RED)} {message}", file=sys.stderr)


def format_task(task: Task) -> str:
    """One-line rendering: ``[x] title  (id)``."""
    box = "[x]" if task.completed else "[ ]"
    title = task.title_for_list or "(untitled)"
    return f"{box} {title}  {_colorize(f'({task.id})', DIM)}"


def print_tasks(tasks: list[Task]) -> None:
    if not tasks:
        info("No tasks")
        return
    for task in tasks:
        print(format_task(task))


def print_task(task: Task) -> None:
    print(format_task(task))
    if task.title and task.description:
        print()
        print(task.description)
