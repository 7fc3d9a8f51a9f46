"""Binary search trees, stack and queue demos, word autocompletion and a task board."""

__version__ = "0.1.0"