"""
Command-line task tracker.

Components:
- core/models.py: Priority, Task, TaskList
- core/commands.py: command parsing + dispatch onto a TaskList
- storage/task_store.py: JSON file persistence
- cli/main.py: process entrypoint (load -> one command -> save)
"""

__version__ = "0.1.0"
