class TodoError(Exception):
    """Base error for the todo domain."""
