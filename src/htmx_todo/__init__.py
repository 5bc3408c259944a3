"""Server-rendered HTMX to-do list backed by an in-memory task store."""
