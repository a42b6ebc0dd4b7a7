"""HTTP layer for the todo API."""
