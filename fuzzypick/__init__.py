"""Interactive terminal fuzzy finder for files in a directory tree."""

__version__ = "0.1.0"
__all__ = ["algo", "files", "list_view", "app"]