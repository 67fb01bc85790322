"""Console logging helpers shared by the CLI commands."""

__all__ = ["info", "error", "debug", "warn"]


def _emit(level: str, message: object) -> None:
    print(f"[{level}] {message}")


def info(message: object) -> None:
    """Print an informational message."""
    _emit("info", message)


def error(message: object) -> None:
    """Print an error message."""
    _emit("error", message)


def debug(message: object) -> None:
    """Print a debug message."""
    _emit("debug", message)


def warn(message: object) -> None:
    """Print a warning message."""
    _emit("warning", message)