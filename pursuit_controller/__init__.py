"""Pure pursuit path-following controller with path generation, lifecycle and simulation."""

__version__ = "0.1.0"
__all__ = ["messages", "path_handler", "lifecycle", "localization", "config", "controller_server"]