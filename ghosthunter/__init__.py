"""Ghost Hunter: click the ghosts before they cross the haunted house."""

__version__ = "0.1.0"
__all__ = ["numfmt", "printf", "state", "game"]