"""Input scanning, word parsing and word expansion for a Bash-compatible shell."""

__version__ = "0.1.0"