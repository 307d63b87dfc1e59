"""IP Checker - report the caller's originating IP address."""

__version__ = "0.1.0"
