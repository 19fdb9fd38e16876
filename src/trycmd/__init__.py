"""Run a command, show a standard result banner and pass on its exit status."""

__version__ = "1.0.0"
