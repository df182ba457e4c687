"""Chess position model and legal-move generator."""

__version__ = "0.1.0"
