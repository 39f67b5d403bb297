"""Grammar-based recogniser that decides whether text is a number or inf/nan."""

__version__ = "0.1.0"
__all__ = ["context", "expressions", "interpreter"]