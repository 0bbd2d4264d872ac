"""CURP building, text helpers and small console exercises."""

__version__ = "0.1.0"
__all__ = ["curp", "exercises", "loops", "textutils"]