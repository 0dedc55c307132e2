"""Utilities for scores, grades, passwords, in-memory file trees and a book catalogue."""

__version__ = "0.1.0"
__all__ = ["scores", "grades", "passwords", "filesystem", "library"]