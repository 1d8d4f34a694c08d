"""Small, testable example functions and TTL caches with an injectable clock."""

__version__ = "0.1.0"
__all__ = ["adder", "pubadder", "bench", "cleanup", "table", "text", "cachev1", "cachev2"]