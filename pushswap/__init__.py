"""Two-stack sorting with a restricted set of operations: input parsing, the stack operations, and sorting strategies for short and long lists."""

__version__ = "0.1.0"