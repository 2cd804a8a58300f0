"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Alphabet, separator, padding and grid constants
- exceptions: Custom exception hierarchy
"""
