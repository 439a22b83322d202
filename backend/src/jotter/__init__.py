"""
Jotter Backend - Personal Note Taking API

Token-authenticated REST backend for keeping private notes.
"""

__version__ = "1.0.0"
