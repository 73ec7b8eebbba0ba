"""
PromptVEO Scene Studio

Desktop and command-line client for the PromptVEO scene backend: turn a
transcript into a JSON scene list, extend it, and export it.
"""

__version__ = "2.0.0"
