"""
PromptVEO Scene Proxy

FastAPI service that turns transcripts into scene lists with Gemini.
"""

__version__ = "2.0.0"
