"""Cosine similarity between two texts, embedded by a local Ollama server."""

__version__ = "0.1.0"
