"""Local backend bridging the desktop translation shell and an Ollama server."""

__version__ = "0.1.0"
