"""LingoDesk - desktop translator backed by OpenAI and Gemini chat models."""

__version__ = "0.1.0"
