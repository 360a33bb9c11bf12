"""External model (OpenAI-compatible) integration."""
