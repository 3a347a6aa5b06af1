"""Data model, configuration and clock shared by the engines."""
