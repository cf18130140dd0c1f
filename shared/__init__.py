"""Helpers shared by the command-line tools: logging and console output."""
