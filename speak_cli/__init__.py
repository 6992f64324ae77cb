"""Speak - moody nonsense statements from word libraries and templates."""
