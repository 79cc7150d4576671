"""Shared helpers for the prompter CLI."""
