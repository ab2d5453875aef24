"""Fetch web pages concurrently and count the words in their visible text."""

__version__ = "0.1.0"

__all__ = ["cli", "http_client", "thread_pool", "url", "word_counter"]