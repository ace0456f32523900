"""Bounded contexts of the Reviewly summarization engine."""
