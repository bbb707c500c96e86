"""Command line tools for the movie search service."""
