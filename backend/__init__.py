"""Backend packages for the movie catalog search service."""
