"""Quote calculator backend for a media-production studio."""
