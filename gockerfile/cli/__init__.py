"""Command line interface for gockerfile."""
