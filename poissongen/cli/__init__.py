"""Command-line interface for PoissonGen."""
