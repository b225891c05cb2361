"""Command-line surface of respec-validator."""
