"""Command line interface for the beads bridge."""
