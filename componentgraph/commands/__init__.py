"""CLI commands for componentgraph."""
