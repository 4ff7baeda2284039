"""Application layer - request dispatch."""
