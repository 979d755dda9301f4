"""Output layer — Rich console and renderers for the visible board state."""
