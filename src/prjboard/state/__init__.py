"""State layer — the observable store and the project store built on it."""
