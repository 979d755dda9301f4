"""Infrastructure layer — template loading and the DOM collaborator."""
