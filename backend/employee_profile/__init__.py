"""Employee profile change-request backend."""
