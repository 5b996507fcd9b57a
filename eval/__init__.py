"""Session driving and run reports."""
