"""msgvault command-line interface."""
