"""End-to-end tests for the emojify stream filters."""
