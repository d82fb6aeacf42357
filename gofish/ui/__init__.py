"""User interfaces for the Go Fish game."""
