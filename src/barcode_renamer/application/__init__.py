"""Application layer shared by every user interface."""
