"""Infrastructure helpers shared by feature layers."""
