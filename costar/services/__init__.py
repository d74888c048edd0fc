"""Runtime services shared by CLI commands."""
