"""Command-line entrypoint for contactbook."""
