"""ahkunit command line interface."""
