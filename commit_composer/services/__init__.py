"""Services built on the inquiry engine."""
