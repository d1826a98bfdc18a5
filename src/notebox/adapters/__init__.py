"""Host adapters for the notebox views."""
