"""Context-sensitive directory shortcuts for the shell."""
