"""Find the most recently changed file in a directory tree."""
