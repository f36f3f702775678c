"""Local, heuristic analysis of code samples."""
