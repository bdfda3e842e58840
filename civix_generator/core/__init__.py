"""Core generation logic: validation, path mapping, directories and writes."""
