"""Engine internals: logging, errors, parsing and construction."""
