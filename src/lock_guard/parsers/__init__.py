"""Lock file parsers."""
