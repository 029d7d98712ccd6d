"""Error catalogue, template parsing and diagnostics reporting."""
