"""Runtime layer: chunked pagination and REST execution."""
