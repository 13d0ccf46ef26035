"""top.gg REST connector."""
