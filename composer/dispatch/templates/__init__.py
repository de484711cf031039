"""Built-in scene templates, one module per scene type."""
