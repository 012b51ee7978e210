"""Built-in disk sorters. Each module registers itself with @algorithm on import."""
