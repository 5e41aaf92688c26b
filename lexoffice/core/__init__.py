"""Domain core: exceptions and pure calculations with no I/O."""
