"""Application layer: ports and use cases of the inline logger."""
