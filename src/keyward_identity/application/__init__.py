"""Application layer: the services exposed to the presentation layer."""
