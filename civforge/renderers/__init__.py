"""Text renderers used by the command-line driver."""
