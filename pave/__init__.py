"""Link programs into a per-user bin directory and keep a JSON registry of the links."""

__version__ = "0.1.0"