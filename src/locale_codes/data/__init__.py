"""Generated registry datasets (JSON), read through importlib.resources."""
