"""Static theme data consumed by the bundled utilities."""
