"""Transport, URL and error primitives."""

__all__: list[str] = []
