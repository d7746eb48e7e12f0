"""fiber-gen: scaffolding generator for Go Fiber + htmx projects."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("fiber-gen")
except PackageNotFoundError:
    __version__ = "0.0.0"
