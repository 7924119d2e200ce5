"""stackseed: project scaffolding for Python, Next.js and fullstack layouts."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("stackseed")
except PackageNotFoundError:
    __version__ = "0.0.0"
