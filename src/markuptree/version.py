from importlib.metadata import PackageNotFoundError, version

try:
    version = version("MarkupTree")
except PackageNotFoundError:
    version = "0.0.0"
