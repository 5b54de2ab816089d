from importlib.metadata import PackageNotFoundError, version

try:
    version = version("DFAScan")
except PackageNotFoundError:
    version = "0.0.0"
