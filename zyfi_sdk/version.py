"""
Version information for the ZyFi SDK.
"""
import importlib.metadata

try:
    __version__ = importlib.metadata.version("zyfi-sdk")
except importlib.metadata.PackageNotFoundError:
    # Running from a source checkout that was never installed
    __version__ = "0.1.0"
