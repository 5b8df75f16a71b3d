"""Encoder and decoder for Nouns DAO governance admin calldata."""

from importlib import metadata


def __getattr__(name: str) -> str:
    """Expose the package version via ``govcalldata.__version__``."""
    if name == "__version__":
        try:
            return metadata.version("govcalldata")
        except metadata.PackageNotFoundError:
            return "0.0.0"
    raise AttributeError(name)


__all__ = ["__version__"]
