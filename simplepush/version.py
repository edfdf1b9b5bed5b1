"""Version resolution from package metadata."""

try:
    from importlib.metadata import PackageNotFoundError as _PackageNotFoundError
    from importlib.metadata import version as _package_version
except Exception:  # pragma: no cover
    _PackageNotFoundError = Exception
    _package_version = None


if _package_version is not None:
    try:
        __version__ = _package_version("simplepush")
    except _PackageNotFoundError:
        __version__ = "0.0.0"
else:
    __version__ = "0.0.0"


__all__ = ["__version__"]
