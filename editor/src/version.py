"""Application version module.

Reads the installed distribution's metadata; a plain source checkout that
was never installed reports 0.0.0.
"""

DISTRIBUTION_NAME = "truesize-overlay"


def get_version() -> str:
    """Get the application version string (e.g. '0.1.0')."""
    from importlib.metadata import PackageNotFoundError, version
    try:
        return version(DISTRIBUTION_NAME)
    except PackageNotFoundError:
        # Running from a source checkout without `pip install -e .`
        return "0.0.0"
