"""
Version module.
"""

from importlib import resources

__version__ = resources.files("huby").joinpath("version.txt").read_text().strip()


def get_version() -> str:
    """
    Return huby version.
    """
    return __version__
