"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths scattered throughout the code.
2. Deployment: The sample shape files ship inside the package (see
   [tool.setuptools.package-data]), so they are found through
   importlib.resources in a checkout, an editable install and a wheel alike.
   A PyInstaller bundle (sys._MEIPASS) is handled separately.

Exports:
    ASSETS_PATH (str): Absolute path to the bundled assets directory.
    DEFAULT_SHAPES_PATH (str): Sample flat shapes, default input of `shapecalc area`.
    DEFAULT_SOLIDS_PATH (str): Sample solids, default input of `shapecalc volume`.
    FLOAT_TOLERANCE (float): Relative tolerance used when comparing totals.
    DEFAULT_OUTPUT_FORMAT (str): Output encoding used when none is requested.
    MARKUP_TEMPLATE (str): HTML template for ResultFormatter.to_markup().
"""
import sys
import os
from importlib.resources import files

PACKAGE_NAME: str = "shapecalc"


def get_resource_path(relative_path: str) -> str:
    """
    Absolute path of a file bundled in the shapecalc package.

    Args:
        relative_path: Path relative to the package directory, e.g. "assets".
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller collects package data under <_MEIPASS>/shapecalc/
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, PACKAGE_NAME, relative_path)

    return str(files(PACKAGE_NAME).joinpath(relative_path))


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_SHAPES_PATH: str = os.path.join(ASSETS_PATH, "shapes_example.json")
DEFAULT_SOLIDS_PATH: str = os.path.join(ASSETS_PATH, "solids_example.json")

FLOAT_TOLERANCE: float = 1e-9
DEFAULT_OUTPUT_FORMAT: str = "json"
MARKUP_TEMPLATE: str = "<h1>Sum of the {quantity} of provided shapes: {total}</h1>"
