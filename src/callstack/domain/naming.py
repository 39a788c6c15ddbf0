"""Qualified name splitting.

Pure functions, no frame access. Qualified names are slash-delimited
package paths followed by a dotted function path:

    tests/unit/test_api.TestHere.test_here
    |----- dir ------||------ base --------|

The first dotted segment of the base belongs to the package,
everything after it is the function.
"""

from __future__ import annotations

import posixpath
from pathlib import PurePath


def split_qualified_name(qualified_name: str) -> tuple[str, str]:
    """Split qualified name into (package, function).

    Examples:
        >>> split_qualified_name("tests/unit/test_api.TestHere.test_here")
        ('tests/unit/test_api', 'TestHere.test_here')
        >>> split_qualified_name("mod.outer.<locals>.inner")
        ('mod', 'outer.<locals>.inner')
        >>> split_qualified_name("mod")
        ('mod', '')
    """
    directory, base = posixpath.split(qualified_name)
    head, _, function = base.partition(".")
    return posixpath.join(directory, head), function


def module_path(module_name: str) -> str:
    """Dotted module name as slash-delimited package path."""
    return module_name.replace(".", "/")


def base_name(file_path: str) -> str:
    """File name with directory stripped.

    Both separators are accepted: code objects may carry Windows paths.
    """
    return PurePath(file_path.replace("\\", "/")).name
