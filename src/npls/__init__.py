"""npls — inspect npm dependency trees in a throwaway project.

Installs the requested packages into a scratch directory, prints the
output of ``npm ls`` and removes the directory again.
"""

from npls.version import __version__

__all__: list[str] = ["__version__"]
