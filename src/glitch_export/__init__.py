"""glitch-project-export — list, clone and update every Glitch project of a user.

Discovers projects through the paginated Glitch API and drives ``git``
subprocesses, with a small ``cache.json`` beside the clones.
"""

from glitch_export.version import __version__

__all__: list[str] = ["__version__"]
