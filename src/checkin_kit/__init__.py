"""checkin-kit — responsive layout values and secure check-in codes.

Pure helpers behind the check-in/admin app shell, with a small CLI for
previewing layouts, minting codes and validating the environment.
"""

from checkin_kit.version import __version__

__all__: list[str] = ["__version__"]
