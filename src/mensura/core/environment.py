import collections.abc
import configparser
import functools
import json
import logging
import os
import pathlib
import typing

from mensura.core import iotools


LOGGER = logging.getLogger(__name__)


FILENAME = 'mensura.ini'
"""The name of the configuration file."""


DEFAULTS = pathlib.Path(__file__).parent.parent / FILENAME
"""The configuration file that ships with this package."""


def search_paths() -> typing.List[typing.Optional[iotools.PathLike]]:
    """The locations to search for a user configuration file, in order."""
    home = pathlib.Path('~').expanduser()
    return [
        pathlib.Path.cwd(), # The current working directory
        home, # The user's home directory
        home / '.config', # Linux standard (local)
        '/etc/mensura', # Linux standard (global)
        os.environ.get('MENSURA_INI'), # A known environment variable
        DEFAULTS.parent, # The package top
    ]


class Environment(collections.abc.Mapping):
    """A collection of environmental settings.

    Values come from the first ``mensura.ini`` found in `search_paths`, with
    the package defaults filling in any missing values.

    Parameters
    ----------
    name : string
        The name of the configuration section to select (e.g., ``'cache'``).

    Raises
    ------
    KeyError
        Neither the user configuration nor the defaults have this section.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        """The name of the configuration section."""
        config = configparser.ConfigParser()
        path = iotools.search(search_paths(), FILENAME)
        read = config.read([DEFAULTS, path] if path else [DEFAULTS])
        LOGGER.debug("Read configuration from %s", read)
        if not config.has_section(self.name):
            raise KeyError(
                f"No configuration section named {self.name!r}"
            )
        self._config = config[self.name]
        self.path = path or DEFAULTS

    def __len__(self) -> int:
        """The number of settings in this section."""
        return len(self._config)

    def __iter__(self):
        """Iterate over the names of settings in this section."""
        yield from self._config

    def __getitem__(self, key: str):
        """The raw string value of a setting."""
        if key in self._config:
            return self._config[key]
        raise KeyError(
            f"Section {self.name!r} has no value for {key!r}"
        ) from None

    def getboolean(
        self,
        key: str,
        fallback: bool=None,
    ) -> typing.Optional[bool]:
        """Interpret a parameter value as a boolean."""
        return self._config.getboolean(key, fallback=fallback)

    def getint(self, key: str, fallback: int=None) -> typing.Optional[int]:
        """Interpret a parameter value as an integer.

        An empty value is the same as a missing value.
        """
        if not self._config.get(key):
            return fallback
        return self._config.getint(key)

    def __str__(self) -> str:
        return json.dumps(
            dict(self._config),
            indent=4,
            sort_keys=True,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}({self.path}):\n{self}"


@functools.lru_cache(maxsize=None)
def get(name: str) -> Environment:
    """The (memoized) environmental settings in the named section."""
    return Environment(name)
