import pathlib

import pytest

from mensura.core import conversion
from mensura.core import environment


@pytest.fixture(autouse=True)
def workdir(
    tmp_path: pathlib.Path,
    monkeypatch: pytest.MonkeyPatch,
) -> pathlib.Path:
    """A working directory that hides any user configuration files.

    This fixture changes the current working directory and the home directory
    to empty temporary directories, unsets ``MENSURA_INI``, and forgets any
    previously read settings, so that every test sees only the package
    defaults unless it writes its own configuration file. It returns the new
    working directory.
    """
    work = tmp_path / 'work'
    home = tmp_path / 'home'
    work.mkdir()
    home.mkdir()
    monkeypatch.chdir(work)
    monkeypatch.setenv('HOME', str(home))
    monkeypatch.delenv('MENSURA_INI', raising=False)
    environment.get.cache_clear()
    yield work
    environment.get.cache_clear()


@pytest.fixture
def cache() -> conversion.BaseUnitCache:
    """An empty cache of base-unit reductions."""
    return conversion.BaseUnitCache()


@pytest.fixture
def raw_definitions():
    """Raw prefix and unit definitions for a small custom registry."""
    prefixes = {
        '<kilo>': {'aliases': ('k', 'kilo'), 'scalar': 1e3},
        '<milli>': {'aliases': ('m', 'milli'), 'scalar': 1e-3},
    }
    units = {
        '<meter>': {
            'aliases': ('m', 'meter', 'meters'),
            'scalar': 1,
            'kind': 'length',
        },
        '<second>': {
            'aliases': ('s', 'sec', 'second'),
            'scalar': 1,
            'kind': 'time',
        },
        '<minute>': {
            'aliases': ('min', 'minute'),
            'scalar': 60,
            'numerator': ('<second>',),
            'kind': 'time',
        },
        '<hour>': {
            'aliases': ('h', 'hr', 'hour'),
            'scalar': 60,
            'numerator': ('<minute>',),
            'kind': 'time',
        },
        '<knot>': {
            'aliases': ('kt', 'knot'),
            'scalar': 1852,
            'numerator': ('<meter>',),
            'denominator': ('<hour>',),
            'kind': 'speed',
        },
    }
    return {'prefixes': prefixes, 'units': units}
