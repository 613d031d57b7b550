import pathlib

import pytest

from mensura.core import environment
from mensura.core import iotools
from mensura.core import quantity


def test_defaults(workdir: pathlib.Path):
    """Without a user file, settings should come from the package defaults."""
    env = environment.Environment('cache')
    assert env.path.resolve() == environment.DEFAULTS.resolve()
    assert env['base_units'] == 'yes'
    assert env.getboolean('base_units') is True
    display = environment.Environment('display')
    assert display.getint('max_decimals') is None
    assert display.getint('max_decimals', 4) == 4
    assert 'max_decimals' in display


def test_missing_section():
    """Requesting an unknown section should raise an exception."""
    with pytest.raises(KeyError):
        environment.Environment('bogus')


def test_missing_key():
    """Requesting an unknown parameter should raise an exception."""
    env = environment.Environment('cache')
    with pytest.raises(KeyError):
        env['bogus']


def test_user_file(workdir: pathlib.Path):
    """A file in the working directory should override the defaults."""
    path = workdir / environment.FILENAME
    path.write_text("[display]\nmax_decimals = 3\n")
    env = environment.Environment('display')
    assert env.path == path.resolve()
    assert env.getint('max_decimals') == 3
    assert environment.Environment('cache').getboolean('base_units')


def test_environment_variable(
    workdir: pathlib.Path,
    monkeypatch: pytest.MonkeyPatch,
):
    """The search should honor the ``MENSURA_INI`` environment variable."""
    confdir = workdir.parent / 'conf'
    confdir.mkdir()
    path = confdir / environment.FILENAME
    path.write_text("[cache]\nbase_units = no\n")
    monkeypatch.setenv('MENSURA_INI', str(path))
    env = environment.Environment('cache')
    assert env.path == path.resolve()
    assert env.getboolean('base_units') is False


def test_memoized():
    """The module-level accessor should reuse instances."""
    assert environment.get('display') is environment.get('display')


def test_display_setting(workdir: pathlib.Path):
    """Quantities should display with the configured number of decimals."""
    q = quantity.Quantity('3.14159 m')
    assert str(q) == '3.14159 m'
    (workdir / environment.FILENAME).write_text(
        "[display]\nmax_decimals = 2\n"
    )
    environment.get.cache_clear()
    assert str(q) == '3.14 m'
    assert q.to_string(max_decimals=4) == '3.1416 m'


def test_search(tmp_path: pathlib.Path):
    """Test the function that searches directories for a file."""
    name = 'target.txt'
    first = tmp_path / 'first'
    second = tmp_path / 'second'
    first.mkdir()
    second.mkdir()
    (second / name).write_text('')
    expected = (second / name).resolve()
    paths = [None, tmp_path / 'missing', first, second]
    assert iotools.search(paths, name) == expected
    assert iotools.search([second / name], name) == expected
    assert iotools.search([first], name) is None
