import os
import pathlib
import typing


PathLike = typing.Union[str, os.PathLike]


def full_path(path: PathLike) -> pathlib.Path:
    """Expand the user wildcard in `path` and fully resolve it."""
    return pathlib.Path(path).expanduser().resolve()


def search(
    paths: typing.Iterable[typing.Optional[PathLike]],
    file: PathLike,
) -> typing.Optional[pathlib.Path]:
    """Search `paths` for `file`.

    Parameters
    ----------
    paths : iterable of path-like
        The paths to search, in the order given. Each member may be a directory
        that might contain `file`, a path to a file with the same name as
        `file`, or ``None``, which this function skips. Paths that do not exist
        on the current file system do not match.

    file : path-like
        The name of the file to locate.

    Returns
    -------
    path or `None`
        The full path to the file, if found.
    """
    name = pathlib.Path(file).name
    for p in paths:
        if p is None:
            continue
        path = full_path(p)
        if path.is_dir():
            test = path / name
            if test.is_file():
                return test
        elif path.is_file() and path.name == name:
            return path
