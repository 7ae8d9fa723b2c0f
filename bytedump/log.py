"""A pluggable log sink, so that dumps can be sent someplace other than
   stdout (a file, a list for tests, or nowhere at all).

   Modules call log() and whoever is in charge of output picks where it
   goes:

   from bytedump.log import log, log_to_file

   log_to_file(open('dump.txt', 'w'))
   log(dump_bytes(data))

   Changes made by calling one of the log_to_xxx functions take effect in
   every module which uses log().
"""

from contextlib import contextmanager
from typing import Callable, Iterator, List

LogFn = Callable[[tuple], None]


def log_to_none_fn(_args) -> None:
    """Logs to the bitbucket"""


log_fn: LogFn = log_to_none_fn


def log(*args) -> None:
    """Passes args along to the log function which is currently installed."""
    log_fn(args)


def log_to_fn(fn: LogFn) -> LogFn:
    """Installs fn as the log function and returns the one it replaced.
       fn is called with the tuple of args passed to log().
    """
    global log_fn  # pylint: disable=global-statement
    prev_fn = log_fn
    log_fn = fn
    return prev_fn


def log_to_none() -> LogFn:
    """Throws away anything logged."""
    return log_to_fn(log_to_none_fn)


def log_to_print() -> LogFn:
    """Logs using print."""

    def log_to_print_fn(args) -> None:
        print(*args)

    return log_to_fn(log_to_print_fn)


def log_to_file(file) -> LogFn:
    """Logs each call as a line of space separated args written to file."""

    def log_to_file_fn(args) -> None:
        file.write(' '.join([str(arg) for arg in args]))
        file.write('\n')

    return log_to_fn(log_to_file_fn)


def log_to_list(lines: List[str]) -> LogFn:
    """Appends each call, joined the same way as log_to_file, to lines."""

    def log_to_list_fn(args) -> None:
        lines.append(' '.join([str(arg) for arg in args]))

    return log_to_fn(log_to_list_fn)


@contextmanager
def logging_to(install: Callable[..., LogFn], *args) -> Iterator[None]:
    """Temporarily logs using one of the log_to_xxx functions, putting the
       previous log function back afterwards, e.g.

       with logging_to(log_to_file, outfile):
           ...
    """
    prev_fn = install(*args)
    try:
        yield
    finally:
        log_to_fn(prev_fn)


log_to_print()
