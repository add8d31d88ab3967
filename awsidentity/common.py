#!env python
"""
    I provide the helpers shared by the aws-identity modules.
"""


# python libraries
import logging
import sys
from importlib import metadata


from termcolor import colored


LOG = logging.getLogger()
DIST_NAME = 'aws-identity'


class AwsIdentityError(Exception):
    """
        I am the base of every local (non AWS) failure aws-identity reports.
    """


def set_level(verbosity=0):
    """Sets the logging level based on command line provided verbosity.

    By default, `botocore` and `urllib3` are quiet and only show logging
    statements at the `ERROR` level.  These logging statements will be shown
    when verbosity is greater than 1, which is what `--debug` asks for, and
    include the request and response bodies.

    Args:
        verbosity
            0-based level of verbosity

    Returns:
        None
    """
    level = logging.INFO
    logging.getLogger('botocore').setLevel(logging.ERROR)
    logging.getLogger('urllib3').setLevel(logging.ERROR)
    if verbosity > 1:
        # enable other loggers
        logging.getLogger('botocore').setLevel(logging.DEBUG)
        logging.getLogger('urllib3').setLevel(logging.DEBUG)
    if verbosity == 1:
        logging.getLogger('botocore').setLevel(logging.INFO)
        logging.getLogger('urllib3').setLevel(logging.INFO)
    level -= 10 * verbosity
    LOG.setLevel(max(level, logging.DEBUG))


def announce(message, quiet=False) -> None:
    """
        I print a one line status message unless quiet was requested.
    """
    if quiet:
        return
    print(colored(message, 'green'))
    sys.stdout.flush()


def report_error(error) -> None:
    """
        I report a fatal error on stderr.

        Args
            error: the exception (or message) to report verbatim.
    """
    LOG.error(colored(str(error), 'red'))


def get_version() -> str:
    """
        I return the installed version of aws-identity.

        Returns
            str: the version, or 'unknown' when running from a source tree.
    """
    try:
        return metadata.version(DIST_NAME)
    except metadata.PackageNotFoundError:
        return 'unknown'
