#!env python
"""
    I spawn an interactive subshell carrying temporary credentials.
"""


# python libraries
import logging
import os
import subprocess


from awsidentity.common import AwsIdentityError, announce


LOG = logging.getLogger()
DEFAULT_SHELL = 'bash'


class ShellError(AwsIdentityError):
    """
        I am raised when the subshell can't be started.
    """


def get_shell(environ=None) -> str:
    """
        I return the shell to run, $SHELL or bash.
    """
    if environ is None:
        environ = os.environ
    return environ.get('SHELL') or DEFAULT_SHELL


def build_environment(credentials, environ=None) -> dict:
    """
        I return a copy of the environment with the credentials added.

        Args
            credentials: sts.Credentials to inject.
            environ: the environment to inherit, os.environ by default.
                It is never modified.

        Returns
            dict for the child process environment.
    """
    if environ is None:
        environ = os.environ
    env = dict(environ)
    env.update(credentials.as_environment())
    return env


def spawn_subshell(principal, credentials, quiet=False, environ=None) -> int:
    """
        I launch an interactive shell for the principal and wait for it.

        Args
            principal: string label, ie "role arn:aws:iam::111122223333:role/deploy"
            credentials: sts.Credentials for the shell.
            quiet: suppress the announcement.
            environ: the environment to inherit, os.environ by default.

        Returns
            int return code of the shell.
    """
    announce(f'Spawning subshell for {principal}', quiet=quiet)
    command = [get_shell(environ), '-i']
    LOG.debug('Running %s', command)
    try:
        result = subprocess.run(
            command,
            env=build_environment(credentials, environ),
            check=False
        )
    except OSError as err:
        raise ShellError(f'unable to start {command[0]}: {err}') from err
    LOG.debug('%s exited with %s', command[0], result.returncode)
    return result.returncode
