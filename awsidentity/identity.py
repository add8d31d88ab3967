#!env python
"""
    I resolve the caller identity and pick what to do with it.

    Exactly one of three things happens per run:

        ASSUME_ROLE  a role was given, assume it (with MFA when a token was
                     given too) and spawn a shell with its credentials.
        MFA_SESSION  only an MFA token was given, get a session token for the
                     caller and spawn a shell with it.
        WHOAMI       neither, print the caller ARN.
"""


# python libraries
import logging
import sys


from awsidentity import arn, shell, sts


LOG = logging.getLogger()


ASSUME_ROLE = 'assume-role'
MFA_SESSION = 'mfa-session'
WHOAMI = 'whoami'


def select_operation(config) -> str:
    """
        I return the operation the configuration asks for, role first.
    """
    if config.role:
        return ASSUME_ROLE
    if config.mfa_token:
        return MFA_SESSION
    return WHOAMI


def run(config, client, spawn=shell.spawn_subshell, out=None) -> int:
    """
        I run one aws-identity invocation.

        AWS errors propagate untouched; nothing is retried.  A failed
        credential call means no shell is spawned.

        Args
            config: config.Configuration, possibly unresolved.
            client: boto3 sts client.
            spawn: callable(principal, credentials, quiet=...) starting the shell.
            out: stream the caller ARN is written to, stdout by default.

        Returns
            int exit code.
    """
    if out is None:
        out = sys.stdout
    caller = arn.parse_caller_arn(sts.get_caller_identity(client))
    config = config.resolve(caller)
    operation = select_operation(config)
    LOG.debug('Operation: %s', operation)

    if operation == ASSUME_ROLE:
        target = arn.role_arn(config.account, config.role)
        credentials = sts.assume_role(
            client,
            target,
            config.session_name,
            config.duration,
            mfa_serial=config.mfa_serial,
            mfa_token=config.mfa_token,
        )
        spawn(f'role {target}', credentials, quiet=config.quiet)
    elif operation == MFA_SESSION:
        credentials = sts.get_session_token(
            client,
            config.duration,
            config.mfa_serial,
            config.mfa_token,
        )
        spawn(f'user {caller}', credentials, quiet=config.quiet)
    else:
        print(caller, file=out)
    return 0
