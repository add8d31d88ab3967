#!env python
"""
    I hold the resolved run configuration.
"""


import dataclasses
import logging


from awsidentity import arn


LOG = logging.getLogger()
DEFAULT_DURATION = 60 * 60  # one hour


@dataclasses.dataclass(frozen=True)
class Configuration:
    """
        I am the operating parameters of one run.

        account, mfa_serial and session_name may start empty, in which case
        resolve() derives them from the caller identity.
    """
    account: str = ''
    role: str = ''
    duration: int = DEFAULT_DURATION
    session_name: str = ''
    mfa_serial: str = ''
    mfa_token: str = ''
    debug: bool = False
    quiet: bool = False

    @classmethod
    def from_args(cls, args) -> 'Configuration':
        """
            I build a Configuration from the parsed argparse namespace.
        """
        return cls(
            account=args.account,
            role=args.role,
            duration=args.duration,
            session_name=args.session_name,
            mfa_serial=args.mfa_serial,
            mfa_token=args.mfa_token,
            debug=args.debug,
            quiet=args.quiet,
        )

    def resolve(self, caller) -> 'Configuration':
        """
            I fill in the fields left empty from the caller identity.

            Args
                caller: arn.CallerArn of the invoking principal.

            Returns
                a new Configuration; values given explicitly are kept.
        """
        changes = {}
        if not self.account:
            changes['account'] = caller.account
        if not self.mfa_serial:
            changes['mfa_serial'] = arn.mfa_serial(caller.account, caller.principal)
        if not self.session_name:
            changes['session_name'] = caller.principal
        LOG.debug('Derived from caller identity: %s', changes)
        return dataclasses.replace(self, **changes)
