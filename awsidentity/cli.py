#!env python
"""
    I provide the aws-identity command line: assume a role or open an MFA
    session in a subshell, or just tell you who you are.
"""


# python libraries
import argparse
import logging
import sys


# external libraries aka not from python
from botocore.exceptions import BotoCoreError, ClientError


from awsidentity import config, identity, sts
from awsidentity.common import AwsIdentityError, get_version, report_error, set_level


LOG = logging.getLogger()
LOG_FORMAT = 'aws-identity: %(message)s'


def _options(argv=None) -> object:
    """
        I provide the argparse option set.

        Args
            argv: list of arguments, sys.argv[1:] when None.

        Returns
            argparse namespace.
    """
    parser = argparse.ArgumentParser(
        prog='aws-identity',
        description='Run a subshell with temporary STS credentials.'
    )
    parser.add_argument('--account', '-a',
                        required=False,
                        default='',
                        help='Target account, default derived from caller identity')
    parser.add_argument('--debug', '-D',
                        required=False,
                        default=False,
                        action='store_true',
                        help='Enable debugging output')
    parser.add_argument('--duration', '-d',
                        required=False,
                        type=int,
                        default=config.DEFAULT_DURATION,
                        help='Lifetime of temporary credentials in seconds')
    parser.add_argument('--mfa-serial', '-m',
                        dest='mfa_serial',
                        required=False,
                        default='',
                        help='ARN of MFA device, default derived from caller identity')
    parser.add_argument('--mfa-token', '-t',
                        dest='mfa_token',
                        required=False,
                        default='',
                        help='MFA token code')
    parser.add_argument('--quiet', '-q',
                        required=False,
                        default=False,
                        action='store_true',
                        help='Minimise output')
    parser.add_argument('--role', '-r',
                        required=False,
                        default='',
                        help='Target role name')
    parser.add_argument('--session-name', '-n',
                        dest='session_name',
                        required=False,
                        default='',
                        help='Session name, default derived from caller identity')
    parser.add_argument('--version', '-v',
                        action='version',
                        version=f'%(prog)s {get_version()}',
                        help='Print the version and exit')
    return parser.parse_args(argv)


def _main(argv=None) -> None:
    """
        Main Logic
    """
    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    args = _options(argv)
    set_level(0)
    run_config = config.Configuration.from_args(args)

    try:
        client = sts.new_client(debug=run_config.debug)
        code = identity.run(run_config, client)
    except (BotoCoreError, ClientError, AwsIdentityError) as err:
        report_error(err)
        sys.exit(1)
    sys.exit(code)


if __name__ == '__main__':
    _main()
