#!env python
"""
    I talk to AWS STS: who am I, assume a role, and get an MFA session token.
"""


# python libraries
import logging
from typing import NamedTuple


import boto3


from awsidentity.common import set_level


LOG = logging.getLogger()


class Credentials(NamedTuple):
    """
        I am a set of temporary credentials returned by STS.
    """
    access_key_id: str
    secret_access_key: str
    session_token: str

    @classmethod
    def from_response(cls, response) -> 'Credentials':
        """
            I build Credentials from an AssumeRole or GetSessionToken response.
        """
        creds = response['Credentials']
        return cls(
            access_key_id=creds['AccessKeyId'],
            secret_access_key=creds['SecretAccessKey'],
            session_token=creds['SessionToken'],
        )

    def as_environment(self) -> dict:
        """
            I return the environment variables that carry these credentials.
        """
        return {
            'AWS_ACCESS_KEY_ID': self.access_key_id,
            'AWS_SECRET_ACCESS_KEY': self.secret_access_key,
            'AWS_SESSION_TOKEN': self.session_token,
        }


def new_client(debug=False) -> object:
    """
        I create an STS client from the default session.

        Args
            debug: when True botocore logs every request and response,
                bodies included, to stderr.

        Returns
            boto3 sts client
    """
    if debug:
        set_level(2)
    return boto3.client('sts')


def get_caller_identity(client) -> str:
    """
        I return the ARN of the principal making the call.
    """
    LOG.debug('Fetching caller identity')
    return client.get_caller_identity()['Arn']


def assume_role(client, role_arn, session_name, duration,
                mfa_serial='', mfa_token='') -> Credentials:
    """
        I assume a role, gated by MFA when a token code is given.

        Args
            client: boto3 sts client
            role_arn: string of the role to assume.
            session_name: string of the role session name.
            duration: int lifetime of the credentials in seconds.
            mfa_serial: string of the MFA device ARN, only sent with a token.
            mfa_token: string of the MFA token code, optional.

        Returns
            Credentials
    """
    kwargs = {
        'DurationSeconds': duration,
        'RoleArn': role_arn,
        'RoleSessionName': session_name,
    }
    if mfa_token:
        kwargs['SerialNumber'] = mfa_serial
        kwargs['TokenCode'] = mfa_token
    LOG.debug('Assuming the role %s as %s (mfa: %s)',
              role_arn, session_name, bool(mfa_token))
    return Credentials.from_response(client.assume_role(**kwargs))


def get_session_token(client, duration, mfa_serial, mfa_token) -> Credentials:
    """
        I return MFA session credentials for the caller's own identity.
    """
    LOG.debug('Getting a session token with %s', mfa_serial)
    response = client.get_session_token(
        DurationSeconds=duration,
        SerialNumber=mfa_serial,
        TokenCode=mfa_token
    )
    return Credentials.from_response(response)
