#!env python
"""
    I parse the caller identity ARN and build the ARNs derived from it.

    A caller ARN looks like

        arn:aws:iam::111122223333:user/alice

    six colon separated fields, the last one being a resource type and a
    resource name separated by the first slash.
"""


from dataclasses import dataclass


from awsidentity.common import AwsIdentityError


ARN_FIELDS = 6
ROLE_ARN = 'arn:aws:iam::{account}:role/{role}'
MFA_ARN = 'arn:aws:iam::{account}:mfa/{principal}'


class MalformedArnError(AwsIdentityError):
    """
        I am raised when the identity service hands back an ARN we can't read.
    """

    def __init__(self, arn, reason):
        super().__init__(f'malformed caller ARN "{arn}": {reason}')
        self.arn = arn
        self.reason = reason


@dataclass(frozen=True)
class CallerArn:
    """
        I am the structured form of a caller identity ARN.
    """
    arn: str
    prefix: str
    partition: str
    service: str
    region: str
    account: str
    resource_type: str
    principal: str

    def __str__(self) -> str:
        return self.arn


def parse_caller_arn(arn) -> CallerArn:
    """
        I parse the ARN returned by GetCallerIdentity.

        Only the simple `type/name` resource form is interpreted; anything
        after the first slash is taken as the principal name as-is.

        Args
            arn: string of the caller ARN.

        Returns
            CallerArn

        Raises
            MalformedArnError: when the ARN doesn't have six fields, an
                account, or a `type/name` resource.
    """
    fields = arn.split(':')
    if len(fields) != ARN_FIELDS:
        raise MalformedArnError(
            arn, f'expected {ARN_FIELDS} colon separated fields, got {len(fields)}'
        )
    prefix, partition, service, region, account, resource = fields
    if not account:
        raise MalformedArnError(arn, 'no account id')
    if '/' not in resource:
        raise MalformedArnError(arn, f'resource "{resource}" has no "/"')
    resource_type, principal = resource.split('/', 1)
    if not principal:
        raise MalformedArnError(arn, 'no principal name')
    return CallerArn(
        arn=arn,
        prefix=prefix,
        partition=partition,
        service=service,
        region=region,
        account=account,
        resource_type=resource_type,
        principal=principal,
    )


def role_arn(account, role) -> str:
    """
        I return the ARN of the named role in the given account.
    """
    return ROLE_ARN.format(account=account, role=role)


def mfa_serial(account, principal) -> str:
    """
        I return the ARN of the virtual MFA device named after the principal.
    """
    return MFA_ARN.format(account=account, principal=principal)
