#!env python
"""
    I let aws-identity run as `python -m awsidentity`.
"""


from awsidentity.cli import _main


if __name__ == '__main__':
    _main()
