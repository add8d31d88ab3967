"""
    aws-identity: run a subshell with temporary STS credentials.
"""
