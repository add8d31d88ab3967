#!/usr/bin/env python
"""
    I provide a package setup for the egg.
"""


from setuptools import setup


def get_requirements() -> list:
    """
        I generate a list of requirements from the requirements.txt
    """
    with open('requirements.txt', encoding='utf8') as file_handler:
        return [line for line in file_handler.read().split("\n") if line]


def get_changelog() -> str:
    """
        I return the version from changelog.

        Args
        None

        Returns
        str: string form of the current verion.
    """
    with open('CHANGELOG.md', encoding='utf8') as file_handler:
        for line in file_handler:
            if line.startswith('## ['):
                if 'unreleased' not in line.lower():
                    left = line.split(']')[0]
                    return left.split('[')[1]
    return 'unknown'


NAME = 'awsidentity'
with open('README.md', encoding='utf8') as readme_handler:
    README = readme_handler.read()


setup_options = dict(
    name='aws-identity',
    version=get_changelog(),
    description='Run a subshell with temporary AWS STS credentials',
    long_description=README,
    long_description_content_type='text/markdown',
    scripts=[],
    package_data={
        NAME: []
    },
    entry_points={
        'console_scripts': [
            'aws-identity = awsidentity.cli:_main',
        ]
    },
    packages=[NAME],
    include_package_data=True,
    install_requires=get_requirements(),
    extras_require={
        'test': ['pytest'],
    },
    python_requires='>=3.8',
    classifiers=[
        'Development Status :: 5 - Production/Stable',
        'Intended Audience :: Developers',
        'Natural Language :: English',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
    ],
)

setup(**setup_options)
