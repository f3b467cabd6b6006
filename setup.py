# -*- coding: utf-8 -*-

from setuptools import setup, find_packages


with open('README.md') as f:
    readme = f.read()

setup(
    name='polyconst',
    version='1.0.0',
    description='Exact constant term recovery from base-encoded polynomial samples',
    long_description=readme,
    long_description_content_type='text/markdown',
    author='',
    author_email='',
    packages=find_packages(include=('polyconst', 'polyconst.*')),
    python_requires='>=3.8',
    install_requires=[
        'gmpy2',
    ],
    extras_require={
        'test': ['pytest'],
    },
    entry_points={
        'console_scripts': ['polyconst=polyconst.cli:main'],
    },
)
