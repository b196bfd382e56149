import os

from setuptools import setup, find_packages

with open(os.path.join(os.path.abspath(os.path.dirname(__file__)), 'README.md'), encoding='utf-8') as fh:
    long_description = '\n' + fh.read()

setup(
    name='py-steam-guard',
    version='1.0.0',
    license='Apache-2.0',
    author='SecorD',
    description='Steam Guard two-factor code generator',
    long_description_content_type='text/markdown',
    long_description=long_description,
    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=['pycryptodome'],
    extras_require={'test': ['pytest']},
    keywords=['steam', 'steam guard', '2fa', 'totp'],
)
