import os

from setuptools import setup, find_packages

with open(os.path.join(os.path.dirname(__file__), "readme.md"), "r") as fh:
    long_description = fh.read()

setup(
    name='bikeshare',
    version='1.0.0',
    license='MIT',
    description='The in-memory core of a bike sharing service.',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires='>=3.7',
    install_requires=[
        'pynacl',
        'shapely',
        'geopy',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-asyncio',
            'faker',
        ],
    },
)
