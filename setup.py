import os

from setuptools import setup, find_packages

with open(os.path.join(os.path.dirname(__file__), "readme.md"), "r") as fh:
    long_description = fh.read()

setup(
    name='bikerent',
    version='1.0.0',
    license='MIT',
    description='Bike rental lifecycle and parking zone validation server',
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=("tests", "tests.*")),
    package_data={'bikerent': ['static/*']},
    python_requires='>=3.8',
    install_requires=[
        'aiohttp>=3.8',
        'aiohttp-cors',
        'aiohttp-apispec',
        'marshmallow>=3.13,<4',
        'marshmallow-jsonschema',
        'attrs',
        'shapely',
        'geopy',
        'sentry-sdk',
        'uvloop',
        'aiobreaker',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-aiohttp',
            'pytest-asyncio',
            'Faker',
        ],
    },
    entry_points={
        'console_scripts': ['bikerent=bikerent.cli:run'],
    },
)
