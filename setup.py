from setuptools import setup
from setuptools import find_packages

long_description = open('README.md').read()

setup(
    name="respbuilder",
    version='1.0.0',
    description="Mutable HTTP response builder producing (status, headers, body) triples",
    python_requires='>=3.8',
    install_requires=[
        'lark',
    ],
    extras_require={
        'tests': [
            'pytest',
        ],
    },
    packages=find_packages(exclude=('tests', 'tests.*')),
    include_package_data=True,
    package_data={'respbuilder': ['*.ini']},
    long_description=long_description,
    long_description_content_type='text/markdown'
)
