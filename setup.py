"""Setup script for functionkit."""
import re
from setuptools import setup, find_packages  # type: ignore


def read_version() -> str:
    with open('functionkit/__init__.py') as init:
        return re.search(r"^version = '([^']+)'", init.read(), re.M).group(1)


setup(
    name='functionkit',
    version=read_version(),
    description='Composable wrappers around one-argument Python functions',  # noqa
    long_description=open('README.md').read(),
    long_description_content_type='text/markdown',
    license='MIT',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Libraries',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3.12',
    ],
    keywords='functional composition currying combinators',
    packages=find_packages(),  # type: ignore
    python_requires='>=3.12',
    install_requires=[
        'typing-extensions>=4',
    ],
    extras_require={
        'test': [
            'coverage>=6.4.4',
            'hypothesis>=6',
            'pytest>=7',
        ],
        'dev': ['axblack==20220330', 'mypy>=1.1.1', 'pre-commit>=2.6.0,<3'],
    },
)
