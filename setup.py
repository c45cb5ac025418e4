"""Setup script for matcfg package."""

from setuptools import setup, find_packages

setup(
    name='matcfg',
    version='1.0',
    packages=find_packages(include=['matcfg', 'matcfg.*']),
    python_requires='>=3.9',
    install_requires=[
        'numpy>=1.20.0',
        'PyYAML>=5.4',
    ],
    extras_require={
        'test': ['pytest>=7.0'],
    },
    entry_points={
        'console_scripts': [
            'matcfg-cli=matcfg.cli:main',
        ],
    },
)
