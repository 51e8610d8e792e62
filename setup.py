# /setup.py
"""
Setup configuration for VolumeCtl.
"""
from setuptools import setup, find_packages
from pathlib import Path

here = Path(__file__).parent

# Read version from volumectl/__init__.py
with open(here / 'volumectl' / '__init__.py', 'r') as f:
    for line in f:
        if line.startswith('__version__'):
            version = line.split('=')[1].strip().strip('"\'')
            break

# Read README
readme = here / 'README.md'
long_description = readme.read_text() if readme.exists() else ''

setup(
    name='volumectl',
    version=version,
    description='Management tool for container runtime volumes and their files',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=find_packages(include=['volumectl', 'volumectl.*']),
    include_package_data=True,
    python_requires='>=3.8',
    install_requires=[
        'click>=8.1.7',
        'rich>=13.7.0',
        'pyyaml>=6.0.1',
        'python-dotenv>=1.0.0',
        'jsonschema>=4.17.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.4.0',
        ],
    },
    entry_points={
        'console_scripts': [
            'volumectl=volumectl.volumectl:cli'
        ]
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: System Administrators',
        'License :: OSI Approved :: MIT License',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Topic :: System :: Systems Administration',
    ],
    keywords='container management, volumes, docker, podman',
    zip_safe=False,
)
