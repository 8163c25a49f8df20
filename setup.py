# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="assetlife",
    version="0.1.0",
    description="Embed a directory tree into a Python package as a read-only in-memory file system",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["assetlife", "assetlife.*"]),
    package_data={
        "assetlife.interface": ["locales/*.json"],
    },
    python_requires=">=3.8",
    install_requires=[],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'assetlife=assetlife.main:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
