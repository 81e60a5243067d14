import json
from setuptools import setup, find_packages

# Load configuration from JSON file
with open('confmap/settings.json', 'r') as config_file:
    config = json.load(config_file)

setup(
    name="confmap",
    version=config['version'],
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "numpy>=2.0.1",
    ],
    entry_points={
        "console_scripts": [
            "confmap=confmap.cli:main",
        ],
    },
    description="confmap: read a JSON config file into a process-wide map and look up typed values",
    long_description=open("README.md").read(),
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires='>=3.9',
    extras_require={
        "dev": [
            "pytest",
            "black",
            "flake8",
        ],
    },
    package_data={"confmap": ["settings.json"]},
    include_package_data=True,
)
