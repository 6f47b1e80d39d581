from setuptools import find_packages, setup

# Define core requirements
core_requirements = [
    "pydantic>=2.0",
    "typer>=0.9.0",
    "tqdm>=4.65.0",
]

# Define development requirements
dev_requirements = [
    "pytest>=7.3.1",
]

setup(
    name="autotag",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=core_requirements,
    extras_require={
        "dev": dev_requirements,
    },
    entry_points={
        "console_scripts": [
            "autotag=autotag.cli.main:run",
        ],
    },
    python_requires=">=3.9",
    description="Layer encoders between CoNLL-U token annotations and sequence labels",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
)
