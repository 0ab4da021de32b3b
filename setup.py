from setuptools import setup, find_packages

setup(
    name="openstratos-ci",
    version="0.3.0",
    license="AGPL-3.0-or-later",
    description="Hardware-in-the-loop CI harness for the OpenStratos testing probe.",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "click>=8.1",
        "pydantic>=2.0",
        "requests>=2.28",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "openstratos-ci=stratos_ci.cli:main",
        ],
    },
)
