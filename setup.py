from setuptools import setup, find_packages

setup(
    name="decision-flow",
    version="0.1.0",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.9",
    install_requires=["click>=8.0.0", "numpy>=1.22", "pydantic>=2.0.0", "PyYAML>=6.0", "rich>=10.0.0"],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "decision-flow=decision_flow.cli.decision_cli:cli",
        ],
    },
)
