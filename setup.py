import os

from setuptools import find_packages, setup

setup(
    name="rulekit",
    version="0.1.0",
    packages=find_packages(include=["rulekit", "rulekit.*"]),
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2.10.6,<3.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
            "hypothesis>=6.100",
            "annotated-types>=0.6",
        ],
    },
    author="Rulekit Contributors",
    description="Composable validation rules that accumulate every error",
    long_description=open("README.md").read()
    if os.path.exists("README.md")
    else "",
    long_description_content_type="text/markdown",
)
