from setuptools import setup, find_packages
import os
import re

# Agent Framework OpenAI Assistants threads package

PACKAGE_NAME = "agent-framework-assistants"
PACKAGE_PPRINT_NAME = "Agent Framework Assistants"

# a-b-c => a_b_c
package_folder_path = PACKAGE_NAME.replace("-", "_")

# Version extraction inspired from 'requests'
with open(os.path.join(package_folder_path, "_version.py"), "r") as fd:
    version = re.search(r'^VERSION\s*=\s*[\'"]([^\'"]*)[\'"]', fd.read(), re.MULTILINE).group(1)
if not version:
    raise RuntimeError("Cannot find version information")

with open("README.md", encoding="utf-8") as f:
    long_description = f.read()

setup(
    name=PACKAGE_NAME,
    version=version,
    description="Microsoft {} Library for Python".format(PACKAGE_PPRINT_NAME),
    long_description=long_description,
    long_description_content_type="text/markdown",
    keywords="agent framework, openai, assistants, threads",
    author="Microsoft Corporation",
    license="MIT License",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "License :: OSI Approved :: MIT License",
    ],
    packages=find_packages(
        exclude=[
            "tests",
            "tests.*",
        ]
    ),
    include_package_data=True,
    package_data={
        package_folder_path: ["py.typed"],
    },
    install_requires=[
        "openai>=1.40.0",
        "httpx>=0.27.0",
        "pydantic>=2.0.0,<3.0.0",
        "python-dotenv>=1.0.0",
        "opentelemetry-api>=1.24.0",
    ],
    extras_require={
        "test": [
            "pytest>=8.0.0",
            "pytest-asyncio>=0.23.0",
            "opentelemetry-sdk>=1.24.0",
        ],
    },
    python_requires=">=3.10",
)
