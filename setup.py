#!/usr/bin/env python3
#
# see: https://setuptools.pypa.io/en/latest/userguide/quickstart.html

import setuptools

setuptools.setup(
    name="figspec",
    version="0.1.0",
    description="Build declarative figure specifications for a JavaScript plotting renderer.",
    long_description=(
        "figspec turns high-level plotting calls into a nested scene-graph "
        "document, with validated style parameters and interactive tools, "
        "ready to be serialized to JSON for the renderer."
    ),
    long_description_content_type="text/plain",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    package_dir={"": "src"},
    packages=setuptools.find_packages(where="src", include=["figspec", "figspec.*"]),
    package_data={"figspec.schemas": ["*.json"]},
    install_requires=["numpy", "pandas", "matplotlib", "jsonschema"],
    extras_require={"test": ["pytest", "pytest-cov"]},
    entry_points={"console_scripts": ["figspec=figspec.cli:main"]},
    python_requires=">=3.11",
)
