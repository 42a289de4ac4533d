from setuptools import setup, find_packages

setup(
    name="fastaseq",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.9",
    install_requires=[
        "pandas",
        "pyyaml",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "fastaseq=fastaseq.cli:main",
        ],
    },
    include_package_data=True,
)
