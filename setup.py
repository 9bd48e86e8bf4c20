from setuptools import setup, find_packages

setup(
    name="iran-hijri",
    version="0.1.0",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "click>=8.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "iran-hijri=iran_hijri.cli:cli",
        ],
    },
    python_requires=">=3.8",
)
