from setuptools import setup, find_packages

setup(
    name="op_coverage",
    version="0.1.0",
    description="Quantization capability classifier and spec getter generator for compiler op catalogs",
    author="Your Name",
    author_email="your.email@example.com",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    install_requires=[
        "numpy>=1.24.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.3.0",
        ],
    },
    python_requires=">=3.8",
)
