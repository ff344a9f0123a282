from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="courier-dispatch",
    version="1.0.0",
    author="Courier Dispatch Team",
    description="Courier cost calculator and capacity-constrained delivery scheduler",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["courier_dispatch", "courier_dispatch.*"]),
    py_modules=["run_delivery_plan", "load_custom_data"],
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Topic :: Scientific/Engineering :: Mathematics",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
    ],
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.24.0",
        "pandas>=2.0.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "dev": ["pytest>=7.3.0", "pytest-cov>=4.1.0", "black>=23.3.0", "flake8>=6.0.0"],
    },
)
