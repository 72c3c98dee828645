from setuptools import setup, find_packages

setup(
    name="mafkit",
    version="0.1.0",
    description="Streaming reader and writer for Multiple Alignment Format (MAF) files with numpy, pandas and Biopython views",
    packages=find_packages(include=["mafkit", "mafkit.*"]),
    package_data={
        "mafkit.tests": ["data/*.maf"],
    },
    install_requires=[
        "biopython",
        "pandas",
        "numpy",
        "tqdm",
        "colorama",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-cov",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "Topic :: Scientific/Engineering :: Bio-Informatics",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.7",
)
