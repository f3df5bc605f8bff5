from pathlib import Path

from setuptools import find_packages, setup

ROOT = Path(__file__).parent
README = (ROOT / "README.md").read_text(encoding="utf-8") if (ROOT / "README.md").exists() else ""

setup(
    name="pximage",
    version="0.1.0",
    description="Command-line erosion and slice extraction for N-dimensional medical images",
    long_description=README,
    long_description_content_type="text/markdown",
    author="pximage Contributors",
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.19",
        "scipy>=1.5.1",
        "SimpleITK>=2.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
    include_package_data=True,
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Science/Research",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: Medical Science Apps.",
        "Topic :: Scientific/Engineering :: Image Processing",
    ],
    keywords=[
        "medical-imaging",
        "image-processing",
        "morphology",
        "erosion",
        "itk",
    ],
    entry_points={
        "console_scripts": [
            "pxerodeimage=pximage.erode_cli:main",
            "pxextractslice=pximage.extract_slice_cli:main",
        ],
    },
)
