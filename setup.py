# setup.py
from setuptools import setup, find_packages
from pathlib import Path
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding="utf-8")

setup(
    name="asyncocr",
    version="1.0.0",
    package_dir={"": "src"},
    packages=find_packages(where="src", include=["asyncocr", "asyncocr.*"]),
    author="Phuoc Nguyen",
    description="Sequential vs. concurrent execution of simulated OCR over sample PDFs.",
    long_description=long_description,
    long_description_content_type='text/markdown',
    python_requires=">=3.8",

    install_requires=[
        "PyMuPDF",
        "tqdm",
        "python-slugify",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-asyncio",
        ],
    },
    entry_points={
        'console_scripts': [
            'asyncocr=asyncocr.cli:main',
        ],
    },
)
