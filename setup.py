from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="matrix-reorder",
    version="0.1.0",
    author="Your Name",
    author_email="your.email@example.com",
    description="Interactive matrix normalization, reordering and seriation",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(where="src") + ["panel_app", "panel_app.components"],
    package_dir={"": "src", "panel_app": "panel_app"},
    classifiers=[
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=[
        "numpy>=1.24.0",
        "pandas>=2.0.0",
        "panel>=1.3.0",
        "param>=2.0.0",
        "python-dotenv>=1.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "black>=22.0.0",
            "flake8>=5.0.0",
        ]
    },
    entry_points={
        "console_scripts": [
            "matrix-reorder=panel_app.app:main",
        ],
    },
)
