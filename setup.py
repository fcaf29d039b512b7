from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="simpleperiod",
    version="0.1.0",
    author="P. Frugone",
    author_email="frugone@gmail.com",
    description="Date range value object: factories, timezone reinterpretation, stepping and readable diffs",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/pfrug/simpleperiod",
    packages=find_packages(include=["simpleperiod", "simpleperiod.*"]),
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.10",
    install_requires=[
        "python-dateutil>=2.8.0",
        "tzdata>=2023.3",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
)
