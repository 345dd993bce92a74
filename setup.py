import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="tablayout",
    version="0.0.1",
    author="Gianluca Pacchiella",
    author_email="gp@ktln2.org",
    description="Record layouts and decoders for table-based binary formats",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/gipi/tablayout",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    python_requires='>=3.11',
    install_requires=[
        'bitstring>=4,<5',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    scripts=[
        'scripts/dumplayout.py',
    ],
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GNU General Public License v2 (GPLv2)",
        "Operating System :: OS Independent",
    ],
)
