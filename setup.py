import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="cobstruct",
    version="0.0.1",
    author="Gianluca Pacchiella",
    author_email="gp@ktln2.org",
    description="Fixed width COBOL-like records for humans",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/gipi/cobstruct",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    install_requires=[],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    scripts=[
        'scripts/sortrecords.py',
        'scripts/phonebook.py',
    ],
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: GPLv2 License",
        "Operating System :: OS Independent",
    ],
)
