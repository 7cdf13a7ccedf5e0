import setuptools

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="biglittle",
    version="0.1.0",
    description="Preference-driven matching of Littles to Bigs",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=setuptools.find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.8",
    install_requires=['numpy', 'scipy', 'numba', 'click'],
    entry_points={
        "console_scripts": ["biglittle=biglittle.cli:main"],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
