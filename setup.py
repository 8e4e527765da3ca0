from setuptools import setup

with open("README.md", "r", encoding="utf-8") as fp:
    long_description = fp.read()

setup(
    name="wmml",
    version="0.1.26",
    description="WMML is a module that launches Minecraft versions already installed in a .minecraft "
                "directory, it provides both an API and an executable script to run WMML CLI.",
    author="WMProject1217",
    packages=["wmml", "wmml.cli"],
    python_requires=">=3.7",
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["wmml = wmml.cli:main"]},
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="GPL-3.0",
)
