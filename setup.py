import re
import setuptools

with open('stormurl/version.py', 'r') as fd:
    version = re.search(r'^__version__\s*=\s*[\'"]([^\'"]*)[\'"]', fd.read(), re.MULTILINE).group(1)

with open("README.md", "r") as fh:
    long_description = fh.read()

setuptools.setup(
    name="stormurl",
    version=version,
    description="RFC 3986 URL building, merging and normalisation",
    long_description=long_description,
    long_description_content_type="text/markdown",
    platforms=["any"],
    python_requires=">=3.10",
    install_requires=["pydantic>=2", "toml", "tabulate", "deepmerge"],
    extras_require={"test": ["pytest", "pytest-mock"]},
    package_dir={'': '.'},
    packages=["stormurl", "stormurl.config"],
    package_data={"": ["README.md"]},
)
