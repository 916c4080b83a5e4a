from re import search
from setuptools import setup, find_packages

with open("src/graphql_defaults/version.py") as version_file:
    version = search('version = "(.*)"', version_file.read()).group(1)

with open("README.md") as readme_file:
    readme = readme_file.read()

setup(
    name="graphql-defaults",
    version=version,
    description="Validation of the default values of GraphQL query variables"
    " against their declared input types.",
    long_description=readme,
    long_description_content_type="text/markdown",
    keywords="graphql validation",
    license="MIT license",
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Libraries",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3 :: Only",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    install_requires=["anyio>=3.6"],
    extras_require={
        "test": [
            "pytest>=7.0",
            "pytest-describe>=2.0",
            "trio>=0.31",
        ],
    },
    python_requires=">=3.10,<4",
    packages=find_packages("src"),
    package_dir={"": "src"},
    # PEP-561: https://www.python.org/dev/peps/pep-0561/
    package_data={"graphql_defaults": ["py.typed"]},
    include_package_data=True,
    zip_safe=False,
)
