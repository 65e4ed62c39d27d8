import setuptools

setuptools.setup(
    name="osrelease",
    version="1",
    description="Read operating system information from os-release",
    packages=[
        "osrelease",
    ],
    license='Apache-2.0',
    install_requires=[
        "jsonschema",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
    },
)
