from setuptools import setup, find_packages


setup(
    name="slatepack",
    version="0.1",
    packages=find_packages(include=["slatepack", "slatepack.*"]),
    description="Checksum protected Base58 text armor for binary slates.",
    author="vercingetorx",
    python_requires=">=3.8",
    install_requires=[
        "pycryptodomex>=3.23.0",
        "base58>=2.1.1",
    ],
    entry_points={
        "console_scripts": [
            "slatepack=slatepack.cli:main",
        ]
    },
)
