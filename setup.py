from setuptools import setup, find_packages


setup(
    name="crc32lut",
    version="0.1",
    packages=find_packages(include=["crc32lut", "crc32lut.*"]),
    description="Table-driven CRC-32 for any reflected polynomial, with IEEE, Castagnoli and Koopman tables built in.",
    author="vercingetorx",
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.22",
    ],
)
