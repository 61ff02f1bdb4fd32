
from setuptools import setup, find_packages


setup(
    name="pykeccak",
    version="0.1.0",
    description="Pure Python Keccak-224/256/384/512 message digests",
    long_description=open('README.md').read(),
    long_description_content_type="text/markdown",
    license="MIT",
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3.13',
        'Topic :: Security :: Cryptography',
    ],
    packages=find_packages(where=".", exclude=("tests", "tests.*")),
    python_requires=">=3.10, <4",
    extras_require={
        "test": ["pytest", "pytest-asyncio", "pycryptodome"],
    },
)
