import os
from setuptools import find_packages, setup

def read(fname):
    return open(os.path.join(os.path.dirname(__file__), fname)).read()

setup(
    name='prime_change',
    version='0.1',
    license='MIT',

    packages=find_packages(include=['prime_change', 'prime_change.*']),
    install_requires=["symengine",
                      "lark",
                      "numpy",
                      "contexttimer",
                      "logzero",
                      "tqdm"],
    extras_require={
        "test": ["pytest"],
    },
    python_requires='>=3.9',
    description = ("Count the changes of an amount with prime coins, by the number of coins used."),
    long_description=read('README.md'),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Programming Language :: Python :: 3.9",
        "Topic :: Scientific/Engineering :: Mathematics",
        "License :: OSI Approved :: MIT License",
    ],
    keywords="coin-change combinatorics dynamic-programming primes",
)
